"""
Add Documents Validation (POST /documents JSON batch)
"""

# Store
from ..services.document_store import DocumentStore

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class AddDocumentsValidation:

    def __init__(self, store: DocumentStore = None):
        self.store = store or DocumentStore()


    def validate(self, data):
        """
        Body:
            {"documents": [{"id"?: str, "content": str, "metadata": {"source": str, "tags"?: [str]}}]}
        """

        documents = data.get("documents") if isinstance(data, dict) else None

        if not isinstance(documents, list) or not documents:
            raise ValidationException(
                error_code = "DOCUMENTS_REQUIRED",
                message = messages.ERROR["DOCUMENTS_REQUIRED"]
            )

        seen_ids = set()

        for document in documents:
            if not isinstance(document, dict):
                raise ValidationException(
                    error_code = "DOCUMENTS_REQUIRED",
                    message = messages.ERROR["DOCUMENTS_REQUIRED"]
                )

            content = document.get("content")
            if not isinstance(content, str) or not content.strip():
                raise ValidationException(
                    error_code = "DOCUMENT_CONTENT_REQUIRED",
                    message = messages.ERROR["DOCUMENT_CONTENT_REQUIRED"]
                )

            metadata = document.get("metadata")
            source = metadata.get("source") if isinstance(metadata, dict) else None
            if not isinstance(source, str) or not source.strip():
                raise ValidationException(
                    error_code = "DOCUMENT_SOURCE_REQUIRED",
                    message = messages.ERROR["DOCUMENT_SOURCE_REQUIRED"]
                )

            tags = metadata.get("tags")
            if tags is not None and (not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags)):
                raise ValidationException(
                    error_code = "INVALID_TAGS",
                    message = messages.ERROR["INVALID_TAGS"]
                )

            # 🔹 Optional caller id must be new
            document_id = document.get("id")
            if document_id is None:
                continue

            if not isinstance(document_id, str) or not document_id.strip() or len(document_id) > 36:
                raise ValidationException(
                    error_code = "INVALID_DOCUMENT_ID",
                    message = "Document id must be a non-empty string of at most 36 characters."
                )

            if document_id in seen_ids or self.store.exists(document_id):
                raise ValidationException(
                    error_code = "DOCUMENT_ID_EXISTS",
                    message = messages.ERROR["DOCUMENT_ID_EXISTS"].format(document_id = document_id)
                )

            seen_ids.add(document_id)

        return True
