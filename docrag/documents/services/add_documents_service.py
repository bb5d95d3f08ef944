"""
Add Documents Service

Handles:
    - Batch add of JSON documents (no raw file)
    - One throttled embedding call for the whole batch
"""

# Python Packages
from loguru import logger

# Store & Cache
from .document_store import DocumentStore
from .document_cache import DocumentCache, document_cache as shared_document_cache

# Vendors
from ...vendors import EmbeddingService

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages





class AddDocumentsService:

    def __init__(self, store: DocumentStore = None, cache: DocumentCache = None, embedding_service = None):
        self.store = store or DocumentStore()
        self.cache = cache or shared_document_cache
        self.embedding_service = embedding_service or EmbeddingService()


    def add_documents(self, documents: list) -> dict:
        """
        Args:
            documents (list): Validated [{"id"?, "content", "metadata": {"source", "tags"?}}]

        Returns:
            dict: documentsAdded, documentIds, totalDocuments
        """

        logger.info(f"📄 Adding {len(documents)} documents...")

        try:
            vectors = self.embedding_service.embed([document["content"] for document in documents])

        except Exception as error:
            raise ServiceException(
                error_code = "EMBEDDING_FAILED",
                message = messages.ERROR["EMBEDDING_FAILED"],
                details = str(error),
                status_code = 502
            )

        if len(vectors) != len(documents):
            logger.error(f"❌ Embedding provider returned {len(vectors)} vectors for {len(documents)} documents")

            raise ServiceException(
                error_code = "EMBEDDING_FAILED",
                message = messages.ERROR["EMBEDDING_FAILED"],
                details = f"Expected {len(documents)} embeddings, got {len(vectors)}",
                status_code = 502
            )

        rows = []

        for document, vector in zip(documents, vectors):
            metadata = document["metadata"]
            fields = {
                "content": document["content"],
                "file_name": metadata["source"],
                "source": metadata["source"],
                "tags": list(metadata.get("tags") or [])
            }

            if document.get("id"):
                fields["id"] = document["id"]

            rows.append((fields, vector))

        records = self.store.insert_many(rows)
        self.cache.invalidate()

        logger.info(f"✅ Added {len(records)} documents")

        return {
            "documentsAdded": len(records),
            "documentIds": [record.id for record in records],
            "totalDocuments": len(self.cache.all())
        }
