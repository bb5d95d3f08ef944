"""
List Documents Service

Handles:
    - Lightweight list for query planning (GET /documents)
    - Detailed view with a summary (GET /documents/view)
    - Single document (GET /documents/<id>)
"""

# Python Packages
from typing import List

# Store & Cache
from .document_store import DocumentRecord
from .document_cache import DocumentCache, document_cache as shared_document_cache

# Config
from ...query.config import query_config

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages





class ListDocumentsService:

    def __init__(self, cache: DocumentCache = None):
        self.cache = cache or shared_document_cache


    def list_documents(self) -> dict:
        """
        Documents available for selection, plus the tags and file types in use
        """

        documents = self.cache.all()

        return {
            "totalDocuments": len(documents),
            "documents": [
                {
                    "id": document.id,
                    "name": document.name,
                    "source": document.source,
                    "tags": list(document.tags),
                    "size": f"{document.file_size / 1024:.1f} KB",
                    "type": document.file_type,
                    "contentPreview": self.preview(document.content, 150),
                    "createdAt": self.format_datetime(document.created_at)
                }
                for document in documents
            ],
            "availableTags": self.unique_tags(documents),
            "fileTypes": self.unique_file_types(documents),
            "usage": query_config.SELECTION_USAGE
        }



    def view_documents(self) -> dict:
        """
        Every attribute of every document, with a size / type / tag summary
        """

        documents = self.cache.all()
        total_size = sum(document.file_size for document in documents)

        return {
            "summary": {
                "total_documents": len(documents),
                "total_size_kb": round(total_size / 1024, 1),
                "total_size_mb": round(total_size / 1024 / 1024, 2),
                "file_types": self.unique_file_types(documents),
                "all_tags": self.unique_tags(documents)
            },
            "documents": [
                {
                    "document_name": document.name,
                    "document_id": document.id,
                    "tags": list(document.tags),
                    "file_info": {
                        "size_kb": round(document.file_size / 1024, 1),
                        "size_mb": round(document.file_size / 1024 / 1024, 2),
                        "type": document.file_type,
                        "source": document.source
                    },
                    "content_info": {
                        "length": len(document.content),
                        "preview": self.preview(document.content, 100)
                    },
                    "timestamps": {
                        "created_at": self.format_datetime(document.created_at),
                        "updated_at": self.format_datetime(document.updated_at)
                    },
                    "storage_path": document.storage_path,
                    "has_embedding": document.embedding is not None
                }
                for document in documents
            ]
        }



    def get_document(self, document_id: str) -> dict:
        document = next((item for item in self.cache.all() if item.id == document_id), None)

        if not document:
            raise NotFoundException(message = messages.ERROR["DOCUMENT_NOT_FOUND"])

        return {
            "id": document.id,
            "fileName": document.name,
            "fileSize": document.file_size,
            "fileSizeMB": round(document.file_size / 1024 / 1024, 2),
            "fileType": document.file_type,
            "source": document.source,
            "tags": list(document.tags),
            "content": document.content,
            "createdAt": self.format_datetime(document.created_at),
            "updatedAt": self.format_datetime(document.updated_at),
            "storagePath": document.storage_path
        }



    # ── Helpers ────────────────────────────────────────────────────────────────
    @staticmethod
    def unique_tags(documents: List[DocumentRecord]) -> List[str]:
        return list(dict.fromkeys(tag for document in documents for tag in document.tags))


    @staticmethod
    def unique_file_types(documents: List[DocumentRecord]) -> List[str]:
        return list(dict.fromkeys(document.file_type for document in documents))


    @staticmethod
    def preview(content: str, length: int) -> str:
        return content[:length] + ("..." if len(content) > length else "")


    def format_datetime(self, value):
        """ Datetime Format... """

        return value.strftime("%Y-%m-%d %H:%M:%S") if value else None
