"""
System Controller

Handles:
    - Health banner
    - Statistics (documents + rate limiting)
"""

# Python Packages
from datetime import datetime, timezone

# Cache
from ..documents.services.document_cache import DocumentCache, document_cache as shared_document_cache

# Vendors
from ..vendors.factory import current_models
from ..vendors.rate_throttler import RateThrottler, get_rate_throttler

# Constants
from ..base import constants





class SystemController:

    def __init__(self, cache: DocumentCache = None, throttler: RateThrottler = None):
        self.cache = cache or shared_document_cache
        self.throttler = throttler or get_rate_throttler()


    def health(self) -> dict:
        return {
            "message": f"{constants.SWAGGER_APP_PROPS['name']} API",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": constants.APP_ENV,
            "models": current_models(),
            "storage": "S3 + SQL database"
        }


    def stats(self) -> dict:
        """
        Document totals, model names and the throttler's current window
        """

        documents = self.cache.all()
        total_size = sum(document.file_size for document in documents)

        return {
            "documents": {
                "documentCount": len(documents),
                "embeddedCount": sum(1 for document in documents if document.embedding is not None),
                "totalSize": total_size,
                "totalSizeMB": round(total_size / 1024 / 1024, 2),
                "fileTypes": list(dict.fromkeys(document.file_type for document in documents)),
                "recentDocuments": [
                    {
                        "id": document.id,
                        "fileName": document.name,
                        "source": document.source,
                        "createdAt": document.created_at.isoformat() if document.created_at else None
                    }
                    for document in documents[:5]
                ]
            },
            "models": current_models(),
            "rate_limiting": self.throttler.snapshot()
        }
