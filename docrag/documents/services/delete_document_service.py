"""
Delete Document Service

Handles:
    - Delete one document (row + raw S3 file)
    - Clear every document
Storage clean-up failures only warn; the database row is what counts.
"""

# Python Packages
from loguru import logger

# Store & Cache
from .document_store import DocumentStore
from .document_cache import DocumentCache, document_cache as shared_document_cache

# Vendors
from ...vendors.aws.s3_delete import S3DeleteService

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages





class DeleteDocumentService:

    def __init__(self, store: DocumentStore = None, cache: DocumentCache = None, deleter: S3DeleteService = None):
        self.store = store or DocumentStore()
        self.cache = cache or shared_document_cache
        self.deleter = deleter


    def delete_document(self, document_id: str) -> dict:
        """
        Args:
            document_id (str)

        Raises:
            NotFoundException: Unknown id
        """

        document = self.store.get_by_id(document_id)

        if not document:
            raise NotFoundException(message = messages.ERROR["DOCUMENT_NOT_FOUND"])

        # 🔹 Raw file first; failure only warns
        if document.storage_path:
            try:
                self._deleter().delete_file(document.storage_path)
            except Exception as error:
                logger.warning(f"⚠️  Could not delete file from storage: {error}")

        # 🔹 Row
        if not self.store.delete_by_id(document_id):
            raise NotFoundException(message = messages.ERROR["DOCUMENT_NOT_FOUND"])

        self.cache.invalidate()

        logger.info(f"✅ Deleted document: {document_id}")

        return {
            "document_id": document_id,
            "message": messages.SUCCESS["DOCUMENT_DELETED"].format(document_id = document_id)
        }



    def clear_documents(self) -> dict:
        deleted = self.store.clear_all()
        self.cache.invalidate()

        try:
            self._deleter().delete_prefix(f"{constants.S3_DOCUMENT_PREFIX}/")
        except Exception as error:
            logger.warning(f"⚠️  Could not clear storage: {error}")

        logger.info(f"✅ All documents cleared ({deleted})")

        return {
            "deleted": deleted,
            "message": messages.SUCCESS["DOCUMENTS_CLEARED"]
        }



    def _deleter(self) -> S3DeleteService:
        if self.deleter is None:
            self.deleter = S3DeleteService()
        return self.deleter
