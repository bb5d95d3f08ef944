"""
Upload Document Service

Handles:
    - Store the raw file in S3 (documents/{unix_ms}-{filename})
    - Extract text from the file
    - Embed the text (throttled)
    - Insert the document and refresh the cache
"""

# Python Packages
import time
from loguru import logger
from werkzeug.utils import secure_filename

# Store & Cache
from .document_store import DocumentStore
from .document_cache import DocumentCache, document_cache as shared_document_cache

# Services
from ...document_processing.services.text_extraction_service import TextExtractionService

# Vendors
from ...vendors import EmbeddingService
from ...vendors.aws.s3_uploader import S3Uploader
from ...vendors.aws.s3_delete import S3DeleteService

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import AppException, ServiceException

# App Messages
from ...util import messages


PREVIEW_CHARS = 200





class UploadDocumentService:

    def __init__(
        self,
        store: DocumentStore = None,
        cache: DocumentCache = None,
        extractor: TextExtractionService = None,
        embedding_service = None,
        uploader: S3Uploader = None,
        deleter: S3DeleteService = None
    ):
        self.store = store or DocumentStore()
        self.cache = cache or shared_document_cache
        self.extractor = extractor or TextExtractionService()
        self.embedding_service = embedding_service or EmbeddingService()
        self.uploader = uploader or S3Uploader()
        self.deleter = deleter


    def upload(self, args: dict) -> dict:
        """
        Upload, extract, embed and store one document

        Args:
            args (dict):
                {
                    "file": FileStorage,
                    "content": bytes,      # read by UploadDocumentValidation
                    "tags": list[str]
                }

        Returns:
            dict: document, fileUrl, contentPreview
        """

        file = args.get("file")
        content = args.get("content") or b""
        tags = args.get("tags") or []

        file_name = file.filename
        mime_type = file.mimetype or "application/octet-stream"
        s3_key = f"{constants.S3_DOCUMENT_PREFIX}/{int(time.time() * 1000)}-{secure_filename(file_name) or 'upload'}"

        logger.info(f"📁 Uploading file: {file_name} ({len(content)} bytes)")

        # 1️⃣ Raw file to S3
        try:
            file_url = self.uploader.upload_bytes(content, s3_key, mime_type)

        except Exception as error:
            logger.error(f"❌ S3 upload failed for {file_name}: {error}")
            raise ServiceException(
                error_code = "DOCUMENT_UPLOAD_FAILED",
                message = messages.ERROR["DOCUMENT_UPLOAD_FAILED"],
                details = str(error),
                status_code = 500
            )

        try:
            # 2️⃣ Extract text
            text = self.extractor.extract(content, file_name, mime_type)

            # 3️⃣ Embed (empty text is stored without a vector)
            vector = self._embed(text)

            # 4️⃣ Store
            record = self.store.insert(
                {
                    "content": text,
                    "file_name": file_name,
                    "file_size": len(content),
                    "file_type": mime_type,
                    "storage_path": s3_key,
                    "source": file_name,
                    "tags": tags
                },
                vector
            )

        except Exception:
            self._discard_raw_file(s3_key)
            raise

        self.cache.invalidate()

        logger.info(f"✅ Stored document {record.id} ({len(text)} chars)")

        return {
            "document": {
                "id": record.id,
                "fileName": record.name,
                "fileSize": record.file_size,
                "fileType": record.file_type,
                "source": record.source,
                "tags": list(record.tags),
                "createdAt": record.created_at.isoformat() if record.created_at else None
            },
            "fileUrl": file_url,
            "contentPreview": text[:PREVIEW_CHARS] + ("..." if len(text) > PREVIEW_CHARS else "")
        }



    def _embed(self, text: str):
        if not text.strip():
            return None

        try:
            return self.embedding_service.generate_embedding(text)

        except AppException:
            raise

        except Exception as error:
            raise ServiceException(
                error_code = "EMBEDDING_FAILED",
                message = messages.ERROR["EMBEDDING_FAILED"],
                details = str(error),
                status_code = 502
            )



    def _discard_raw_file(self, s3_key: str):
        """ Best effort: a failed upload must not leave an orphaned S3 object... """

        try:
            deleter = self.deleter or S3DeleteService()
            deleter.delete_file(s3_key)

        except Exception as error:
            logger.warning(f"⚠️  Could not remove {s3_key} from storage: {error}")
