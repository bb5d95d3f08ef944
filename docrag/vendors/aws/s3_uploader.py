""" Stores the raw bytes of an uploaded document in the bucket... """

# Python Packages
from loguru import logger

# Client
from .s3_client import get_s3_client, object_url

# Constants
from ...base import constants





class S3Uploader:

    def __init__(self, client = None, bucket_name: str = None):
        self.client = client or get_s3_client()
        self.bucket_name = bucket_name or constants.AWS_S3_BUCKET_NAME


    def upload_bytes(self, data: bytes, s3_key: str, content_type: str = None) -> str:
        """
        Put one object; the key is chosen by the caller (documents/{ms}-{name})

        Returns:
            str: s3:// url of the stored object
        """

        self.client.put_object(
            Bucket = self.bucket_name,
            Key = s3_key,
            Body = data,
            ContentType = content_type or "application/octet-stream"
        )

        logger.debug(f"☁️  Stored {len(data)} bytes at {s3_key}")

        return object_url(self.bucket_name, s3_key)
