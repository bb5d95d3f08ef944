"""
Shared boto3 S3 client for the document bucket.
"""

# Python Packages
import threading
import boto3

# Constants
from ...base import constants


_client = None
_client_lock = threading.Lock()





def get_s3_client():
    """
    One client per process; boto3 clients are thread safe once built.
    """

    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                _client = boto3.client(
                    "s3",
                    aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
                    aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
                    region_name = constants.AWS_REGION
                )

    return _client


def object_url(bucket_name: str, s3_key: str) -> str:
    return f"s3://{bucket_name}/{s3_key}"
