"""
S3 Delete Service

Handles:
    - Delete the raw file behind one document
    - Delete every raw file under the documents/ prefix (clear all)

delete_objects takes at most 1000 keys; list_objects_v2 pages are never
larger, so each page is removed with one call.
"""

# Python Packages
from loguru import logger

# Client
from .s3_client import get_s3_client

# Constants
from ...base import constants





class S3DeleteService:

    def __init__(self, client = None, bucket_name: str = None):
        self.s3_client = client or get_s3_client()
        self.bucket_name = bucket_name or constants.AWS_S3_BUCKET_NAME


    # ---------------------------------------------------------
    # 🔹 Single Object
    # ---------------------------------------------------------
    def delete_file(self, s3_key: str):
        """
        Args:
            s3_key (str): Object key, e.g. documents/1718000000000-report.pdf
        """

        self.s3_client.delete_object(Bucket = self.bucket_name, Key = s3_key)


    # ---------------------------------------------------------
    # 🔹 Prefix
    # ---------------------------------------------------------
    def delete_prefix(self, prefix: str) -> int:
        """
        Returns:
            int: Number of objects removed
        """

        deleted = 0
        paginator = self.s3_client.get_paginator("list_objects_v2")

        for page in paginator.paginate(Bucket = self.bucket_name, Prefix = prefix):
            keys = [{"Key": item["Key"]} for item in page.get("Contents", [])]

            if keys:
                self.s3_client.delete_objects(Bucket = self.bucket_name, Delete = {"Objects": keys, "Quiet": True})
                deleted += len(keys)

        logger.debug(f"🗑️  Removed {deleted} objects under {prefix}")

        return deleted
