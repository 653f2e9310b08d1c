"""
Object Storage Client

Resume PDFs live in an S3-compatible bucket (Supabase storage in production).
Only put-object is used: this system never updates or deletes stored files.
Public URLs are derived from config, not returned by the store.
"""
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


class ObjectStorage:
    """
    Wrapper around a boto3 S3 client bound to one bucket.
    """

    def __init__(self, client=None, bucket: str = None):
        self.client = client or boto3.client(
            "s3",
            endpoint_url=settings.s3_endpoint_url or None,
            region_name=settings.s3_region,
            aws_access_key_id=settings.s3_access_key_id or None,
            aws_secret_access_key=settings.s3_secret_access_key or None,
            # Supabase and most self-hosted stores only speak path-style
            config=Config(s3={"addressing_style": "path"}),
        )
        self.bucket = bucket or settings.s3_bucket_name

    def put_object(self, key: str, body: bytes, content_type: str) -> None:
        """Upload bytes under `key`. Errors propagate to the caller."""
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )
        logger.info("Stored object %s (%d bytes) in bucket %s", key, len(body), self.bucket)

    def public_url(self, key: str) -> str:
        return settings.public_file_url(key)

    def ping(self) -> bool:
        """Test if the bucket is reachable"""
        try:
            self.client.head_bucket(Bucket=self.bucket)
            return True
        except (BotoCoreError, ClientError) as e:
            logger.warning("Object storage check failed: %s", e)
            return False


# Singleton instance
_storage: ObjectStorage = None


def get_storage() -> ObjectStorage:
    """Get or create the storage client (singleton pattern)"""
    global _storage
    if _storage is None:
        _storage = ObjectStorage()
    return _storage
