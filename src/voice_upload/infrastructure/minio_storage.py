"""MinIO implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio

from voice_upload.exceptions import StorageDeleteError, StorageUploadError
from voice_upload.interfaces import StorageClient
from voice_upload.logging import setup_logging

logger = setup_logging()


class MinioStorage(StorageClient):
    """Handles audio object storage using MinIO or any S3-compatible endpoint."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    def upload_file(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to storage",
                extra={
                    "object_name": object_name,
                    "size": size,
                    "bucket": self._bucket_name,
                },
            )
        except Exception as e:
            logger.exception(
                "Storage upload failed",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
            raise StorageUploadError(object_name, e) from e

    def delete_file(self, object_name: str) -> None:
        try:
            self._client.remove_object(self._bucket_name, object_name)
            logger.info(
                "File removed from storage",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
        except Exception as e:
            logger.exception(
                "Storage delete failed",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
            raise StorageDeleteError(object_name, e) from e

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": self._bucket_name})
