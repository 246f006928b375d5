from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from redactor.storage.base import BaseStorageClient, ObjectMetadata
from redactor.storage.exceptions import ObjectNotFoundError, StorageError

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3StorageClient(BaseStorageClient):
    """Storage adapter built on a boto3 S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def put_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                Bucket=bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as exc:
            raise self._translate(exc, bucket, key) from exc

    def head_object(self, bucket: str, key: str) -> ObjectMetadata:
        try:
            response = self._client.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise self._translate(exc, bucket, key) from exc
        return ObjectMetadata(
            key=key,
            content_length=response.get("ContentLength"),
            content_type=response.get("ContentType"),
        )

    def get_object(self, bucket: str, key: str) -> object:
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as exc:
            raise self._translate(exc, bucket, key) from exc
        return response["Body"]

    @staticmethod
    def _translate(exc: Exception, bucket: str, key: str) -> StorageError:
        if isinstance(exc, ClientError):
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in NOT_FOUND_CODES:
                return ObjectNotFoundError(f"s3://{bucket}/{key} not found")
            return StorageError(f"S3 error for s3://{bucket}/{key}: {code or exc}")
        return StorageError(f"S3 client error for s3://{bucket}/{key}: {exc}")
