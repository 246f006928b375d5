import boto3

from redactor.config.settings import STORAGE_BACKENDS, ConfigurationError, Settings
from redactor.storage.base import BaseStorageClient
from redactor.storage.memory_client import InMemoryStorageClient
from redactor.storage.s3_client import S3StorageClient


class StorageClientFactory:
    """Creates the configured storage adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseStorageClient:
        backend = settings.storage_backend.lower()
        if backend == "s3":
            client = boto3.client(
                "s3",
                region_name=settings.aws_region,
                endpoint_url=settings.aws_endpoint_url or None,
            )
            return S3StorageClient(client)
        if backend == "memory":
            return InMemoryStorageClient()
        raise ConfigurationError(
            f"Unknown storage backend '{backend}'. Choose from: {list(STORAGE_BACKENDS)}"
        )
