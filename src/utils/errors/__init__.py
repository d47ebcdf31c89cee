"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BucketStorageError,
    InfrastructureError,
    MetadataStoreError,
    RemoteFetchError,
)

__all__ = [
    "BucketStorageError",
    "InfrastructureError",
    "MetadataStoreError",
    "RemoteFetchError",
]
