"""Protocolos e contratos do core da aplicação."""

from .auth_verifier import AuthResult, AuthVerifierProtocol
from .bucket_store import BucketStoreProtocol
from .media_processor import MediaProcessorProtocol, ProcessorUploadResult
from .metadata_store import MetadataStoreProtocol
from .thumbnail_trigger import ThumbnailTriggerProtocol
from .video_fetcher import RemoteVideoProtocol, VideoFetcherProtocol

__all__ = [
    "AuthResult",
    "AuthVerifierProtocol",
    "BucketStoreProtocol",
    "MediaProcessorProtocol",
    "MetadataStoreProtocol",
    "ProcessorUploadResult",
    "RemoteVideoProtocol",
    "ThumbnailTriggerProtocol",
    "VideoFetcherProtocol",
]
