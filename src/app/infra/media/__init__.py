"""Clientes HTTP de mídia: download remoto, Cloudinary e thumbnails."""

from __future__ import annotations

from app.infra.media.cloudinary_client import CloudinaryClient, build_public_id, sign_params
from app.infra.media.thumbnail_trigger import HttpThumbnailTrigger
from app.infra.media.video_fetcher import HttpRemoteVideo, HttpVideoFetcher

__all__ = [
    "CloudinaryClient",
    "HttpRemoteVideo",
    "HttpThumbnailTrigger",
    "HttpVideoFetcher",
    "build_public_id",
    "sign_params",
]
