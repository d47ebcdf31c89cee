"""Testes do CloudinaryClient com httpx.MockTransport."""

from __future__ import annotations

import hashlib

import httpx
import pytest

from app.infra.media import CloudinaryClient, build_public_id, sign_params
from app.infra.media.cloudinary_client import EAGER_TRANSFORMATIONS
from config.settings.cloudinary import CloudinarySettings

PUBKEY = "ab" * 32
SETTINGS = CloudinarySettings(cloud_name="demo", api_key="key-123", api_secret="s3cr3t")


def _client(handler) -> CloudinaryClient:
    return CloudinaryClient(SETTINGS, transport=httpx.MockTransport(handler), clock=lambda: 1_700_000_000.9)


def test_build_public_id_strips_extension_and_truncates_pubkey() -> None:
    assert build_public_id("importa-video", PUBKEY, 1700000000, "clip.final.mp4") == (
        f"importa-video/{PUBKEY[:16]}/1700000000_clip.final"
    )


def test_sign_params_sorts_keys_and_ignores_unsigned() -> None:
    params = {"timestamp": "10", "public_id": "a/b", "api_key": "key", "file": "x", "eager": "w_1"}

    expected = hashlib.sha1(b"eager=w_1&public_id=a/b&timestamp=10secret").hexdigest()
    assert sign_params(params, "secret") == expected


def test_build_upload_params_signs_everything_but_api_key() -> None:
    client = _client(lambda request: httpx.Response(200))

    params = client.build_upload_params(filename="cat.mp4", uploader_pubkey=PUBKEY)

    assert params["timestamp"] == "1700000000"
    assert params["public_id"] == f"importa-video/{PUBKEY[:16]}/1700000000_cat"
    assert params["moderation"] == "aws_rek_video"
    assert params["eager"] == EAGER_TRANSFORMATIONS
    assert params["eager_async"] == "true"
    assert params["context"] == f"pubkey={PUBKEY}|app=importa-video|source=url-import"
    assert params["api_key"] == "key-123"
    unsigned = {k: v for k, v in params.items() if k not in {"signature", "api_key"}}
    assert params["signature"] == sign_params(unsigned, "s3cr3t")


def test_eager_transformations_are_square_jpegs() -> None:
    assert EAGER_TRANSFORMATIONS == (
        "w_320,h_320,c_fill,q_auto,f_jpg|w_640,h_640,c_fill,q_auto,f_jpg|w_1280,h_1280,c_fill,q_auto,f_jpg"
    )


@pytest.mark.asyncio
async def test_upload_video_success() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "secure_url": "https://res.cloudinary.com/demo/video/upload/v1/cat.mp4",
                "public_id": "importa-video/abab/1700000000_cat",
                "width": 640,
                "height": 640,
            },
        )

    result = await _client(handler).upload_video(
        content=b"video", filename="cat.mp4", content_type="video/mp4", uploader_pubkey=PUBKEY
    )

    assert result.success is True
    assert result.url == "https://res.cloudinary.com/demo/video/upload/v1/cat.mp4"
    assert result.width == 640
    request = seen[0]
    assert str(request.url) == "https://api.cloudinary.com/v1_1/demo/video/upload"
    assert request.method == "POST"
    body = request.read()
    assert b'name="moderation"' in body
    assert b'name="file"; filename="cat.mp4"' in body


@pytest.mark.asyncio
async def test_upload_video_http_error_is_reported_not_raised() -> None:
    result = await _client(lambda request: httpx.Response(500)).upload_video(
        content=b"video", filename="cat.mp4", content_type="video/mp4", uploader_pubkey=PUBKEY
    )

    assert result.success is False
    assert result.error == "http_500"


@pytest.mark.asyncio
async def test_upload_video_transport_error_is_reported_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    result = await _client(handler).upload_video(
        content=b"video", filename="cat.mp4", content_type="video/mp4", uploader_pubkey=PUBKEY
    )

    assert result.success is False
    assert result.error == "ConnectTimeout"


@pytest.mark.asyncio
async def test_upload_video_without_secure_url_fails() -> None:
    result = await _client(lambda request: httpx.Response(200, json={"public_id": "x"})).upload_video(
        content=b"video", filename="cat.mp4", content_type="video/mp4", uploader_pubkey=PUBKEY
    )

    assert result.success is False
    assert result.error == "missing_secure_url"
