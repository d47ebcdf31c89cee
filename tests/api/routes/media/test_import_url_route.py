"""Testes HTTP do endpoint /api/import-url."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import get_import_use_case_provider
from app.infra.stores import MemoryBucketStore, MemoryMetadataStore
from app.protocols import AuthResult
from app.use_cases.url_import import ImportVideoFromUrlUseCase
from config.settings import get_base_settings
from config.settings.media_import import MediaImportSettings
from fakes.import_fakes import (
    FakeAuthVerifier,
    FakeRemoteVideo,
    FakeThumbnailTrigger,
    FakeVideoFetcher,
    RecordingScheduler,
)

VIDEO = b"\x00\x00\x00\x18ftypmp42" + b"v" * 64


@pytest.fixture(autouse=True)
def _plain_origin(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PUBLIC_BASE_URL", raising=False)
    get_base_settings.cache_clear()
    yield
    get_base_settings.cache_clear()


def _client(auth: AuthResult | None = None, remote: FakeRemoteVideo | None = None):
    verifier = FakeAuthVerifier(auth)
    scheduler = RecordingScheduler()
    use_case = ImportVideoFromUrlUseCase(
        auth_verifier=verifier,
        video_fetcher=FakeVideoFetcher(remote or FakeRemoteVideo(content=VIDEO)),
        bucket_store=MemoryBucketStore(),
        settings=MediaImportSettings(max_bytes_free=1024),
        metadata_store=MemoryMetadataStore(),
        thumbnail_trigger=FakeThumbnailTrigger(),
        scheduler=scheduler,
    )
    app = create_app()
    app.dependency_overrides[get_import_use_case_provider] = lambda: lambda: use_case
    return TestClient(app), verifier, scheduler


def test_preflight_returns_cors_headers() -> None:
    client, _, _ = _client()

    response = client.options("/api/import-url")

    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"
    assert response.headers["access-control-max-age"] == "86400"


def test_import_success_returns_nip94_event() -> None:
    client, verifier, scheduler = _client()

    response = client.post(
        "/api/import-url",
        json={"url": "https://cdn.example/cat.mp4", "caption": "oi"},
        headers={"Authorization": "Nostr abc", "x-correlation-id": "corr-1"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "Video imported successfully"
    assert body["processing_url"].startswith("http://testserver/media/")
    assert body["download_url"] == body["processing_url"]
    assert body["nip94_event"]["kind"] == 1063
    assert body["nip94_event"]["content"] == "oi"
    assert verifier.calls[0]["url"] == "http://testserver/api/import-url"
    assert verifier.calls[0]["authorization"] == "Nostr abc"
    assert len(scheduler.scheduled) == 1


def test_repeat_import_reports_existing_file() -> None:
    client, _, _ = _client()
    payload = {"url": "https://cdn.example/cat.mp4"}

    first = client.post("/api/import-url", json=payload, headers={"Authorization": "Nostr abc"})
    second = client.post("/api/import-url", json=payload, headers={"Authorization": "Nostr abc"})

    assert second.status_code == 200
    assert second.json()["message"] == "File already exists"
    assert second.json()["processing_url"] == first.json()["processing_url"]


def test_auth_failure_is_401_with_specific_code() -> None:
    client, _, _ = _client(auth=AuthResult.failure("missing_auth", "Valid NIP-98 authentication required"))

    response = client.post("/api/import-url", json={"url": "https://cdn.example/cat.mp4"})

    assert response.status_code == 401
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json() == {
        "status": "error",
        "message": "Valid NIP-98 authentication required",
        "code": "missing_auth",
    }


def test_invalid_url_is_400() -> None:
    client, _, _ = _client()

    response = client.post(
        "/api/import-url",
        json={"url": "ftp://files.example/a.mp4"},
        headers={"Authorization": "Nostr abc"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "invalid_request"


def test_file_too_large_is_400() -> None:
    client, _, _ = _client(remote=FakeRemoteVideo(content=b"x" * 2048))

    response = client.post(
        "/api/import-url",
        json={"url": "https://cdn.example/big.mp4"},
        headers={"Authorization": "Nostr abc"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "file_too_large"
    assert response.json()["message"] == "File size 2048 exceeds limit of 1024 bytes"


def test_public_base_url_overrides_request_origin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://media.example")
    get_base_settings.cache_clear()
    client, verifier, _ = _client()

    response = client.post(
        "/api/import-url",
        json={"url": "https://cdn.example/cat.mp4"},
        headers={"Authorization": "Nostr abc"},
    )

    assert response.json()["processing_url"].startswith("https://media.example/media/")
    assert verifier.calls[0]["url"] == "https://media.example/api/import-url"


def test_wiring_failure_returns_error_body_with_cors() -> None:
    def broken_factory():
        raise ValueError("GCS sem credenciais")

    app = create_app()
    app.dependency_overrides[get_import_use_case_provider] = lambda: broken_factory
    client = TestClient(app)

    response = client.post(
        "/api/import-url",
        json={"url": "https://cdn.example/cat.mp4"},
        headers={"Authorization": "Nostr abc"},
    )

    assert response.status_code == 400
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json() == {
        "status": "error",
        "message": "Internal server error",
        "code": "server_error",
    }
