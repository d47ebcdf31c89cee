"""Fakes dos colaboradores da importação para testes do caso de uso."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from app.protocols import AuthResult, ProcessorUploadResult

PUBKEY = "a" * 64


class FakeAuthVerifier:
    def __init__(self, result: AuthResult | None = None) -> None:
        self.result = result or AuthResult(valid=True, pubkey=PUBKEY)
        self.calls: list[dict[str, Any]] = []

    async def verify(self, *, authorization, url, method, body) -> AuthResult:
        self.calls.append(
            {"authorization": authorization, "url": url, "method": method, "body": body}
        )
        return self.result


@dataclass
class FakeRemoteVideo:
    content: bytes = b"\x00\x00\x00\x18ftypmp42video-bytes"
    status_code: int = 200
    reason_phrase: str = "OK"
    headers: dict[str, str] = field(default_factory=lambda: {"content-type": "video/mp4"})
    read_calls: int = 0

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    async def read(self) -> bytes:
        self.read_calls += 1
        return self.content


class FakeVideoFetcher:
    def __init__(self, remote: FakeRemoteVideo | None = None, error: Exception | None = None) -> None:
        self.remote = remote or FakeRemoteVideo()
        self.error = error
        self.opened_urls: list[str] = []

    @asynccontextmanager
    async def open(self, url: str):
        self.opened_urls.append(url)
        if self.error is not None:
            raise self.error
        yield self.remote


class FakeMediaProcessor:
    def __init__(self, result: ProcessorUploadResult | None = None, error: Exception | None = None) -> None:
        self.result = result or ProcessorUploadResult(
            success=True,
            url="https://res.cloudinary.com/demo/video/upload/v1/clip.mp4",
            public_id="importa-video/aaaa/1_clip",
        )
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def upload_video(self, *, content, filename, content_type, uploader_pubkey):
        self.calls.append(
            {
                "content": content,
                "filename": filename,
                "content_type": content_type,
                "uploader_pubkey": uploader_pubkey,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


class FakeThumbnailTrigger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def trigger(self, asset_id: str, base_url: str) -> bool:
        self.calls.append((asset_id, base_url))
        return True


class RecordingScheduler:
    """Substitui schedule_background_task sem criar tasks reais."""

    def __init__(self) -> None:
        self.scheduled: list[str] = []

    def __call__(self, *, name: str, coroutine) -> int:
        self.scheduled.append(name)
        # Fecha a coroutine para não gerar "never awaited"
        coroutine.close()
        return len(self.scheduled)
