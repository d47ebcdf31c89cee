"""Testes do HttpVideoFetcher."""

from __future__ import annotations

import httpx
import pytest

from app.infra.media import HttpVideoFetcher
from utils.errors import RemoteFetchError


def _fetcher(handler) -> HttpVideoFetcher:
    return HttpVideoFetcher(
        user_agent="ImportaVideo/1.0 (Video Import Bot)",
        timeout_seconds=5,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_open_exposes_headers_and_reads_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, headers={"Content-Type": "video/mp4"}, content=b"video-bytes")

    async with _fetcher(handler).open("https://cdn.example/cat.mp4") as remote:
        assert remote.is_success is True
        assert remote.status_code == 200
        assert remote.headers.get("content-type") == "video/mp4"
        assert await remote.read() == b"video-bytes"

    assert seen[0].headers["user-agent"] == "ImportaVideo/1.0 (Video Import Bot)"


@pytest.mark.asyncio
async def test_open_follows_redirects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/short":
            return httpx.Response(302, headers={"Location": "https://cdn.example/final.mp4"})
        return httpx.Response(200, content=b"final")

    async with _fetcher(handler).open("https://cdn.example/short") as remote:
        assert await remote.read() == b"final"


@pytest.mark.asyncio
async def test_open_exposes_error_status() -> None:
    async with _fetcher(lambda request: httpx.Response(404)).open("https://cdn.example/x.mp4") as remote:
        assert remote.is_success is False
        assert remote.status_code == 404
        assert remote.reason_phrase == "Not Found"


@pytest.mark.asyncio
async def test_transport_error_becomes_remote_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    with pytest.raises(RemoteFetchError, match="ConnectError"):
        async with _fetcher(handler).open("https://nowhere.invalid/x.mp4"):
            pass
