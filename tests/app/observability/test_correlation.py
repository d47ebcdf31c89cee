"""Testes do correlation_id em ContextVar."""

from __future__ import annotations

from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("req-1")
    try:
        assert get_correlation_id() == "req-1"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_uuid() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)


def test_correlation_id_from_headers() -> None:
    assert correlation_id_from_headers({"x-correlation-id": " abc "}) == "abc"
    assert correlation_id_from_headers({}) is None
    assert correlation_id_from_headers({"x-correlation-id": "x" * 200}) is None
