"""Endpoints HTTP: `media/` (importação por URL) e `health/` (probes)."""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
