"""Verificação de autenticação da requisição (NIP-98)."""

from __future__ import annotations

from app.infra.auth.nip98_verifier import (
    NIP98_EVENT_KIND,
    Nip98AuthVerifier,
    compute_event_id,
    extract_user_plan,
    verify_schnorr_signature,
)

__all__ = [
    "NIP98_EVENT_KIND",
    "Nip98AuthVerifier",
    "compute_event_id",
    "extract_user_plan",
    "verify_schnorr_signature",
]
