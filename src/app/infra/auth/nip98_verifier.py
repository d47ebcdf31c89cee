"""Verificação NIP-98: requisição HTTP autenticada por evento Nostr.

Header esperado:
    Authorization: Nostr <base64(evento JSON)>

Ordem das checagens (cada falha devolve seu próprio error_code):
1. header presente ............................ missing_auth
2. esquema, base64, JSON e campos ............. invalid_auth_format
3. kind 27235 ................................. invalid_event_kind
4. created_at dentro da janela ................ event_expired
5. tag `u` igual à URL da requisição .......... url_mismatch
6. tag `method` igual ao método ............... method_mismatch
7. tag `payload` igual ao sha256 do body ...... payload_mismatch
8. id igual ao hash da serialização canônica .. invalid_event_id
9. assinatura Schnorr (BIP-340) do id ......... invalid_signature
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
import logging
import time
from typing import TYPE_CHECKING, Any

from coincurve.keys import PublicKeyXOnly

from app.protocols.auth_verifier import AuthResult
from config.settings.media_import import DEFAULT_PLAN

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.auth import AuthSettings

logger = logging.getLogger(__name__)

NIP98_EVENT_KIND = 27235
AUTH_SCHEME = "nostr"

_HEX_LENGTHS = {"id": 64, "pubkey": 64, "sig": 128}


def compute_event_id(event: dict[str, Any]) -> str:
    """sha256 hex da serialização canônica [0, pubkey, created_at, kind, tags, content]."""
    serialized = json.dumps(
        [0, event["pubkey"], event["created_at"], event["kind"], event["tags"], event["content"]],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def verify_schnorr_signature(pubkey: str, event_id: str, signature: str) -> bool:
    """Verifica assinatura BIP-340 do id do evento."""
    try:
        public_key = PublicKeyXOnly(bytes.fromhex(pubkey))
        return bool(public_key.verify(bytes.fromhex(signature), bytes.fromhex(event_id)))
    except (ValueError, TypeError):
        return False


def extract_user_plan(tags: list[list[str]]) -> str:
    """Plano declarado na tag `plan` do evento; ausente = free."""
    value = _tag_value(tags, "plan")
    return value.strip().lower() if value and value.strip() else DEFAULT_PLAN


def _tag_value(tags: list[list[str]], name: str) -> str | None:
    for tag in tags:
        if len(tag) >= 2 and tag[0] == name:
            return tag[1]
    return None


def _is_hex(value: object, length: int) -> bool:
    if not isinstance(value, str) or len(value) != length:
        return False
    try:
        bytes.fromhex(value)
    except ValueError:
        return False
    return True


def _is_well_formed(event: object) -> bool:
    if not isinstance(event, dict):
        return False
    if not all(_is_hex(event.get(field), size) for field, size in _HEX_LENGTHS.items()):
        return False
    if not isinstance(event.get("created_at"), int) or not isinstance(event.get("kind"), int):
        return False
    if not isinstance(event.get("content", ""), str):
        return False
    tags = event.get("tags")
    return isinstance(tags, list) and all(
        isinstance(tag, list) and all(isinstance(item, str) for item in tag) for tag in tags
    )


def _same_url(left: str, right: str) -> bool:
    return left.rstrip("/") == right.rstrip("/")


class Nip98AuthVerifier:
    """Verificador local de eventos NIP-98.

    Args:
        settings: AuthSettings (janela de tempo, checagem de URL/payload)
        signature_checker: Função (pubkey, id, sig) -> bool
        clock: Fonte de tempo em segundos
    """

    def __init__(
        self,
        settings: AuthSettings,
        *,
        signature_checker: Callable[[str, str, str], bool] = verify_schnorr_signature,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings
        self._check_signature = signature_checker
        self._clock = clock

    async def verify(
        self,
        *,
        authorization: str | None,
        url: str,
        method: str,
        body: bytes,
    ) -> AuthResult:
        result = self._verify(authorization=authorization, url=url, method=method, body=body)
        if not result.valid:
            logger.info("nip98_auth_rejected", extra={"error_code": result.error_code})
        return result

    def _verify(
        self,
        *,
        authorization: str | None,
        url: str,
        method: str,
        body: bytes,
    ) -> AuthResult:
        if not authorization or not authorization.strip():
            return AuthResult.failure("missing_auth", "Valid NIP-98 authentication required")

        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() != AUTH_SCHEME or not token.strip():
            return AuthResult.failure(
                "invalid_auth_format", "Authorization header must use the Nostr scheme"
            )

        try:
            event = json.loads(base64.b64decode(token.strip(), validate=True))
        except (binascii.Error, ValueError):
            return AuthResult.failure(
                "invalid_auth_format", "Authorization token is not a base64 encoded event"
            )

        if not _is_well_formed(event):
            return AuthResult.failure("invalid_auth_format", "Malformed authorization event")
        event.setdefault("content", "")

        if event["kind"] != NIP98_EVENT_KIND:
            return AuthResult.failure(
                "invalid_event_kind", f"Authorization event must be kind {NIP98_EVENT_KIND}"
            )

        age = abs(self._clock() - event["created_at"])
        if age > self._settings.max_event_age_seconds:
            return AuthResult.failure("event_expired", "Authorization event has expired")

        tags = event["tags"]
        signed_url = _tag_value(tags, "u")
        if self._settings.verify_url and (signed_url is None or not _same_url(signed_url, url)):
            return AuthResult.failure("url_mismatch", "Authorization event URL does not match request")

        signed_method = _tag_value(tags, "method")
        if signed_method is None or signed_method.upper() != method.upper():
            return AuthResult.failure(
                "method_mismatch", "Authorization event method does not match request"
            )

        payload_hash = _tag_value(tags, "payload")
        if payload_hash is not None or self._settings.verify_payload:
            if payload_hash != hashlib.sha256(body).hexdigest():
                return AuthResult.failure(
                    "payload_mismatch", "Authorization event payload hash does not match body"
                )

        if compute_event_id(event) != event["id"]:
            return AuthResult.failure("invalid_event_id", "Authorization event id is invalid")

        if not self._check_signature(event["pubkey"], event["id"], event["sig"]):
            return AuthResult.failure("invalid_signature", "Authorization event signature is invalid")

        return AuthResult(valid=True, pubkey=event["pubkey"], plan=extract_user_plan(tags))
