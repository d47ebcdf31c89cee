"""Caso de uso: importar vídeo a partir de uma URL.

Saga linear (cada passo depende do anterior):

    autenticar → parse do body → download → política de tipo →
    teto declarado → buffer → teto real → sha256 → dedupe →
    persistência (Cloudinary com fallback para bucket) →
    thumbnail em background → evento NIP-94

Erros de validação e política sobem como `UrlImportError` tipado no passo
que os detecta. Falha da estratégia primária é recuperada localmente pelo
fallback. Qualquer outra exceção vira `ServerError` na borda de `execute`.
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.import_errors import (
    AuthError,
    PayloadTooLargeError,
    ServerError,
    UnsupportedMediaTypeError,
    UpstreamFetchError,
    UrlImportError,
)
from app.domain.url_import import (
    FetchedAsset,
    ImportOutcome,
    ImportRequest,
    build_nip94_event,
    parse_import_request,
)
from app.observability.metrics import record_latency
from app.services.background_tasks import schedule_background_task
from app.services.media_policy import (
    get_file_extension,
    is_valid_video_content,
    normalize_content_type,
    resolve_content_type,
)
from app.use_cases.url_import._persistence import (
    build_media_url,
    generate_asset_id,
    record_hash_mapping,
    store_in_bucket,
)
from config.logging import log_fallback
from utils.errors import RemoteFetchError

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine, Mapping

    from app.protocols import (
        AuthVerifierProtocol,
        BucketStoreProtocol,
        MediaProcessorProtocol,
        MetadataStoreProtocol,
        ThumbnailTriggerProtocol,
        VideoFetcherProtocol,
    )
    from config.settings.media_import import MediaImportSettings

logger = logging.getLogger(__name__)

MESSAGE_IMPORTED = "Video imported successfully"
MESSAGE_ALREADY_EXISTS = "File already exists"

STORAGE_CLOUDINARY = "cloudinary"
STORAGE_BUCKET = "bucket"
STORAGE_EXISTING = "existing"


@dataclass(frozen=True, slots=True)
class ImportContext:
    """Dados da requisição HTTP consumidos pelo caso de uso.

    Attributes:
        body: Corpo bruto (JSON)
        authorization: Header Authorization (prova NIP-98)
        request_url: URL assinada esperada na prova
        method: Método HTTP da requisição
        origin: Origem pública usada nas URLs de mídia
    """

    body: bytes
    authorization: str | None
    request_url: str
    method: str
    origin: str


def _mask(value: str, size: int = 8) -> str:
    return value[:size] + "..." if len(value) > size else value


def _parse_content_length(value: str | None) -> int | None:
    if not value:
        return None
    try:
        length = int(value.strip())
    except ValueError:
        return None
    return length if length > 0 else None


class ImportVideoFromUrlUseCase:
    """Orquestra a importação de um vídeo remoto.

    Não guarda estado entre execuções; todo estado durável fica no
    metadata store e no bucket injetados.
    """

    def __init__(
        self,
        *,
        auth_verifier: AuthVerifierProtocol,
        video_fetcher: VideoFetcherProtocol,
        bucket_store: BucketStoreProtocol,
        settings: MediaImportSettings,
        object_prefix: str = "uploads/",
        metadata_store: MetadataStoreProtocol | None = None,
        media_processor: MediaProcessorProtocol | None = None,
        thumbnail_trigger: ThumbnailTriggerProtocol | None = None,
        scheduler: Callable[..., Any] = schedule_background_task,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._auth_verifier = auth_verifier
        self._video_fetcher = video_fetcher
        self._bucket_store = bucket_store
        self._settings = settings
        self._object_prefix = object_prefix
        self._metadata_store = metadata_store
        self._media_processor = media_processor
        self._thumbnail_trigger = thumbnail_trigger
        self._schedule = scheduler
        self._clock = clock

    async def execute(self, context: ImportContext) -> ImportOutcome:
        """Executa a saga completa.

        Raises:
            UrlImportError: Sempre uma variante tipada; falhas inesperadas
                chegam como ServerError com a mensagem original.
        """
        started_at = time.perf_counter()
        try:
            outcome = await self._run(context)
        except UrlImportError as exc:
            logger.info("url_import_rejected", extra={"code": exc.code})
            raise
        except Exception as exc:
            logger.exception(
                "url_import_unexpected_error",
                extra={"error_type": type(exc).__name__},
            )
            raise ServerError(str(exc) or "Internal server error") from exc

        record_latency("url_import", outcome.storage, (time.perf_counter() - started_at) * 1000)
        return outcome

    async def _run(self, context: ImportContext) -> ImportOutcome:
        auth = await self._auth_verifier.verify(
            authorization=context.authorization,
            url=context.request_url,
            method=context.method,
            body=context.body,
        )
        if not auth.valid:
            raise AuthError(
                auth.error or "Valid NIP-98 authentication required",
                code=auth.error_code or "auth_required",
            )
        logger.info(
            "url_import_authenticated",
            extra={"pubkey": _mask(auth.pubkey), "plan": auth.plan},
        )

        request = parse_import_request(context.body)
        logger.info("url_import_started", extra={"host": request.hostname})

        asset = await self._fetch(request, plan=auth.plan)

        if self._metadata_store is not None:
            existing_id = await self._metadata_store.get_asset_id(asset.sha256)
            if existing_id:
                logger.info(
                    "url_import_duplicate_detected",
                    extra={"asset_id": existing_id, "sha256": _mask(asset.sha256)},
                )
                media_url = build_media_url(
                    context.origin, self._settings.media_path_prefix, existing_id
                )
                return self._outcome(
                    request, asset, media_url, existing_id, STORAGE_EXISTING, MESSAGE_ALREADY_EXISTS
                )

        now_ms = int(self._clock() * 1000)
        asset_id = generate_asset_id(asset.sha256, now_ms)
        logger.info(
            "url_import_processing",
            extra={"asset_id": asset_id, "size_bytes": asset.size, "content_type": asset.content_type},
        )

        media_url, storage = await self._persist(
            request=request,
            asset=asset,
            asset_id=asset_id,
            uploader_pubkey=auth.pubkey,
            origin=context.origin,
            now_ms=now_ms,
        )

        if storage == STORAGE_BUCKET:
            self._schedule_thumbnail(asset_id, context.origin)

        logger.info("url_import_completed", extra={"asset_id": asset_id, "storage": storage})
        return self._outcome(request, asset, media_url, asset_id, storage, MESSAGE_IMPORTED)

    async def _fetch(self, request: ImportRequest, *, plan: str) -> FetchedAsset:
        max_size = self._settings.max_size_for_plan(plan)
        try:
            async with self._video_fetcher.open(request.url) as remote:
                if not remote.is_success:
                    raise UpstreamFetchError(
                        f"Failed to fetch video: {remote.status_code} {remote.reason_phrase}".rstrip(),
                        upstream_status=remote.status_code,
                    )

                headers: Mapping[str, str] = remote.headers
                declared_type = normalize_content_type(headers.get("content-type"))
                if not is_valid_video_content(request.url, declared_type):
                    raise UnsupportedMediaTypeError(
                        declared_type, get_file_extension(request.url), request.url
                    )

                declared_length = _parse_content_length(headers.get("content-length"))
                if declared_length is not None and declared_length > max_size:
                    raise PayloadTooLargeError(declared_length, max_size)

                content = await remote.read()
        except RemoteFetchError as exc:
            raise UpstreamFetchError(str(exc)) from exc

        # Tamanho declarado não é confiável; revalida o real
        if len(content) > max_size:
            raise PayloadTooLargeError(len(content), max_size)

        content_type = resolve_content_type(request.url, declared_type)
        if content_type != declared_type:
            logger.info(
                "content_type_corrected",
                extra={"declared": declared_type, "resolved": content_type},
            )

        return FetchedAsset(
            content=content,
            source_url=request.url,
            filename=request.filename,
            declared_content_type=declared_type,
            declared_length=declared_length,
            content_type=content_type,
            sha256=hashlib.sha256(content).hexdigest(),
        )

    async def _persist(
        self,
        *,
        request: ImportRequest,
        asset: FetchedAsset,
        asset_id: str,
        uploader_pubkey: str,
        origin: str,
        now_ms: int,
    ) -> tuple[str, str]:
        """Retorna (media_url, estratégia usada)."""
        processor = self._media_processor
        if request.use_cloudinary and processor is not None:
            processed_url = await self._upload_to_processor(processor, asset, uploader_pubkey)
            if processed_url:
                await record_hash_mapping(self._metadata_store, asset.sha256, asset_id)
                return processed_url, STORAGE_CLOUDINARY

        await store_in_bucket(
            bucket_store=self._bucket_store,
            metadata_store=self._metadata_store,
            asset=asset,
            asset_id=asset_id,
            object_key=f"{self._object_prefix}{asset_id}",
            uploader_pubkey=uploader_pubkey,
            uploaded_at_ms=now_ms,
        )
        return build_media_url(origin, self._settings.media_path_prefix, asset_id), STORAGE_BUCKET

    async def _upload_to_processor(
        self,
        processor: MediaProcessorProtocol,
        asset: FetchedAsset,
        uploader_pubkey: str,
    ) -> str | None:
        """Estratégia primária; None sinaliza fallback para o bucket."""
        started_at = time.perf_counter()
        try:
            result = await processor.upload_video(
                content=asset.content,
                filename=asset.filename,
                content_type=asset.content_type,
                uploader_pubkey=uploader_pubkey,
            )
        except Exception as exc:
            reason = type(exc).__name__
        else:
            if result.success and result.url:
                return result.url
            reason = result.error or "upload_failed"

        log_fallback(
            logger,
            "cloudinary_upload",
            reason=reason,
            elapsed_ms=round((time.perf_counter() - started_at) * 1000, 2),
        )
        return None

    def _schedule_thumbnail(self, asset_id: str, origin: str) -> None:
        if self._thumbnail_trigger is None:
            return
        coroutine: Coroutine[Any, Any, Any] = self._thumbnail_trigger.trigger(asset_id, origin)
        self._schedule(name=f"thumbnail:{asset_id}", coroutine=coroutine)

    @staticmethod
    def _outcome(
        request: ImportRequest,
        asset: FetchedAsset,
        media_url: str,
        asset_id: str,
        storage: str,
        message: str,
    ) -> ImportOutcome:
        event = build_nip94_event(
            media_url=media_url,
            sha256=asset.sha256,
            size=asset.size,
            mime_type=asset.content_type,
            request=request,
        )
        return ImportOutcome(
            message=message,
            media_url=media_url,
            asset_id=asset_id,
            event=event,
            storage=storage,
            deduplicated=storage == STORAGE_EXISTING,
        )
