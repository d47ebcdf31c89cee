"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class MetadataStoreError(InfrastructureError):
    """Falha de conexão/timeout ao acessar o metadata store (Redis)."""


class BucketStorageError(InfrastructureError):
    """Falha ao gravar objeto no bucket."""


class RemoteFetchError(InfrastructureError):
    """Falha de transporte ao baixar recurso remoto (DNS, conexão, timeout)."""
