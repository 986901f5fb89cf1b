"""Infrastructure errors – failures of the identity / authorization backend."""

from __future__ import annotations

from typing import Any

from azperm.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a permission outcome."""

    default_code = "infrastructure_error"


class ProviderError(InfrastructureError):
    """An authorization data provider failed to answer a query.

    Adapters raise this (or let their own errors escape); the evaluator
    never wraps, retries or downgrades it to a verdict.
    """

    default_code = "provider_error"

    def __init__(
        self,
        provider: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Authorization provider '{provider}' error", **kwargs)
        self.provider = provider
        self.status_code = status_code


__all__ = ["InfrastructureError", "ProviderError"]
