"""Domain errors – malformed input to the evaluator."""

from __future__ import annotations

from typing import Any

from azperm.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when input violates a structural rule of the permission model."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class MalformedScopeError(ValidationError):
    """A resource scope string failed structural parsing."""

    default_code = "malformed_scope"

    def __init__(self, scope: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Malformed scope {scope!r}: {reason}",
            errors=[{"field": "scope", "reason": reason}],
            **kwargs,
        )
        self.scope = scope
        self.reason = reason


class NoOperationsError(ValidationError):
    """An evaluation was requested for an empty operation list."""

    default_code = "no_operations"

    def __init__(self, message: str = "At least one operation is required", **kwargs: Any) -> None:
        super().__init__(message, errors=[{"field": "operations", "reason": "empty"}], **kwargs)


__all__ = [
    "DomainError",
    "MalformedScopeError",
    "NoOperationsError",
    "ValidationError",
]
