"""Application-layer errors – outcomes of a permission check."""

from __future__ import annotations

from typing import Any, Sequence

from azperm.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ForbiddenError(ApplicationError):
    """Principal lacks a required permission."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


class InsufficientPermissionError(ForbiddenError):
    """One or more requested operations are not effectively granted.

    ``missing_operations`` keeps the caller's input order so every missing
    permission can be reported in one pass.
    """

    default_code = "insufficient_permission"

    def __init__(
        self,
        missing_operations: Sequence[str],
        *,
        scope: str | None = None,
        principal: str | None = None,
        **kwargs: Any,
    ) -> None:
        missing = list(missing_operations)
        joined = ", ".join(missing)
        who = f"Principal {principal!r}" if principal else "Principal"
        where = f" on scope {scope!r}" if scope else ""
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("missing_operations", missing)
        super().__init__(
            f"{who} is missing permission(s){where}: {joined}",
            permission=joined,
            detail=detail,
            **kwargs,
        )
        self.missing_operations = missing
        self.scope = scope
        self.principal = principal


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "InsufficientPermissionError",
    "TimeoutError",
]
