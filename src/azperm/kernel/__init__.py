"""Kernel – framework-agnostic building blocks of the permission model."""

from azperm.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InsufficientPermissionError,
    MalformedScopeError,
    NoOperationsError,
    ProviderError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InsufficientPermissionError",
    "MalformedScopeError",
    "NoOperationsError",
    "ProviderError",
    "TimeoutError",
    "ValidationError",
]
