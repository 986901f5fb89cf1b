"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── ValidationError
    │       ├── MalformedScopeError
    │       └── NoOperationsError
    ├── ApplicationError             (application.py)
    │   ├── ForbiddenError
    │   │   └── InsufficientPermissionError
    │   └── TimeoutError
    └── InfrastructureError          (infrastructure.py)
        └── ProviderError
"""

from azperm.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    InsufficientPermissionError,
    TimeoutError,
)
from azperm.kernel.errors.base import BaseError
from azperm.kernel.errors.domain import (
    DomainError,
    MalformedScopeError,
    NoOperationsError,
    ValidationError,
)
from azperm.kernel.errors.infrastructure import InfrastructureError, ProviderError

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
