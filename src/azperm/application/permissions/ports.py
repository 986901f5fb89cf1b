"""Permissions – provider ports consumed by the evaluator.

Adapters implement these against a real directory / authorization backend
(ARM REST, Azure SDK, Graph).  Every call is synchronous and blocking.  Any
exception an adapter raises aborts the evaluation unchanged.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from azperm.kernel.security import DenyAssignment, GrantSet, Operation, RoleAssignment


@runtime_checkable
class AuthorizationProvider(Protocol):
    """Port: role / deny assignment data for a scope and principal."""

    def fetch_role_assignments(self, scope: str, principal: str) -> Sequence[RoleAssignment]: ...

    def fetch_role_definition(self, role_definition_id: str) -> GrantSet: ...

    def fetch_deny_assignments(self, scope: str, principal: str) -> Sequence[DenyAssignment]: ...

    def fetch_subscription_root_role_assignments(self, scope: str) -> Sequence[RoleAssignment]: ...

    def current_principal(self) -> str: ...


@runtime_checkable
class OperationCatalog(Protocol):
    """Port: look up provider operations by name (``None`` when unknown)."""

    def fetch_operation(self, name: str) -> Operation | None: ...


__all__ = ["AuthorizationProvider", "OperationCatalog"]
