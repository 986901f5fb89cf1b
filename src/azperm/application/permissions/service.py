"""Permissions – entry points for calling tooling.

These accept operation names as well as :class:`Operation` objects and
resolve names through the provider's operation catalog when it has one.
Pass a long-lived *evaluator* to keep its caches warm across calls.
"""
from __future__ import annotations

from typing import Sequence

from azperm.application.permissions.evaluator import EffectivePermissionEvaluator
from azperm.application.permissions.gate import AssertionGate
from azperm.application.permissions.operations import resolve_operations
from azperm.application.permissions.ports import AuthorizationProvider, OperationCatalog
from azperm.kernel.security import Operation, Scope
from azperm.resilience.timeouts import Deadline


def _operations(provider: AuthorizationProvider, operations: Sequence[Operation | str]) -> tuple[Operation, ...]:
    lookup = provider.fetch_operation if isinstance(provider, OperationCatalog) else None
    return resolve_operations(operations, lookup)


def evaluate_permissions(
    provider: AuthorizationProvider,
    scope: Scope | str,
    operations: Sequence[Operation | str],
    principal: str | None = None,
    refresh_cache: bool = False,
    *,
    evaluator: EffectivePermissionEvaluator | None = None,
    deadline: Deadline | None = None,
) -> dict[str, bool]:
    evaluator = evaluator or EffectivePermissionEvaluator(provider)
    result = evaluator.evaluate(
        scope, _operations(provider, operations), principal, refresh_cache=refresh_cache, deadline=deadline
    )
    return dict(result)


def assert_permissions(
    provider: AuthorizationProvider,
    scope: Scope | str,
    operations: Sequence[Operation | str],
    principal: str | None = None,
    refresh_cache: bool = False,
    *,
    evaluator: EffectivePermissionEvaluator | None = None,
    deadline: Deadline | None = None,
) -> None:
    """Raise :class:`InsufficientPermissionError` naming every missing operation."""
    gate = AssertionGate(evaluator or EffectivePermissionEvaluator(provider))
    gate.assert_permissions(
        scope, _operations(provider, operations), principal, refresh_cache=refresh_cache, deadline=deadline
    )


__all__ = ["assert_permissions", "evaluate_permissions"]
