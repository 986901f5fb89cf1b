"""Application layer – use cases built on the kernel."""

from azperm.application.permissions import (
    AssertionGate,
    EffectivePermissionEvaluator,
    assert_permissions,
    evaluate_permissions,
)

__all__ = [
    "AssertionGate",
    "EffectivePermissionEvaluator",
    "assert_permissions",
    "evaluate_permissions",
]
