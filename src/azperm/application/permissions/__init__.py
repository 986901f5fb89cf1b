"""Permissions – effective-permission evaluation and assertion."""
from azperm.application.permissions.evaluator import EffectivePermissionEvaluator
from azperm.application.permissions.gate import AssertionGate
from azperm.application.permissions.operations import resolve_operations
from azperm.application.permissions.ports import AuthorizationProvider, OperationCatalog
from azperm.application.permissions.privileged import (
    DEFAULT_PRIVILEGED_ROLE_MARKERS,
    PrivilegedPrincipalRegistry,
)
from azperm.application.permissions.role_definitions import RoleDefinitionCache
from azperm.application.permissions.service import assert_permissions, evaluate_permissions
from azperm.application.permissions.settings import EvaluatorSettings

__all__ = [
    "DEFAULT_PRIVILEGED_ROLE_MARKERS",
    "AssertionGate",
    "AuthorizationProvider",
    "EffectivePermissionEvaluator",
    "EvaluatorSettings",
    "OperationCatalog",
    "PrivilegedPrincipalRegistry",
    "RoleDefinitionCache",
    "assert_permissions",
    "evaluate_permissions",
    "resolve_operations",
]
