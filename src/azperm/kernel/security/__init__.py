"""Kernel security – scopes, principals, grant sets and pattern matching."""
from azperm.kernel.security.grants import (
    DenyAssignment,
    EvaluationResult,
    GrantSet,
    Operation,
    RoleAssignment,
)
from azperm.kernel.security.matcher import PatternMatcher, WildcardPatternMatcher, matches
from azperm.kernel.security.principal import canonicalize_principal, same_principal
from azperm.kernel.security.scope import Scope, format_scope, parse_scope, subscription_root

__all__ = [
    "DenyAssignment",
    "EvaluationResult",
    "GrantSet",
    "Operation",
    "PatternMatcher",
    "RoleAssignment",
    "Scope",
    "WildcardPatternMatcher",
    "canonicalize_principal",
    "format_scope",
    "matches",
    "parse_scope",
    "same_principal",
    "subscription_root",
]
