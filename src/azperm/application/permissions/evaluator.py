"""Permissions – EffectivePermissionEvaluator.

Answers "does principal P effectively hold operation O on scope S?".

Precedence, strongest first:

1. classic subscription administrators hold everything,
2. deny assignments revoke,
3. role assignments grant.

Example::

    evaluator = EffectivePermissionEvaluator(provider)
    result = evaluator.evaluate(
        "/subscriptions/S/resourceGroups/G/providers/Microsoft.Storage/storageAccounts/A",
        [Operation("Microsoft.Storage/storageAccounts/listkeys/action")],
        principal="alice@contoso.com",
    )
    result.missing   # [] when every operation is granted
"""

from __future__ import annotations

from typing import Sequence

from azperm.application.permissions.ports import AuthorizationProvider
from azperm.application.permissions.privileged import PrivilegedPrincipalRegistry
from azperm.application.permissions.role_definitions import RoleDefinitionCache
from azperm.application.permissions.settings import EvaluatorSettings
from azperm.kernel.errors import NoOperationsError
from azperm.kernel.security import (
    EvaluationResult,
    GrantSet,
    Operation,
    PatternMatcher,
    Scope,
    WildcardPatternMatcher,
    canonicalize_principal,
    parse_scope,
    subscription_root,
)
from azperm.observability.logging import get_logger
from azperm.resilience.timeouts import Deadline

logger = get_logger(__name__)


class EffectivePermissionEvaluator:
    """Combine privileged bypass, role grants and deny overrides into verdicts.

    The evaluator owns its :class:`RoleDefinitionCache` and
    :class:`PrivilegedPrincipalRegistry` unless they are injected, so two
    evaluators never share cached state by accident.

    Provider errors propagate unchanged: there is no retry and no partial
    result.
    """

    def __init__(
        self,
        provider: AuthorizationProvider,
        *,
        matcher: PatternMatcher | None = None,
        role_definitions: RoleDefinitionCache | None = None,
        privileged: PrivilegedPrincipalRegistry | None = None,
        settings: EvaluatorSettings | None = None,
    ) -> None:
        self._settings = settings or EvaluatorSettings()
        self._provider = provider
        self._matcher = matcher or WildcardPatternMatcher()
        self._role_definitions = role_definitions if role_definitions is not None else RoleDefinitionCache()
        self._privileged = (
            privileged
            if privileged is not None
            else PrivilegedPrincipalRegistry(self._settings.privileged_role_markers)
        )

    @property
    def provider(self) -> AuthorizationProvider:
        return self._provider

    @property
    def role_definitions(self) -> RoleDefinitionCache:
        return self._role_definitions

    @property
    def privileged(self) -> PrivilegedPrincipalRegistry:
        return self._privileged

    def refresh(self) -> None:
        """Drop both caches; the next evaluation refetches."""
        self._privileged.clear()
        self._role_definitions.clear()

    # ------------------------------------------------------------------

    def evaluate(
        self,
        scope: Scope | str,
        operations: Sequence[Operation],
        principal: str | None = None,
        refresh_cache: bool = False,
        deadline: Deadline | None = None,
    ) -> EvaluationResult:
        """Return one verdict per requested operation.

        Raises
        ------
        NoOperationsError
            *operations* is empty.
        MalformedScopeError
            *scope* is not a subscription-rooted resource path.
        TimeoutError
            *deadline* expired before a provider call.
        """
        if not operations:
            raise NoOperationsError()
        parsed = parse_scope(scope) if isinstance(scope, str) else scope
        root = subscription_root(parsed)
        scope_text = parsed.format()
        if deadline is None:
            deadline = Deadline.from_timeout(self._settings.default_timeout_seconds)

        if refresh_cache:
            self.refresh()

        if principal is None:
            self._check(deadline, "current_principal")
            principal = self._provider.current_principal()
        principal = principal.strip()
        canonical = canonicalize_principal(principal)
        log = logger.bind(scope=scope_text, principal=canonical)
        log.debug("permission.evaluate.started", operations=len(operations), refresh=refresh_cache)

        root_text = root.format()
        self._check(deadline, "fetch_subscription_root_role_assignments")
        self._privileged.ensure_populated(root_text, self._provider.fetch_subscription_root_role_assignments)
        if self._privileged.contains(root_text, canonical):
            log.info("permission.privileged_bypass")
            return EvaluationResult.for_operations(operations, True, principal=principal)

        result = EvaluationResult.for_operations(operations, principal=principal)

        self._check(deadline, "fetch_role_assignments")
        assignments = self._provider.fetch_role_assignments(scope_text, principal)
        for assignment in assignments:
            self._check(deadline, "fetch_role_definition")
            grant_set = self._role_definitions.get(
                assignment.role_definition_id, self._provider.fetch_role_definition
            )
            for operation in operations:
                if not result[operation.name] and self._grants(grant_set, operation):
                    result[operation.name] = True

        # Deny assignments are matched with the same allow / not-list selection as
        # grants, over their own embedded grant set.
        self._check(deadline, "fetch_deny_assignments")
        denies = self._provider.fetch_deny_assignments(scope_text, principal)
        for deny in denies:
            for operation in operations:
                if self._grants(deny.grant_set, operation):
                    if result[operation.name]:
                        log.info("permission.deny_override", operation=operation.name, deny=deny.name)
                    result[operation.name] = False

        log.info(
            "permission.evaluate.completed",
            role_assignments=len(assignments),
            deny_assignments=len(denies),
            missing=result.missing,
        )
        return result

    def _grants(self, grant_set: GrantSet, operation: Operation) -> bool:
        allow, exclude = grant_set.select(operation)
        if not self._matches_any(operation.name, allow):
            return False
        return not self._matches_any(operation.name, exclude)

    def _matches_any(self, operation: str, patterns: Sequence[str]) -> bool:
        return any(self._matcher.matches(operation, p) for p in patterns)

    @staticmethod
    def _check(deadline: Deadline | None, step: str) -> None:
        if deadline is not None:
            deadline.raise_if_expired(step)


__all__ = ["EffectivePermissionEvaluator"]
