"""Permissions – AssertionGate."""
from __future__ import annotations

from typing import Sequence

from azperm.application.permissions.evaluator import EffectivePermissionEvaluator
from azperm.kernel.errors import InsufficientPermissionError
from azperm.kernel.security import Operation, Scope, canonicalize_principal
from azperm.observability.logging import get_logger
from azperm.resilience.timeouts import Deadline

logger = get_logger(__name__)


class AssertionGate:
    """Turn an evaluation into pass / fail.

    Every missing operation is reported in one
    :class:`InsufficientPermissionError`, in the caller's order.
    """

    def __init__(self, evaluator: EffectivePermissionEvaluator) -> None:
        self._evaluator = evaluator

    def assert_permissions(
        self,
        scope: Scope | str,
        operations: Sequence[Operation],
        principal: str | None = None,
        refresh_cache: bool = False,
        deadline: Deadline | None = None,
    ) -> None:
        result = self._evaluator.evaluate(
            scope, operations, principal, refresh_cache=refresh_cache, deadline=deadline
        )
        missing = result.missing
        if not missing:
            return
        scope_text = str(scope)
        resolved = result.principal or principal
        who = canonicalize_principal(resolved) if resolved else None
        logger.warning("permission.assert.failed", scope=scope_text, principal=who, missing=missing)
        raise InsufficientPermissionError(missing, scope=scope_text, principal=who)

    __call__ = assert_permissions


__all__ = ["AssertionGate"]
