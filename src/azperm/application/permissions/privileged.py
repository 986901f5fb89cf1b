"""Permissions – PrivilegedPrincipalRegistry.

Classic subscription administrators (co-administrators and the service
administrator) predate role assignments and hold every permission on every
scope of *their* subscription.  ARM reports them as subscription-root role
assignments whose role-name field carries ``CoAdministrator`` or
``ServiceAdministrator`` among its semicolon-separated values.

The registry keeps one principal set per subscription root, so membership in
one subscription never leaks into another.
"""
from __future__ import annotations

import threading
from typing import Callable, Iterable, Sequence

from azperm.kernel.security import RoleAssignment, canonicalize_principal
from azperm.observability.logging import get_logger

DEFAULT_PRIVILEGED_ROLE_MARKERS: tuple[str, ...] = ("CoAdministrator", "ServiceAdministrator")

logger = get_logger(__name__)


class PrivilegedPrincipalRegistry:
    def __init__(self, markers: Iterable[str] = DEFAULT_PRIVILEGED_ROLE_MARKERS) -> None:
        self._markers = frozenset(m.lower() for m in markers)
        self._principals: dict[str, frozenset[str]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(root: str) -> str:
        return root.strip().rstrip("/").casefold()

    def is_populated(self, root: str) -> bool:
        with self._lock:
            return self._key(root) in self._principals

    def is_privileged_assignment(self, assignment: RoleAssignment) -> bool:
        return any(name.lower() in self._markers for name in assignment.role_names)

    def populate(self, root: str, fetch: Callable[[str], Sequence[RoleAssignment]]) -> None:
        """Rebuild the set for *root* from its subscription-root role assignments."""
        principals = frozenset(
            canonicalize_principal(a.principal).casefold()
            for a in fetch(root)
            if self.is_privileged_assignment(a)
        )
        with self._lock:
            self._principals[self._key(root)] = principals
        logger.debug("privileged_registry.populated", root=root, count=len(principals))

    def ensure_populated(self, root: str, fetch: Callable[[str], Sequence[RoleAssignment]]) -> None:
        """Populate *root* unless a non-empty set is already loaded for it."""
        with self._lock:
            loaded = bool(self._principals.get(self._key(root)))
        if not loaded:
            self.populate(root, fetch)

    def contains(self, root: str, principal: str) -> bool:
        key = canonicalize_principal(principal).casefold()
        with self._lock:
            return key in self._principals.get(self._key(root), frozenset())

    def clear(self) -> None:
        """Forget every subscription."""
        with self._lock:
            self._principals.clear()

    def __len__(self) -> int:
        """Number of subscriptions loaded."""
        with self._lock:
            return len(self._principals)


__all__ = ["DEFAULT_PRIVILEGED_ROLE_MARKERS", "PrivilegedPrincipalRegistry"]
