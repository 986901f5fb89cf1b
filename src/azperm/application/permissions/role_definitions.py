"""Permissions – RoleDefinitionCache."""
from __future__ import annotations

import threading
from typing import Callable

from azperm.kernel.security import GrantSet


class RoleDefinitionCache:
    """Role definition id → :class:`GrantSet`, filled lazily.

    Entries never expire; call :meth:`clear` to force a refetch.  A lock
    guards the mapping, but *fetch* runs outside it, so two threads missing
    the same id may both fetch.  The first stored value wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, GrantSet] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(role_definition_id: str) -> str:
        return role_definition_id.strip().lower()

    def get(self, role_definition_id: str, fetch: Callable[[str], GrantSet]) -> GrantSet:
        key = self._key(role_definition_id)
        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            return cached
        grant_set = fetch(role_definition_id)
        with self._lock:
            return self._entries.setdefault(key, grant_set)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, role_definition_id: object) -> bool:
        if not isinstance(role_definition_id, str):
            return False
        with self._lock:
            return self._key(role_definition_id) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["RoleDefinitionCache"]
