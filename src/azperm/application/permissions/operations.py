"""Permissions – turning caller input into :class:`Operation` values."""
from __future__ import annotations

from typing import Callable, Iterable

from azperm.kernel.errors import ValidationError
from azperm.kernel.security import Operation

OperationLookup = Callable[[str], "Operation | None"]


def resolve_operations(
    items: Iterable[Operation | str],
    lookup: OperationLookup | None = None,
) -> tuple[Operation, ...]:
    """Normalise a mix of names and :class:`Operation` objects.

    Names are resolved through *lookup* (usually an operation catalog) so
    data actions are recognised; unknown names become control-plane
    operations.  The first occurrence of a name wins.
    """
    resolved: list[Operation] = []
    seen: set[str] = set()
    for item in items:
        if isinstance(item, Operation):
            operation = item
        elif isinstance(item, str) and item.strip():
            name = item.strip()
            found = lookup(name) if lookup is not None else None
            operation = found if found is not None else Operation(name)
        else:
            raise ValidationError(f"Invalid operation {item!r}", errors=[{"field": "operations", "reason": "invalid"}])
        if operation.name in seen:
            continue
        seen.add(operation.name)
        resolved.append(operation)
    return tuple(resolved)


__all__ = ["OperationLookup", "resolve_operations"]
