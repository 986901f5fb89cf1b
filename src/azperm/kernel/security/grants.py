"""Kernel security – Operation, GrantSet, role and deny assignments."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

ROLE_NAME_SEPARATOR = ";"


@dataclasses.dataclass(frozen=True)
class Operation:
    """Action identifier, e.g. ``Microsoft.Storage/storageAccounts/listkeys/action``.

    ``is_data_action`` selects the data-plane pattern lists of a
    :class:`GrantSet` instead of the control-plane ones.
    """

    name: str
    is_data_action: bool = False

    def __str__(self) -> str:
        return self.name


def _patterns(value: Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclasses.dataclass(frozen=True)
class GrantSet:
    """The four ordered wildcard-pattern lists of a role or deny assignment."""

    actions: tuple[str, ...] = ()
    not_actions: tuple[str, ...] = ()
    data_actions: tuple[str, ...] = ()
    not_data_actions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            object.__setattr__(self, field.name, _patterns(getattr(self, field.name)))

    def select(self, operation: Operation) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Return the (allow, not) pattern lists that apply to *operation*."""
        if operation.is_data_action:
            return self.data_actions, self.not_data_actions
        return self.actions, self.not_actions

    @classmethod
    def from_dict(cls, data: dict[str, Sequence[str]]) -> "GrantSet":
        """Build from a role-definition permission block.

        Accepts both ARM casing (``Actions``, ``NotDataActions``) and
        snake_case keys.
        """
        lowered = {k.replace("_", "").lower(): v for k, v in data.items()}
        return cls(
            actions=_patterns(lowered.get("actions")),
            not_actions=_patterns(lowered.get("notactions")),
            data_actions=_patterns(lowered.get("dataactions")),
            not_data_actions=_patterns(lowered.get("notdataactions")),
        )


@dataclasses.dataclass(frozen=True)
class RoleAssignment:
    """Binding of a principal to a role definition at a scope."""

    role_definition_id: str
    scope: str
    principal: str
    role_definition_name: str = ""

    @property
    def role_names(self) -> tuple[str, ...]:
        """Individual names from the semicolon-delimited role-name field."""
        return tuple(
            name.strip()
            for name in self.role_definition_name.split(ROLE_NAME_SEPARATOR)
            if name.strip()
        )


@dataclasses.dataclass(frozen=True)
class DenyAssignment:
    """Like a role assignment, but with an embedded :class:`GrantSet` that revokes."""

    grant_set: GrantSet
    scope: str
    principal: str
    name: str = ""


class EvaluationResult(dict[str, bool]):
    """Ordered ``operation name -> verdict`` mapping.

    Every requested operation has exactly one entry.  ``principal`` is the
    identity the verdicts were computed for, when known.
    """

    principal: str | None = None

    @classmethod
    def for_operations(
        cls, operations: Iterable[Operation], verdict: bool = False, principal: str | None = None
    ) -> "EvaluationResult":
        result = cls((op.name, verdict) for op in operations)
        result.principal = principal
        return result

    @property
    def granted(self) -> list[str]:
        return [name for name, ok in self.items() if ok]

    @property
    def missing(self) -> list[str]:
        return [name for name, ok in self.items() if not ok]

    @property
    def all_granted(self) -> bool:
        return all(self.values())


__all__ = [
    "DenyAssignment",
    "EvaluationResult",
    "GrantSet",
    "Operation",
    "ROLE_NAME_SEPARATOR",
    "RoleAssignment",
]
