"""Kernel security – hierarchical resource scopes.

A scope is an ARM-style resource path::

    /subscriptions/S/resourceGroups/G/providers/Microsoft.Storage/storageAccounts/A

parsed into ordered ``(segment_type, segment_value)`` pairs::

    (("subscriptions", "S"), ("resourceGroups", "G"),
     ("providers", "Microsoft.Storage"), ("storageAccounts", "A"))
"""

from __future__ import annotations

import dataclasses
from typing import Iterator

from azperm.kernel.errors import MalformedScopeError

SUBSCRIPTIONS = "subscriptions"

Segment = tuple[str, str]


@dataclasses.dataclass(frozen=True)
class Scope:
    """Parsed resource scope; an ordered tuple of (type, identifier) pairs."""

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise MalformedScopeError(self.segments, "scope has no segments")
        for pair in self.segments:
            if len(pair) != 2 or not all(isinstance(p, str) and p for p in pair):
                raise MalformedScopeError(self.segments, f"invalid segment {pair!r}")
            if any("/" in p for p in pair):
                raise MalformedScopeError(self.segments, f"segment {pair!r} contains '/'")

    @classmethod
    def parse(cls, value: str) -> "Scope":
        return parse_scope(value)

    def format(self) -> str:
        return format_scope(self)

    def __str__(self) -> str:
        return self.format()

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def subscription_id(self) -> str | None:
        kind, value = self.segments[0]
        return value if kind.lower() == SUBSCRIPTIONS else None

    def subscription_root(self) -> "Scope":
        return subscription_root(self)


def parse_scope(value: str) -> Scope:
    """Parse *value* into a :class:`Scope`.

    Raises :class:`MalformedScopeError` unless *value* is ``/`` followed by
    an even, non-zero number of non-empty ``/``-delimited tokens.  A single
    trailing ``/`` is tolerated.
    """
    if not isinstance(value, str):
        raise MalformedScopeError(value, "scope must be a string")
    text = value.strip()
    if not text.startswith("/"):
        raise MalformedScopeError(value, "scope must start with '/'")
    body = text[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        raise MalformedScopeError(value, "scope has no segments")
    tokens = body.split("/")
    if any(not t for t in tokens):
        raise MalformedScopeError(value, "scope contains an empty segment")
    if len(tokens) % 2:
        raise MalformedScopeError(value, "segment types and identifiers must alternate")
    return Scope(tuple(zip(tokens[0::2], tokens[1::2])))


def format_scope(scope: Scope) -> str:
    """Inverse of :func:`parse_scope`."""
    return "".join(f"/{kind}/{value}" for kind, value in scope.segments)


def subscription_root(scope: Scope | str) -> Scope:
    """Return the ``/subscriptions/<id>`` prefix of *scope*."""
    parsed = parse_scope(scope) if isinstance(scope, str) else scope
    kind, value = parsed.segments[0]
    if kind.lower() != SUBSCRIPTIONS:
        raise MalformedScopeError(format_scope(parsed), "scope is not rooted at a subscription")
    return Scope(((SUBSCRIPTIONS, value),))


__all__ = ["Scope", "Segment", "format_scope", "parse_scope", "subscription_root"]
