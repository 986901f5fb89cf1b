"""Kernel security – wildcard matching of operation strings.

Permission patterns follow the hierarchical-segment convention used by cloud
IAM systems::

    Microsoft.Storage/storageAccounts/*          any storage account operation
    */read                                       any read operation
    Microsoft.Storage/storageAccounts/listkeys/action   exact

Rules:

* ``*`` matches any run of characters, ``/`` included, so a trailing ``*``
  matches any suffix of segments.
* Matching is case-insensitive.
* A pattern without ``*`` must equal the operation.
* Every other character is literal.  A malformed pattern never matches; the
  matcher never raises.
"""

from __future__ import annotations

import functools
import re
from typing import Protocol


class PatternMatcher(Protocol):
    """Port: decide whether an operation satisfies a permission pattern."""

    def matches(self, operation: str, pattern: str) -> bool: ...


@functools.lru_cache(maxsize=1024)
def _compile(pattern: str) -> re.Pattern[str]:
    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(body, re.IGNORECASE | re.DOTALL)


def matches(operation: str, pattern: str) -> bool:
    """Return ``True`` if *operation* satisfies the wildcard *pattern*."""
    if not isinstance(operation, str) or not isinstance(pattern, str):
        return False
    if not operation or not pattern:
        return False
    if "*" not in pattern:
        return operation.casefold() == pattern.casefold()
    return _compile(pattern).fullmatch(operation) is not None


class WildcardPatternMatcher:
    """Default :class:`PatternMatcher` backed by :func:`matches`."""

    def matches(self, operation: str, pattern: str) -> bool:
        return matches(operation, pattern)


__all__ = ["PatternMatcher", "WildcardPatternMatcher", "matches"]
