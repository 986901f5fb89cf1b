"""Kernel security – principal identity canonicalization.

Guest accounts appear in two forms:

* modern, external-guest naming: ``alice_contoso.com#EXT#@tenant.onmicrosoft.com``
* classic: ``alice@contoso.com``

Both are reduced to the classic form before comparing identities.
"""
from __future__ import annotations

EXTERNAL_MARKER = "#EXT#"


def canonicalize_principal(principal: str) -> str:
    """Return the classic-style identity for *principal*."""
    value = principal.strip()
    if EXTERNAL_MARKER not in value:
        return value
    local = value.split("@", 1)[0].replace(EXTERNAL_MARKER, "")
    head, sep, domain = local.rpartition("_")
    if not sep:
        return local
    return f"{head}@{domain}"


def same_principal(left: str, right: str) -> bool:
    """Case-insensitive comparison of canonicalized identities."""
    return canonicalize_principal(left).casefold() == canonicalize_principal(right).casefold()


__all__ = ["EXTERNAL_MARKER", "canonicalize_principal", "same_principal"]
