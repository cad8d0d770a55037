"""Property name normalization: hyphenated CSS names to camelCase."""

from __future__ import annotations

__all__ = ["normalize_key"]


def normalize_key(key: str) -> str:
    """Convert a hyphenated property name to camelCase.

    ``background-color`` becomes ``backgroundColor``; names without a hyphen
    are returned unchanged.
    """
    head, *rest = key.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
