"""Style model: Declaration, StyleSet, and the StyleMap value types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

StyleValue = str | int | float
StyleMap = dict[str, StyleValue]
ReadOnlyStyleMap = Mapping[str, StyleValue]


class StyleSet(StrEnum):
    """Native rendering primitive a tag maps to.

    The tag-to-category mapping itself lives with the caller; only the
    categories are defined here.
    """

    VIEW = "view"
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a declaration string."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"
