"""Value coercion: optional reduction of pixel values to plain numbers.

Parsed declaration values are always strings.  Reduction is opt-in per
property: a ``ValueCoercer`` only touches values whose (normalized) property
name is listed in ``numeric_properties``.  With the default empty set every
value passes through unchanged, so ``"12px"`` stays ``"12px"``.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from html_styles.model import StyleValue

__all__ = ["ValueCoercer", "property_set", "strip_px"]

logger = logging.getLogger(__name__)

_PX_SUFFIX = "px"

# A CSS <number>: optional sign, digits with an optional fraction (or a bare
# fraction), optional exponent.
_NUMBER_RE = re.compile(
    r"""
    [+-]?
    (?:\d+(?:\.\d+)?|\.\d+)
    (?:[eE][+-]?\d+)?
    """,
    re.VERBOSE | re.ASCII,
)


def property_set(names: Iterable[str]) -> frozenset[str]:
    """Return *names* as a frozenset, refusing a bare string."""
    if isinstance(names, str):
        raise TypeError(
            f"Expected a collection of property names, got the string {names!r}"
        )
    return frozenset(names)


def strip_px(value: str) -> float | None:
    """Parse ``"20px"`` (or a bare ``"20"``) as a number.

    Returns None if the remainder is not a finite CSS number.
    """
    text = value.strip()
    if text.endswith(_PX_SUFFIX):
        text = text[: -len(_PX_SUFFIX)].rstrip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class ValueCoercer:
    """Second stage of conversion, applied after key normalization."""

    numeric_properties: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "numeric_properties", property_set(self.numeric_properties))

    @property
    def is_noop(self) -> bool:
        return not self.numeric_properties

    def coerce(self, key: str, value: StyleValue) -> StyleValue:
        """Return *value* for *key*, reduced to a number where enabled."""
        if key not in self.numeric_properties or not isinstance(value, str):
            return value
        number = strip_px(value)
        if number is None:
            return value
        logger.debug("Coerced %s: %r -> %r", key, value, number)
        return number
