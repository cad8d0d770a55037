"""Parser for inline CSS declaration strings.

Syntax example (the value of an HTML ``style`` attribute):
    color: red; font-size: 12px; background-color: #fff;

Splitting is naive: segments are cut on ``;`` and each segment on ``:``.
Values that themselves contain either character (URLs, for instance) produce
a malformed segment and are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from html_styles.model import Declaration

__all__ = ["iter_declarations", "parse_declarations"]

logger = logging.getLogger(__name__)

_SEGMENT_SEP = ";"
_PROPERTY_SEP = ":"


def iter_declarations(text: str) -> Iterator[Declaration]:
    """Yield each well-formed declaration in *text*, in source order.

    A segment is well-formed when it has exactly one colon and non-empty
    text on both sides of it.
    """
    for segment in text.split(_SEGMENT_SEP):
        parts = [part.strip() for part in segment.split(_PROPERTY_SEP)]
        if len(parts) != 2 or not all(parts):
            if segment.strip():
                logger.debug("Dropping malformed declaration: %r", segment)
            continue
        yield Declaration(property=parts[0], value=parts[1])


def parse_declarations(text: str) -> dict[str, str]:
    """Parse a declaration string into a property -> value dictionary.

    Later declarations of the same property overwrite earlier ones.
    Malformed segments are skipped; this function never raises.
    """
    props: dict[str, str] = {}
    for decl in iter_declarations(text):
        props[decl.property] = decl.value
    return props
