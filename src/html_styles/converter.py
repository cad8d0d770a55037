"""Conversion of declaration strings and mappings into style objects."""

from __future__ import annotations

from collections.abc import Mapping

from html_styles.coercion import ValueCoercer
from html_styles.keys import normalize_key
from html_styles.model import StyleMap, StyleValue
from html_styles.parser import parse_declarations

__all__ = [
    "StyleConverter",
    "object_to_style",
    "string_to_object",
    "string_to_style",
]


class StyleConverter:
    """Normalize keys and coerce values of parsed declarations.

    Every call returns a new dictionary; the converter holds no per-call
    state and can be shared freely.
    """

    def __init__(self, coercer: ValueCoercer | None = None) -> None:
        self.coercer = coercer or ValueCoercer()

    def string_to_object(self, text: str) -> dict[str, str]:
        """Parse *text* into raw property -> value pairs."""
        return parse_declarations(text)

    def object_to_style(self, css: Mapping[str, StyleValue]) -> StyleMap:
        """Convert a raw CSS mapping into a camelCase style object.

        If two raw keys normalize to the same name, the later one wins.
        """
        style: StyleMap = {}
        for raw_key, value in css.items():
            key = normalize_key(raw_key)
            style[key] = self.coercer.coerce(key, value)
        return style

    def string_to_style(self, text: str) -> StyleMap:
        """Parse and convert *text* in one step."""
        return self.object_to_style(self.string_to_object(text))


_DEFAULT_CONVERTER = StyleConverter()


def string_to_object(text: str) -> dict[str, str]:
    """Parse a declaration string; see ``parse_declarations``."""
    return _DEFAULT_CONVERTER.string_to_object(text)


def object_to_style(css: Mapping[str, StyleValue]) -> StyleMap:
    """Convert a raw CSS mapping with the default (no-op) value coercion."""
    return _DEFAULT_CONVERTER.object_to_style(css)


def string_to_style(text: str) -> StyleMap:
    """Convert a declaration string with the default (no-op) value coercion."""
    return _DEFAULT_CONVERTER.string_to_style(text)
