"""Default per-tag styles and block element set.

The values are adapted from the Blink user-agent stylesheet (html.css),
expressed as camelCase style objects with unitless sizes.

Nothing here is built at import time; call ``create_html_styles`` once at
startup and pass the resulting ``HTMLStyles`` to whatever needs it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from html_styles.coercion import ValueCoercer
from html_styles.config import BASE_FONT_SIZE, StylesConfig
from html_styles.converter import StyleConverter
from html_styles.errors import UnknownTagError
from html_styles.model import ReadOnlyStyleMap, StyleMap, StyleSet, StyleValue

__all__ = [
    "BASE_FONT_SIZE",
    "BLOCK_ELEMENTS",
    "HEADING_MULTIPLIERS",
    "HTMLStyles",
    "build_default_styles",
    "create_html_styles",
    "heading_style",
]

logger = logging.getLogger(__name__)

# Rounding applied to scaled sizes; wide enough to keep every product in the
# heading table exact.
_PRECISION = 4

# Layout primitives without css display: inline|block support need these
# laid out as blocks.
BLOCK_ELEMENTS: frozenset[str] = frozenset({"div", "ol", "ul"})

# tag -> (font multiplier, margin multiplier)
HEADING_MULTIPLIERS: Mapping[str, tuple[float, float]] = MappingProxyType({
    "h1": (2, 0.67),
    "h2": (1.5, 0.83),
    "h3": (1.17, 1),
    "h4": (1, 1.33),
    "h5": (0.83, 1.67),
    "h6": (0.67, 2.33),
})


def _scale(value: float, *factors: float) -> float:
    for factor in factors:
        value *= factor
    return round(value, _PRECISION)


def heading_style(
    base_font_size: float, font_multiplier: float, margin_multiplier: float
) -> StyleMap:
    """Build the style of a heading.

    Args:
        base_font_size: the body font size the heading scales from.
        font_multiplier: factor applied to the font size.
        margin_multiplier: factor applied to the scaled font size to get the
            top and bottom margins.
    """
    margin = _scale(base_font_size, font_multiplier, margin_multiplier)
    return {
        "fontSize": _scale(base_font_size, font_multiplier),
        "marginTop": margin,
        "marginBottom": margin,
        "fontWeight": "bold",
    }


def build_default_styles(config: StylesConfig | None = None) -> dict[str, StyleMap]:
    """Compute the default tag -> style mapping for *config*."""
    config = config or StylesConfig()
    base = config.base_font_size
    styles: dict[str, StyleMap] = {
        # Block level elements
        "div": {},
        # Typography
        "p": {"fontSize": base, "marginTop": base, "marginBottom": base},
        "u": {"textDecorationLine": "underline"},
        "em": {"fontStyle": "italic"},
        "b": {"fontWeight": "bold"},
        "strong": {"fontWeight": "bold"},
        "big": {"fontSize": _scale(base, 1.2)},
        "small": {"fontSize": _scale(base, 0.8)},
        "a": {"textDecorationLine": "underline", "color": config.link_color},
    }

    # Headings
    for tag, (font_multiplier, margin_multiplier) in HEADING_MULTIPLIERS.items():
        styles[tag] = heading_style(base, font_multiplier, margin_multiplier)

    # Lists
    for tag in ("ul", "ol"):
        styles[tag] = {"paddingLeft": config.list_indent, "marginBottom": base}

    # Breaks
    styles["br"] = {}
    styles["hr"] = {
        "marginTop": base / 2,
        "marginBottom": base / 2,
        "height": 1,
        "backgroundColor": config.rule_color,
    }
    return styles


def _freeze(styles: Mapping[str, ReadOnlyStyleMap]) -> Mapping[str, ReadOnlyStyleMap]:
    return MappingProxyType(
        {tag: MappingProxyType(dict(style)) for tag, style in styles.items()}
    )


@dataclass(frozen=True)
class HTMLStyles:
    """Immutable bundle of default styles, block elements, and converter.

    Build one with ``create_html_styles`` and share it.  The sheet and block
    set are copied into read-only containers on construction, so nothing on
    it can be mutated afterwards.
    """

    default_styles: Mapping[str, ReadOnlyStyleMap]
    block_elements: frozenset[str] = BLOCK_ELEMENTS
    converter: StyleConverter = field(default_factory=StyleConverter, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_styles", _freeze(self.default_styles))
        object.__setattr__(self, "block_elements", frozenset(self.block_elements))

    def __hash__(self) -> int:
        sheet = frozenset(
            (tag, frozenset(style.items())) for tag, style in self.default_styles.items()
        )
        return hash((sheet, self.block_elements))

    @property
    def stylesets(self) -> type[StyleSet]:
        """The rendering primitive categories (``StyleSet``)."""
        return StyleSet

    def is_block(self, tag: str) -> bool:
        return tag in self.block_elements

    def style_for(self, tag: str) -> ReadOnlyStyleMap:
        """Return the default style of *tag*, raising if there is none.

        Use ``default_styles.get(tag)`` to get None instead.
        """
        try:
            return self.default_styles[tag]
        except KeyError:
            raise UnknownTagError(tag) from None

    # --- conversion ---------------------------------------------------------

    def string_to_object(self, text: str) -> dict[str, str]:
        return self.converter.string_to_object(text)

    def object_to_style(self, css: Mapping[str, StyleValue]) -> StyleMap:
        return self.converter.object_to_style(css)

    def string_to_style(self, text: str) -> StyleMap:
        return self.converter.string_to_style(text)


def create_html_styles(config: StylesConfig | None = None) -> HTMLStyles:
    """Build an ``HTMLStyles`` from *config* (defaults if omitted)."""
    config = config or StylesConfig()
    default_styles = build_default_styles(config)
    converter = StyleConverter(ValueCoercer(config.numeric_properties))
    logger.info(
        "Built default styles: %d tags, base font size %s",
        len(default_styles),
        config.base_font_size,
    )
    return HTMLStyles(
        default_styles=default_styles,
        block_elements=BLOCK_ELEMENTS,
        converter=converter,
    )
