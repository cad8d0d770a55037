"""html_styles: inline CSS declarations to style objects, plus default tag styles."""
from __future__ import annotations

__version__ = "1.0.0"

# Model
from html_styles.model import Declaration, StyleMap, StyleSet, StyleValue

# Errors and configuration
from html_styles.errors import HTMLStylesError, UnknownTagError
from html_styles.config import StylesConfig

# Conversion pipeline
from html_styles.parser import iter_declarations, parse_declarations
from html_styles.keys import normalize_key
from html_styles.coercion import ValueCoercer, strip_px
from html_styles.converter import (
    StyleConverter,
    object_to_style,
    string_to_object,
    string_to_style,
)

# Default styles
from html_styles.defaults import (
    BASE_FONT_SIZE,
    BLOCK_ELEMENTS,
    HTMLStyles,
    build_default_styles,
    create_html_styles,
    heading_style,
)

__all__ = [
    "__version__",
    # Model
    "Declaration",
    "StyleMap",
    "StyleSet",
    "StyleValue",
    # Errors and configuration
    "HTMLStylesError",
    "UnknownTagError",
    "StylesConfig",
    # Conversion pipeline
    "iter_declarations",
    "parse_declarations",
    "normalize_key",
    "ValueCoercer",
    "strip_px",
    "StyleConverter",
    "object_to_style",
    "string_to_object",
    "string_to_style",
    # Default styles
    "BASE_FONT_SIZE",
    "BLOCK_ELEMENTS",
    "HTMLStyles",
    "build_default_styles",
    "create_html_styles",
    "heading_style",
]
