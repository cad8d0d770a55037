from __future__ import annotations

import math
from dataclasses import dataclass, field

from html_styles.coercion import property_set

BASE_FONT_SIZE = 14


@dataclass(frozen=True)
class StylesConfig:
    base_font_size: float = BASE_FONT_SIZE
    list_indent: int = 40
    link_color: str = "#245dc1"
    rule_color: str = "#CCC"
    # Normalized property names whose "px" values are reduced to numbers.
    numeric_properties: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.base_font_size) and self.base_font_size > 0):
            raise ValueError("base_font_size must be a positive finite number")
        object.__setattr__(self, "numeric_properties", property_set(self.numeric_properties))
