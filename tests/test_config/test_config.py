"""Tests for StylesConfig."""
from __future__ import annotations

import dataclasses

import pytest

from html_styles import BASE_FONT_SIZE, StylesConfig


class TestStylesConfig:
    def test_defaults(self) -> None:
        config = StylesConfig()
        assert config.base_font_size == BASE_FONT_SIZE == 14
        assert config.list_indent == 40
        assert config.link_color == "#245dc1"
        assert config.rule_color == "#CCC"
        assert config.numeric_properties == frozenset()

    def test_frozen(self) -> None:
        config = StylesConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_font_size = 16  # type: ignore[misc]

    @pytest.mark.parametrize("size", [0, -1, float("nan"), float("inf")])
    def test_invalid_base_font_size(self, size: float) -> None:
        with pytest.raises(ValueError, match="base_font_size"):
            StylesConfig(base_font_size=size)

    def test_numeric_properties_frozen(self) -> None:
        config = StylesConfig(numeric_properties={"fontSize"})  # type: ignore[arg-type]
        assert isinstance(config.numeric_properties, frozenset)
        assert config.numeric_properties == frozenset({"fontSize"})

    def test_numeric_properties_rejects_bare_string(self) -> None:
        with pytest.raises(TypeError, match="fontSize"):
            StylesConfig(numeric_properties="fontSize")  # type: ignore[arg-type]
