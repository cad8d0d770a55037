"""Tests for property name normalization."""
from __future__ import annotations

import pytest

from html_styles import normalize_key


class TestNormalizeKey:
    @pytest.mark.parametrize(
        "key, expected",
        [
            ("background-color", "backgroundColor"),
            ("border-top-width", "borderTopWidth"),
            ("text-decoration-line", "textDecorationLine"),
            ("font-size", "fontSize"),
        ],
    )
    def test_hyphenated(self, key: str, expected: str) -> None:
        assert normalize_key(key) == expected

    def test_no_hyphen_is_identity(self) -> None:
        assert normalize_key("color") == "color"

    def test_empty_key(self) -> None:
        assert normalize_key("") == ""

    def test_first_segment_unchanged(self) -> None:
        assert normalize_key("Font-size") == "FontSize"

    def test_remainder_case_preserved(self) -> None:
        assert normalize_key("x-fooBAR") == "xFooBAR"

    def test_vendor_prefix(self) -> None:
        # Leading hyphen leaves an empty first segment.
        assert normalize_key("-webkit-box-shadow") == "WebkitBoxShadow"

    def test_empty_segments_contribute_nothing(self) -> None:
        assert normalize_key("margin--top") == "marginTop"
        assert normalize_key("margin-") == "margin"

    def test_already_camel_case(self) -> None:
        assert normalize_key("backgroundColor") == "backgroundColor"
