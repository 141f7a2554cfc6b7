from __future__ import annotations

import pytest

from sitecss.grammar.values import (
    format_alpha,
    format_font_stack,
    hex_to_rgb,
    is_color_value,
    is_image_value,
    is_size_value,
    rgba,
    split_type_hint,
    unescape_arbitrary,
)


class TestHexToRgb:
    def test_six_digit(self) -> None:
        assert hex_to_rgb("#6b7280") == (107, 114, 128)

    def test_three_digit(self) -> None:
        assert hex_to_rgb("#fff") == (255, 255, 255)

    def test_eight_digit_ignores_alpha(self) -> None:
        assert hex_to_rgb("#00000080") == (0, 0, 0)

    @pytest.mark.parametrize("value", ["red", "#12", "#gggggg", "rgb(0,0,0)"])
    def test_rejects_non_hex(self, value: str) -> None:
        with pytest.raises(ValueError):
            hex_to_rgb(value)


class TestAlpha:
    @pytest.mark.parametrize(
        ("percent", "expected"),
        [(50, "0.5"), (5, "0.05"), (100, "1"), ("75", "0.75")],
    )
    def test_format_alpha(self, percent, expected: str) -> None:
        assert format_alpha(percent) == expected

    def test_rgba(self) -> None:
        assert rgba("#6b7280", "0.5") == "rgba(107, 114, 128, 0.5)"


class TestArbitraryValues:
    def test_underscore_becomes_space(self) -> None:
        assert unescape_arbitrary("1fr_2fr") == "1fr 2fr"

    def test_escaped_underscore_is_kept(self) -> None:
        assert unescape_arbitrary("var(--my\\_var)") == "var(--my_var)"

    def test_split_type_hint(self) -> None:
        assert split_type_hint("color:#fff") == ("color", "#fff")
        assert split_type_hint("length:2px") == ("length", "2px")

    def test_unknown_hint_passes_through(self) -> None:
        assert split_type_hint("url(http://x)") == (None, "url(http://x)")


class TestSniffing:
    @pytest.mark.parametrize("value", ["#fff", "rgb(0 0 0)", "oklch(0.5 0.1 200)", "var(--color-x)", "white"])
    def test_colors(self, value: str) -> None:
        assert is_color_value(value)

    @pytest.mark.parametrize("value", ["14px", "1.5rem", ".5em", "calc(100% - 2rem)", "clamp(1rem, 2vw, 2rem)"])
    def test_sizes(self, value: str) -> None:
        assert is_size_value(value)
        assert not is_color_value(value)

    def test_images(self) -> None:
        assert is_image_value("url(/a.png)")
        assert is_image_value("linear-gradient(red, blue)")
        assert not is_image_value("#fff")


class TestFontStack:
    def test_quotes_names_with_spaces(self) -> None:
        assert format_font_stack(["Open Sans", "sans-serif"]) == '"Open Sans", sans-serif'

    def test_leaves_generic_and_quoted_names(self) -> None:
        assert format_font_stack(["'Inter'", "system-ui", "Roboto"]) == "'Inter', system-ui, Roboto"
