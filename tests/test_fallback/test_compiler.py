from __future__ import annotations

import pytest

from sitecss.tiers.base import CompileRequest
from sitecss.tiers.fallback import FallbackCompiler


@pytest.fixture
def compiler() -> FallbackCompiler:
    return FallbackCompiler()


def _rule(compiler: FallbackCompiler, token: str):
    compiled = compiler.compile_token(token)
    assert compiled is not None, token
    return compiled[0]


# ---------------------------------------------------------------------------
# Scaled utilities
# ---------------------------------------------------------------------------


class TestSpacing:
    def test_padding_all_sides(self, compiler) -> None:
        rule = _rule(compiler, "p-4")
        assert rule.selector == ".p-4"
        assert rule.declarations == (
            "padding-top: 1rem; padding-right: 1rem; padding-bottom: 1rem; padding-left: 1rem;"
        )

    def test_margin_top_only(self, compiler) -> None:
        assert _rule(compiler, "mt-2").declarations == "margin-top: 0.5rem;"

    def test_axis(self, compiler) -> None:
        assert _rule(compiler, "px-2").declarations == "padding-left: 0.5rem; padding-right: 0.5rem;"

    def test_negative_margin(self, compiler) -> None:
        assert _rule(compiler, "-mt-2").declarations == "margin-top: -0.5rem;"

    def test_negative_padding_is_not_a_utility(self, compiler) -> None:
        assert compiler.compile_token("-p-2") is None

    def test_margin_auto(self, compiler) -> None:
        assert _rule(compiler, "mx-auto").declarations == "margin-left: auto; margin-right: auto;"

    def test_fractional_step_is_escaped(self, compiler) -> None:
        rule = _rule(compiler, "p-0.5")
        assert rule.selector == ".p-0\\.5"
        assert "0.125rem" in rule.declarations


class TestSizing:
    def test_fraction(self, compiler) -> None:
        assert _rule(compiler, "w-1/2").declarations == "width: 50%;"

    def test_screen(self, compiler) -> None:
        assert _rule(compiler, "h-screen").declarations == "height: 100vh;"
        assert _rule(compiler, "w-screen").declarations == "width: 100vw;"

    def test_max_width_named(self, compiler) -> None:
        assert _rule(compiler, "max-w-7xl").declarations == "max-width: 80rem;"

    def test_size_sets_both(self, compiler) -> None:
        assert _rule(compiler, "size-4").declarations == "width: 1rem; height: 1rem;"


class TestColors:
    def test_palette(self, compiler) -> None:
        assert _rule(compiler, "bg-gray-500").declarations == "background-color: #6b7280;"

    def test_alpha(self, compiler) -> None:
        rule = _rule(compiler, "bg-gray-500/50")
        assert rule.declarations == "background-color: rgba(107, 114, 128, 0.5);"
        assert rule.selector == ".bg-gray-500\\/50"

    def test_named(self, compiler) -> None:
        assert _rule(compiler, "text-white").declarations == "color: #ffffff;"

    def test_unknown_shade(self, compiler) -> None:
        assert compiler.compile_token("bg-gray-510") is None


class TestTypography:
    def test_font_size_carries_line_height(self, compiler) -> None:
        assert _rule(compiler, "text-lg").declarations == "font-size: 1.125rem; line-height: 1.75rem;"

    def test_font_weight(self, compiler) -> None:
        assert _rule(compiler, "font-bold").declarations == "font-weight: 700;"

    def test_tracking(self, compiler) -> None:
        assert _rule(compiler, "tracking-tight").declarations == "letter-spacing: -0.025em;"


class TestEffects:
    def test_rounded(self, compiler) -> None:
        assert _rule(compiler, "rounded-lg").declarations == "border-radius: 0.5rem;"
        assert _rule(compiler, "rounded").declarations == "border-radius: 0.25rem;"

    def test_opacity(self, compiler) -> None:
        assert _rule(compiler, "opacity-50").declarations == "opacity: 0.5;"
        assert _rule(compiler, "opacity-100").declarations == "opacity: 1;"
        assert _rule(compiler, "opacity-0").declarations == "opacity: 0;"

    def test_opacity_above_full_is_not_a_utility(self, compiler) -> None:
        assert compiler.compile_token("opacity-150") is None
        assert compiler.compile_token("opacity-101") is None

    def test_border_default_width(self, compiler) -> None:
        assert _rule(compiler, "border").declarations == "border-width: 1px;"
        assert _rule(compiler, "border-t-2").declarations == "border-top-width: 2px;"

    def test_border_side_color(self, compiler) -> None:
        assert _rule(compiler, "border-t-gray-200").declarations == "border-top-color: #e5e7eb;"
        assert _rule(compiler, "border-x-white").declarations == (
            "border-left-color: #ffffff; border-right-color: #ffffff;"
        )
        assert _rule(compiler, "border-transparent").declarations == "border-color: transparent;"
        assert compiler.compile_token("bg-t-gray-200") is None

    def test_rotate_negative(self, compiler) -> None:
        assert _rule(compiler, "-rotate-45").declarations == "transform: rotate(-45deg);"

    def test_duration(self, compiler) -> None:
        assert _rule(compiler, "duration-300").declarations == "transition-duration: 300ms;"


class TestLayout:
    def test_static_table(self, compiler) -> None:
        assert _rule(compiler, "flex").declarations == "display: flex;"
        assert _rule(compiler, "items-center").declarations == "align-items: center;"

    def test_grid_columns(self, compiler) -> None:
        assert _rule(compiler, "grid-cols-3").declarations == (
            "grid-template-columns: repeat(3, minmax(0, 1fr));"
        )

    def test_col_span_full(self, compiler) -> None:
        assert _rule(compiler, "col-span-full").declarations == "grid-column: 1 / -1;"

    def test_space_between_targets_following_siblings(self, compiler) -> None:
        rule = _rule(compiler, "space-y-4")
        assert rule.selector == ".space-y-4 > * + *"
        assert rule.declarations == "margin-top: 1rem;"

    def test_z_index(self, compiler) -> None:
        assert _rule(compiler, "z-10").declarations == "z-index: 10;"


# ---------------------------------------------------------------------------
# Arbitrary values
# ---------------------------------------------------------------------------


class TestArbitrary:
    def test_width(self, compiler) -> None:
        rule = _rule(compiler, "w-[320px]")
        assert rule.selector == ".w-\\[320px\\]"
        assert rule.declarations == "width: 320px;"

    def test_hover_background(self, compiler) -> None:
        rule = _rule(compiler, "hover:bg-[#ff0000]")
        assert rule.selector.endswith(":hover")
        assert rule.declarations == "background-color: #ff0000;"

    def test_text_size_versus_color(self, compiler) -> None:
        assert _rule(compiler, "text-[14px]").declarations == "font-size: 14px;"
        assert _rule(compiler, "text-[#333]").declarations == "color: #333;"

    def test_type_hint_overrides_sniffing(self, compiler) -> None:
        assert _rule(compiler, "text-[color:var(--ink)]").declarations == "color: var(--ink);"
        assert _rule(compiler, "bg-[length:200px_100px]").declarations == "background-size: 200px 100px;"

    def test_background_image(self, compiler) -> None:
        assert _rule(compiler, "bg-[url(/img/a.png)]").declarations == "background-image: url(/img/a.png);"

    def test_underscores_become_spaces(self, compiler) -> None:
        assert _rule(compiler, "grid-cols-[1fr_2fr]").declarations == "grid-template-columns: 1fr 2fr;"

    def test_negative_margin(self, compiler) -> None:
        assert _rule(compiler, "-mt-[3px]").declarations == "margin-top: -3px;"

    def test_multi_value_spacing_uses_shorthand(self, compiler) -> None:
        assert _rule(compiler, "p-[10px_20px]").declarations == "padding: 10px 20px;"
        assert _rule(compiler, "m-[0_auto]").declarations == "margin: 0 auto;"
        assert _rule(compiler, "px-[1rem_2rem]").declarations == "padding-inline: 1rem 2rem;"
        assert _rule(compiler, "inset-[0_auto]").declarations == "inset: 0 auto;"

    def test_single_value_spacing_expands_per_side(self, compiler) -> None:
        assert _rule(compiler, "p-[3px]").declarations == (
            "padding-top: 3px; padding-right: 3px; padding-bottom: 3px; padding-left: 3px;"
        )
        assert _rule(compiler, "p-[calc(1px_+_2px)]").declarations.startswith("padding-top: calc(1px + 2px);")

    def test_negative_multi_value_is_not_a_utility(self, compiler) -> None:
        assert compiler.compile_token("-m-[1px_2px]") is None

    def test_border_width_versus_color(self, compiler) -> None:
        assert _rule(compiler, "border-[3px]").declarations == "border-width: 3px;"
        assert _rule(compiler, "border-[#ccc]").declarations == "border-color: #ccc;"

    def test_opacity_percentage(self, compiler) -> None:
        assert _rule(compiler, "opacity-[85%]").declarations == "opacity: 0.85;"

    def test_unknown_property(self, compiler) -> None:
        assert compiler.compile_token("frobnicate-[12px]") is None


# ---------------------------------------------------------------------------
# Variants and the rule set
# ---------------------------------------------------------------------------


class TestVariants:
    def test_group_hover(self, compiler) -> None:
        rule = _rule(compiler, "group-hover:text-white")
        assert rule.selector == ".group:hover .group-hover\\:text-white"

    def test_responsive_breakpoint_is_reported(self, compiler) -> None:
        compiled = compiler.compile_token("md:flex")
        assert compiled is not None
        rule, breakpoint = compiled
        assert breakpoint == "md"
        assert rule.selector == ".md\\:flex"

    def test_responsive_groups_sorted_by_width(self, compiler) -> None:
        css = compiler.compile_classes(["lg:p-4", "flex", "sm:p-2"]).to_css()
        assert css.index(".flex") < css.index("@media (min-width: 640px)")
        assert css.index("@media (min-width: 640px)") < css.index("@media (min-width: 1024px)")

    def test_unsupported_variant_is_dropped(self, compiler) -> None:
        assert compiler.compile_token("dark:bg-black") is None


class TestCompile:
    def test_returns_successful_result(self, compiler) -> None:
        result = compiler.compile(CompileRequest(classes=("flex", "p-4")))
        assert result.ok
        assert result.tier == "fallback"
        assert ".flex { display: flex; }" in result.css

    def test_never_fails_on_garbage(self, compiler) -> None:
        result = compiler.compile(CompileRequest(classes=("", "[[", "::", "bg-", "a:b:c:d", "}")))
        assert result.ok
        assert result.css == ""

    def test_no_important(self, compiler) -> None:
        css = compiler.compile(CompileRequest(classes=("!p-4", "!bg-white"))).css
        assert "!important" not in css
        assert "padding-top: 1rem" in css

    def test_covers(self, compiler) -> None:
        assert compiler.covers("p-4")
        assert not compiler.covers("bg-primary")
