from __future__ import annotations

from sitecss.generators import DesignTokens, generate_design_tokens_css
from sitecss.generators.tokens import TokenColor, root_variables

RECORD = {
    "colors": {
        "brand": {"primary": "#ff5500", "accent": "#00aa88"},
        "neutral": {"background": "#fafafa"},
        "semantic": {"error": "#cc0000"},
    },
    "typography": {"fontHeading": "Playfair Display", "fontMono": ""},
    "borders": {"radius": {"default": "4px"}},
    "spacing": {"scale": {"section": "6rem"}, "containerWidths": {"xl": "1200px"}},
    "shadows": {"md": "0 2px 4px black"},
    "customColors": {"sand": "#e5d3b3", "ink": "var(--ink)"},
    "gradients": {"primary": {"enabled": True, "direction": "to-br"}},
}


class TestDesignTokens:
    def test_defaults_without_record(self) -> None:
        tokens = DesignTokens.from_record(None)
        assert tokens == DesignTokens()
        assert tokens.primary == "#3b82f6"
        assert tokens.gradient is None

    def test_record_overrides(self) -> None:
        tokens = DesignTokens.from_record(RECORD)
        assert tokens.primary == "#ff5500"
        assert tokens.primary_hover == "#2563eb"
        assert tokens.background == "#fafafa"
        assert tokens.error == "#cc0000"
        assert tokens.font_heading == "Playfair Display"
        assert tokens.font_mono == "JetBrains Mono"
        assert tokens.radius_default == "4px"
        assert tokens.spacing_section == "6rem"
        assert tokens.container_width == "1200px"
        assert tokens.shadows["md"] == "0 2px 4px black"
        assert tokens.shadows["sm"].startswith("0 1px 2px")

    def test_gradient_defaults_to_brand_colors(self) -> None:
        gradient = DesignTokens.from_record(RECORD).gradient
        assert gradient is not None
        assert gradient.to_css() == "linear-gradient(to bottom right, #ff5500, #00aa88)"

    def test_disabled_gradient(self) -> None:
        record = {"gradients": {"primary": {"enabled": False, "from": "#000"}}}
        assert DesignTokens.from_record(record).gradient is None

    def test_custom_colors_follow_named_colors(self) -> None:
        names = [color.name for color in DesignTokens.from_record(RECORD).colors]
        assert names[0] == "primary"
        assert names[-2:] == ["sand", "ink"]

    def test_rgb_only_for_hex(self) -> None:
        assert TokenColor("a", "--a", "#ff0000").rgb == "255, 0, 0"
        assert TokenColor("b", "--b", "#fff").rgb == "255, 255, 255"
        assert TokenColor("c", "--c", "var(--ink)").rgb is None


class TestRootVariables:
    def test_variables(self) -> None:
        root = root_variables(DesignTokens.from_record(RECORD))
        assert root.startswith(":root {\n")
        assert "  --color-brand-primary: #ff5500;" in root
        assert "  --color-brand-primary-rgb: 255, 85, 0;" in root
        assert "  --color-neutral-background: #fafafa;" in root
        assert "  --color-custom-sand: #e5d3b3;" in root
        assert "--color-custom-ink-rgb" not in root
        assert "  --font-heading: 'Playfair Display', system-ui, sans-serif;" in root
        assert "  --font-mono: 'JetBrains Mono', monospace;" in root
        assert "  --radius-default: 4px;" in root
        assert "  --radius-full: 9999px;" in root
        assert "  --spacing-container: 1200px;" in root
        assert "  --gradient-primary: linear-gradient(to bottom right, #ff5500, #00aa88);" in root


class TestGenerateDesignTokensCSS:
    def test_color_utilities(self) -> None:
        css = generate_design_tokens_css(None)
        assert ".bg-primary { background-color: var(--color-brand-primary); }" in css
        assert ".text-foreground { color: var(--color-neutral-foreground); }" in css
        assert ".border-border { border-color: var(--color-neutral-border); }" in css

    def test_opacity_steps(self) -> None:
        css = generate_design_tokens_css(None)
        assert ".bg-primary\\/50 { background-color: rgba(var(--color-brand-primary-rgb), 0.5); }" in css
        assert ".text-accent\\/5 { color: rgba(var(--color-brand-accent-rgb), 0.05); }" in css
        assert ".border-primary\\/50" not in css

    def test_state_variants(self) -> None:
        css = generate_design_tokens_css(None)
        assert ".hover\\:bg-primary:hover { background-color: var(--color-brand-primary); }" in css
        assert ".focus\\:border-accent:focus { border-color: var(--color-brand-accent); }" in css
        assert ".group:hover .group-hover\\:text-primary { color: var(--color-brand-primary); }" in css
        assert "group-hover\\:border-" not in css

    def test_non_hex_custom_color_has_no_opacity_steps(self) -> None:
        css = generate_design_tokens_css(RECORD)
        assert ".bg-ink { background-color: var(--color-custom-ink); }" in css
        assert ".bg-ink\\/50" not in css
        assert ".bg-sand\\/50" in css

    def test_typography_and_effects(self) -> None:
        css = generate_design_tokens_css(RECORD)
        assert ".font-heading { font-family: var(--font-heading); }" in css
        assert ".shadow-md { box-shadow: var(--shadow-md); }" in css
        assert ".rounded { border-radius: var(--radius-default); }" in css
        assert ".rounded-2xl { border-radius: var(--radius-2xl); }" in css
        assert ".bg-gradient-primary { background-image: var(--gradient-primary); }" in css

    def test_gradient_stops(self) -> None:
        css = generate_design_tokens_css(None)
        assert ".from-primary { --tw-gradient-from: var(--color-brand-primary);" in css
        assert ".to-accent { --tw-gradient-to: var(--color-brand-accent); }" in css

    def test_no_important(self) -> None:
        assert "!important" not in generate_design_tokens_css(RECORD)

    def test_only_root_and_class_selectors(self) -> None:
        css = generate_design_tokens_css(None)
        assert css.startswith(":root {")
        assert "box-sizing" not in css

    def test_accepts_resolved_tokens(self) -> None:
        tokens = DesignTokens(primary="#000000")
        assert "--color-brand-primary: #000000;" in generate_design_tokens_css(tokens)
