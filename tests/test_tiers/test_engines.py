from __future__ import annotations

import json

import pytest

from sitecss.config import SiteCSSConfig
from sitecss.errors import EngineCompileError, EngineUnavailableError, PostProcessError
from sitecss.model.theme import ThemeExtension
from sitecss.tiers import FallbackCompiler, PrimaryEngine, SecondaryEngine, build_tiers
from sitecss.tiers.base import CompileRequest
from sitecss.tiers.binary import EngineBinary
from sitecss.tiers.primary import TAILWIND_DIRECTIVES, build_engine_config, render_engine_config
from sitecss.tiers.secondary import (
    FALLBACK_BASE_SOURCE,
    BaseSourceCache,
    build_input_css,
    build_source_directive,
    build_theme_block,
    flatten_colors,
    rewrite_relative_imports,
)

THEME = ThemeExtension(
    colors={"brand": {"DEFAULT": "#111111", "500": "#222222"}, "accent": "#ff0000"},
    font_family={"display": ["Playfair Display", "serif"]},
    animation={"wiggle": "wiggle 1s ease-in-out infinite"},
)


class TestPrimaryConfig:
    def test_config_inlines_markup(self) -> None:
        config = build_engine_config(['<div class="flex">', "<p class='mt-2'>"], THEME)
        content = config["content"][0]
        assert content["extension"] == "html"
        assert content["raw"].startswith(TAILWIND_DIRECTIVES)
        assert '<div class="flex">' in content["raw"]
        assert config["theme"]["extend"]["fontFamily"] == {"display": ["Playfair Display", "serif"]}
        assert config["corePlugins"] == {"preflight": True}

    def test_render_is_a_commonjs_module(self) -> None:
        rendered = render_engine_config({"content": []})
        assert rendered.startswith("module.exports = ")
        assert rendered.rstrip().endswith(";")
        assert json.loads(rendered[len("module.exports = "):].rstrip().rstrip(";")) == {"content": []}


class TestPrimaryEngine:
    def test_success(self, fake_engine, binary_path) -> None:
        engine = fake_engine(output=".flex { display: flex; }")
        tier = PrimaryEngine(EngineBinary("3.4.17", explicit_path=str(binary_path)), timeout=3)
        result = tier.compile(CompileRequest(markup=('<div class="flex">',), theme=THEME))
        assert result.ok
        assert result.tier == "primary"
        assert result.css == ".flex { display: flex; }"
        cmd, kwargs = engine.calls[0]
        assert "--config" in cmd
        assert kwargs["timeout"] == 3
        assert engine.inputs["--input"] == TAILWIND_DIRECTIVES
        assert '<div class=\\"flex\\">' in engine.inputs["--config"]

    def test_missing_binary_is_a_failed_result(self, tmp_path) -> None:
        tier = PrimaryEngine(EngineBinary("3.4.17", explicit_path=str(tmp_path / "missing")))
        result = tier.compile(CompileRequest())
        assert result.failed
        assert isinstance(result.error, EngineUnavailableError)

    def test_engine_error_is_a_failed_result(self, fake_engine, binary_path) -> None:
        fake_engine(returncode=2, stderr="bad config")
        tier = PrimaryEngine(EngineBinary("3.4.17", explicit_path=str(binary_path)))
        result = tier.compile(CompileRequest())
        assert isinstance(result.error, EngineCompileError)
        assert result.error.stderr == "bad config"


class TestSecondaryInput:
    def test_flatten_colors(self) -> None:
        assert list(flatten_colors(THEME.colors)) == [
            ("brand", "#111111"),
            ("brand-500", "#222222"),
            ("accent", "#ff0000"),
        ]

    def test_theme_block(self) -> None:
        block = build_theme_block(THEME)
        assert block.startswith("@theme {\n")
        assert "  --color-brand: #111111;" in block
        assert "  --color-brand-500: #222222;" in block
        assert '  --font-display: "Playfair Display", serif;' in block
        assert "  --animate-wiggle: wiggle 1s ease-in-out infinite;" in block

    def test_empty_theme_block(self) -> None:
        assert build_theme_block(ThemeExtension()) == ""

    def test_source_directive_escapes_quotes(self) -> None:
        directive = build_source_directive(["flex", 'content-["x"]', "bg-[url(a\\b)]"])
        assert directive == '@source inline("flex content-[\\"x\\"] bg-[url(a\\\\b)]");\n'

    def test_input_css_order(self) -> None:
        css = build_input_css("@import 'tailwindcss';", THEME, ["flex"])
        assert css.index("@import") < css.index("@theme") < css.index("@source inline")


class TestBaseSourceCache:
    def test_fallback_is_not_cached(self, tmp_path) -> None:
        path = tmp_path / "index.css"
        cache = BaseSourceCache([path])
        assert cache.get_or_load() == FALLBACK_BASE_SOURCE
        assert not cache.loaded

        path.write_text("@layer theme, base, components, utilities;\n")
        assert cache.get_or_load().startswith("@layer theme")
        assert cache.loaded

    def test_real_source_is_cached(self, tmp_path) -> None:
        path = tmp_path / "index.css"
        path.write_text("first")
        cache = BaseSourceCache([tmp_path / "missing.css", path])
        assert cache.get_or_load() == "first"
        path.write_text("second")
        assert cache.get_or_load() == "first"

    def test_relative_imports_are_rewritten(self, tmp_path) -> None:
        out = rewrite_relative_imports("@import './theme.css' layer(theme);\n@import 'x';", tmp_path)
        assert f"@import '{(tmp_path / 'theme.css').resolve().as_posix()}' layer(theme);" in out
        assert "@import 'x';" in out


class TestSecondaryEngine:
    def _tier(self, binary_path, tmp_path) -> SecondaryEngine:
        return SecondaryEngine(
            EngineBinary("4.1.11", explicit_path=str(binary_path)),
            BaseSourceCache([tmp_path / "missing.css"]),
        )

    def test_output_is_postprocessed(self, fake_engine, binary_path, tmp_path) -> None:
        engine = fake_engine(
            output="@layer utilities {\n  .flex { display: flex; }\n  .btn { &:hover { color: red; } }\n}\n"
        )
        result = self._tier(binary_path, tmp_path).compile(CompileRequest(classes=("flex", "btn")))
        assert result.ok
        assert "@layer" not in result.css
        assert ".btn:hover" in result.css
        assert '@source inline("flex btn");' in engine.inputs["--input"]

    def test_unparseable_output_fails(self, fake_engine, binary_path, tmp_path) -> None:
        fake_engine(output=".a { color: red; }\n.b")
        result = self._tier(binary_path, tmp_path).compile(CompileRequest(classes=("a",)))
        assert result.failed
        assert isinstance(result.error, PostProcessError)


class TestBuildTiers:
    def test_default_order(self) -> None:
        tiers = build_tiers(SiteCSSConfig())
        assert [tier.name for tier in tiers] == ["primary", "secondary", "fallback"]
        assert isinstance(tiers[0], PrimaryEngine)
        assert isinstance(tiers[1], SecondaryEngine)
        assert isinstance(tiers[2], FallbackCompiler)

    def test_selected_tiers(self) -> None:
        tiers = build_tiers(SiteCSSConfig(tiers=("fallback",)))
        assert [tier.name for tier in tiers] == ["fallback"]

    def test_base_source_cache_is_shared(self) -> None:
        config = SiteCSSConfig(tiers=("secondary",), base_source_paths=("shared-test/index.css",))
        first = build_tiers(config)[0]
        second = build_tiers(config)[0]
        assert first.base_source is second.base_source

    def test_unknown_tier(self) -> None:
        with pytest.raises(ValueError, match="Unknown tier"):
            build_tiers(SiteCSSConfig(tiers=("lightning",)))

    def test_engine_paths_from_config(self) -> None:
        config = SiteCSSConfig(primary_engine="/opt/tw3", secondary_engine="/opt/tw4", engine_timeout=9)
        primary, secondary, _ = build_tiers(config)
        assert primary.binary.explicit_path == "/opt/tw3"
        assert secondary.binary.explicit_path == "/opt/tw4"
        assert primary.timeout == secondary.timeout == 9
