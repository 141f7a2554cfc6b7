"""Inline theme discovery: ``tailwind.config = {...}`` scripts and literal pairs."""

from __future__ import annotations

import functools
import logging
import re
from pathlib import Path
from typing import Any, Mapping

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from sitecss.errors import ThemeConfigError
from sitecss.model.theme import ThemeExtension

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "theme_config.lark"

_CONFIG_START_RE = re.compile(r"tailwind\.config\s*=\s*(?=\{)")

# 'key': "value" / key: `value` pairs anywhere in markup or script text.
_LITERAL_PAIR_RE = re.compile(
    r"""
    (?P<kq>['"]?)(?P<key>[A-Za-z_][\w-]*)(?P=kq)   # optionally quoted key
    \s*:\s*
    (?P<q>['"`])(?P<value>(?:\\.|(?!(?P=q)).)*)(?P=q)  # quoted value
    """,
    re.VERBOSE,
)

_IMAGE_MARKERS = ("url(", "gradient", "linear-", "radial-")

# Keys that commonly carry image-like values but are not background utilities.
EXCLUDED_IMAGE_KEYS = frozenset({
    "background",
    "backgroundImage",
    "background-image",
    "style",
    "src",
    "href",
    "content",
    "className",
    "class",
    "html",
    "css",
    "customCss",
    "image",
    "url",
})

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def _unquote(raw: str) -> str:
    body = raw[1:-1]
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


class ThemeLiteralTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a JS-object-literal parse tree into plain Python values."""

    def object(self, items: list[tuple[str, Any]]) -> dict[str, Any]:
        return dict(items)

    def array(self, items: list[Any]) -> list[Any]:
        return list(items)

    def pair(self, items: list[Any]) -> tuple[str, Any]:
        return (str(items[0]), items[1])

    def string(self, items: list[Token]) -> str:
        return _unquote(str(items[0]))

    def name_key(self, items: list[Token]) -> str:
        return str(items[0])

    def number_key(self, items: list[Token]) -> str:
        return str(items[0])

    def number(self, items: list[Token]) -> int | float:
        raw = str(items[0])
        value = float(raw)
        return int(value) if value.is_integer() and "." not in raw else value

    def true(self, _items: list[Token]) -> bool:
        return True

    def false(self, _items: list[Token]) -> bool:
        return False

    def null(self, _items: list[Token]) -> None:
        return None


@functools.cache
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_js_object(source: str) -> Any:
    """Parse a JS object literal made only of plain data.

    Raises ThemeConfigError with the failing position on anything else.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as exc:
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)
        raise ThemeConfigError(str(exc), line=line, column=column, cause=exc) from exc
    return ThemeLiteralTransformer().transform(tree)


def find_config_literal(text: str) -> str | None:
    """Cut the object literal out of ``tailwind.config = {...}`` by brace matching.

    Braces inside quoted strings are ignored. Returns None when there is no
    assignment or its braces never balance.
    """
    match = _CONFIG_START_RE.search(text)
    if match is None:
        return None
    start = match.end()
    depth = 0
    quote: str | None = None
    index = start
    while index < len(text):
        ch = text[index]
        if quote is not None:
            if ch == "\\":
                index += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "'\"`":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
        index += 1
    return None


def theme_from_config(config: Mapping[str, Any]) -> ThemeExtension:
    """Flatten ``theme`` and ``theme.extend`` into one ThemeExtension."""
    theme = config.get("theme")
    if not isinstance(theme, Mapping):
        return ThemeExtension()
    combined = {key: value for key, value in theme.items() if key != "extend"}
    extend = theme.get("extend")
    if isinstance(extend, Mapping):
        combined.update(extend)
    return ThemeExtension.from_mapping(combined)


def extract_config_theme(text: str) -> ThemeExtension:
    """Parse an inline ``tailwind.config`` assignment, if present.

    A literal that is not plain data is logged at debug level and ignored.
    """
    literal = find_config_literal(text)
    if literal is None:
        return ThemeExtension()
    try:
        config = parse_js_object(literal)
    except ThemeConfigError as exc:
        logger.debug(
            "Ignoring inline theme config at line %s, column %s: %s",
            exc.line,
            exc.column,
            exc,
        )
        return ThemeExtension()
    if not isinstance(config, Mapping):
        return ThemeExtension()
    return theme_from_config(config)


def scan_background_images(text: str) -> dict[str, str]:
    """Find ``name: "<gradient or url>"`` literal pairs embedded in markup."""
    found: dict[str, str] = {}
    for match in _LITERAL_PAIR_RE.finditer(text):
        key = match.group("key")
        value = match.group("value")
        if key in EXCLUDED_IMAGE_KEYS:
            continue
        if any(marker in value for marker in _IMAGE_MARKERS):
            found.setdefault(key, value.replace('\\"', '"').replace("\\'", "'"))
    return found
