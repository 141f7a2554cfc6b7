"""Extraction rule table: attribute patterns paired with value-splitting strategies."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator

__all__ = [
    "DEFAULT_RULES",
    "ExtractionRule",
    "is_class_like",
    "is_template_syntax",
    "split_quoted",
    "split_whitespace",
]

Strategy = Callable[[str], list[str]]

# Quoted substrings inside a binding expression.
_QUOTED_RE = re.compile(r"""'([^']*)'|"([^"]*)"|`([^`]*)`""")

# Tokens that plausibly are utility classes, used where the attribute value
# is an expression rather than a plain class list.
_CLASS_LIKE_RE = re.compile(r"^!?-?[a-z0-9@][\w\-\[\]:/.%#()',!&>*+=~@]*$")


def is_template_syntax(token: str) -> bool:
    """True for unresolved template placeholders (``{foo}``, ``{{ x }}``, ``${x}``)."""
    return token.startswith("{") or "{{" in token or "${" in token


def is_class_like(token: str) -> bool:
    return bool(_CLASS_LIKE_RE.match(token))


def split_whitespace(value: str) -> list[str]:
    return [token for token in value.split() if not is_template_syntax(token)]


def split_quoted(value: str) -> list[str]:
    """Take every quoted substring, split it, keep the class-like pieces."""
    tokens: list[str] = []
    for match in _QUOTED_RE.finditer(value):
        text = next(group for group in match.groups() if group is not None)
        tokens.extend(token for token in split_whitespace(text) if is_class_like(token))
    return tokens


@dataclass(frozen=True)
class ExtractionRule:
    """One attribute pattern and how to split what it captures.

    Every capturing group in ``pattern`` is a value alternative (e.g. one per
    quote style); the first group that participated in the match is used.
    """

    name: str
    pattern: re.Pattern[str]
    strategy: Strategy

    def apply(self, text: str) -> Iterator[str]:
        for match in self.pattern.finditer(text):
            value = next((group for group in match.groups() if group is not None), "")
            yield from self.strategy(value)


# Attribute values may appear JSON-escaped (class=\"...\") inside serialized content.
_DQ = r'\\?"([^"\\]*)\\?"'
_SQ = r"'([^']*)'"

DEFAULT_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule(
        name="class_attribute",
        pattern=re.compile(rf"(?<![\w:.-])(?:class|className)\s*=\s*(?:{_DQ}|{_SQ})"),
        strategy=split_whitespace,
    ),
    ExtractionRule(
        name="json_class_name",
        pattern=re.compile(r'"className"\s*:\s*"((?:\\.|[^"\\])*)"'),
        strategy=split_whitespace,
    ),
    ExtractionRule(
        name="bound_class",
        pattern=re.compile(
            rf"(?<![\w-])(?:x-bind:class|v-bind:class|:class|ng-class)\s*=\s*(?:{_DQ}|{_SQ})"
        ),
        strategy=split_quoted,
    ),
    ExtractionRule(
        name="data_class",
        pattern=re.compile(rf"(?<![\w-])data-class\s*=\s*(?:{_DQ}|{_SQ})"),
        strategy=split_whitespace,
    ),
    ExtractionRule(
        name="transition_directive",
        pattern=re.compile(rf"(?<![\w-])x-transition(?::[\w.-]+)?\s*=\s*(?:{_DQ}|{_SQ})"),
        strategy=split_whitespace,
    ),
)
