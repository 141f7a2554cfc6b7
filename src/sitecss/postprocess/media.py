"""Rewrite range-syntax media features to ``min-``/``max-`` form.

``(width >= 64rem)`` -> ``(min-width: 64rem)``. Strict comparisons map to the
same inclusive form.
"""

from __future__ import annotations

import re

_VALUE = r"(?P<{name}>[^\s()<>=]+)"

_DOUBLE_RE = re.compile(
    r"\(\s*" + _VALUE.format(name="low") + r"\s*<=?\s*(?P<feature>width|height)\s*<=?\s*"
    + _VALUE.format(name="high") + r"\s*\)"
)
_FORWARD_RE = re.compile(
    r"\(\s*(?P<feature>width|height)\s*(?P<op>>=|<=|>|<)\s*" + _VALUE.format(name="value") + r"\s*\)"
)
_REVERSED_RE = re.compile(
    r"\(\s*" + _VALUE.format(name="value") + r"\s*(?P<op>>=|<=|>|<)\s*(?P<feature>width|height)\s*\)"
)


def _double(match: re.Match[str]) -> str:
    feature = match.group("feature")
    return f"(min-{feature}: {match.group('low')}) and (max-{feature}: {match.group('high')})"


def _forward(match: re.Match[str]) -> str:
    bound = "min" if match.group("op").startswith(">") else "max"
    return f"({bound}-{match.group('feature')}: {match.group('value')})"


def _reversed(match: re.Match[str]) -> str:
    # "64rem <= width" reads as width >= 64rem
    bound = "min" if match.group("op").startswith("<") else "max"
    return f"({bound}-{match.group('feature')}: {match.group('value')})"


def normalize_media_ranges(css: str) -> str:
    css = _DOUBLE_RE.sub(_double, css)
    css = _FORWARD_RE.sub(_forward, css)
    return _REVERSED_RE.sub(_reversed, css)
