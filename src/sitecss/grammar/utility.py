"""Utility class-name grammar.

A class token has the shape::

    [responsive:][state:][!][-]base

where ``base`` is either a plain utility name (``p-4``, ``bg-gray-500/50``)
or a property followed by a bracketed arbitrary value (``w-[320px]``).
Colons inside the brackets do not split variants.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from sitecss.grammar.tables import BREAKPOINTS

__all__ = [
    "STATE_PSEUDO",
    "ParsedUtility",
    "class_selector",
    "escape_class",
    "parse_utility",
    "split_variants",
    "state_selector",
]

# state prefix -> selector suffix
STATE_PSEUDO: Mapping[str, str] = MappingProxyType({
    "hover": ":hover",
    "focus": ":focus",
    "active": ":active",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "disabled": ":disabled",
    "group-hover": ":hover",
    "first": ":first-child",
    "last": ":last-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
})

_ARBITRARY_RE = re.compile(
    r"""
    ^(?P<property>[a-z][a-z0-9-]*?)   # property prefix, e.g. "w", "min-h", "bg"
    -\[                               # opening bracket
    (?P<value>.+)                     # raw bracket body
    \]$                               # closing bracket
    """,
    re.VERBOSE,
)

# Characters that must be backslash-escaped in a class selector.
_SELECTOR_SPECIALS = frozenset(":/[].,'\"#%!+*&>~=@$^|{};?<()` \\")


@dataclass(frozen=True)
class ParsedUtility:
    """Structured decomposition of one class token.

    For arbitrary tokens ``property``/``value`` are the bracket split
    (``w`` / ``320px``). For plain tokens they are the split at the last
    dash (``p`` / ``4``, ``bg-gray`` / ``500/50``); single-word utilities
    carry an empty value.
    """

    raw: str
    base: str
    property: str
    value: str
    responsive: str | None = None
    state: str | None = None
    negative: bool = False
    important: bool = False
    arbitrary: bool = False

    @property
    def has_variants(self) -> bool:
        return self.responsive is not None or self.state is not None

    @property
    def signed_base(self) -> str:
        """The base with its negative sign restored (``-mt-2``)."""
        return f"-{self.base}" if self.negative else self.base


def split_variants(token: str) -> list[str]:
    """Split a token on colons that are not inside brackets or parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in token:
        if ch in "[(":
            depth += 1
        elif ch in "])" and depth:
            depth -= 1
        if ch == ":" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def parse_utility(token: str) -> ParsedUtility | None:
    """Parse a class token, or return None if it does not fit the grammar.

    At most one responsive prefix followed by at most one state prefix is
    accepted; any other variant combination (``dark:``, ``md:lg:``) fails.
    """
    if not token or token != token.strip():
        return None
    parts = split_variants(token)
    body = parts[-1]
    prefixes = parts[:-1]
    if not body or len(prefixes) > 2:
        return None

    responsive: str | None = None
    state: str | None = None
    for prefix in prefixes:
        if prefix in BREAKPOINTS and responsive is None and state is None:
            responsive = prefix
        elif prefix in STATE_PSEUDO and state is None:
            state = prefix
        else:
            return None

    important = body.startswith("!")
    if important:
        body = body[1:]
    negative = body.startswith("-")
    if negative:
        body = body[1:]
    if not body:
        return None

    match = _ARBITRARY_RE.match(body)
    if match is not None:
        return ParsedUtility(
            raw=token,
            base=body,
            property=match.group("property"),
            value=match.group("value"),
            responsive=responsive,
            state=state,
            negative=negative,
            important=important,
            arbitrary=True,
        )
    if "[" in body or "]" in body:
        return None
    prop, _, value = body.rpartition("-")
    if not prop:
        prop, value = value, ""
    return ParsedUtility(
        raw=token,
        base=body,
        property=prop,
        value=value,
        responsive=responsive,
        state=state,
        negative=negative,
        important=important,
    )


def escape_class(name: str) -> str:
    """Escape a raw class name for use as a CSS identifier.

    >>> escape_class("hover:w-[50%]")
    'hover\\\\:w-\\\\[50\\\\%\\\\]'
    """
    out: list[str] = []
    for index, ch in enumerate(name):
        if ch.isdigit() and (index == 0 or (index == 1 and name[0] == "-")):
            out.append(f"\\{ord(ch):x} ")
        elif ch in _SELECTOR_SPECIALS:
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def class_selector(name: str) -> str:
    return "." + escape_class(name)


def state_selector(name: str, state: str | None) -> str:
    """Build the selector for ``name`` under an optional state prefix."""
    selector = class_selector(name)
    if state is None:
        return selector
    if state == "group-hover":
        return f".group:hover {selector}"
    return selector + STATE_PSEUDO[state]
