"""Strip the zero-specificity ``:where(...)`` wrapper from engine selectors.

``:where(X)`` is unwrapped to ``X`` only when ``X`` is a single selector;
unwrapping a selector list would change what the rule matches.
"""

from __future__ import annotations

_MARKER = ":where("


def _matching_paren(text: str, open_index: int) -> int:
    """Index of the ``)`` closing the ``(`` at ``open_index``, or -1."""
    depth = 0
    quote: str | None = None
    index = open_index
    while index < len(text):
        ch = text[index]
        if quote is not None:
            if ch == "\\":
                index += 2
                continue
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "\\":
            index += 2
            continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    return -1


def _has_top_level_comma(text: str) -> bool:
    depth = 0
    for ch in text:
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == "," and depth == 0:
            return True
    return False


def strip_specificity_hack(css: str) -> str:
    out: list[str] = []
    cursor = 0
    while True:
        start = css.find(_MARKER, cursor)
        if start == -1:
            out.append(css[cursor:])
            break
        # An escaped colon belongs to a class name (".hover\:where(...)").
        if start > 0 and css[start - 1] == "\\":
            out.append(css[cursor : start + len(_MARKER)])
            cursor = start + len(_MARKER)
            continue
        close = _matching_paren(css, start + len(_MARKER) - 1)
        if close == -1:
            out.append(css[cursor:])
            break
        inner = css[start + len(_MARKER) : close]
        out.append(css[cursor:start])
        if _has_top_level_comma(inner):
            out.append(css[start : close + 1])
        else:
            out.append(strip_specificity_hack(inner.strip()))
        cursor = close + 1
    return "".join(out)
