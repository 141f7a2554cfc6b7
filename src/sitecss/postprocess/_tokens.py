"""tinycss2 helpers shared by the post-processing passes."""

from __future__ import annotations

from typing import Any, Iterable

import tinycss2
from tinycss2 import ast

from sitecss.errors import PostProcessError


def _raise_on_error(nodes: Iterable[Any]) -> list[Any]:
    out = []
    for node in nodes:
        if node.type == "error":
            raise PostProcessError(
                f"Unparseable CSS: {node.message}", line=node.source_line, column=node.source_column
            )
        out.append(node)
    return out


def parse_rules(css: str) -> list[Any]:
    """Top-level rules of a stylesheet, without whitespace or comments."""
    nodes = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    return _raise_on_error(nodes)


def parse_block(content: list[Any] | None) -> list[Any]:
    """Declarations and nested rules inside a ``{}`` block."""
    if not content:
        return []
    nodes = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    return _raise_on_error(nodes)


def parse_rule_list(content: list[Any] | None) -> list[Any]:
    if not content:
        return []
    nodes = tinycss2.parse_rule_list(content, skip_comments=True, skip_whitespace=True)
    return _raise_on_error(nodes)


def serialize(nodes: list[Any] | None) -> str:
    return tinycss2.serialize(nodes or []).strip()


def serialize_node(node: Any) -> str:
    return tinycss2.serialize([node]).strip()


def split_selector_list(prelude: list[Any]) -> list[str]:
    """Split a selector prelude on top-level commas."""
    selectors: list[str] = []
    current: list[Any] = []
    for token in prelude:
        if isinstance(token, ast.LiteralToken) and token.value == ",":
            selectors.append(serialize(current))
            current = []
        else:
            current.append(token)
    selectors.append(serialize(current))
    return [sel for sel in selectors if sel]


def format_declaration(decl: ast.Declaration) -> str:
    important = " !important" if decl.important else ""
    return f"{decl.name}: {serialize(decl.value)}{important};"
