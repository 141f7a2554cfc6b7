"""Flatten CSS nesting into plain selectors.

``.a { color: red; &:hover { color: blue; } @media (x) { color: green; } }``
becomes three flat rules, the last one wrapped in ``@media (x)``. Nested
``@media`` conditions are combined with ``and``. Layer blocks are kept (their
contents flattened) so that layer removal can run as a separate pass.
"""

from __future__ import annotations

from typing import Any

from sitecss.postprocess._tokens import (
    format_declaration,
    parse_block,
    parse_rule_list,
    parse_rules,
    serialize,
    serialize_node,
    split_selector_list,
)

# Conditional group rules that can wrap a flattened rule.
_CONDITIONAL = frozenset({"media", "supports", "container"})

Conditions = tuple[tuple[str, str], ...]


def resolve_selector(parent: str, child: str) -> str:
    """Resolve a nested selector against its parent.

    ``&`` is replaced by the parent; without ``&`` the child is a descendant.
    """
    if "&" in child:
        return child.replace("&", parent)
    return f"{parent} {child}"


def _add_condition(conditions: Conditions, keyword: str, prelude: str) -> Conditions:
    if conditions and keyword == "media" and conditions[-1][0] == "media":
        combined = f"{conditions[-1][1]} and {prelude}"
        return conditions[:-1] + (("media", combined),)
    return conditions + ((keyword, prelude),)


def _wrap(text: str, conditions: Conditions) -> str:
    for keyword, prelude in reversed(conditions):
        indented = "\n".join(f"  {line}" for line in text.split("\n"))
        text = f"@{keyword} {prelude} {{\n{indented}\n}}"
    return text


def _flatten_style_rule(
    selectors: list[str], content: list[Any], conditions: Conditions, out: list[str]
) -> None:
    declarations: list[str] = []
    nested: list[Any] = []
    for node in parse_block(content):
        if node.type == "declaration":
            declarations.append(format_declaration(node))
        else:
            nested.append(node)
    if declarations:
        rule = f"{', '.join(selectors)} {{ {' '.join(declarations)} }}"
        out.append(_wrap(rule, conditions))
    for node in nested:
        if node.type == "qualified-rule":
            children = split_selector_list(node.prelude)
            resolved = [resolve_selector(p, c) for p in selectors for c in children]
            _flatten_style_rule(resolved, node.content, conditions, out)
        elif node.type == "at-rule" and node.lower_at_keyword in _CONDITIONAL and node.content is not None:
            inner = _add_condition(conditions, node.lower_at_keyword, serialize(node.prelude))
            _flatten_style_rule(selectors, node.content, inner, out)


def _flatten_rule_list(nodes: list[Any], conditions: Conditions, out: list[str]) -> None:
    for node in nodes:
        if node.type == "qualified-rule":
            _flatten_style_rule(split_selector_list(node.prelude), node.content, conditions, out)
        elif node.type == "at-rule" and node.content is not None and node.lower_at_keyword in _CONDITIONAL:
            inner = _add_condition(conditions, node.lower_at_keyword, serialize(node.prelude))
            _flatten_rule_list(parse_rule_list(node.content), inner, out)
        elif node.type == "at-rule" and node.content is not None and node.lower_at_keyword == "layer":
            body: list[str] = []
            _flatten_rule_list(parse_rule_list(node.content), (), body)
            name = serialize(node.prelude)
            header = f"@layer {name} {{" if name else "@layer {"
            indented = "\n".join(f"  {line}" for chunk in body for line in chunk.split("\n"))
            out.append(_wrap(f"{header}\n{indented}\n}}", conditions))
        else:
            out.append(_wrap(serialize_node(node), conditions))


def flatten_nesting(css: str) -> str:
    out: list[str] = []
    _flatten_rule_list(parse_rules(css), (), out)
    return "\n".join(out)
