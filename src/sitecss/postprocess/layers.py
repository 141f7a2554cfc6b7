"""Remove ``@layer`` groupings, turning layer precedence into rule order.

Layers are emitted in their declared order (``@layer a, b, c;`` statements
first, then blocks in order of appearance). Unlayered rules beat every layer
in the cascade, so they are moved after all layered content.
"""

from __future__ import annotations

from typing import Any

from sitecss.postprocess._tokens import parse_rule_list, parse_rules, serialize, serialize_node


def _layer_names(prelude: list[Any]) -> list[str]:
    return [name.strip() for name in serialize(prelude).split(",") if name.strip()]


class _LayerCollector:
    def __init__(self) -> None:
        self.order: list[str] = []
        self.layered: dict[str, list[str]] = {}
        self.unlayered: list[str] = []
        self._anonymous = 0

    def declare(self, name: str) -> None:
        if name not in self.layered:
            self.order.append(name)
            self.layered[name] = []

    def collect(self, nodes: list[Any], layer: str | None) -> None:
        for node in nodes:
            if node.type == "at-rule" and node.lower_at_keyword == "layer":
                names = _layer_names(node.prelude)
                if node.content is None:
                    for name in names:
                        self.declare(f"{layer}.{name}" if layer else name)
                    continue
                if names:
                    name = names[0]
                else:
                    self._anonymous += 1
                    name = f"<anonymous-{self._anonymous}>"
                full = f"{layer}.{name}" if layer else name
                self.declare(full)
                self.collect(parse_rule_list(node.content), full)
            elif layer is None:
                self.unlayered.append(serialize_node(node))
            else:
                self.layered[layer].append(serialize_node(node))

    def _parent(self, name: str) -> str | None:
        parent = name.rpartition(".")[0]
        return parent if parent in self.layered else None

    def _emit(self, name: str, out: list[str]) -> None:
        # Sub-layers lose to their parent's own rules, so they come first.
        for child in self.order:
            if self._parent(child) == name:
                self._emit(child, out)
        out.extend(self.layered[name])

    def ordered(self) -> list[str]:
        out: list[str] = []
        for name in self.order:
            if self._parent(name) is None:
                self._emit(name, out)
        out.extend(self.unlayered)
        return out


def remove_layers(css: str) -> str:
    collector = _LayerCollector()
    collector.collect(parse_rules(css), None)
    return "\n".join(collector.ordered())
