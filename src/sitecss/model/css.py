"""CSS rule model: CSSRule, ResponsiveGroup, and the RuleSet collector."""

from __future__ import annotations

from dataclasses import dataclass, field

from sitecss.grammar.tables import BREAKPOINTS


@dataclass(frozen=True)
class CSSRule:
    """A single flat rule: ``selector { declarations }``."""

    selector: str
    declarations: str  # "prop: value; prop: value;"

    def to_css(self) -> str:
        return f"{self.selector} {{ {self.declarations} }}"


@dataclass(frozen=True)
class ResponsiveGroup:
    """Rules scoped to a ``@media (min-width: ...)`` breakpoint."""

    breakpoint_width: str
    rules: tuple[CSSRule, ...]

    def to_css(self) -> str:
        body = "\n".join(f"  {rule.to_css()}" for rule in self.rules)
        return f"@media (min-width: {self.breakpoint_width}) {{\n{body}\n}}"


@dataclass
class RuleSet:
    """Append-only collector of top-level rules and breakpoint buckets.

    Buckets exist for every known breakpoint and are serialized in ascending
    width order; empty buckets are skipped.
    """

    rules: list[CSSRule] = field(default_factory=list)
    buckets: dict[str, list[CSSRule]] = field(
        default_factory=lambda: {name: [] for name in BREAKPOINTS}
    )

    def add(self, rule: CSSRule, breakpoint: str | None = None) -> None:
        if breakpoint is None:
            self.rules.append(rule)
        else:
            self.buckets[breakpoint].append(rule)

    @property
    def groups(self) -> list[ResponsiveGroup]:
        ordered = sorted(BREAKPOINTS.items(), key=lambda item: int(item[1].rstrip("px")))
        return [
            ResponsiveGroup(breakpoint_width=width, rules=tuple(self.buckets[name]))
            for name, width in ordered
            if self.buckets[name]
        ]

    def __len__(self) -> int:
        return len(self.rules) + sum(len(b) for b in self.buckets.values())

    def to_css(self) -> str:
        parts = [rule.to_css() for rule in self.rules]
        parts.extend(group.to_css() for group in self.groups)
        return "\n".join(parts)


def format_declarations(pairs: list[tuple[str, str]] | tuple[tuple[str, str], ...]) -> str:
    """Render ``[(prop, value), ...]`` as ``"prop: value; prop: value;"``."""
    return " ".join(f"{prop}: {value};" for prop, value in pairs)
