"""ThemeExtension model and the persisted/extracted merge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

# Accepted spellings for each section when reading loose config mappings.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "colors": ("colors",),
    "font_family": ("fontFamily", "font_family"),
    "keyframes": ("keyframes",),
    "animation": ("animation",),
    "background_image": ("backgroundImage", "background_image"),
}


def _lookup(data: Mapping[str, Any], section: str) -> Any:
    for key in _KEY_ALIASES[section]:
        if key in data:
            return data[key]
    return None


def _font_stack(value: Any) -> list[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        # Tailwind allows [stack, {fontFeatureSettings: ...}]; keep the names only.
        stack: list[str] = []
        for item in value:
            if isinstance(item, str):
                stack.append(item)
            elif isinstance(item, (list, tuple)):
                stack.extend(str(x) for x in item)
        return stack
    return [str(value)]


@dataclass(frozen=True)
class ThemeExtension:
    """Site-level theme extension: custom colors, fonts, keyframes, animations, images.

    ``colors`` and ``font_family`` are ``None`` when absent so that the merge
    can tell "not provided" apart from "provided but empty".
    """

    colors: dict[str, Any] | None = None
    font_family: dict[str, list[str]] | None = None
    keyframes: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)
    animation: dict[str, str] = field(default_factory=dict)
    background_image: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ThemeExtension:
        """Build an extension from a camelCase (or snake_case) config mapping."""
        if not data:
            return cls()
        colors = _lookup(data, "colors")
        fonts = _lookup(data, "font_family")
        keyframes = _lookup(data, "keyframes") or {}
        animation = _lookup(data, "animation") or {}
        images = _lookup(data, "background_image") or {}
        return cls(
            colors=dict(colors) if isinstance(colors, Mapping) and colors else None,
            font_family=(
                {str(k): _font_stack(v) for k, v in fonts.items()}
                if isinstance(fonts, Mapping) and fonts
                else None
            ),
            keyframes={
                str(name): {
                    str(offset): {str(p): str(v) for p, v in props.items()}
                    for offset, props in frames.items()
                    if isinstance(props, Mapping)
                }
                for name, frames in keyframes.items()
                if isinstance(frames, Mapping)
            },
            animation={str(k): str(v) for k, v in animation.items()},
            background_image={str(k): str(v) for k, v in images.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase config form, omitting empty sections."""
        out: dict[str, Any] = {}
        if self.colors:
            out["colors"] = dict(self.colors)
        if self.font_family:
            out["fontFamily"] = {k: list(v) for k, v in self.font_family.items()}
        if self.keyframes:
            out["keyframes"] = self.keyframes
        if self.animation:
            out["animation"] = dict(self.animation)
        if self.background_image:
            out["backgroundImage"] = dict(self.background_image)
        return out

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()


def merge_theme(persisted: ThemeExtension, extracted: ThemeExtension) -> ThemeExtension:
    """Merge a persisted extension with one discovered in markup.

    ``colors`` and ``font_family`` are replaced wholesale by the extracted
    version when it has one. ``keyframes``, ``animation`` and
    ``background_image`` merge key by key with extracted entries winning.
    """
    return ThemeExtension(
        colors=extracted.colors if extracted.colors else persisted.colors,
        font_family=extracted.font_family if extracted.font_family else persisted.font_family,
        keyframes={**persisted.keyframes, **extracted.keyframes},
        animation={**persisted.animation, **extracted.animation},
        background_image={**persisted.background_image, **extracted.background_image},
    )
