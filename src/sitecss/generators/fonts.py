"""``@font-face`` rules for locally hosted fonts."""

from __future__ import annotations

from typing import Iterable

from sitecss.model.site import FontDescriptor


def font_face(font: FontDescriptor) -> str:
    return (
        "@font-face {\n"
        f"  font-family: '{font.family}';\n"
        f"  src: url('{font.path}') format('{font.format}');\n"
        f"  font-weight: {font.weight};\n"
        f"  font-style: {font.style};\n"
        "  font-display: swap;\n"
        "}"
    )


def generate_font_faces(fonts: Iterable[FontDescriptor]) -> str:
    return "\n".join(font_face(font) for font in fonts)
