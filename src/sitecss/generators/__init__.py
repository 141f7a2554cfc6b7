"""Section generators that bypass the compilation tiers."""

from sitecss.generators.fonts import font_face, generate_font_faces
from sitecss.generators.reset import BASE_RESET, generate_base_css
from sitecss.generators.theme import (
    generate_animation_utilities,
    generate_background_utilities,
    generate_keyframes,
    generate_theme_utilities,
)
from sitecss.generators.tokens import DesignTokens, generate_design_tokens_css

__all__ = [
    "BASE_RESET",
    "DesignTokens",
    "font_face",
    "generate_animation_utilities",
    "generate_background_utilities",
    "generate_base_css",
    "generate_design_tokens_css",
    "generate_font_faces",
    "generate_keyframes",
    "generate_theme_utilities",
]
