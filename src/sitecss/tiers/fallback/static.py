"""Fixed utility names that map to fixed declarations."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

Declarations = tuple[tuple[str, str], ...]

_TRANSITION_TIMING = ("transition-timing-function", "cubic-bezier(0.4, 0, 0.2, 1)")
_TRANSITION_DURATION = ("transition-duration", "150ms")

STATIC_UTILITIES: Mapping[str, Declarations] = MappingProxyType({
    # Display
    "block": (("display", "block"),),
    "inline-block": (("display", "inline-block"),),
    "inline": (("display", "inline"),),
    "flex": (("display", "flex"),),
    "inline-flex": (("display", "inline-flex"),),
    "grid": (("display", "grid"),),
    "inline-grid": (("display", "inline-grid"),),
    "table": (("display", "table"),),
    "contents": (("display", "contents"),),
    "hidden": (("display", "none"),),
    # Flexbox
    "flex-row": (("flex-direction", "row"),),
    "flex-row-reverse": (("flex-direction", "row-reverse"),),
    "flex-col": (("flex-direction", "column"),),
    "flex-col-reverse": (("flex-direction", "column-reverse"),),
    "flex-wrap": (("flex-wrap", "wrap"),),
    "flex-nowrap": (("flex-wrap", "nowrap"),),
    "flex-1": (("flex", "1 1 0%"),),
    "flex-auto": (("flex", "1 1 auto"),),
    "flex-initial": (("flex", "0 1 auto"),),
    "flex-none": (("flex", "none"),),
    "grow": (("flex-grow", "1"),),
    "grow-0": (("flex-grow", "0"),),
    "shrink": (("flex-shrink", "1"),),
    "shrink-0": (("flex-shrink", "0"),),
    "items-start": (("align-items", "flex-start"),),
    "items-end": (("align-items", "flex-end"),),
    "items-center": (("align-items", "center"),),
    "items-baseline": (("align-items", "baseline"),),
    "items-stretch": (("align-items", "stretch"),),
    "justify-start": (("justify-content", "flex-start"),),
    "justify-end": (("justify-content", "flex-end"),),
    "justify-center": (("justify-content", "center"),),
    "justify-between": (("justify-content", "space-between"),),
    "justify-around": (("justify-content", "space-around"),),
    "justify-evenly": (("justify-content", "space-evenly"),),
    "self-auto": (("align-self", "auto"),),
    "self-start": (("align-self", "flex-start"),),
    "self-end": (("align-self", "flex-end"),),
    "self-center": (("align-self", "center"),),
    "self-stretch": (("align-self", "stretch"),),
    "place-items-center": (("place-items", "center"),),
    # Position
    "static": (("position", "static"),),
    "relative": (("position", "relative"),),
    "absolute": (("position", "absolute"),),
    "fixed": (("position", "fixed"),),
    "sticky": (("position", "sticky"),),
    # Visibility, overflow
    "visible": (("visibility", "visible"),),
    "invisible": (("visibility", "hidden"),),
    "overflow-hidden": (("overflow", "hidden"),),
    "overflow-auto": (("overflow", "auto"),),
    "overflow-scroll": (("overflow", "scroll"),),
    "overflow-visible": (("overflow", "visible"),),
    "overflow-x-auto": (("overflow-x", "auto"),),
    "overflow-y-auto": (("overflow-y", "auto"),),
    "overflow-x-hidden": (("overflow-x", "hidden"),),
    "overflow-y-hidden": (("overflow-y", "hidden"),),
    # Typography
    "text-left": (("text-align", "left"),),
    "text-center": (("text-align", "center"),),
    "text-right": (("text-align", "right"),),
    "text-justify": (("text-align", "justify"),),
    "italic": (("font-style", "italic"),),
    "not-italic": (("font-style", "normal"),),
    "underline": (("text-decoration-line", "underline"),),
    "line-through": (("text-decoration-line", "line-through"),),
    "no-underline": (("text-decoration-line", "none"),),
    "uppercase": (("text-transform", "uppercase"),),
    "lowercase": (("text-transform", "lowercase"),),
    "capitalize": (("text-transform", "capitalize"),),
    "normal-case": (("text-transform", "none"),),
    "truncate": (
        ("overflow", "hidden"),
        ("text-overflow", "ellipsis"),
        ("white-space", "nowrap"),
    ),
    "whitespace-nowrap": (("white-space", "nowrap"),),
    "whitespace-normal": (("white-space", "normal"),),
    "whitespace-pre-line": (("white-space", "pre-line"),),
    "break-words": (("overflow-wrap", "break-word"),),
    "antialiased": (
        ("-webkit-font-smoothing", "antialiased"),
        ("-moz-osx-font-smoothing", "grayscale"),
    ),
    "font-sans": (("font-family", 'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", "Segoe UI Emoji"'),),
    "font-serif": (("font-family", 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif'),),
    "font-mono": (("font-family", 'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace'),),
    "list-none": (("list-style-type", "none"),),
    "list-disc": (("list-style-type", "disc"),),
    "list-decimal": (("list-style-type", "decimal"),),
    # Borders
    "border-solid": (("border-style", "solid"),),
    "border-dashed": (("border-style", "dashed"),),
    "border-dotted": (("border-style", "dotted"),),
    "border-none": (("border-style", "none"),),
    # Images
    "object-cover": (("object-fit", "cover"),),
    "object-contain": (("object-fit", "contain"),),
    "object-center": (("object-position", "center"),),
    "bg-cover": (("background-size", "cover"),),
    "bg-contain": (("background-size", "contain"),),
    "bg-center": (("background-position", "center"),),
    "bg-no-repeat": (("background-repeat", "no-repeat"),),
    "bg-fixed": (("background-attachment", "fixed"),),
    # Interaction
    "cursor-pointer": (("cursor", "pointer"),),
    "cursor-default": (("cursor", "default"),),
    "cursor-not-allowed": (("cursor", "not-allowed"),),
    "pointer-events-none": (("pointer-events", "none"),),
    "pointer-events-auto": (("pointer-events", "auto"),),
    "select-none": (("user-select", "none"),),
    # Transitions
    "transition": (
        ("transition-property", "color, background-color, border-color, text-decoration-color, fill, stroke, opacity, box-shadow, transform, filter, backdrop-filter"),
        _TRANSITION_TIMING,
        _TRANSITION_DURATION,
    ),
    "transition-all": (("transition-property", "all"), _TRANSITION_TIMING, _TRANSITION_DURATION),
    "transition-colors": (
        ("transition-property", "color, background-color, border-color, text-decoration-color, fill, stroke"),
        _TRANSITION_TIMING,
        _TRANSITION_DURATION,
    ),
    "transition-opacity": (("transition-property", "opacity"), _TRANSITION_TIMING, _TRANSITION_DURATION),
    "transition-transform": (("transition-property", "transform"), _TRANSITION_TIMING, _TRANSITION_DURATION),
    "transition-none": (("transition-property", "none"),),
    "ease-linear": (("transition-timing-function", "linear"),),
    "ease-in": (("transition-timing-function", "cubic-bezier(0.4, 0, 1, 1)"),),
    "ease-out": (("transition-timing-function", "cubic-bezier(0, 0, 0.2, 1)"),),
    "ease-in-out": (_TRANSITION_TIMING,),
    # Accessibility
    "sr-only": (
        ("position", "absolute"),
        ("width", "1px"),
        ("height", "1px"),
        ("padding", "0"),
        ("margin", "-1px"),
        ("overflow", "hidden"),
        ("clip", "rect(0, 0, 0, 0)"),
        ("white-space", "nowrap"),
        ("border-width", "0"),
    ),
})
