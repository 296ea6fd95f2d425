"""Small SVG building helpers shared by the artifact renderers."""

from __future__ import annotations

import math

SVG_NS = "http://www.w3.org/2000/svg"

# Courier New advance width is 0.6em for every glyph.
MONO_CHAR_WIDTH_EM = 0.6

MONO_FONT = "Courier New,monospace"


def escape_xml(text: str) -> str:
    """Escape text for element content and attribute values."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def mono_budget(column_px: float, font_px: float) -> int:
    """Characters of a monospace font that fit in ``column_px``."""
    return max(1, math.floor(column_px / (font_px * MONO_CHAR_WIDTH_EM)))


def svg_document(
    width: int,
    height: int,
    body: list[str],
    styles: dict[str, str] | None = None,
    defs: list[str] | None = None,
) -> str:
    """Wrap body elements in an ``<svg>`` root with optional CSS classes."""
    lines = [
        f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]
    if styles:
        lines.append("<style>")
        for selector, props in styles.items():
            lines.append(f"{selector}{{{props}}}")
        lines.append("</style>")
    if defs:
        lines.append("<defs>")
        lines.extend(defs)
        lines.append("</defs>")
    lines.extend(body)
    lines.append("</svg>")
    return "\n".join(lines)
