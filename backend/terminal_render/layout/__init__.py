"""Text layout primitives shared by on-chain previews and social images."""

from terminal_render.layout.colors import DEFAULT_ACCENT, bytes3_to_hex, ensure_contrast
from terminal_render.layout.timestamps import format_iso, format_timestamp
from terminal_render.layout.wrap import (
    BODY,
    LABEL,
    RenderableLine,
    WrappedBlock,
    wrap_feed_entry,
    wrap_labeled,
    wrap_words,
)

__all__ = [
    "DEFAULT_ACCENT",
    "bytes3_to_hex",
    "ensure_contrast",
    "format_iso",
    "format_timestamp",
    "BODY",
    "LABEL",
    "RenderableLine",
    "WrappedBlock",
    "wrap_feed_entry",
    "wrap_labeled",
    "wrap_words",
]
