"""Lenient query-parameter parsing for image routes.

Image routes never reject a request over a malformed parameter; the value
is treated as absent and the renderer falls back.
"""

from __future__ import annotations

from terminal_render.models.records import FallbackFields


def parse_int(value: str | None) -> int | None:
    """Non-negative integer from a query string value, or None."""
    if value is None:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)


def parse_id(value: str | None) -> int | None:
    """Positive record id, or None."""
    parsed = parse_int(value)
    return parsed if parsed is not None and parsed >= 1 else None


def parse_fallback(
    username: str | None,
    text: str | None,
    color: str | None,
    timestamp: str | None,
) -> FallbackFields | None:
    """Fallback fields when the caller sent at least a username and text."""
    if not username or not text:
        return None
    return FallbackFields(
        username=username,
        text=text,
        color=color or None,
        timestamp=parse_int(timestamp),
    )
