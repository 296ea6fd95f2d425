"""Username color normalization against the dark terminal canvas.

The constants below match the on-chain renderer so labels in social images
look the same as on minted tokens.
"""

from __future__ import annotations

import math
import re

DEFAULT_ACCENT = "#00FF00"

# Perceptual luma weights (ITU-R BT.601).
_LUMA_R = 0.299
_LUMA_G = 0.587
_LUMA_B = 0.114

# Below this luminance the label is rescaled.
_MIN_LUMINANCE = 0.15
# Target luminance the rescale aims for.
_TARGET_LUMINANCE = 0.4
# Channels all below this count as black.
_NEAR_BLACK_CHANNEL = 10
# Used only when luminance is exactly zero.
_ZERO_LUMINANCE_FACTOR = 3.0

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def bytes3_to_hex(raw: str | bytes) -> str:
    """Convert a ledger ``bytes3`` value to ``#rrggbb``.

    Accepts the raw 3 bytes or a ``0x``-prefixed hex string; short hex is
    left-padded with zeros.
    """
    if isinstance(raw, (bytes, bytearray)):
        digits = bytes(raw).hex()
    else:
        digits = raw[2:] if raw.lower().startswith("0x") else raw
    return f"#{digits.zfill(6)}"


def parse_hex_color(value: str | None) -> tuple[int, int, int] | None:
    """Parse ``#rrggbb`` into channels, or None if malformed."""
    if not value or not _HEX_COLOR_RE.match(value):
        return None
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


def luminance(r: int, g: int, b: int) -> float:
    return (_LUMA_R * r + _LUMA_G * g + _LUMA_B * b) / 255


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def ensure_contrast(value: str | None) -> str:
    """Return a label color readable on the dark canvas.

    Malformed input and near-black colors map to ``DEFAULT_ACCENT``. Dark
    colors are scaled up toward the target luminance, preserving hue; all
    other colors are returned unchanged.
    """
    channels = parse_hex_color(value)
    if channels is None:
        return DEFAULT_ACCENT

    r, g, b = channels
    if r < _NEAR_BLACK_CHANNEL and g < _NEAR_BLACK_CHANNEL and b < _NEAR_BLACK_CHANNEL:
        return DEFAULT_ACCENT

    lum = luminance(r, g, b)
    if lum >= _MIN_LUMINANCE:
        return value  # type: ignore[return-value]

    factor = _TARGET_LUMINANCE / lum if lum > 0 else _ZERO_LUMINANCE_FACTOR
    scaled = [min(255, _round_half_up(c * factor)) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in scaled)
