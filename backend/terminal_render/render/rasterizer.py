"""SVG → PNG rasterization for social preview images."""

from __future__ import annotations

import io
import logging

logger = logging.getLogger(__name__)


class RenderBackendError(RuntimeError):
    """The rasterization backend (cairo / Pillow) is missing or failed."""


def svg_to_png(svg: str, width: int, height: int) -> bytes:
    """Rasterize ``svg`` at ``width``×``height`` into an opaque RGB PNG.

    Raises:
        RenderBackendError: cairo is unavailable or could not render the document.
    """
    try:
        import cairosvg
        from PIL import Image
    except (ImportError, OSError) as e:
        # cairocffi raises OSError when libcairo itself is missing
        raise RenderBackendError(f"Rasterizer unavailable: {e}") from e

    try:
        png_bytes = cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
        img = Image.open(io.BytesIO(png_bytes)).convert("RGB")
        out = io.BytesIO()
        img.save(out, format="PNG", optimize=True)
    except Exception as e:
        logger.error("Rasterization failed (%dx%d): %s", width, height, e)
        raise RenderBackendError(f"Rasterization failed: {e}") from e

    return out.getvalue()
