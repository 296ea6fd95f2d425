"""Artifact engine: resolves records and dispatches to a renderer.

All ledger I/O happens here, before any renderer runs. Renderers in
``render.social`` and ``render.onchain`` are pure.

Mode precedence:
    target given and resolvable → FEED_WINDOW (half-width > 0)
                                 → SINGLE_MESSAGE (half-width 0)
    otherwise                   → PROMOTIONAL
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from terminal_render.feed.context import COMPACT_HALF_WIDTH, WIDE_HALF_WIDTH, assemble_window
from terminal_render.ledger.protocols import Ledger
from terminal_render.models.records import FallbackFields, FeedWindow
from terminal_render.render import onchain, social
from terminal_render.render.rasterizer import svg_to_png

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
PNG_MEDIA_TYPE = "image/png"


class RenderMode(str, enum.Enum):
    SINGLE_MESSAGE = "single_message"
    FEED_WINDOW = "feed_window"
    PROMOTIONAL = "promotional"
    TOKEN_PREVIEW = "token_preview"


class ArtifactSize(str, enum.Enum):
    WIDE = "wide"  # 7-record window, 1200×800
    COMPACT = "compact"  # 3-record window, 1200×630
    SINGLE = "single"  # target only, receipt layout

    @property
    def half_width(self) -> int:
        return {
            ArtifactSize.WIDE: WIDE_HALF_WIDTH,
            ArtifactSize.COMPACT: COMPACT_HALF_WIDTH,
            ArtifactSize.SINGLE: 0,
        }[self]

    @property
    def canvas_height(self) -> int:
        return social.FEED_WIDE_HEIGHT if self is ArtifactSize.WIDE else social.OG_HEIGHT


class OutputFormat(str, enum.Enum):
    PNG = "png"
    SVG = "svg"


@dataclass(frozen=True)
class ArtifactRequest:
    target_id: int | None = None
    total: int | None = None
    fallback: FallbackFields | None = None
    size: ArtifactSize = ArtifactSize.WIDE
    format: OutputFormat = OutputFormat.PNG


@dataclass(frozen=True)
class RenderedArtifact:
    content: bytes
    media_type: str
    width: int
    height: int
    mode: RenderMode


def select_mode(window: FeedWindow | None, half_width: int) -> RenderMode:
    if window is None or not window.resolvable:
        return RenderMode.PROMOTIONAL
    if half_width > 0:
        return RenderMode.FEED_WINDOW
    return RenderMode.SINGLE_MESSAGE


def finish(svg: str, width: int, height: int, mode: RenderMode, fmt: OutputFormat) -> RenderedArtifact:
    if fmt is OutputFormat.PNG:
        return RenderedArtifact(svg_to_png(svg, width, height), PNG_MEDIA_TYPE, width, height, mode)
    return RenderedArtifact(svg.encode("utf-8"), SVG_MEDIA_TYPE, width, height, mode)


class ArtifactEngine:
    """Entry point for rendered artifacts.

    Args:
        ledger: Read capability used for windowed and single-record renders.
    """

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger

    async def render(self, request: ArtifactRequest) -> RenderedArtifact:
        window: FeedWindow | None = None
        half_width = request.size.half_width

        if request.target_id is not None and request.target_id >= 1:
            window = await assemble_window(
                self.ledger,
                request.target_id,
                half_width=half_width,
                fallback=request.fallback,
                total=request.total,
            )

        mode = select_mode(window, half_width)
        logger.info(
            "Rendering %s for target=%s size=%s",
            mode.value,
            request.target_id,
            request.size.value,
        )

        if mode is RenderMode.FEED_WINDOW:
            svg, w, h = social.feed_window_svg(window, height=request.size.canvas_height)  # type: ignore[arg-type]
        elif mode is RenderMode.SINGLE_MESSAGE:
            total = request.total
            if total is None:
                total = await self.ledger.read_count()
            svg, w, h = social.receipt_svg(window.target, total=total)  # type: ignore[union-attr, arg-type]
        else:
            svg, w, h = social.promotional_svg()

        return finish(svg, w, h, mode, request.format)

    @staticmethod
    def preview_message(username: str, text: str, timestamp: int) -> RenderedArtifact:
        """Message token SVG without touching the ledger."""
        svg = onchain.message_svg(username, text, timestamp)
        return finish(svg, onchain.TOKEN_SIZE, onchain.TOKEN_SIZE, RenderMode.TOKEN_PREVIEW, OutputFormat.SVG)

    @staticmethod
    def preview_feed(messages: Sequence[onchain.PreviewMessage]) -> RenderedArtifact:
        """Feed token SVG without touching the ledger."""
        svg = onchain.feed_svg(messages)
        return finish(svg, onchain.TOKEN_SIZE, onchain.TOKEN_SIZE, RenderMode.TOKEN_PREVIEW, OutputFormat.SVG)
