"""Social preview images: feed window, transmission receipt, promotional card.

Each builder is a pure function from already-resolved data to an SVG string
plus its pixel size. Text layout goes through the same wrap engine as the
token itself; only budgets differ, derived from the column width and the
monospace advance.
"""

from __future__ import annotations

from terminal_render.layout.colors import DEFAULT_ACCENT
from terminal_render.layout.timestamps import format_timestamp
from terminal_render.layout.wrap import LABEL, RenderableLine, wrap_feed_entry, wrap_labeled
from terminal_render.models.records import FeedEntry, FeedWindow
from terminal_render.render.svg import MONO_FONT, escape_xml, mono_budget, svg_document

OG_WIDTH = 1200
OG_HEIGHT = 630
FEED_WIDE_HEIGHT = 800

TRUNCATION_MARK = "..."

_GRAY = "#808080"

# ── Feed window ──

_FEED_PAD_X = 40
_FEED_HEADER_Y = 70
_FEED_BODY_TOP = 110
_FEED_FOOTER_GAP = 70
_FEED_BORDER_W = 4
_FEED_TEXT_INDENT = 16  # border + paddingLeft
_FEED_FONT_PX = 28
_FEED_LINE_H = 36
_FEED_ENTRY_PAD = 4
_FEED_ENTRY_GAP = 8
_FEED_MAX_LINES = 3
_FEED_DIM_OPACITY = 0.5
_FEED_TARGET_BODY = "#E0E0E0"
_FEED_OTHER_BODY = "#A0A0A0"

_FEED_STYLES = {
    "text": f"font-family:{MONO_FONT}",
    ".title": "fill:#FFF;font-size:36px;font-weight:bold;font-style:italic",
    ".count": f"fill:{_GRAY};font-size:24px",
    ".entry": f"font-size:{_FEED_FONT_PX}px",
    ".usr": "font-weight:bold",
    ".foot": f"fill:{_GRAY};font-size:20px",
}

# ── Receipt ──

_RCPT_PAD_X = 50
_RCPT_BOX_TOP = 205
_RCPT_BOX_H = 330
_RCPT_BOX_PAD = 30
_RCPT_FONT_PX = 34
_RCPT_LINE_H = 48
_RCPT_MAX_LINES = 5

_RCPT_STYLES = {
    "text": f"font-family:{MONO_FONT}",
    ".brand": "fill:#FFF;font-size:42px;font-weight:bold;letter-spacing:2px",
    ".sub": f"fill:{_GRAY};font-size:20px",
    ".tx": f"fill:{DEFAULT_ACCENT};font-size:28px;font-weight:bold",
    ".of": f"fill:{_GRAY};font-size:18px",
    ".ts": f"fill:{_GRAY};font-size:24px",
    ".msg": f"fill:#C0C0C0;font-size:{_RCPT_FONT_PX}px",
    ".usr": "font-weight:bold",
    ".foot": f"fill:{_GRAY};font-size:18px",
    ".ok": f"fill:{DEFAULT_ACCENT};font-size:18px",
}

_SCANLINES = (
    '<pattern id="scan" width="2" height="2" patternUnits="userSpaceOnUse">'
    '<rect width="2" height="1" fill="#000" fill-opacity="0.15"/></pattern>'
)

# ── Promotional ──

_PROMO_STYLES = {
    "text": f"font-family:{MONO_FONT}",
    ".title": "fill:#FFF;font-size:32px;font-weight:bold;font-style:italic",
    ".tag": "fill:#C0C0C0;font-size:24px",
    ".btn": "fill:#FFF;font-size:18px;font-weight:bold",
}


def _line_tspans(line: RenderableLine, label_color: str, body_color: str) -> str:
    parts = []
    for seg in line.segments:
        if seg.role == LABEL:
            parts.append(f'<tspan class="usr" fill="{label_color}">{escape_xml(seg.text)}</tspan>')
        else:
            parts.append(f'<tspan fill="{body_color}">{escape_xml(seg.text)}</tspan>')
    return "".join(parts)


def _entry_lines(entry: FeedEntry) -> tuple[list[RenderableLine], bool]:
    budget = mono_budget(OG_WIDTH - 2 * _FEED_PAD_X - _FEED_TEXT_INDENT, _FEED_FONT_PX)
    block = wrap_feed_entry(entry.username, entry.text, line_budget=budget, max_lines=_FEED_MAX_LINES)
    return list(block.lines), block.truncated


def _entry_height(line_count: int) -> int:
    return line_count * _FEED_LINE_H + 2 * _FEED_ENTRY_PAD


def fit_around_target(heights: list[int], target_index: int, available: int) -> tuple[int, int]:
    """Pick the contiguous slice ``[start, end)`` of entries that fits ``available`` px.

    The target is always kept; neighbors are added alternately before and
    after it while they fit, so the target stays near the middle.
    """
    start, end = target_index, target_index + 1
    used = heights[target_index]
    prefer_before = True
    while True:
        can_before = start > 0 and used + heights[start - 1] + _FEED_ENTRY_GAP <= available
        can_after = end < len(heights) and used + heights[end] + _FEED_ENTRY_GAP <= available
        if not (can_before or can_after):
            return start, end
        if can_before and (prefer_before or not can_after):
            start -= 1
            used += heights[start] + _FEED_ENTRY_GAP
        else:
            used += heights[end] + _FEED_ENTRY_GAP
            end += 1
        prefer_before = not prefer_before


def feed_window_svg(window: FeedWindow, height: int = FEED_WIDE_HEIGHT) -> tuple[str, int, int]:
    """Feed-context image with the target highlighted and neighbors dimmed.

    Raises:
        ValueError: the window does not contain its target.
    """
    if not window.resolvable:
        raise ValueError(f"window has no entry for target {window.target_id}")

    body: list[str] = [
        '<rect width="100%" height="100%" fill="#1a1a1a"/>',
        f'<text x="{_FEED_PAD_X}" y="{_FEED_HEADER_Y}" class="title">Public_Terminal</text>',
    ]
    if window.total is not None:
        body.append(
            f'<text x="{OG_WIDTH - _FEED_PAD_X}" y="{_FEED_HEADER_Y}" class="count" '
            f'text-anchor="end">#{window.target_id} of {window.total}</text>'
        )

    laid_out = [(entry, *_entry_lines(entry)) for entry in window.entries]
    heights = [_entry_height(len(lines)) for _, lines, _ in laid_out]
    target_index = next(i for i, (e, _, _) in enumerate(laid_out) if e.id == window.target_id)
    available = height - _FEED_FOOTER_GAP - _FEED_BODY_TOP
    start, end = fit_around_target(heights, target_index, available)

    y = _FEED_BODY_TOP
    text_x = _FEED_PAD_X + _FEED_TEXT_INDENT
    for (entry, lines, truncated), entry_h in zip(laid_out[start:end], heights[start:end]):
        is_target = entry.id == window.target_id
        body_color = _FEED_TARGET_BODY if is_target else _FEED_OTHER_BODY

        opacity = "" if is_target else f' opacity="{_FEED_DIM_OPACITY}"'
        group = [f'<g class="entry"{opacity}>']
        if is_target:
            group.append(
                f'<rect x="{_FEED_PAD_X}" y="{y}" width="{_FEED_BORDER_W}" '
                f'height="{entry_h}" fill="{DEFAULT_ACCENT}"/>'
            )
        baseline = y + _FEED_ENTRY_PAD + _FEED_FONT_PX
        for j, line in enumerate(lines):
            spans = _line_tspans(line, entry.color, body_color)
            if truncated and j == len(lines) - 1:
                spans += f'<tspan fill="{body_color}">{TRUNCATION_MARK}</tspan>'
            group.append(f'<text x="{text_x}" y="{baseline + j * _FEED_LINE_H}">{spans}</text>')
        group.append("</g>")
        body.append("".join(group))

        y += entry_h + _FEED_ENTRY_GAP

    body.append(
        f'<text x="{_FEED_PAD_X}" y="{height - 30}" class="foot">'
        "Permanent on-chain transmissions on Base</text>"
    )
    return svg_document(OG_WIDTH, height, body, styles=_FEED_STYLES), OG_WIDTH, height


def receipt_svg(entry: FeedEntry, total: int | None = None) -> tuple[str, int, int]:
    """Transmission receipt for a single message."""
    right_x = OG_WIDTH - _RCPT_PAD_X
    body: list[str] = [
        '<rect width="100%" height="100%" fill="#0a0a0a"/>',
        f'<text x="{_RCPT_PAD_X}" y="82" class="brand">PUBLIC_TERMINAL</text>',
        f'<text x="{_RCPT_PAD_X}" y="112" class="sub">TRANSMISSION RECEIPT</text>',
        f'<text x="{right_x}" y="72" class="tx" text-anchor="end">TX #{entry.id}</text>',
    ]
    if total is not None:
        body.append(
            f'<text x="{right_x}" y="100" class="of" text-anchor="end">of {total} transmissions</text>'
        )
    body += [
        f'<line x1="{_RCPT_PAD_X}" y1="132" x2="{right_x}" y2="132" stroke="#333" stroke-width="2"/>',
        f'<text x="{_RCPT_PAD_X}" y="180" class="ts">'
        f"[{format_timestamp(entry.posted_at, with_seconds=True)}]</text>",
        f'<rect x="{_RCPT_PAD_X}" y="{_RCPT_BOX_TOP}" width="{OG_WIDTH - 2 * _RCPT_PAD_X}" '
        f'height="{_RCPT_BOX_H}" rx="8" fill="#151515" stroke="#333"/>',
    ]

    inner_w = OG_WIDTH - 2 * _RCPT_PAD_X - 2 * _RCPT_BOX_PAD
    block = wrap_labeled(
        entry.username,
        entry.text,
        line_budget=mono_budget(inner_w, _RCPT_FONT_PX),
        max_lines=_RCPT_MAX_LINES,
    )
    text_x = _RCPT_PAD_X + _RCPT_BOX_PAD
    baseline = _RCPT_BOX_TOP + _RCPT_BOX_PAD + _RCPT_FONT_PX
    for j, line in enumerate(block.lines):
        spans = _line_tspans(line, entry.color, "#C0C0C0")
        if block.truncated and j == len(block.lines) - 1:
            spans += f'<tspan fill="{_GRAY}">{TRUNCATION_MARK}</tspan>'
        body.append(f'<text x="{text_x}" y="{baseline + j * _RCPT_LINE_H}" class="msg">{spans}</text>')

    body += [
        f'<line x1="{_RCPT_PAD_X}" y1="560" x2="{right_x}" y2="560" stroke="#333"/>',
        f'<text x="{_RCPT_PAD_X}" y="595" class="foot">Permanent on-chain artifact on Base</text>',
        f'<text x="{right_x - 20}" y="595" class="ok" text-anchor="end">VERIFIED</text>',
        f'<circle cx="{right_x - 6}" cy="589" r="6" fill="{DEFAULT_ACCENT}"/>',
        '<rect width="100%" height="100%" fill="url(#scan)"/>',
    ]
    return svg_document(OG_WIDTH, OG_HEIGHT, body, styles=_RCPT_STYLES, defs=[_SCANLINES]), OG_WIDTH, OG_HEIGHT


def promotional_svg() -> tuple[str, int, int]:
    """Generic card used when no record can be shown."""
    body = [
        '<rect width="100%" height="100%" fill="#1a1a1a"/>',
        '<text x="50" y="92" class="title">Public_Terminal</text>',
        '<text x="50" y="170" class="tag">Mint a permanent text artifact to the global feed.</text>',
        f'<rect x="51" y="511" width="128" height="48" fill="#1a1a1a" stroke="{DEFAULT_ACCENT}" stroke-width="2"/>',
        '<text x="115" y="541" class="btn" text-anchor="middle">MINT</text>',
    ]
    return svg_document(OG_WIDTH, OG_HEIGHT, body, styles=_PROMO_STYLES), OG_WIDTH, OG_HEIGHT