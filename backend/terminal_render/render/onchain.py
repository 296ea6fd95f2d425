"""Network-free replicas of the contract's own token SVGs.

Used to check layout before minting. Every coordinate, class name and wrap
budget here mirrors what ``tokenURI`` returns, so a preview and the minted
token are interchangeable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from terminal_render.layout.timestamps import format_timestamp
from terminal_render.layout.wrap import wrap_feed_entry, wrap_labeled
from terminal_render.render.svg import escape_xml, svg_document

TOKEN_SIZE = 1000

# Message token
_MSG_TEXT_X = 60
_MSG_START_Y = 380
_MSG_LINE_HEIGHT = 60

# Feed token
_FEED_TEXT_X = 40
_FEED_START_Y = 100
_FEED_LINE_HEIGHT = 24
_FEED_MSG_SPACING = 20
_FEED_BOTTOM_Y = 960
FEED_MAX_MESSAGES = 15

_MESSAGE_STYLES = {
    ".title": "fill:#FFF;font-family:Courier New,monospace;font-size:24px;font-weight:bold",
    ".ts": "fill:#FFF;font-family:Courier New,monospace;font-size:48px",
    ".usr": "fill:#00FF00;font-family:Courier New,monospace;font-size:48px",
    ".msg": "fill:#FFF;font-family:Courier New,monospace;font-size:48px",
}

_FEED_STYLES = {
    ".title": "fill:#FFF;font-family:Courier New,monospace;font-size:18px;font-weight:bold",
    ".ts": "fill:#FFF;font-family:Courier New,monospace;font-size:18px",
    ".usr": "font-family:Courier New,monospace;font-size:18px",
    ".msg": "fill:#FFF;font-family:Courier New,monospace;font-size:18px",
}

_BACKGROUND = '<rect width="100%" height="100%" fill="#1A1A1A"/>'


@dataclass(frozen=True)
class PreviewMessage:
    username: str
    text: str
    timestamp: int
    # Bare hex as the contract stores it, e.g. "00FF00"
    color: str = "00FF00"


def message_svg(username: str, text: str, timestamp: int) -> str:
    """SVG for a single message token."""
    block = wrap_labeled(username, text)

    label, body = block.lines[0].segments
    parts = [
        f'<text x="{_MSG_TEXT_X}" y="{_MSG_START_Y}">'
        f'<tspan class="usr">{escape_xml(label.text)}</tspan>'
        f'<tspan class="msg">{escape_xml(body.text)}</tspan></text>'
    ]
    for i, line in enumerate(block.lines[1:], start=1):
        y = _MSG_START_Y + i * _MSG_LINE_HEIGHT
        parts.append(f'<text x="{_MSG_TEXT_X}" y="{y}" class="msg">{escape_xml(line.text)}</text>')

    return svg_document(
        TOKEN_SIZE,
        TOKEN_SIZE,
        [
            _BACKGROUND,
            f'<text x="{_MSG_TEXT_X}" y="70" class="title">Public_Terminal</text>',
            f'<text x="{_MSG_TEXT_X}" y="280" class="ts">[{format_timestamp(timestamp)}]</text>',
            "".join(parts),
        ],
        styles=_MESSAGE_STYLES,
    )


def feed_svg(messages: Sequence[PreviewMessage]) -> str:
    """SVG for a feed token: newest-first messages until the canvas runs out."""
    count = min(len(messages), FEED_MAX_MESSAGES)
    content: list[str] = []
    y = _FEED_START_Y

    for m in messages[:count]:
        if y >= _FEED_BOTTOM_Y:
            break

        content.append(
            f'<text x="{_FEED_TEXT_X}" y="{y}" class="ts">[{format_timestamp(m.timestamp)}]</text>'
        )
        y += _FEED_LINE_HEIGHT

        block = wrap_feed_entry(m.username, m.text)
        for j, line in enumerate(block.lines):
            if y >= _FEED_BOTTOM_Y:
                break
            if j == 0:
                label, body = line.segments
                content.append(
                    f'<text x="{_FEED_TEXT_X}" y="{y}">'
                    f'<tspan fill="#{escape_xml(m.color.lstrip("#"))}" class="usr">{escape_xml(label.text)}</tspan>'
                    f'<tspan class="msg">{escape_xml(body.text)}</tspan></text>'
                )
            else:
                content.append(
                    f'<text x="{_FEED_TEXT_X}" y="{y}" class="msg">{escape_xml(line.text)}</text>'
                )
            y += _FEED_LINE_HEIGHT

        y += _FEED_MSG_SPACING

    if count == 0:
        content = [f'<text x="{_FEED_TEXT_X}" y="{_FEED_START_Y}" class="msg">No transmissions yet...</text>']

    return svg_document(
        TOKEN_SIZE,
        TOKEN_SIZE,
        [
            _BACKGROUND,
            f'<text x="{_FEED_TEXT_X}" y="50" class="title">Public_Terminal</text>',
            "".join(content),
        ],
        styles=_FEED_STYLES,
    )
