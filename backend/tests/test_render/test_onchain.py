"""Tests for the token SVG replicas."""

import re
import xml.etree.ElementTree as ET

from terminal_render.render.onchain import FEED_MAX_MESSAGES, PreviewMessage, feed_svg, message_svg
from tests.conftest import BASE_TS


def _text_ys(svg: str) -> list[int]:
    return [int(y) for y in re.findall(r'<text x="\d+" y="(\d+)"', svg)]


def test_message_token_layout():
    svg = message_svg("alice", "hello world", BASE_TS)
    ET.fromstring(svg)

    assert 'width="1000" height="1000"' in svg
    assert '<text x="60" y="70" class="title">Public_Terminal</text>' in svg
    assert '<text x="60" y="280" class="ts">[2025.01.26 16:34]</text>' in svg
    assert '<tspan class="usr">&lt;alice&gt; </tspan><tspan class="msg">hello world</tspan>' in svg


def test_message_token_continuation_lines():
    svg = message_svg("alice", "aaaa bbbb cccc dddd eeee ffff gggg", BASE_TS)
    assert '<text x="60" y="440" class="msg">eeee ffff gggg</text>' in svg


def test_message_token_escapes_markup():
    svg = message_svg("<b>", "a & b <i>", BASE_TS)
    ET.fromstring(svg)
    assert "<b>" not in svg
    assert "a &amp; b &lt;i&gt;" in svg


def test_feed_token_empty():
    svg = feed_svg([])
    ET.fromstring(svg)
    assert "No transmissions yet..." in svg


def test_feed_token_uses_stored_color():
    svg = feed_svg([PreviewMessage("bob", "gm", BASE_TS, color="FF00FF")])
    assert '<tspan fill="#FF00FF" class="usr">&lt;bob&gt;</tspan><tspan class="msg"> gm</tspan>' in svg
    assert '<text x="40" y="100" class="ts">[2025.01.26 16:34]</text>' in svg


def test_feed_token_stops_at_canvas_bottom():
    long_text = "lorem ipsum dolor sit amet " * 10
    messages = [PreviewMessage(f"u{i}", long_text, BASE_TS + i) for i in range(30)]
    svg = feed_svg(messages)
    ET.fromstring(svg)

    assert all(y < 960 for y in _text_ys(svg))
    assert svg.count('class="ts"') < FEED_MAX_MESSAGES


def test_feed_token_fills_until_bottom():
    # One-line entries take 68px each starting at y=100
    messages = [PreviewMessage(f"u{i}", "hi", BASE_TS) for i in range(20)]
    svg = feed_svg(messages)
    assert svg.count('class="ts">[') == 13


def test_feed_token_escapes_color():
    svg = feed_svg([PreviewMessage("bob", "gm", BASE_TS, color='00FF00" onload="x')])
    ET.fromstring(svg)
    assert 'onload="x"' not in svg
