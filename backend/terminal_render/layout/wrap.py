"""Fixed-width word wrapping that reproduces the on-chain token renderer.

Width is measured in characters, never glyphs: the contract assumes a
monospace font and so does every layout built from this module.

One greedy primitive (``wrap_words``) drives both modes:

- labeled mode: ``<username> `` prefix eats into the first line's budget,
  used by the single-message token and receipt.
- feed mode: ``<username> text`` wrapped as one string with a uniform
  budget, used for every entry in a feed.
"""

from __future__ import annotations

from dataclasses import dataclass

LABEL = "label"
BODY = "body"

# On-chain message token: 48px Courier on an 880px text column.
MESSAGE_LINE_BUDGET = 28
MESSAGE_MAX_LINES = 6
# First-line room for text when the label fills the whole line.
MIN_FIRST_LINE_BUDGET = 5

# On-chain feed token: 18px Courier on a 920px column.
FEED_LINE_BUDGET = 70
FEED_MAX_LINES = 3


@dataclass(frozen=True)
class WrappedText:
    lines: tuple[str, ...]
    # True when words were discarded at the line cap
    truncated: bool = False


@dataclass(frozen=True)
class LineSegment:
    text: str
    role: str = BODY


@dataclass(frozen=True)
class RenderableLine:
    segments: tuple[LineSegment, ...]

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)


@dataclass(frozen=True)
class WrappedBlock:
    lines: tuple[RenderableLine, ...]
    truncated: bool = False


def _has_content(words: list[str]) -> bool:
    return any(words)


def wrap_words(
    text: str,
    first_budget: int,
    other_budget: int,
    max_lines: int,
) -> WrappedText:
    """Greedy wrap of ``text`` into at most ``max_lines`` lines.

    Args:
        text: Input string, split on single spaces (runs of spaces survive).
        first_budget: Character budget for line 0.
        other_budget: Character budget for every later line.
        max_lines: Hard line cap; content beyond it is dropped.

    Returns:
        The wrapped lines and whether anything was dropped.
    """
    if first_budget < 1 or other_budget < 1 or max_lines < 1:
        raise ValueError("wrap budgets and line cap must be positive")

    def budget(index: int) -> int:
        return first_budget if index == 0 else other_budget

    words = text.split(" ")
    lines: list[str] = []
    current = ""
    truncated = False

    for i, word in enumerate(words):
        if len(lines) >= max_lines:
            truncated = truncated or _has_content(words[i:])
            break

        candidate = f"{current} {word}" if current else word
        if len(candidate) <= budget(len(lines)):
            current = candidate
            continue

        # Line is full
        if current:
            lines.append(current)
            current = ""
            if len(lines) >= max_lines:
                truncated = _has_content(words[i:])
                break

        if len(word) > budget(len(lines)):
            # Hard-split an oversized word across lines
            remaining = word
            while remaining and len(lines) < max_lines:
                width = budget(len(lines))
                lines.append(remaining[:width])
                remaining = remaining[width:]
            current = remaining
        else:
            current = word

    if current:
        if len(lines) < max_lines:
            lines.append(current)
        else:
            truncated = True

    return WrappedText(lines=tuple(lines), truncated=truncated)


def label_for(username: str) -> str:
    return f"<{username}>"


def wrap_labeled(
    username: str,
    text: str,
    line_budget: int = MESSAGE_LINE_BUDGET,
    max_lines: int = MESSAGE_MAX_LINES,
) -> WrappedBlock:
    """Wrap ``text`` behind a ``<username> `` label on the first line."""
    label = label_for(username) + " "
    if len(label) < line_budget:
        first_budget = line_budget - len(label)
    else:
        first_budget = MIN_FIRST_LINE_BUDGET

    wrapped = wrap_words(text, first_budget, line_budget, max_lines)
    first_body = wrapped.lines[0] if wrapped.lines else ""

    lines = [RenderableLine((LineSegment(label, LABEL), LineSegment(first_body, BODY)))]
    for line in wrapped.lines[1:]:
        lines.append(RenderableLine((LineSegment(line, BODY),)))
    return WrappedBlock(lines=tuple(lines), truncated=wrapped.truncated)


def wrap_feed_entry(
    username: str,
    text: str,
    line_budget: int = FEED_LINE_BUDGET,
    max_lines: int = FEED_MAX_LINES,
) -> WrappedBlock:
    """Wrap ``<username> text`` as one string, then split the label back out.

    A label longer than the line is hard-split like any other word; its
    characters keep the label role on every line they land on.
    """
    label = label_for(username)
    wrapped = wrap_words(f"{label} {text}", line_budget, line_budget, max_lines)

    lines: list[RenderableLine] = []
    pending = label
    for j, line in enumerate(wrapped.lines):
        n = 0
        while n < len(line) and n < len(pending) and line[n] == pending[n]:
            n += 1
        pending = pending[n:]
        # A break between label words consumes the space
        if pending.startswith(" "):
            pending = pending[1:]

        if j == 0:
            segments = (LineSegment(line[:n], LABEL), LineSegment(line[n:], BODY))
        elif n:
            segments = (LineSegment(line[:n], LABEL),)
            if line[n:]:
                segments += (LineSegment(line[n:], BODY),)
        else:
            segments = (LineSegment(line, BODY),)
        lines.append(RenderableLine(segments))
    return WrappedBlock(lines=tuple(lines), truncated=wrapped.truncated)
