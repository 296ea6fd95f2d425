"""Feed context: the target record plus its neighbors, ready to render.

A just-minted message is often not served by the RPC node yet. The client
that wrote it passes its own copy as fallback fields; those only fill the
gap when the ledger has nothing for the target. Ledger data always wins.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from terminal_render.layout.colors import DEFAULT_ACCENT, ensure_contrast
from terminal_render.layout.timestamps import format_timestamp, now_seconds
from terminal_render.ledger.protocols import Ledger
from terminal_render.models.records import FallbackFields, FeedEntry, FeedWindow, Record

logger = logging.getLogger(__name__)

# Window half-widths by artifact size.
WIDE_HALF_WIDTH = 3
COMPACT_HALF_WIDTH = 1


def candidate_ids(target_id: int, half_width: int) -> list[int]:
    """Ids ``target-k .. target+k``, dropping anything below 1."""
    return [i for i in range(target_id - half_width, target_id + half_width + 1) if i >= 1]


def entry_from_record(record: Record) -> FeedEntry:
    return FeedEntry(
        id=record.id,
        username=record.username,
        text=record.text,
        color=ensure_contrast(record.color),
        timestamp=format_timestamp(record.timestamp),
        posted_at=record.timestamp,
    )


def entry_from_fallback(target_id: int, fallback: FallbackFields) -> FeedEntry:
    timestamp = fallback.timestamp if fallback.timestamp is not None else now_seconds()
    return FeedEntry(
        id=target_id,
        username=fallback.username,
        text=fallback.text,
        color=ensure_contrast(fallback.color or DEFAULT_ACCENT),
        timestamp=format_timestamp(timestamp),
        posted_at=timestamp,
        synthesized=True,
    )


def merge_fallback(
    entries: list[FeedEntry],
    target_id: int,
    fallback: FallbackFields | None,
) -> list[FeedEntry]:
    """Add a synthesized target entry when the ledger did not return one."""
    if any(e.id == target_id for e in entries):
        return entries
    if fallback is None or not fallback.usable:
        return entries
    logger.info("Record %d not on ledger yet, using client fallback", target_id)
    return [*entries, entry_from_fallback(target_id, fallback)]


async def assemble_window(
    ledger: Ledger,
    target_id: int,
    half_width: int = WIDE_HALF_WIDTH,
    fallback: FallbackFields | None = None,
    total: int | None = None,
) -> FeedWindow:
    """Read the window around ``target_id`` and merge in fallback data.

    Failed reads are simply left out. The result is sorted ascending by id
    with no duplicates; check ``FeedWindow.resolvable`` before rendering it
    as a highlighted feed.
    """
    ids = candidate_ids(target_id, half_width)
    results = await ledger.read_many(ids) if ids else []

    by_id: dict[int, FeedEntry] = {}
    for result in results:
        if not result.ok or result.record_id in by_id:
            continue
        # Key by requested id so a misbehaving node cannot duplicate slots
        entry = entry_from_record(result.record)  # type: ignore[arg-type]
        if entry.id != result.record_id:
            entry = replace(entry, id=result.record_id)
        by_id[result.record_id] = entry

    entries = merge_fallback(list(by_id.values()), target_id, fallback)
    entries.sort(key=lambda e: e.id)

    window = FeedWindow(target_id=target_id, entries=entries, total=total)
    logger.debug(
        "Window for %d: %d/%d candidates, target %s",
        target_id,
        len(entries),
        len(ids),
        "resolved" if window.resolvable else "missing",
    )
    return window
