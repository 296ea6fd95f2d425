"""UTC timestamp formatting shared by every rendered artifact."""

from __future__ import annotations

from datetime import datetime, timezone

# Deterministic placeholder for values datetime cannot represent.
_OUT_OF_RANGE = "0000.00.00 00:00"


def _to_utc(seconds: int) -> datetime | None:
    try:
        return datetime.fromtimestamp(int(seconds), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def format_timestamp(seconds: int, with_seconds: bool = False) -> str:
    """Format Unix seconds as ``YYYY.MM.DD HH:MM`` (optionally ``:SS``), always UTC."""
    dt = _to_utc(seconds)
    if dt is None:
        return _OUT_OF_RANGE + (":00" if with_seconds else "")

    out = (
        f"{dt.year:04d}.{dt.month:02d}.{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}"
    )
    if with_seconds:
        out += f":{dt.second:02d}"
    return out


def format_iso(seconds: int) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2025-01-26T16:34:00.000Z``."""
    dt = _to_utc(seconds)
    if dt is None:
        return "1970-01-01T00:00:00.000Z"
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.000Z"
    )


def now_seconds() -> int:
    return int(datetime.now(tz=timezone.utc).timestamp())
