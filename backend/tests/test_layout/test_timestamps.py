"""Tests for UTC timestamp formatting."""

from terminal_render.layout.timestamps import format_iso, format_timestamp


def test_reference_timestamp():
    assert format_timestamp(1737909240) == "2025.01.26 16:34"


def test_with_seconds():
    assert format_timestamp(1737909240, with_seconds=True) == "2025.01.26 16:34:00"


def test_zero_padding():
    # 2024-01-02 03:04:05 UTC
    assert format_timestamp(1704164645, with_seconds=True) == "2024.01.02 03:04:05"


def test_epoch():
    assert format_timestamp(0) == "1970.01.01 00:00"


def test_out_of_range_is_deterministic():
    huge = 10**20
    assert format_timestamp(huge) == "0000.00.00 00:00"
    assert format_timestamp(huge) == format_timestamp(huge)
    assert format_timestamp(huge, with_seconds=True) == "0000.00.00 00:00:00"


def test_iso():
    assert format_iso(1737909240) == "2025-01-26T16:34:00.000Z"
