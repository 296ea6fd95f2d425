"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from terminal_render.models.records import ReadResult, Record

BASE_TS = 1737909240  # 2025.01.26 16:34 UTC
AUTHOR = "0x" + "ab" * 20


def make_record(
    record_id: int,
    username: str | None = None,
    text: str | None = None,
    color: str = "#00ff00",
    timestamp: int | None = None,
) -> Record:
    return Record(
        id=record_id,
        author=AUTHOR,
        fid=1000 + record_id,
        username=username or f"user{record_id}",
        text=text or f"message number {record_id}",
        timestamp=timestamp if timestamp is not None else BASE_TS + record_id * 60,
        color=color,
    )


class FakeLedger:
    """In-memory ledger. Ids in ``failing`` behave like a reverted call."""

    def __init__(
        self,
        records: dict[int, Record] | None = None,
        failing: set[int] | None = None,
        count: int | None = None,
    ) -> None:
        self.records = records or {}
        self.failing = failing or set()
        self.count = count
        self.requested: list[list[int]] = []
        self.count_reads = 0

    def _one(self, record_id: int) -> ReadResult:
        if record_id in self.failing:
            return ReadResult(record_id, error="execution reverted")
        record = self.records.get(record_id)
        if record is None:
            return ReadResult(record_id, error="not minted")
        return ReadResult(record_id, record=record)

    async def read_many(self, record_ids: Sequence[int]) -> list[ReadResult]:
        self.requested.append(list(record_ids))
        return [self._one(rid) for rid in record_ids]

    async def read_record(self, record_id: int) -> ReadResult:
        return (await self.read_many([record_id]))[0]

    async def read_count(self) -> int | None:
        self.count_reads += 1
        return self.count


def cairo_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


@pytest.fixture
def ledger() -> FakeLedger:
    """Records 8..11 minted, 7 reverting, nothing above 11."""
    return FakeLedger(
        records={i: make_record(i) for i in (8, 9, 10, 11)},
        failing={7},
        count=11,
    )


@pytest.fixture
def full_ledger() -> FakeLedger:
    return FakeLedger(records={i: make_record(i) for i in range(1, 21)}, count=20)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
