"""Ledger read capability consumed by the feed assembler and the API."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from terminal_render.models.records import ReadResult


class Ledger(Protocol):
    """Read-only view of the message contract.

    Implementations never raise for a missing or failing identifier; they
    return an absent ``ReadResult`` instead.
    """

    async def read_record(self, record_id: int) -> ReadResult:
        ...

    async def read_many(self, record_ids: Sequence[int]) -> list[ReadResult]:
        """One result per requested id, in request order."""
        ...

    async def read_count(self) -> int | None:
        """Total minted messages, or None when unavailable."""
        ...
