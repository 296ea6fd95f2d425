"""Ledger records and the request-scoped views derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Record:
    """A minted message as stored by the contract."""

    id: int
    author: str
    fid: int
    username: str
    text: str
    # Unix seconds
    timestamp: int
    # Raw username color as #rrggbb (not yet contrast-adjusted)
    color: str


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one identifier. Absence carries no exception."""

    record_id: int
    record: Record | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class FallbackFields:
    """Client-supplied copy of a just-written record the ledger may not serve yet."""

    username: str
    text: str
    color: str | None = None
    timestamp: int | None = None

    @property
    def usable(self) -> bool:
        return bool(self.username) and bool(self.text)


@dataclass(frozen=True)
class FeedEntry:
    id: int
    username: str
    text: str
    # Contrast-adjusted #rrggbb
    color: str
    # Display timestamp, YYYY.MM.DD HH:MM
    timestamp: str
    # Unix seconds behind ``timestamp``
    posted_at: int = 0
    synthesized: bool = False


@dataclass
class FeedWindow:
    target_id: int
    entries: list[FeedEntry] = field(default_factory=list)
    total: int | None = None

    @property
    def ids(self) -> list[int]:
        return [e.id for e in self.entries]

    @property
    def target(self) -> FeedEntry | None:
        for entry in self.entries:
            if entry.id == self.target_id:
                return entry
        return None

    @property
    def resolvable(self) -> bool:
        return self.target is not None
