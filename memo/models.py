"""Shared data classes used across memo's store, selector and session."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Record:
    path: str
    subject: str = ""
    last_reviewed: date | None = None
    review_count: int = 0


@dataclass
class ScoredRecord:
    record: Record
    weight: float


@dataclass(frozen=True)
class SessionConfig:
    today: date
    dry: bool = False
    top_n: int | None = None
    count: int = 3
    subject: str | None = None
    weighted: bool = False
    seed: int | None = None
    prune: bool = False
