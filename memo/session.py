"""ReviewSession: one load, score, select, commit, save pass over the store."""

import dataclasses
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from memo.models import Record, ScoredRecord, SessionConfig
from memo.selector import display_order, select
from memo.store import RecordStore, prune, reconcile
from memo.weight import weight


class ReviewDateError(ValueError):
    """A review would be committed before a note's last review date."""


@dataclass
class SessionResult:
    chosen: list[ScoredRecord]
    scored: list[ScoredRecord]
    pool_size: int
    committed: bool
    pruned: list[Record] = field(default_factory=list)


class ReviewSession:
    """Orchestrates a single review run.

    Usage:
        session = ReviewSession(RecordStore(path), config, discovered=scan_vault(vault))
        result = session.run()

    ``discovered`` is the (path, subject) sequence from the vault scanner.
    When it is None the session works on stored records only.
    """

    def __init__(self, store: RecordStore, config: SessionConfig,
                 discovered: Iterable[tuple[str, str]] | None = None,
                 rng: random.Random | None = None):
        self.store = store
        self.config = config
        self.discovered = list(discovered) if discovered is not None else None
        self.rng = rng if rng is not None else random.Random(config.seed)

    def run(self) -> SessionResult:
        records = self.store.load()
        pruned: list[Record] = []
        if self.discovered is not None:
            records = reconcile(records, self.discovered)
            if self.config.prune:
                records, pruned = prune(records, (p for p, _ in self.discovered))

        today = self.config.today
        scored = [ScoredRecord(r, weight(r, today)) for r in records]
        chosen, _rest = select(scored, self.config, self.rng)
        if self.config.subject is None:
            pool_size = len(scored)
        else:
            pool_size = sum(1 for s in scored if s.record.subject == self.config.subject)

        committed = False
        if not self.config.dry:
            self._check_dates(chosen)
            chosen_paths = {s.record.path for s in chosen}
            records = [commit_review(r, today) if r.path in chosen_paths else r
                       for r in records]
            self.store.save(records)
            committed = True

        return SessionResult(chosen=display_order(chosen), scored=scored,
                             pool_size=pool_size, committed=committed, pruned=pruned)

    def _check_dates(self, chosen: list[ScoredRecord]):
        for s in chosen:
            last = s.record.last_reviewed
            if last is not None and last > self.config.today:
                raise ReviewDateError(
                    f"{s.record.path} was last reviewed on {last}, "
                    f"cannot commit a review dated {self.config.today}")


def commit_review(record: Record, today: date) -> Record:
    """The record as it stands after being reviewed on ``today``."""
    return dataclasses.replace(record, last_reviewed=today,
                               review_count=record.review_count + 1)
