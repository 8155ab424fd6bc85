"""Record store: review history persisted as a path-sorted JSON file."""

import json
import os
import pathlib
import tempfile
from datetime import date
from typing import Iterable

from memo.models import Record


class StoreError(Exception):
    """The store file exists but cannot be trusted."""


def record_to_dict(record: Record) -> dict:
    return {
        "path": record.path,
        "subject": record.subject,
        "last_reviewed": record.last_reviewed.isoformat() if record.last_reviewed else None,
        "review_count": record.review_count,
    }


def record_from_dict(data: dict) -> Record:
    if not isinstance(data, dict) or not isinstance(data.get("path"), str):
        raise ValueError(f"not a record: {data!r}")
    count = data.get("review_count", 0)
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise ValueError(f"bad review_count for {data['path']}: {count!r}")
    subject = data.get("subject", "")
    if not isinstance(subject, str):
        raise ValueError(f"bad subject for {data['path']}: {subject!r}")
    last = data.get("last_reviewed")
    if last is not None and (not isinstance(last, str) or not last):
        raise ValueError(f"bad last_reviewed for {data['path']}: {last!r}")
    return Record(
        path=data["path"],
        subject=subject,
        last_reviewed=date.fromisoformat(last) if last is not None else None,
        review_count=count,
    )


class RecordStore:
    def __init__(self, path: pathlib.Path | str):
        self.path = pathlib.Path(path)

    def load(self) -> list[Record]:
        """Read all records. A missing file is an empty store."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StoreError(f"{self.path}: expected a list of records")

        records = []
        seen: set[str] = set()
        for item in data:
            try:
                record = record_from_dict(item)
            except (ValueError, TypeError) as e:
                raise StoreError(f"{self.path}: {e}") from e
            if record.path in seen:
                raise StoreError(f"{self.path}: duplicate entry for {record.path}")
            seen.add(record.path)
            records.append(record)
        return records

    def save(self, records: Iterable[Record]):
        """Replace the store with ``records``, sorted by path.

        The data goes to a temp file next to the store and is renamed over
        it, so a reader never sees a half-written file.
        """
        ordered = sorted(records, key=lambda r: r.path)
        text = json.dumps([record_to_dict(r) for r in ordered], indent=2,
                          sort_keys=True, ensure_ascii=False) + "\n"

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent,
                                        prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            pathlib.Path(tmp_name).unlink(missing_ok=True)
            raise


def reconcile(records: list[Record],
              discovered: Iterable[tuple[str, str]]) -> list[Record]:
    """Add a fresh record for every discovered path the store lacks.

    Records whose note was not discovered are kept as they are.
    """
    result = list(records)
    known = {r.path for r in records}
    for path, subject in discovered:
        if path not in known:
            known.add(path)
            result.append(Record(path=path, subject=subject))
    return result


def prune(records: list[Record],
          discovered_paths: Iterable[str]) -> tuple[list[Record], list[Record]]:
    """Split records into (kept, removed) by whether their note still exists."""
    present = set(discovered_paths)
    kept = [r for r in records if r.path in present]
    removed = [r for r in records if r.path not in present]
    return kept, removed
