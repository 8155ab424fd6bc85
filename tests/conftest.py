"""Shared test fixtures."""

import json

import pytest

from memo.store import RecordStore


@pytest.fixture
def vault(tmp_path):
    """A vault with two subject folders and a hidden .memo dir."""
    vault_dir = tmp_path / "Memo"
    (vault_dir / "101" / "sets").mkdir(parents=True)
    (vault_dir / "408").mkdir()
    (vault_dir / ".memo").mkdir()
    (vault_dir / "101" / "limits.md").write_text("# Limits\n")
    (vault_dir / "101" / "sets" / "unions.md").write_text("# Unions\n")
    (vault_dir / "101" / "scratch.txt").write_text("not a note")
    (vault_dir / "408" / "paging.md").write_text("# Paging\n")
    return vault_dir


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "revs.json")


@pytest.fixture
def example_store(store):
    """The a.md / b.md store: one reviewed twice, one never reviewed."""
    store.path.write_text(json.dumps([
        {"path": "a.md", "subject": "101", "last_reviewed": "2025-01-01", "review_count": 2},
        {"path": "b.md", "subject": "101", "last_reviewed": None, "review_count": 0},
    ], indent=2, sort_keys=True) + "\n")
    return store

