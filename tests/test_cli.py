"""Tests for CLI argument parsing and the review command."""

import json
from unittest.mock import patch

import pytest

from memo.cli import build_parser, main


def _run(argv, vault, monkeypatch):
    monkeypatch.setenv("MEMO_DIR", str(vault))
    with patch("sys.argv", ["memo", *argv]):
        main()


def _stored(vault):
    return {d["path"]: d for d in json.loads((vault / ".memo" / "revs.json").read_text())}


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.subject is None
    assert args.dry is False
    assert args.top is None
    assert args.date is None


def test_parser_top_without_count():
    args = build_parser().parse_args(["--top"])
    assert args.top == -1


def test_parser_rejects_bad_date(capsys):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--date", "2025-02-30"])
    assert exc.value.code == 2
    assert "YYYY-MM-DD" in capsys.readouterr().err


def test_parser_rejects_top_with_weighted():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--top", "2", "--weighted"])
    assert exc.value.code == 2


def test_parser_rejects_negative_top():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--top", "-3"])


def test_review_top_commits(vault, monkeypatch, capsys):
    _run(["--top", "1", "--date", "2025-01-10", "-s", "408"], vault, monkeypatch)
    out = capsys.readouterr().out
    assert out.strip() == "paging"
    stored = _stored(vault)
    assert stored["408/paging.md"]["last_reviewed"] == "2025-01-10"
    assert stored["408/paging.md"]["review_count"] == 1
    assert stored["101/limits.md"]["review_count"] == 0


def test_review_default_uses_files_per_day(vault, monkeypatch, capsys):
    (vault / ".memo" / "settings.toml").write_text("files_per_day = 2\n")
    _run(["--seed", "1"], vault, monkeypatch)
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(lines) == 2
    assert sum(d["review_count"] for d in _stored(vault).values()) == 2


def test_review_dry_run_does_not_save(vault, monkeypatch, capsys):
    _run(["--dry", "--top"], vault, monkeypatch)
    out = capsys.readouterr().out
    assert "Dry run" in out
    assert not (vault / ".memo" / "revs.json").exists()


def test_review_nothing_to_review(vault, monkeypatch, capsys):
    _run(["--top", "3", "--subject", "999"], vault, monkeypatch)
    assert "Nothing to review." in capsys.readouterr().out


def test_review_list_prints_table(vault, monkeypatch, capsys):
    _run(["--dry", "--top", "1", "--list", "-s", "101"], vault, monkeypatch)
    out = capsys.readouterr().out
    assert "N/A" in out
    assert "2 note(s) in pool" in out
    assert "paging" not in out


def test_review_prune(vault, monkeypatch, capsys):
    _run(["--top", "0"], vault, monkeypatch)
    (vault / "408" / "paging.md").unlink()
    _run(["--top", "0", "--prune"], vault, monkeypatch)
    assert "Pruned 408/paging.md" in capsys.readouterr().out
    assert "408/paging.md" not in _stored(vault)


def test_corrupt_store_exits_nonzero(vault, monkeypatch, capsys):
    (vault / ".memo" / "revs.json").write_text("{{{")
    with pytest.raises(SystemExit) as exc:
        _run(["--top", "1"], vault, monkeypatch)
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err
    assert (vault / ".memo" / "revs.json").read_text() == "{{{"


def test_backdated_review_exits_nonzero(vault, monkeypatch, capsys):
    _run(["--top", "3", "--date", "2025-01-10"], vault, monkeypatch)
    before = (vault / ".memo" / "revs.json").read_bytes()
    with pytest.raises(SystemExit) as exc:
        _run(["--top", "3", "--date", "2025-01-01"], vault, monkeypatch)
    assert exc.value.code == 1
    assert (vault / ".memo" / "revs.json").read_bytes() == before


def test_missing_vault_exits(tmp_path, monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        _run(["--top", "1"], tmp_path / "nope", monkeypatch)
    assert exc.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_bad_settings_exits_nonzero(vault, monkeypatch, capsys):
    (vault / ".memo" / "settings.toml").write_text('files_per_day = "three"\n')
    with pytest.raises(SystemExit) as exc:
        _run(["--top"], vault, monkeypatch)
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err
    assert not (vault / ".memo" / "revs.json").exists()


def test_unwritable_store_exits_nonzero(vault, monkeypatch, capsys):
    with patch("memo.store.RecordStore.save", side_effect=PermissionError("read-only vault")):
        with pytest.raises(SystemExit) as exc:
            _run(["--top", "1"], vault, monkeypatch)
    assert exc.value.code == 1
    assert "Error: read-only vault" in capsys.readouterr().err
