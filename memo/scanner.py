"""Vault scanning: find markdown notes and tag them with their subject folder."""

import pathlib
import sys
from typing import Iterator


def scan_vault(vault_dir: pathlib.Path,
               subjects: list[str] | None = None) -> Iterator[tuple[str, str]]:
    """Yield (path, subject) for every note in the vault.

    Args:
        vault_dir: Root of the vault.
        subjects: Top-level folders to scan. Defaults to every folder not
                  starting with a dot.

    Paths are relative to the vault, in POSIX form, so the store does not
    change when the vault moves between machines.
    """
    vault_dir = pathlib.Path(vault_dir)
    if subjects is None:
        subjects = _subject_dirs(vault_dir)

    seen_paths: set[str] = set()
    for subject in subjects:
        subject_dir = vault_dir / subject
        if not subject_dir.is_dir():
            print(f"Warning: subject folder {subject_dir} not found", file=sys.stderr)
            continue
        for path in _scan_directory(subject_dir):
            rel = path.relative_to(vault_dir).as_posix()
            if rel not in seen_paths:
                seen_paths.add(rel)
                yield rel, subject


def _subject_dirs(vault_dir: pathlib.Path) -> list[str]:
    try:
        entries = sorted(vault_dir.iterdir())
    except OSError as e:
        print(f"Warning: cannot read {vault_dir}: {e}", file=sys.stderr)
        return []
    return [item.name for item in entries
            if item.is_dir() and not item.name.startswith(".")]


def _scan_directory(dirpath: pathlib.Path) -> Iterator[pathlib.Path]:
    try:
        entries = sorted(dirpath.iterdir())
    except PermissionError:
        print(f"Warning: cannot read {dirpath}", file=sys.stderr)
        return
    for item in entries:
        if item.is_dir() and not item.name.startswith("."):
            yield from _scan_directory(item)
        elif item.is_file() and item.suffix == ".md":
            yield item
