"""Output formatting: clickable note links and the score table."""

import pathlib
import urllib.parse

from memo.models import ScoredRecord


def note_uri(path: str, vault_name: str) -> str:
    stem = pathlib.PurePosixPath(path).stem
    return (f"obsidian://open?vault={urllib.parse.quote(vault_name, safe='')}"
            f"&file={urllib.parse.quote(stem, safe='')}")


def render_link(path: str, vault_name: str, hyperlink: bool = True) -> str:
    """Note name, wrapped in an OSC 8 terminal hyperlink unless ``hyperlink`` is False."""
    name = pathlib.PurePosixPath(path).stem
    if not hyperlink:
        return name
    return f"\x1b]8;;{note_uri(path, vault_name)}\x1b\\{name}\x1b]8;;\x1b\\"


def render_table(scored: list[ScoredRecord]) -> list[str]:
    lines = []
    for s in sorted(scored, key=lambda s: (s.weight, s.record.path)):
        last = s.record.last_reviewed.isoformat() if s.record.last_reviewed else "N/A"
        name = pathlib.PurePosixPath(s.record.path).stem
        lines.append(f"{s.weight:>6.1f} | {last:>10} | {s.record.review_count:>2} | {name}")
    return lines
