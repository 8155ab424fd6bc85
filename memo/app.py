"""App: central object that wires together the vault, settings and record store."""

import pathlib
import random

from memo.config import get_vault_dir, load_settings
from memo.models import SessionConfig
from memo.scanner import scan_vault
from memo.session import ReviewSession, SessionResult
from memo.store import RecordStore


class App:
    """Holds all shared state for a memo run.

    Usage:
        app = App(vault_dir="/path/to/vault")
        result = app.review(SessionConfig(today=date.today()))

    For testing:
        app = App(vault_dir=tmp_path)
    """

    def __init__(self, vault_dir: pathlib.Path | str | None = None):
        if vault_dir is None:
            vault_dir = get_vault_dir()
        self.vault_dir = pathlib.Path(vault_dir)
        self.settings = load_settings(self.vault_dir)
        self.store = RecordStore(self.store_path)

    @property
    def store_path(self) -> pathlib.Path:
        return self.vault_dir / self.settings["store"]

    @property
    def vault_name(self) -> str:
        return self.settings["vault_name"]

    def scan(self) -> list[tuple[str, str]]:
        """Discover (path, subject) pairs using the configured subjects."""
        return list(scan_vault(self.vault_dir, self.settings.get("subjects")))

    def review(self, config: SessionConfig, rng: random.Random | None = None) -> SessionResult:
        session = ReviewSession(self.store, config, discovered=self.scan(), rng=rng)
        return session.run()
