"""memo — spaced review for a vault of markdown notes."""

__version__ = "0.1.0"

from memo.models import Record, ScoredRecord, SessionConfig
from memo.session import ReviewSession, SessionResult

__all__ = ["Record", "ReviewSession", "ScoredRecord", "SessionConfig", "SessionResult"]
