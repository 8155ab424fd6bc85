"""Choosing the day's notes from the scored pool."""

import random

from memo.models import ScoredRecord, SessionConfig


def _by_priority(scored: ScoredRecord):
    return (-scored.weight, scored.record.path)


def display_order(chosen: list[ScoredRecord]) -> list[ScoredRecord]:
    """Weight ascending, so the most urgent note is printed last."""
    return sorted(chosen, key=lambda s: (s.weight, s.record.path))


def select(scored: list[ScoredRecord], config: SessionConfig,
           rng: random.Random | None = None) -> tuple[list[ScoredRecord], list[ScoredRecord]]:
    """Split scored records into (chosen, rest).

    Records outside ``config.subject`` always land in ``rest``. With
    ``top_n`` the choice is deterministic; otherwise the pool is drawn
    through ``rng`` (uniformly, or proportionally to weight when
    ``config.weighted`` is set).
    """
    if rng is None:
        rng = random.Random(config.seed)

    # Path order first so a seeded draw does not depend on input order.
    candidates = sorted(scored, key=lambda s: s.record.path)
    if config.subject is not None:
        pool = [s for s in candidates if s.record.subject == config.subject]
    else:
        pool = candidates

    if config.top_n is not None:
        chosen = sorted(pool, key=_by_priority)[:max(config.top_n, 0)]
    elif config.weighted:
        chosen = _weighted_sample(pool, config.count, rng)
    else:
        shuffled = list(pool)
        rng.shuffle(shuffled)
        chosen = shuffled[:max(config.count, 0)]

    chosen_paths = {s.record.path for s in chosen}
    rest = [s for s in candidates if s.record.path not in chosen_paths]
    return chosen, rest


def _weighted_sample(pool: list[ScoredRecord], k: int,
                     rng: random.Random) -> list[ScoredRecord]:
    """Draw k distinct records, each with probability proportional to its weight."""
    keyed = []
    for s in pool:
        # Efraimidis-Spirakis: the k largest u ** (1 / w) form the sample.
        u = rng.random()
        keyed.append((u ** (1.0 / s.weight) if s.weight > 0 else 0.0, s))
    keyed.sort(key=lambda item: item[0], reverse=True)
    return [s for _, s in keyed[:max(k, 0)]]
