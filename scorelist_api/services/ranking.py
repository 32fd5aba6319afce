"""Leaderboard ranking: cap the records, order them by score, number the places."""
from __future__ import annotations

from typing import Sequence

from scorelist_api.entities.scorelist import LeaderboardEntry, Scorelist

DEFAULT_LEADERBOARD_SIZE = 10


def rank_top_n(
    records: Sequence[Scorelist],
    n: int = DEFAULT_LEADERBOARD_SIZE,
    sort_before_truncate: bool = False,
) -> list[LeaderboardEntry]:
    """Build a leaderboard of at most `n` entries, lowest score first.

    By default the input is clipped to its first `n` records in the order the
    store returned them and only that prefix is sorted, so a low score stored
    after position `n` never reaches the board. `sort_before_truncate=True`
    ranks the whole input before clipping.
    """
    if n < 1:
        raise ValueError(f"leaderboard size must be positive, got {n}")

    retained = list(records)
    if sort_before_truncate:
        retained = sorted(retained, key=lambda record: record.score)

    if len(retained) > n:
        retained = retained[:n]

    retained = sorted(retained, key=lambda record: record.score)

    return [
        LeaderboardEntry(scorelist=record, placement=index + 1)
        for index, record in enumerate(retained)
    ]
