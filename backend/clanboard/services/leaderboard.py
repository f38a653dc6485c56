from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from clanboard.core.categories import LeaderboardCategory
from clanboard.core.errors import LeaderboardQueryError
from clanboard.services.error_sink import ErrorSink
from clanboard.services.leaderboard_source import LeaderboardRow, LeaderboardSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    display_name: str
    amount: Decimal
    standing: int
    percent_distance: float
    percent_ranking: float


def _percent_distance(amount: Decimal, top: Decimal) -> float:
    if top > 0:
        return float(amount / top) * 100.0
    # Nothing to scale against: whoever matches the leader sits at the top.
    return 100.0 if amount == top else 0.0


def rank_entries(rows: Iterable[LeaderboardRow]) -> list[LeaderboardEntry]:
    """
    Order raw (display_name, amount) rows into a leaderboard.

    Sorting is stable, so members tied on amount keep the order they were
    fetched in and each gets its own standing.
    """
    ordered = sorted(rows, key=lambda row: row[1], reverse=True)
    if not ordered:
        return []

    top = ordered[0][1]
    n = len(ordered)
    return [
        LeaderboardEntry(
            display_name=name,
            amount=amount,
            standing=i + 1,
            percent_distance=_percent_distance(amount, top),
            percent_ranking=((n - i) / n) * 100.0,
        )
        for i, (name, amount) in enumerate(ordered)
    ]


def fetch_or_empty(
    source: LeaderboardSource,
    category: LeaderboardCategory,
    sink: ErrorSink,
) -> list[LeaderboardRow]:
    try:
        return source.fetch(category)
    except LeaderboardQueryError as failure:
        try:
            sink.record(failure)
        except Exception:
            logger.warning("error sink failed while recording %s", failure, exc_info=True)
        return []


def get_leaderboard(
    source: LeaderboardSource,
    category: LeaderboardCategory,
    sink: ErrorSink,
) -> list[LeaderboardEntry]:
    return rank_entries(fetch_or_empty(source, category, sink))
