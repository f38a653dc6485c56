from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Protocol

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clanboard.core.categories import LeaderboardCategory
from clanboard.core.errors import LeaderboardQueryError

QUERIES_DIR = Path(__file__).resolve().parent.parent / "queries"

REQUIRED_COLUMNS = {"display_name", "amount"}

LeaderboardRow = tuple[str, Decimal]


class LeaderboardSource(Protocol):
    def fetch(self, category: LeaderboardCategory) -> list[LeaderboardRow]:
        ...


def load_query(category: LeaderboardCategory) -> str:
    return (QUERIES_DIR / f"leaderboard_{category.value}.sql").read_text(encoding="utf-8")


def _to_row(category: LeaderboardCategory, raw: Mapping) -> LeaderboardRow:
    missing = sorted(REQUIRED_COLUMNS - set(raw.keys()))
    if missing:
        raise LeaderboardQueryError(category, f"missing column {', '.join(missing)}")

    name = raw["display_name"]
    amount = raw["amount"]
    if name is None:
        raise LeaderboardQueryError(category, "row without display_name")

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise LeaderboardQueryError(category, f"non numeric amount {amount!r} for {name!r}", exc) from exc
    if not value.is_finite():
        raise LeaderboardQueryError(category, f"non numeric amount {amount!r} for {name!r}")
    return (str(name), value)


class SqlLeaderboardSource:
    """Runs the raw leaderboard query for a category against the clan database."""

    def __init__(self, db: Session, queries: Mapping[LeaderboardCategory, str] | None = None):
        self.db = db
        self.queries = dict(queries or {})

    def _sql(self, category: LeaderboardCategory) -> str:
        if category in self.queries:
            return self.queries[category]
        return load_query(category)

    def fetch(self, category: LeaderboardCategory) -> list[LeaderboardRow]:
        try:
            sql = self._sql(category)
            rows = self.db.execute(sa.text(sql)).mappings().all()
        except (OSError, SQLAlchemyError) as exc:
            raise LeaderboardQueryError(category, "query failed", exc) from exc
        return [_to_row(category, r) for r in rows]
