from __future__ import annotations

import logging
from typing import Protocol

from clanboard.core.errors import LeaderboardQueryError

logger = logging.getLogger(__name__)


class ErrorSink(Protocol):
    def record(self, failure: LeaderboardQueryError) -> None:
        ...


class LoggingErrorSink:
    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def record(self, failure: LeaderboardQueryError) -> None:
        self.log.error(
            "leaderboard fetch failed (category=%s): %s",
            failure.category.value,
            failure,
            exc_info=failure.cause,
        )
