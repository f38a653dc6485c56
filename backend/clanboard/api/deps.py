from fastapi import Depends
from sqlalchemy.orm import Session

from clanboard.db.session import get_db
from clanboard.services.error_sink import ErrorSink, LoggingErrorSink
from clanboard.services.leaderboard_source import LeaderboardSource, SqlLeaderboardSource


def get_leaderboard_source(db: Session = Depends(get_db)) -> LeaderboardSource:
    return SqlLeaderboardSource(db)


def get_error_sink() -> ErrorSink:
    return LoggingErrorSink()
