import sys

from clanboard.core.categories import normalize_category
from clanboard.core.config import settings
from clanboard.core.logging import setup_logging
from clanboard.db.session import SessionLocal
from clanboard.services.error_sink import LoggingErrorSink
from clanboard.services.leaderboard import LeaderboardEntry, get_leaderboard
from clanboard.services.leaderboard_source import SqlLeaderboardSource


def format_entry(entry: LeaderboardEntry) -> str:
    return (
        f"{entry.standing:>4}  {entry.display_name:<32} {entry.amount:>8}"
        f"  {entry.percent_distance:6.2f}%  {entry.percent_ranking:6.2f}%"
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: python -m scripts.print_leaderboard <titles|raids>", file=sys.stderr)
        return 2
    try:
        category = normalize_category(args[0])
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.LOG_LEVEL)
    db = SessionLocal()
    try:
        entries = get_leaderboard(SqlLeaderboardSource(db), category, LoggingErrorSink())
    finally:
        db.close()

    for entry in entries:
        print(format_entry(entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())
