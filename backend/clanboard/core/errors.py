from clanboard.core.categories import LeaderboardCategory


class LeaderboardQueryError(RuntimeError):
    """The leaderboard data source could not be queried or returned malformed rows."""

    def __init__(self, category: LeaderboardCategory, message: str, cause: BaseException | None = None):
        self.category = category
        self.cause = cause
        super().__init__(f"{category.value} leaderboard: {message}")
