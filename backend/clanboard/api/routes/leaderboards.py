from fastapi import APIRouter, Depends, HTTPException

from clanboard.api.deps import get_error_sink, get_leaderboard_source
from clanboard.core.categories import LeaderboardCategory, normalize_category
from clanboard.schemas.leaderboard import LeaderboardEntryOut, LeaderboardOut
from clanboard.services.error_sink import ErrorSink
from clanboard.services.leaderboard import get_leaderboard
from clanboard.services.leaderboard_source import LeaderboardSource

router = APIRouter()


def _normalize_category(category: str) -> LeaderboardCategory:
    try:
        return normalize_category(category)
    except ValueError as exc:
        raise HTTPException(400, str(exc))


@router.get("/{category}", response_model=LeaderboardOut)
def leaderboard(
    category: str,
    source: LeaderboardSource = Depends(get_leaderboard_source),
    sink: ErrorSink = Depends(get_error_sink),
):
    category_norm = _normalize_category(category)
    entries = get_leaderboard(source, category_norm, sink)

    return LeaderboardOut(
        category=category_norm.value,
        entries=[
            LeaderboardEntryOut(
                display_name=e.display_name,
                amount=e.amount,
                standing=e.standing,
                percent_distance=e.percent_distance,
                percent_ranking=e.percent_ranking,
            )
            for e in entries
        ],
    )
