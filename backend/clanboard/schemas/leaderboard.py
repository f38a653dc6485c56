from decimal import Decimal

from pydantic import BaseModel

class LeaderboardEntryOut(BaseModel):
    display_name: str
    amount: Decimal
    standing: int
    percent_distance: float
    percent_ranking: float

class LeaderboardOut(BaseModel):
    category: str
    entries: list[LeaderboardEntryOut]
