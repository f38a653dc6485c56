from enum import Enum


class LeaderboardCategory(str, Enum):
    TITLES = "titles"
    RAIDS = "raids"


VALID_CATEGORIES = {c.value for c in LeaderboardCategory}


def normalize_category(value: str) -> LeaderboardCategory:
    out = (value or "").strip().lower()
    if out not in VALID_CATEGORIES:
        raise ValueError(f"category must be one of {'|'.join(sorted(VALID_CATEGORIES))}")
    return LeaderboardCategory(out)
