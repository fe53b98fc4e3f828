"""Strategy-weighted ranking of valued players."""

from .strategy import (
    Ranked,
    RankedBatter,
    RankedPitcher,
    rank_batter,
    rank_batters,
    rank_pitcher,
    rank_pitchers,
    sort_ranked,
)

__all__ = [
    "Ranked",
    "RankedBatter",
    "RankedPitcher",
    "rank_batter",
    "rank_batters",
    "rank_pitcher",
    "rank_pitchers",
    "sort_ranked",
]
