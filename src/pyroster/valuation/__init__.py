"""Fantasy valuation of player season lines."""

from .model import (
    BatterValuation,
    PitcherValuation,
    rate_sort_key,
    value_batter,
    value_batters,
    value_pitcher,
    value_pitchers,
)

__all__ = [
    "BatterValuation",
    "PitcherValuation",
    "rate_sort_key",
    "value_batter",
    "value_batters",
    "value_pitcher",
    "value_pitchers",
]
