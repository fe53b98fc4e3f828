"""Configuration presets for scoring weights, strategies and roster rules."""

from .requirements import DEFAULT_REQUIREMENTS, RosterRequirements, get_requirements, iter_requirements
from .strategy import BALANCED, StrategyPreferences, get_strategy, iter_strategies
from .weights import (
    DEFAULT_WEIGHTS,
    BatterWeights,
    PitcherWeights,
    ValuationWeights,
    get_weights,
    iter_weights,
)

__all__ = [
    "BALANCED",
    "DEFAULT_REQUIREMENTS",
    "DEFAULT_WEIGHTS",
    "BatterWeights",
    "PitcherWeights",
    "RosterRequirements",
    "StrategyPreferences",
    "ValuationWeights",
    "get_requirements",
    "get_strategy",
    "get_weights",
    "iter_requirements",
    "iter_strategies",
    "iter_weights",
]
