"""Player valuation and budget-constrained roster selection."""

from pyroster.config import (
    RosterRequirements,
    StrategyPreferences,
    ValuationWeights,
    get_requirements,
    get_strategy,
    get_weights,
)
from pyroster.models import BatterRecord, PitcherRecord
from pyroster.selection import SelectionResult, build_roster, select_roster
from pyroster.validation import ValidationReport, validate_roster

__all__ = [
    "BatterRecord",
    "PitcherRecord",
    "RosterRequirements",
    "SelectionResult",
    "StrategyPreferences",
    "ValidationReport",
    "ValuationWeights",
    "build_roster",
    "get_requirements",
    "get_strategy",
    "get_weights",
    "select_roster",
    "validate_roster",
]
