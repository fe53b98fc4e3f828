"""Budget-constrained roster selection."""

from .service import (
    PITCHER_BUDGET_RELAXATION,
    RosterBuild,
    SelectionResult,
    build_roster,
    select_batters,
    select_pitchers,
    select_roster,
    split_budget,
)

__all__ = [
    "PITCHER_BUDGET_RELAXATION",
    "RosterBuild",
    "SelectionResult",
    "build_roster",
    "select_batters",
    "select_pitchers",
    "select_roster",
    "split_budget",
]
