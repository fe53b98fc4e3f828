"""Roster feasibility checks."""

from .feasibility import (
    Deficit,
    RosterCounts,
    ValidationReport,
    count_roster,
    position_coverage,
    validate_roster,
    validate_selection,
)

__all__ = [
    "Deficit",
    "RosterCounts",
    "ValidationReport",
    "count_roster",
    "position_coverage",
    "validate_roster",
    "validate_selection",
]
