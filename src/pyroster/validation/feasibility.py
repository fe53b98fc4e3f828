"""Re-check a roster against the hard roster requirements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from pyroster.config.requirements import RosterRequirements
from pyroster.models import REQUIRED_POSITIONS, BatterRecord, PitcherRecord
from pyroster.models.codes import CATCHER

if TYPE_CHECKING:
    from pyroster.selection import SelectionResult


@dataclass(frozen=True)
class Deficit:
    """One failed bound: how far ``actual`` is from ``required``."""

    rule: str
    required: int
    actual: int
    shortfall: int
    message: str


@dataclass(frozen=True)
class RosterCounts:
    pitchers: int
    can_start: int
    can_relieve: int
    pure_relievers: int
    batters: int
    catchers: int
    total_salary: int


@dataclass(frozen=True)
class ValidationReport:
    passed: bool
    counts: RosterCounts
    covered_positions: Tuple[str, ...]
    missing_positions: Tuple[str, ...]
    deficits: Tuple[Deficit, ...]

    def deficit_for(self, rule: str) -> Deficit | None:
        for deficit in self.deficits:
            if deficit.rule == rule:
                return deficit
        return None


def count_roster(batters: Sequence[BatterRecord], pitchers: Sequence[PitcherRecord]) -> RosterCounts:
    roles = [pitcher.roles for pitcher in pitchers]
    return RosterCounts(
        pitchers=len(pitchers),
        can_start=sum(1 for role in roles if role.can_start),
        can_relieve=sum(1 for role in roles if role.can_relieve),
        pure_relievers=sum(1 for role in roles if role.is_pure_reliever),
        batters=len(batters),
        catchers=sum(1 for batter in batters if CATCHER in batter.position_codes),
        total_salary=sum(player.salary for player in (*batters, *pitchers)),
    )


def position_coverage(batters: Sequence[BatterRecord]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return (covered, missing) required positions in canonical order."""

    seen = {code for batter in batters for code in batter.position_codes}
    covered = tuple(pos for pos in REQUIRED_POSITIONS if pos in seen)
    missing = tuple(pos for pos in REQUIRED_POSITIONS if pos not in seen)
    return covered, missing


def _minimum(rule: str, required: int, actual: int, label: str) -> Deficit | None:
    if actual >= required:
        return None
    shortfall = required - actual
    return Deficit(rule, required, actual, shortfall, f"need {shortfall} more {label}")


def _maximum(rule: str, allowed: int, actual: int, label: str) -> Deficit | None:
    if actual <= allowed:
        return None
    excess = actual - allowed
    return Deficit(rule, allowed, actual, excess, f"{excess} {label} over the maximum of {allowed}")


def validate_roster(
    batters: Sequence[BatterRecord],
    pitchers: Sequence[PitcherRecord],
    requirements: RosterRequirements,
) -> ValidationReport:
    """Recompute every bound from the records and report what fails."""

    counts = count_roster(batters, pitchers)
    covered, missing = position_coverage(batters)

    checks = [
        _minimum("min_pitchers", requirements.min_pitchers, counts.pitchers, "pitchers"),
        _maximum("max_pitchers", requirements.max_pitchers, counts.pitchers, "pitchers"),
        _minimum("min_can_start", requirements.min_can_start, counts.can_start, "pitchers who can start"),
        _minimum("min_can_relieve", requirements.min_can_relieve, counts.can_relieve, "pitchers who can relieve"),
        _minimum("min_pure_relievers", requirements.min_pure_relievers, counts.pure_relievers, "pure relievers"),
        _minimum("min_batters", requirements.min_batters, counts.batters, "batters"),
        _maximum("max_batters", requirements.max_batters, counts.batters, "batters"),
        _minimum("min_catchers", requirements.min_catchers, counts.catchers, "catchers"),
    ]
    deficits: List[Deficit] = [deficit for deficit in checks if deficit is not None]

    if requirements.require_all_positions and missing:
        deficits.append(
            Deficit(
                "positions",
                len(REQUIRED_POSITIONS),
                len(covered),
                len(missing),
                f"no fielder for {', '.join(missing)}",
            )
        )

    if counts.total_salary > requirements.salary_cap:
        over = counts.total_salary - requirements.salary_cap
        deficits.append(
            Deficit(
                "salary_cap",
                requirements.salary_cap,
                counts.total_salary,
                over,
                f"salary {counts.total_salary:,} exceeds the cap of {requirements.salary_cap:,} by {over:,}",
            )
        )

    return ValidationReport(
        passed=not deficits,
        counts=counts,
        covered_positions=covered,
        missing_positions=missing,
        deficits=tuple(deficits),
    )


def validate_selection(selection: "SelectionResult", requirements: RosterRequirements) -> ValidationReport:
    return validate_roster(selection.batter_records(), selection.pitcher_records(), requirements)
