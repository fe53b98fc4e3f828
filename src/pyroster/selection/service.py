"""Greedy roster allocation under a split salary budget.

Pitchers are chosen first from their own sub-budget. Quota-critical pitchers
(those still needed for a start/relief/pure-relief minimum) may spend up to
``budget_relaxation`` beyond the pitcher share; everything else must fit the
strict share. Batters never use the relaxation: catchers are secured first,
then the best remaining batters fill the roster.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from pyroster.config.requirements import RosterRequirements
from pyroster.config.strategy import StrategyPreferences
from pyroster.config.weights import ValuationWeights
from pyroster.models import REQUIRED_POSITIONS, BatterRecord, EnduranceProfile, PitcherRecord
from pyroster.ranking import RankedBatter, RankedPitcher, rank_batters, rank_pitchers, sort_ranked
from pyroster.validation import ValidationReport, validate_selection


logger = logging.getLogger(__name__)

PITCHER_BUDGET_RELAXATION = 0.20


@dataclass(frozen=True)
class SelectionResult:
    batters: Tuple[RankedBatter, ...]
    pitchers: Tuple[RankedPitcher, ...]
    batter_budget: float
    pitcher_budget: float
    batter_spend: int
    pitcher_spend: int

    @property
    def total_spend(self) -> int:
        return self.batter_spend + self.pitcher_spend

    @property
    def total_score(self) -> float:
        return sum(entry.score for entry in self.batters) + sum(entry.score for entry in self.pitchers)

    def batter_records(self) -> List[BatterRecord]:
        return [entry.player for entry in self.batters]

    def pitcher_records(self) -> List[PitcherRecord]:
        return [entry.player for entry in self.pitchers]


@dataclass(frozen=True)
class RosterBuild:
    selection: SelectionResult
    report: ValidationReport


@dataclass
class _RoleTally:
    can_start: int = 0
    can_relieve: int = 0
    pure_relievers: int = 0

    def gaps(self, prefs: StrategyPreferences) -> Tuple[int, int, int]:
        return (
            max(0, prefs.target_can_start - self.can_start),
            max(0, prefs.target_can_relieve - self.can_relieve),
            max(0, prefs.target_pure_relievers - self.pure_relievers),
        )

    def add(self, roles: EnduranceProfile) -> None:
        if roles.can_start:
            self.can_start += 1
        if roles.can_relieve:
            self.can_relieve += 1
        if roles.is_pure_reliever:
            self.pure_relievers += 1


def _slots_for_quotas(start_gap: int, relieve_gap: int, pure_gap: int) -> int:
    # Starters and pure relievers are disjoint; relief can come from either.
    return max(start_gap + pure_gap, relieve_gap)


def split_budget(salary_cap: int, prefs: StrategyPreferences) -> Tuple[float, float]:
    """Return the (batter, pitcher) sub-budgets for a salary cap."""

    batter_budget = salary_cap * prefs.batter_budget_percent / 100
    return batter_budget, salary_cap - batter_budget


def select_pitchers(
    pitchers: Sequence[RankedPitcher],
    prefs: StrategyPreferences,
    budget: float,
    *,
    budget_relaxation: float = PITCHER_BUDGET_RELAXATION,
) -> Tuple[List[RankedPitcher], int]:
    """Pick pitchers toward ``prefs.target_pitchers``; returns (picks, spend)."""

    if budget_relaxation < 0:
        raise ValueError("budget_relaxation must be non-negative")

    ordered = sort_ranked(pitchers)
    target = prefs.target_pitchers
    ceiling = budget * (1 + budget_relaxation)
    tally = _RoleTally()
    selected: List[RankedPitcher] = []
    taken: Set[int] = set()
    spent = 0

    for index, entry in enumerate(ordered):
        if len(selected) >= target:
            break
        roles = entry.player.roles
        start_gap, relieve_gap, pure_gap = tally.gaps(prefs)
        needed = (
            (start_gap > 0 and roles.can_start)
            or (relieve_gap > 0 and roles.can_relieve)
            or (pure_gap > 0 and roles.is_pure_reliever)
        )

        open_after = target - len(selected) - 1
        reserved_now = _slots_for_quotas(start_gap, relieve_gap, pure_gap)
        reserved_after = _slots_for_quotas(
            start_gap - (1 if start_gap and roles.can_start else 0),
            relieve_gap - (1 if relieve_gap and roles.can_relieve else 0),
            pure_gap - (1 if pure_gap and roles.is_pure_reliever else 0),
        )
        if open_after < reserved_after and reserved_after >= reserved_now:
            logger.debug("Skipping %s: remaining slots are reserved for role quotas", entry.player_id)
            continue

        limit = ceiling if needed else budget
        if spent + entry.salary > limit:
            logger.debug(
                "Skipping %s: salary %s exceeds %s budget", entry.player_id, entry.salary,
                "relaxed" if needed else "strict",
            )
            continue

        selected.append(entry)
        taken.add(index)
        spent += entry.salary
        tally.add(roles)
        if needed and spent > budget:
            logger.info("Quota-critical pick %s pushed pitcher spend to %s (budget %.0f)", entry.player_id, spent, budget)

    if len(selected) < target:
        for index, entry in enumerate(ordered):
            if len(selected) >= target:
                break
            if index in taken or spent + entry.salary > budget:
                continue
            selected.append(entry)
            taken.add(index)
            spent += entry.salary
            logger.debug("Filled pitcher slot with %s", entry.player_id)

    return selected, spent


def select_batters(
    batters: Sequence[RankedBatter],
    prefs: StrategyPreferences,
    requirements: RosterRequirements,
    budget: float,
) -> Tuple[List[RankedBatter], int]:
    """Pick batters toward ``prefs.target_batters``; returns (picks, spend)."""

    ordered = sort_ranked(batters)
    target = prefs.target_batters
    selected: List[RankedBatter] = []
    taken: Set[int] = set()
    spent = 0

    def take(index: int, entry: RankedBatter) -> None:
        nonlocal spent
        selected.append(entry)
        taken.add(index)
        spent += entry.salary

    catchers = 0
    for index, entry in enumerate(ordered):
        if catchers >= requirements.min_catchers or len(selected) >= target:
            break
        if not entry.player.is_catcher or spent + entry.salary > budget:
            continue
        take(index, entry)
        catchers += 1
        logger.debug("Secured catcher %s", entry.player_id)

    if requirements.require_all_positions:
        covered = {code for entry in selected for code in entry.player.position_codes}
        for position in REQUIRED_POSITIONS:
            if position in covered or len(selected) >= target:
                continue
            for index, entry in enumerate(ordered):
                if index in taken or position not in entry.player.position_codes:
                    continue
                if spent + entry.salary > budget:
                    continue
                take(index, entry)
                covered.update(entry.player.position_codes)
                logger.debug("Covered %s with %s", position, entry.player_id)
                break

    for index, entry in enumerate(ordered):
        if len(selected) >= target:
            break
        if index in taken or spent + entry.salary > budget:
            continue
        take(index, entry)

    return selected, spent


def select_roster(
    batters: Sequence[RankedBatter],
    pitchers: Sequence[RankedPitcher],
    prefs: StrategyPreferences,
    requirements: RosterRequirements,
    *,
    budget_relaxation: float = PITCHER_BUDGET_RELAXATION,
) -> SelectionResult:
    """Allocate a roster from ranked pools.

    Never raises for infeasible pools; the returned roster is the best the
    greedy passes could build and the validator reports what is missing.
    """

    batter_budget, pitcher_budget = split_budget(requirements.salary_cap, prefs)
    chosen_pitchers, pitcher_spend = select_pitchers(
        pitchers, prefs, pitcher_budget, budget_relaxation=budget_relaxation
    )
    # Any relaxed pitcher overage comes out of the batter share.
    batter_budget -= max(0.0, pitcher_spend - pitcher_budget)
    chosen_batters, batter_spend = select_batters(batters, prefs, requirements, batter_budget)

    logger.info(
        "Selected %s batters (%s) and %s pitchers (%s) from pools of %s/%s",
        len(chosen_batters),
        batter_spend,
        len(chosen_pitchers),
        pitcher_spend,
        len(batters),
        len(pitchers),
    )
    return SelectionResult(
        batters=tuple(chosen_batters),
        pitchers=tuple(chosen_pitchers),
        batter_budget=batter_budget,
        pitcher_budget=pitcher_budget,
        batter_spend=batter_spend,
        pitcher_spend=pitcher_spend,
    )


def build_roster(
    batters: Sequence[BatterRecord],
    pitchers: Sequence[PitcherRecord],
    weights: ValuationWeights,
    prefs: StrategyPreferences,
    requirements: RosterRequirements,
    *,
    budget_relaxation: float = PITCHER_BUDGET_RELAXATION,
) -> RosterBuild:
    """Value, rank, select and validate in one call."""

    selection = select_roster(
        rank_batters(batters, weights.batter, prefs),
        rank_pitchers(pitchers, weights.pitcher, prefs),
        prefs,
        requirements,
        budget_relaxation=budget_relaxation,
    )
    report = validate_selection(selection, requirements)
    if not report.passed:
        logger.info("Roster fails %s requirement(s): %s", len(report.deficits), "; ".join(d.message for d in report.deficits))
    return RosterBuild(selection=selection, report=report)
