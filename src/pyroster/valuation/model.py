"""Linear fantasy valuation for batters and pitchers.

Values are plain weighted sums of season events. Rate metrics normalise the
value by usage; when the denominator is zero the metric is ``None`` and
callers treat it as the lowest possible value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pyroster.config.weights import BatterWeights, PitcherWeights
from pyroster.models import BatterRecord, PitcherRecord
from pyroster.models.codes import Side


PA_BASELINE = 600
SALARY_UNIT = 1000


@dataclass(frozen=True)
class BatterValuation:
    value: float
    singles: int
    outs: int
    platoon_bonus: float
    defense_bonus: float
    per_600_pa: Optional[float]
    per_game: Optional[float]
    per_salary: Optional[float]


@dataclass(frozen=True)
class PitcherValuation:
    value: float
    per_inning: Optional[float]
    per_start: Optional[float]
    per_salary: Optional[float]


def _ratio(numerator: float, denominator: float) -> Optional[float]:
    if not denominator:
        return None
    result = numerator / denominator
    return result if math.isfinite(result) else None


def _per_salary(value: float, salary: int) -> Optional[float]:
    ratio = _ratio(value, salary / SALARY_UNIT)
    return None if ratio is None else ratio * 100


def rate_sort_key(metric: Optional[float]) -> float:
    """Sort key that ranks undefined metrics below every real value."""

    return -math.inf if metric is None else metric


def platoon_bonus(player: BatterRecord, weights: BatterWeights) -> float:
    balance = player.platoon
    if balance.side is Side.RIGHT:
        return balance.level * weights.vs_right
    if balance.side is Side.LEFT:
        return balance.level * weights.vs_left
    return 0.0


def defense_bonus(player: BatterRecord, weights: BatterWeights) -> float:
    """Bonus from the first listed fielding entry; unrated range counts as none."""

    if not player.defense:
        return 0.0
    primary = player.defense[0]
    if not 1 <= primary.range <= 5:
        return 0.0
    return (6 - primary.range) * weights.range_bonus + primary.error * weights.error_penalty


def value_batter(player: BatterRecord, weights: BatterWeights) -> BatterValuation:
    singles = player.hits - player.doubles - player.triples - player.home_runs
    outs = player.at_bats - player.hits
    platoon = platoon_bonus(player, weights)
    defense = defense_bonus(player, weights)

    value = (
        singles * weights.single
        + player.doubles * weights.double
        + player.triples * weights.triple
        + player.home_runs * weights.home_run
        + player.walks * weights.walk
        + player.hit_by_pitch * weights.hit_by_pitch
        + player.stolen_bases * weights.stolen_base
        + player.caught_stealing * weights.caught_stealing
        + outs * weights.out_penalty
        + platoon
        + defense
    )

    per_pa = _ratio(value, player.plate_appearances)
    return BatterValuation(
        value=value,
        singles=singles,
        outs=outs,
        platoon_bonus=platoon,
        defense_bonus=defense,
        per_600_pa=None if per_pa is None else per_pa * PA_BASELINE,
        per_game=_ratio(value, player.games),
        per_salary=_per_salary(value, player.salary),
    )


def value_pitcher(player: PitcherRecord, weights: PitcherWeights) -> PitcherValuation:
    value = (
        player.strikeouts * weights.strikeout
        + player.walks * weights.walk_allowed
        + player.hits_allowed * weights.hit_allowed
        + player.home_runs_allowed * weights.home_run_allowed
        + player.earned_runs * weights.earned_run
    )
    return PitcherValuation(
        value=value,
        per_inning=_ratio(value, player.innings_pitched),
        per_start=_ratio(value, player.games_started),
        per_salary=_per_salary(value, player.salary),
    )


def value_batters(
    players: Sequence[BatterRecord], weights: BatterWeights
) -> List[Tuple[BatterRecord, BatterValuation]]:
    return [(player, value_batter(player, weights)) for player in players]


def value_pitchers(
    players: Sequence[PitcherRecord], weights: PitcherWeights
) -> List[Tuple[PitcherRecord, PitcherValuation]]:
    return [(player, value_pitcher(player, weights)) for player in players]
