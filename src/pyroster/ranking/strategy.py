"""Strategy-weighted ranking scores.

The scores blend the neutral fantasy value with the user's category
preferences. They are heuristic weighted sums; the coefficients below define
the selection order and are part of the public contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar, Union

from pyroster.config.strategy import StrategyPreferences
from pyroster.config.weights import BatterWeights, PitcherWeights
from pyroster.models import BatterRecord, PitcherRecord
from pyroster.valuation import BatterValuation, PitcherValuation, value_batters, value_pitchers


VALUE_SHARE = 0.3
SALARY_VALUE_FACTOR = 2.0
WHIP_CEILING = 2.0


def _per_game(total: float, games: int) -> float:
    return total / games if games > 0 else 0.0


def _defined(metric: Optional[float]) -> float:
    return 0.0 if metric is None else metric


def rank_batter(player: BatterRecord, valuation: BatterValuation, prefs: StrategyPreferences) -> float:
    score = valuation.value * VALUE_SHARE

    speed = _per_game(player.stolen_bases * 3 + player.triples * 2, player.games)
    score += speed * (prefs.speed / 100) * 50

    power = _per_game(player.home_runs * 4 + player.doubles * 2, player.games)
    score += power * (prefs.power / 100) * 50

    # Unrated or missing fielding adds nothing; range 0 is not a best-in-class glove.
    if player.defense and 1 <= player.defense[0].range <= 5:
        primary = player.defense[0]
        defense = (6 - primary.range) * 2 - primary.error * 0.5
        score += defense * (prefs.defense / 100) * 10

    on_base = _per_game(player.walks + player.hit_by_pitch, player.games)
    score += on_base * (prefs.on_base / 100) * 30

    score += _defined(valuation.per_salary) * SALARY_VALUE_FACTOR
    return score


def rank_pitcher(player: PitcherRecord, valuation: PitcherValuation, prefs: StrategyPreferences) -> float:
    score = valuation.value * VALUE_SHARE
    roles = player.roles

    if roles.can_start:
        score += (prefs.starter / 100) * 100
        score += _defined(valuation.per_start) * 5
    if roles.can_relieve:
        score += (prefs.reliever / 100) * 80
    if roles.is_closer:
        score += (prefs.closer / 100) * 60

    innings = player.innings_pitched
    strikeout_rate = player.strikeouts / innings if innings > 0 else 0.0
    score += strikeout_rate * (prefs.strikeout / 100) * 100

    # Baserunners per inning; no innings counts as the worst case.
    whip = (player.walks + player.hits_allowed) / innings if innings > 0 else WHIP_CEILING
    score += (WHIP_CEILING - min(whip, WHIP_CEILING)) * 50

    score += _defined(valuation.per_salary) * SALARY_VALUE_FACTOR
    return score


P = TypeVar("P", BatterRecord, PitcherRecord)
V = TypeVar("V", BatterValuation, PitcherValuation)


@dataclass(frozen=True)
class Ranked(Generic[P, V]):
    player: P
    valuation: V
    score: float

    @property
    def player_id(self) -> str:
        return self.player.player_id

    @property
    def salary(self) -> int:
        return self.player.salary


RankedBatter = Ranked[BatterRecord, BatterValuation]
RankedPitcher = Ranked[PitcherRecord, PitcherValuation]
RankedEntry = Union[RankedBatter, RankedPitcher]


def rank_batters(
    players: Sequence[BatterRecord], weights: BatterWeights, prefs: StrategyPreferences
) -> List[RankedBatter]:
    """Value and score a batter pool, preserving input order."""

    return [
        Ranked(player, valuation, rank_batter(player, valuation, prefs))
        for player, valuation in value_batters(players, weights)
    ]


def rank_pitchers(
    players: Sequence[PitcherRecord], weights: PitcherWeights, prefs: StrategyPreferences
) -> List[RankedPitcher]:
    return [
        Ranked(player, valuation, rank_pitcher(player, valuation, prefs))
        for player, valuation in value_pitchers(players, weights)
    ]


def sort_ranked(entries: Sequence[RankedEntry]) -> List[RankedEntry]:
    """Descending by score; equal scores keep their input order."""

    return sorted(entries, key=lambda entry: entry.score, reverse=True)
