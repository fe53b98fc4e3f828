from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pyroster.models import BatterRecord, PitcherRecord
from pyroster.ranking import RankedBatter, RankedPitcher
from pyroster.selection import RosterBuild
from pyroster.validation import ValidationReport

from .settings import SettingsPayload


class PoolPayload(BaseModel):
    batters: List[BatterRecord] = Field(default_factory=list)
    pitchers: List[PitcherRecord] = Field(default_factory=list)


class ValuationRequest(PoolPayload, SettingsPayload):
    pass


class RosterRequest(PoolPayload, SettingsPayload):
    pass


class ValidateRequest(PoolPayload):
    requirements: str = Field(default="standard")
    requirement_overrides: dict[str, int | bool] = Field(default_factory=dict)


class BatterValueResponse(BaseModel):
    player_id: str
    name: str
    salary: int
    positions: List[str]
    value: float
    score: float
    per_600_pa: float | None
    per_game: float | None
    per_salary: float | None


class PitcherValueResponse(BaseModel):
    player_id: str
    name: str
    salary: int
    endurance: str
    value: float
    score: float
    per_inning: float | None
    per_start: float | None
    per_salary: float | None


class ValuationResponse(BaseModel):
    batters: List[BatterValueResponse]
    pitchers: List[PitcherValueResponse]


class DeficitResponse(BaseModel):
    rule: str
    required: int
    actual: int
    shortfall: int
    message: str


class ValidationResponse(BaseModel):
    passed: bool
    pitchers: int
    can_start: int
    can_relieve: int
    pure_relievers: int
    batters: int
    catchers: int
    total_salary: int
    covered_positions: List[str]
    missing_positions: List[str]
    deficits: List[DeficitResponse]


class RosterResponse(BaseModel):
    batters: List[BatterValueResponse]
    pitchers: List[PitcherValueResponse]
    batter_budget: float
    pitcher_budget: float
    batter_spend: int
    pitcher_spend: int
    total_spend: int
    total_score: float
    validation: ValidationResponse


def batter_response(entry: RankedBatter) -> BatterValueResponse:
    player = entry.player
    return BatterValueResponse(
        player_id=player.player_id,
        name=player.name,
        salary=player.salary,
        positions=list(player.position_codes),
        value=entry.valuation.value,
        score=entry.score,
        per_600_pa=entry.valuation.per_600_pa,
        per_game=entry.valuation.per_game,
        per_salary=entry.valuation.per_salary,
    )


def pitcher_response(entry: RankedPitcher) -> PitcherValueResponse:
    player = entry.player
    return PitcherValueResponse(
        player_id=player.player_id,
        name=player.name,
        salary=player.salary,
        endurance=player.endurance,
        value=entry.valuation.value,
        score=entry.score,
        per_inning=entry.valuation.per_inning,
        per_start=entry.valuation.per_start,
        per_salary=entry.valuation.per_salary,
    )


def validation_response(report: ValidationReport) -> ValidationResponse:
    counts = report.counts
    return ValidationResponse(
        passed=report.passed,
        pitchers=counts.pitchers,
        can_start=counts.can_start,
        can_relieve=counts.can_relieve,
        pure_relievers=counts.pure_relievers,
        batters=counts.batters,
        catchers=counts.catchers,
        total_salary=counts.total_salary,
        covered_positions=list(report.covered_positions),
        missing_positions=list(report.missing_positions),
        deficits=[
            DeficitResponse(
                rule=deficit.rule,
                required=deficit.required,
                actual=deficit.actual,
                shortfall=deficit.shortfall,
                message=deficit.message,
            )
            for deficit in report.deficits
        ],
    )


def roster_response(build: RosterBuild) -> RosterResponse:
    selection = build.selection
    return RosterResponse(
        batters=[batter_response(entry) for entry in selection.batters],
        pitchers=[pitcher_response(entry) for entry in selection.pitchers],
        batter_budget=selection.batter_budget,
        pitcher_budget=selection.pitcher_budget,
        batter_spend=selection.batter_spend,
        pitcher_spend=selection.pitcher_spend,
        total_spend=selection.total_spend,
        total_score=selection.total_score,
        validation=validation_response(build.report),
    )
