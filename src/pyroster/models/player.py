"""Canonical player models shared by valuation, selection and the API."""

from __future__ import annotations

import math
from functools import cached_property
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from .codes import (
    CATCHER,
    DefensiveRating,
    EnduranceProfile,
    PlatoonBalance,
    parse_balance,
    parse_endurance,
    parse_fielding,
    split_positions,
)


def _coerce_count(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        try:
            return int(value)
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError:
            return 0
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    return 0


def _coerce_float(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    return 0.0


class _PlayerBase(BaseModel):
    player_id: str = Field(..., min_length=1)
    name: str
    season: str = ""
    team: Optional[str] = None
    salary: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("salary", mode="before")
    @classmethod
    def _salary_number(cls, value: Any) -> Any:
        return _coerce_count(value)


class BatterRecord(_PlayerBase):
    """Season line for a position player."""

    at_bats: int = 0
    hits: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    walks: int = 0
    hit_by_pitch: int = 0
    stolen_bases: int = 0
    caught_stealing: int = 0
    plate_appearances: int = 0
    games: int = 0
    balance: str = "E"
    positions: str = ""
    defense: Tuple[DefensiveRating, ...] = ()

    @field_validator(
        "at_bats",
        "hits",
        "doubles",
        "triples",
        "home_runs",
        "walks",
        "hit_by_pitch",
        "stolen_bases",
        "caught_stealing",
        "plate_appearances",
        "games",
        mode="before",
    )
    @classmethod
    def _stat_number(cls, value: Any) -> Any:
        return _coerce_count(value)

    @field_validator("balance", "positions", mode="before")
    @classmethod
    def _code_text(cls, value: Any) -> Any:
        return value if isinstance(value, str) else ""

    @field_validator("defense", mode="before")
    @classmethod
    def _fielding_card(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return parse_fielding(value)
        return value

    # Code views are parsed on first access and kept on the instance.
    @cached_property
    def platoon(self) -> PlatoonBalance:
        return parse_balance(self.balance)

    @cached_property
    def position_codes(self) -> Tuple[str, ...]:
        return split_positions(self.positions)

    @cached_property
    def primary_position(self) -> str:
        if self.defense:
            return self.defense[0].position.upper()
        codes = self.position_codes
        return codes[0] if codes else "DH"

    @property
    def is_catcher(self) -> bool:
        return CATCHER in self.position_codes


class PitcherRecord(_PlayerBase):
    """Season line for a pitcher."""

    innings_pitched: float = 0.0
    strikeouts: int = 0
    walks: int = 0
    hits_allowed: int = 0
    home_runs_allowed: int = 0
    earned_runs: int = 0
    games: int = 0
    games_started: int = 0
    endurance: str = ""

    @field_validator(
        "strikeouts",
        "walks",
        "hits_allowed",
        "home_runs_allowed",
        "earned_runs",
        "games",
        "games_started",
        mode="before",
    )
    @classmethod
    def _stat_number(cls, value: Any) -> Any:
        return _coerce_count(value)

    @field_validator("innings_pitched", mode="before")
    @classmethod
    def _innings_number(cls, value: Any) -> Any:
        return _coerce_float(value)

    @field_validator("endurance", mode="before")
    @classmethod
    def _code_text(cls, value: Any) -> Any:
        return value if isinstance(value, str) else ""

    @cached_property
    def roles(self) -> EnduranceProfile:
        return parse_endurance(self.endurance)
