from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pyroster.config_loader import SettingsProfile
from pyroster.selection import PITCHER_BUDGET_RELAXATION


class SettingsPayload(BaseModel):
    weights: str = Field(default="standard")
    strategy: str = Field(default="balanced")
    requirements: str = Field(default="standard")
    batter_weights: dict[str, float] = Field(default_factory=dict)
    pitcher_weights: dict[str, float] = Field(default_factory=dict)
    strategy_overrides: dict[str, Any] = Field(default_factory=dict)
    requirement_overrides: dict[str, Any] = Field(default_factory=dict)
    budget_relaxation: float = Field(default=PITCHER_BUDGET_RELAXATION, ge=0.0, le=1.0)

    def to_profile(self) -> SettingsProfile:
        return SettingsProfile(
            weights=self.weights,
            strategy=self.strategy,
            requirements=self.requirements,
            batter_weights=dict(self.batter_weights),
            pitcher_weights=dict(self.pitcher_weights),
            strategy_overrides=dict(self.strategy_overrides),
            requirement_overrides=dict(self.requirement_overrides),
        )


class PresetsResponse(BaseModel):
    weights: list[str]
    strategies: list[str]
    requirements: list[str]
