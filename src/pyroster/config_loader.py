"""Persist and load CLI settings profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from pyroster.config import (
    RosterRequirements,
    StrategyPreferences,
    ValuationWeights,
    get_requirements,
    get_strategy,
    get_weights,
)


@dataclass
class SettingsProfile:
    weights: str = "standard"
    strategy: str = "balanced"
    requirements: str = "standard"
    batter_weights: Dict[str, float] = field(default_factory=dict)
    pitcher_weights: Dict[str, float] = field(default_factory=dict)
    strategy_overrides: Dict[str, Any] = field(default_factory=dict)
    requirement_overrides: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "SettingsProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            weights=data.get("weights", "standard"),
            strategy=data.get("strategy", "balanced"),
            requirements=data.get("requirements", "standard"),
            batter_weights=data.get("batter_weights", {}),
            pitcher_weights=data.get("pitcher_weights", {}),
            strategy_overrides=data.get("strategy_overrides", {}),
            requirement_overrides=data.get("requirement_overrides", {}),
        )

    def save(self, path: Path) -> None:
        payload = {
            "weights": self.weights,
            "strategy": self.strategy,
            "requirements": self.requirements,
            "batter_weights": self.batter_weights,
            "pitcher_weights": self.pitcher_weights,
            "strategy_overrides": self.strategy_overrides,
            "requirement_overrides": self.requirement_overrides,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def resolve(self) -> Tuple[ValuationWeights, StrategyPreferences, RosterRequirements]:
        """Look up the named presets and apply overrides; raises on bad names or keys."""

        weights = get_weights(self.weights).with_overrides(
            batter=self.batter_weights,
            pitcher=self.pitcher_weights,
        )
        strategy = get_strategy(self.strategy).with_overrides(self.strategy_overrides)
        requirements = get_requirements(self.requirements).with_overrides(self.requirement_overrides)
        return weights, strategy, requirements
