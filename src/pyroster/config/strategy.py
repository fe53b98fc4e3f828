"""Strategy preferences used to rank players and shape the roster."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping


_SLIDERS = (
    "speed",
    "power",
    "defense",
    "on_base",
    "starter",
    "reliever",
    "closer",
    "strikeout",
    "batter_budget_percent",
)
_TARGETS = (
    "target_pitchers",
    "target_batters",
    "target_can_start",
    "target_can_relieve",
    "target_pure_relievers",
)


@dataclass(frozen=True)
class StrategyPreferences:
    """Category preferences (0-100 sliders) plus the target roster shape."""

    speed: float = 50
    power: float = 50
    defense: float = 50
    on_base: float = 50
    starter: float = 60
    reliever: float = 40
    closer: float = 30
    strikeout: float = 50
    batter_budget_percent: float = 55
    target_pitchers: int = 11
    target_batters: int = 15
    target_can_start: int = 6
    target_can_relieve: int = 5
    target_pure_relievers: int = 4

    def __post_init__(self) -> None:
        for name in _SLIDERS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value!r}")
        for name in _TARGETS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value!r}")

    @property
    def pitcher_budget_percent(self) -> float:
        return 100 - self.batter_budget_percent

    def with_overrides(self, overrides: Mapping[str, Any]) -> "StrategyPreferences":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise KeyError(f"Unknown strategy field(s): {', '.join(unknown)}")
        return replace(self, **overrides)


BALANCED = StrategyPreferences()

_STRATEGY_PRESETS: Dict[str, StrategyPreferences] = {
    "balanced": BALANCED,
    "power_hitting": replace(
        BALANCED,
        power=90,
        speed=20,
        defense=30,
        batter_budget_percent=65,
    ),
    "speed_defense": replace(
        BALANCED,
        speed=90,
        defense=85,
        power=30,
        batter_budget_percent=60,
    ),
    "pitching_first": replace(
        BALANCED,
        starter=90,
        strikeout=80,
        batter_budget_percent=40,
        target_pitchers=12,
        target_can_start=7,
        target_can_relieve=5,
        target_pure_relievers=4,
    ),
}


def iter_strategies() -> Iterable[tuple[str, StrategyPreferences]]:
    """Return (name, preferences) pairs for every preset."""

    return _STRATEGY_PRESETS.items()


def get_strategy(name: str) -> StrategyPreferences:
    """Fetch a strategy preset by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _STRATEGY_PRESETS:
        raise KeyError(f"No strategy preset configured for name={name!r}")
    return _STRATEGY_PRESETS[key]
