"""Hard roster constraints checked by the validator."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping


@dataclass(frozen=True)
class RosterRequirements:
    min_pitchers: int = 10
    max_pitchers: int = 12
    min_batters: int = 13
    max_batters: int = 17
    min_can_start: int = 5
    min_can_relieve: int = 4
    min_pure_relievers: int = 4
    min_catchers: int = 2
    require_all_positions: bool = False
    salary_cap: int = 80_000_000

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "require_all_positions":
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{f.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value!r}")
        if self.min_pitchers > self.max_pitchers:
            raise ValueError("min_pitchers cannot exceed max_pitchers")
        if self.min_batters > self.max_batters:
            raise ValueError("min_batters cannot exceed max_batters")

    def with_overrides(self, overrides: Mapping[str, Any]) -> "RosterRequirements":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise KeyError(f"Unknown requirement field(s): {', '.join(unknown)}")
        return replace(self, **overrides)


_REQUIREMENT_PRESETS: Dict[str, RosterRequirements] = {
    "standard": RosterRequirements(),
    "full_coverage": RosterRequirements(require_all_positions=True),
}

DEFAULT_REQUIREMENTS = _REQUIREMENT_PRESETS["standard"]


def iter_requirements() -> Iterable[tuple[str, RosterRequirements]]:
    return _REQUIREMENT_PRESETS.items()


def get_requirements(name: str) -> RosterRequirements:
    """Fetch a requirements preset by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _REQUIREMENT_PRESETS:
        raise KeyError(f"No roster requirements configured for name={name!r}")
    return _REQUIREMENT_PRESETS[key]
