"""Linear scoring weights and the named weight presets."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from numbers import Real
from typing import Any, Dict, Iterable, Mapping, Type, TypeVar


_W = TypeVar("_W", "BatterWeights", "PitcherWeights")


def _from_mapping(cls: Type[_W], base: _W, overrides: Mapping[str, Any]) -> _W:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise KeyError(f"Unknown {cls.__name__} coefficient(s): {', '.join(unknown)}")
    for key, value in overrides.items():
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"{cls.__name__}.{key} must be a number, got {value!r}")
    return replace(base, **{key: float(value) for key, value in overrides.items()})


@dataclass(frozen=True)
class BatterWeights:
    single: float = 2.0
    double: float = 3.0
    triple: float = 5.0
    home_run: float = 6.0
    walk: float = 1.0
    hit_by_pitch: float = 1.0
    stolen_base: float = 2.0
    caught_stealing: float = -1.0
    out_penalty: float = -0.3
    vs_right: float = 0.0
    vs_left: float = 0.0
    range_bonus: float = 0.0
    error_penalty: float = 0.0

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any], base: "BatterWeights | None" = None) -> "BatterWeights":
        """Build weights from ``base`` (defaults) with ``overrides`` applied."""

        return _from_mapping(cls, base or cls(), overrides)


@dataclass(frozen=True)
class PitcherWeights:
    strikeout: float = 1.0
    walk_allowed: float = -1.0
    hit_allowed: float = -1.0
    home_run_allowed: float = -3.0
    earned_run: float = -2.0

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any], base: "PitcherWeights | None" = None) -> "PitcherWeights":
        return _from_mapping(cls, base or cls(), overrides)


@dataclass(frozen=True)
class ValuationWeights:
    name: str
    batter: BatterWeights = field(default_factory=BatterWeights)
    pitcher: PitcherWeights = field(default_factory=PitcherWeights)

    def with_overrides(
        self,
        *,
        batter: Mapping[str, Any] | None = None,
        pitcher: Mapping[str, Any] | None = None,
    ) -> "ValuationWeights":
        return ValuationWeights(
            name=self.name,
            batter=BatterWeights.from_mapping(batter or {}, self.batter),
            pitcher=PitcherWeights.from_mapping(pitcher or {}, self.pitcher),
        )


_WEIGHT_PRESETS: Dict[str, ValuationWeights] = {
    "standard": ValuationWeights(name="standard"),
    "platoon_defense": ValuationWeights(
        name="platoon_defense",
        batter=BatterWeights(
            vs_right=1.5,
            vs_left=1.0,
            range_bonus=4.0,
            error_penalty=-0.5,
        ),
    ),
}

DEFAULT_WEIGHTS = _WEIGHT_PRESETS["standard"]


def iter_weights() -> Iterable[ValuationWeights]:
    """Return an iterator of all weight presets."""

    return _WEIGHT_PRESETS.values()


def get_weights(name: str) -> ValuationWeights:
    """Fetch a weight preset by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _WEIGHT_PRESETS:
        raise KeyError(f"No valuation weights configured for name={name!r}")
    return _WEIGHT_PRESETS[key]
