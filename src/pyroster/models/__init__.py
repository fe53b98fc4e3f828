"""Player records and the parsed card codes they carry."""

from .codes import (
    REQUIRED_POSITIONS,
    DefensiveRating,
    EnduranceProfile,
    PlatoonBalance,
    Side,
    parse_balance,
    parse_endurance,
    parse_fielding,
    split_positions,
)
from .player import BatterRecord, PitcherRecord

__all__ = [
    "REQUIRED_POSITIONS",
    "BatterRecord",
    "DefensiveRating",
    "EnduranceProfile",
    "PitcherRecord",
    "PlatoonBalance",
    "Side",
    "parse_balance",
    "parse_endurance",
    "parse_fielding",
    "split_positions",
]
