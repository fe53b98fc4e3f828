"""Parsers for the string-encoded fields found on player cards."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


REQUIRED_POSITIONS: Tuple[str, ...] = ("C", "1B", "2B", "3B", "SS", "LF", "CF", "RF", "DH")
CATCHER = "C"

_BALANCE_RE = re.compile(r"(\d+)\s*([RL])", re.IGNORECASE)
_ENDURANCE_RE = re.compile(r"([SRC])(\d*)", re.IGNORECASE)
_POSITION_SPLIT_RE = re.compile(r"[\s,/]+")
_FIELDING_SPLIT_RE = re.compile(r"[/,]")
_FIELDING_POSITION_RE = re.compile(r"^([a-z0-9]+)-", re.IGNORECASE)
_FIELDING_RANGE_RE = re.compile(r"-(\d+)")
_FIELDING_ARM_RE = re.compile(r"\(([+-]?\d+)\)")
_FIELDING_ERROR_RE = re.compile(r"e(\d+)")

_ARM_POSITIONS = {"LF", "CF", "RF", "C"}


class Side(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    NEUTRAL = "E"


@dataclass(frozen=True)
class PlatoonBalance:
    """Platoon strength toward one side of the pitching matchup."""

    side: Side = Side.NEUTRAL
    level: int = 0


@dataclass(frozen=True)
class EnduranceProfile:
    """Role capabilities decoded from a pitcher's endurance code."""

    can_start: bool = False
    can_relieve: bool = False
    is_closer: bool = False
    starter_level: int = 0
    relief_level: int = 0

    @property
    def is_pure_reliever(self) -> bool:
        return self.can_relieve and not self.can_start


@dataclass(frozen=True)
class DefensiveRating:
    """One fielding entry: range 1 (best) to 5 (worst), 0 when unrated."""

    position: str
    range: int = 0
    error: int = 0
    arm: Optional[int] = None


NEUTRAL_BALANCE = PlatoonBalance()
NO_ROLES = EnduranceProfile()


def parse_balance(code: object) -> PlatoonBalance:
    """Decode codes like ``"3R"``; anything else is neutral."""

    if not isinstance(code, str):
        return NEUTRAL_BALANCE
    match = _BALANCE_RE.search(code)
    if not match:
        return NEUTRAL_BALANCE
    level = int(match.group(1))
    side = Side.RIGHT if match.group(2).upper() == "R" else Side.LEFT
    return PlatoonBalance(side=side, level=level)


def parse_endurance(code: object) -> EnduranceProfile:
    """Decode endurance codes such as ``"S7"``, ``"R2C1"`` or ``"S6R3"``.

    Every capability letter in the code counts, so a swingman code grants
    both starting and relief roles. A closer grade implies relief.
    """

    if not isinstance(code, str):
        return NO_ROLES
    can_start = can_relieve = is_closer = False
    starter_level = relief_level = 0
    for letter, grade in _ENDURANCE_RE.findall(code.upper()):
        level = int(grade) if grade else 0
        if letter == "S":
            can_start = True
            starter_level = max(starter_level, level)
        else:
            can_relieve = True
            relief_level = max(relief_level, level)
            if letter == "C":
                is_closer = True
    return EnduranceProfile(
        can_start=can_start,
        can_relieve=can_relieve,
        is_closer=is_closer,
        starter_level=starter_level,
        relief_level=relief_level,
    )


def split_positions(text: object) -> Tuple[str, ...]:
    """Tokenize a position list on whitespace, commas and slashes.

    Rating suffixes are dropped, so ``"rf-4(0)e8 / 1b"`` yields ``("RF", "1B")``.
    """

    if not isinstance(text, str):
        return ()
    tokens: List[str] = []
    for raw in _POSITION_SPLIT_RE.split(text):
        token = raw.split("-", 1)[0].strip().upper()
        if token:
            tokens.append(token)
    return tuple(tokens)


def parse_fielding(text: object) -> Tuple[DefensiveRating, ...]:
    """Parse a fielding card string such as ``"rf-4(0)e8 / lf-3e8"``."""

    if not isinstance(text, str) or not text.strip():
        return ()

    ratings: List[DefensiveRating] = []
    for entry in (part.strip() for part in _FIELDING_SPLIT_RE.split(text)):
        if not entry:
            continue
        if "-" not in entry:
            ratings.append(DefensiveRating(position=entry.upper()))
            continue

        position_match = _FIELDING_POSITION_RE.match(entry)
        if not position_match:
            continue
        position = position_match.group(1).upper()

        range_match = _FIELDING_RANGE_RE.search(entry)
        error_match = _FIELDING_ERROR_RE.search(entry)
        arm: Optional[int] = None
        if position in _ARM_POSITIONS:
            arm_match = _FIELDING_ARM_RE.search(entry)
            if arm_match:
                arm = int(arm_match.group(1))

        ratings.append(
            DefensiveRating(
                position=position,
                range=int(range_match.group(1)) if range_match else 0,
                error=int(error_match.group(1)) if error_match else 0,
                arm=arm,
            )
        )
    return tuple(ratings)
