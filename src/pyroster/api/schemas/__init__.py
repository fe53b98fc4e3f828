"""Pydantic models for API I/O."""

from .settings import PresetsResponse, SettingsPayload
from .roster import (
    BatterValueResponse,
    DeficitResponse,
    PitcherValueResponse,
    PoolPayload,
    RosterRequest,
    RosterResponse,
    ValidateRequest,
    ValidationResponse,
    ValuationRequest,
    ValuationResponse,
    batter_response,
    pitcher_response,
    roster_response,
    validation_response,
)

__all__ = [
    "BatterValueResponse",
    "DeficitResponse",
    "PitcherValueResponse",
    "PoolPayload",
    "PresetsResponse",
    "RosterRequest",
    "RosterResponse",
    "SettingsPayload",
    "ValidateRequest",
    "ValidationResponse",
    "ValuationRequest",
    "ValuationResponse",
    "batter_response",
    "pitcher_response",
    "roster_response",
    "validation_response",
]
