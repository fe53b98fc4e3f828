"""REST API for the pyroster engine."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, TypeVar

from fastapi import FastAPI, HTTPException

from pyroster.api.schemas import (
    PresetsResponse,
    RosterRequest,
    RosterResponse,
    SettingsPayload,
    ValidateRequest,
    ValidationResponse,
    ValuationRequest,
    ValuationResponse,
    batter_response,
    pitcher_response,
    roster_response,
    validation_response,
)
from pyroster.config import (
    RosterRequirements,
    StrategyPreferences,
    ValuationWeights,
    get_requirements,
    get_strategy,
    get_weights,
    iter_requirements,
    iter_strategies,
    iter_weights,
)
from pyroster.ranking import rank_batters, rank_pitchers
from pyroster.selection import build_roster
from pyroster.validation import validate_roster
from pyroster.valuation import rate_sort_key


logger = logging.getLogger(__name__)

VALUATION_SORT_FIELDS = ("score", "value", "per_600_pa", "per_game", "per_inning", "per_start", "per_salary")

Row = TypeVar("Row")


def _error_text(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def _sorted_rows(rows: List[Row], sort_by: Optional[str]) -> List[Row]:
    if sort_by is None:
        return rows
    # Rows without the metric (batters have no per_inning) keep their order at the end.
    return sorted(rows, key=lambda row: rate_sort_key(getattr(row, sort_by, None)), reverse=True)


def _resolve_settings(
    payload: SettingsPayload,
) -> Tuple[ValuationWeights, StrategyPreferences, RosterRequirements]:
    try:
        get_weights(payload.weights)
        get_strategy(payload.strategy)
        get_requirements(payload.requirements)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=_error_text(exc)) from exc
    try:
        return payload.to_profile().resolve()
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=_error_text(exc)) from exc


def create_app() -> FastAPI:
    app = FastAPI(title="pyroster engine")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/presets", response_model=PresetsResponse)
    async def presets() -> PresetsResponse:
        return PresetsResponse(
            weights=[weights.name for weights in iter_weights()],
            strategies=[name for name, _ in iter_strategies()],
            requirements=[name for name, _ in iter_requirements()],
        )

    @app.post("/valuations", response_model=ValuationResponse)
    async def valuations(request: ValuationRequest, sort_by: Optional[str] = None) -> ValuationResponse:
        if sort_by is not None and sort_by not in VALUATION_SORT_FIELDS:
            raise HTTPException(
                status_code=400,
                detail=f"sort_by must be one of: {', '.join(VALUATION_SORT_FIELDS)}",
            )
        weights, strategy, _ = _resolve_settings(request)
        batters = [batter_response(entry) for entry in rank_batters(request.batters, weights.batter, strategy)]
        pitchers = [pitcher_response(entry) for entry in rank_pitchers(request.pitchers, weights.pitcher, strategy)]
        return ValuationResponse(
            batters=_sorted_rows(batters, sort_by),
            pitchers=_sorted_rows(pitchers, sort_by),
        )

    @app.post("/roster", response_model=RosterResponse)
    async def roster(request: RosterRequest) -> RosterResponse:
        weights, strategy, requirements = _resolve_settings(request)
        build = build_roster(
            request.batters,
            request.pitchers,
            weights,
            strategy,
            requirements,
            budget_relaxation=request.budget_relaxation,
        )
        logger.info(
            "Built roster with %s batters and %s pitchers (passed=%s)",
            len(build.selection.batters),
            len(build.selection.pitchers),
            build.report.passed,
        )
        return roster_response(build)

    @app.post("/validate", response_model=ValidationResponse)
    async def validate(request: ValidateRequest) -> ValidationResponse:
        try:
            requirements = get_requirements(request.requirements)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=_error_text(exc)) from exc
        try:
            requirements = requirements.with_overrides(request.requirement_overrides)
        except (KeyError, TypeError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=_error_text(exc)) from exc
        return validation_response(validate_roster(request.batters, request.pitchers, requirements))

    return app
