"""Covariance and volatility endpoints.

Client errors (missing or unrecognized instrument) answer 400 and computation
failures answer 500, both with a plain-text body.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from market_stats.analytics.service import StatsService
from market_stats.common.exceptions import (
    MarketStatsError,
    MissingParameterError,
    UnrecognizedInstrumentError,
)
from market_stats.infrastructure.observability import get_api_logger
from market_stats.ingestion.models.enums import Instrument
from market_stats_api.dependencies import get_stats_service

log = get_api_logger("statistics-routes")

router = APIRouter()


def _parse_instrument(name: str, value: str | None) -> Instrument:
    if value is None:
        raise MissingParameterError(name)
    instrument = Instrument.from_alias(value)
    if instrument is None:
        raise UnrecognizedInstrumentError(name, value)
    return instrument


def _bad_request(error: MarketStatsError, path: str) -> PlainTextResponse:
    log.warning("bad_request", path=path, error=error.message)
    return PlainTextResponse(error.message, status_code=400)


def _server_error(error: MarketStatsError, path: str) -> PlainTextResponse:
    log.error("computation_failed", path=path, error=error.message)
    return PlainTextResponse(error.message, status_code=500)


@router.get("/covariance")
async def covariance(
    token_1: str | None = None,
    token_2: str | None = None,
    service: StatsService = Depends(get_stats_service),
):
    """Covariance and correlation between two instruments' daily closes."""
    try:
        first = _parse_instrument("token_1", token_1)
        second = _parse_instrument("token_2", token_2)
    except (MissingParameterError, UnrecognizedInstrumentError) as e:
        return _bad_request(e, "/covariance")

    try:
        result = await service.calculate_covariance(first, second)
    except MarketStatsError as e:
        return _server_error(e, "/covariance")

    return JSONResponse(result.to_dict())


@router.get("/volatility")
async def volatility(
    token: str | None = None,
    service: StatsService = Depends(get_stats_service),
):
    """Annualized realized volatility of one instrument."""
    try:
        instrument = _parse_instrument("token", token)
    except (MissingParameterError, UnrecognizedInstrumentError) as e:
        return _bad_request(e, "/volatility")

    try:
        result = await service.calculate_realized_volatility(instrument)
    except MarketStatsError as e:
        return _server_error(e, "/volatility")

    return JSONResponse(result.to_json_value())
