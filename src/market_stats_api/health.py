from typing import Any

import yaml
from fastapi import APIRouter, HTTPException

from market_stats import __version__
from market_stats.config import get_config
from market_stats.infrastructure.observability import get_api_logger

log = get_api_logger("health")

router = APIRouter()


async def check_config() -> bool:
    """Configuration must load and validate."""
    try:
        get_config()
        return True
    except (ValueError, OSError, yaml.YAMLError) as e:
        log.error("config_check_failed", error=str(e))
        return False


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Liveness check endpoint."""
    health_status = {
        "status": "healthy",
        "services": {
            "config": await check_config(),
        },
        "version": __version__,
    }

    # If any check fails, return 503
    if not all(health_status["services"].values()):
        health_status["status"] = "unhealthy"
        raise HTTPException(status_code=503, detail=health_status)

    return health_status


@router.get("/ready")
async def readiness_check() -> dict[str, Any]:
    """Readiness check for Kubernetes."""
    return {"status": "ready"}
