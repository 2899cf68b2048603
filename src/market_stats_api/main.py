from fastapi import FastAPI

from market_stats import __version__
from market_stats.config import get_config
from market_stats.infrastructure.observability import setup_logging
from market_stats_api.health import router as health_router
from market_stats_api.routes.statistics import router as statistics_router

app = FastAPI(title="Market Stats API", version=__version__)
app.include_router(health_router, prefix="")  # /health directly
app.include_router(statistics_router, prefix="")  # /covariance, /volatility


@app.get("/")
async def root():
    return {"message": "Market Stats API is running"}


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    setup_logging(level=config.logging.level, json_logs=config.logging.json_logs)
    uvicorn.run(app, host=config.api.host, port=config.api.port)
