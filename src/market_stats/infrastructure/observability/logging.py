"""
Structured logging infrastructure for market-stats.
Provides consistent, machine-readable logs across the fetch pipeline and the API.

Log Structure:
    {
        "app": "market-stats",          # Application identifier
        "layer": "ingestion",           # Architectural layer
        "component": "request-executor",# Specific component/service
        "module": "...",                # Python module (optional)
        "instrument": "Bitcoin",        # Domain context
        "event": "series_fetched",      # What happened
        ...
    }

Architectural Layers:
    - infrastructure: Cross-cutting (config, clock)
    - ingestion: Data acquisition (request executor, series fetcher)
    - processing: Alignment and statistics
    - api: REST API services and the CLI
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

Layer = Literal["infrastructure", "ingestion", "processing", "api"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the application identifier to every log entry."""
    event_dict["app"] = "market-stats"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity levels.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable format (dev mode).
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from market_stats.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance with architectural context.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (infrastructure, ingestion, processing, api)
        component: Specific component/service within the layer
        **initial_context: Additional context key-value pairs to bind to logger

    Returns:
        Configured structlog logger with bound context

    Usage:
        >>> log = get_logger(__name__, layer="ingestion", component="series-fetcher")
        >>> log.info("series_fetched", points=251)
    """
    context: dict[str, Any] = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    # Initial values keep the proxy lazy, so module-level loggers pick up
    # whatever setup_logging() configures later.
    args = (name,) if name else ()
    return structlog.get_logger(*args, **context)


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_infrastructure_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the infrastructure layer (config, clock).

    Usage:
        >>> log = get_infrastructure_logger("config-loader")
        >>> log.info("config_loaded", env="dev")
    """
    return get_logger(
        "infrastructure",
        layer="infrastructure",
        component=component,
        **context,
    )


def get_ingestion_logger(
    component: str,
    instrument: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the ingestion layer (data acquisition).

    Args:
        component: Component name (e.g., "request-executor", "series-fetcher")
        instrument: Instrument display name - optional
        **context: Additional context (url, symbol, etc.)

    Usage:
        >>> log = get_ingestion_logger("series-fetcher", instrument="Bitcoin")
        >>> log.info("fetching_series", lookback_days=365)
    """
    ctx = {}
    if instrument:
        ctx["instrument"] = instrument
    ctx.update(context)

    return get_logger(
        "ingestion",
        layer="ingestion",
        component=component,
        **ctx,
    )


def get_processing_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the processing layer (alignment, statistics).

    Usage:
        >>> log = get_processing_logger("series-aligner")
        >>> log.info("series_aligned", common_dates=250)
    """
    return get_logger(
        "processing",
        layer="processing",
        component=component,
        **context,
    )


def get_api_logger(
    component: str = "fastapi",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the API layer (REST API services, CLI).

    Usage:
        >>> log = get_api_logger()
        >>> log.info("request_received", method="GET", path="/covariance")
    """
    return get_logger(
        "api",
        layer="api",
        component=component,
        **context,
    )
