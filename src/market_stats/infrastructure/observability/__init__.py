"""
Observability for the fetch pipeline and statistics API: structured logs with
layer and component context so retries, upstream rejections and computation
failures can be traced back to the instrument and URL that caused them.
"""

from .logging import (
    get_api_logger,
    get_infrastructure_logger,
    get_ingestion_logger,
    get_logger,
    get_processing_logger,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_infrastructure_logger",
    "get_ingestion_logger",
    "get_processing_logger",
    "get_api_logger",
]
