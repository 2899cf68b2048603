"""HTTP connectors: aiohttp transport and the retrying request executor."""

from .aiohttp_client import AiohttpClient  # noqa: F401
from .executor import RequestExecutor  # noqa: F401
from .retry_machine import (  # noqa: F401
    Outcome,
    RetryMachine,
    RetryState,
    classify_status,
    transition,
    wake,
)

__all__ = [
    "AiohttpClient",
    "RequestExecutor",
    "Outcome",
    "RetryMachine",
    "RetryState",
    "classify_status",
    "transition",
    "wake",
]
