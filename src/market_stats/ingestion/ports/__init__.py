"""Transport ports for the ingestion layer."""

from .http import HttpResponse, IHttpClient  # noqa: F401

__all__ = [
    "IHttpClient",
    "HttpResponse",
]
