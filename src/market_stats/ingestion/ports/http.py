"""HTTP communication abstractions.

Separates the HTTP transport layer from retry policy and response parsing.
Allows easy mocking and swapping of HTTP implementations in tests.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    body: Any  # JSON-decoded on 200, raw text otherwise
    headers: dict[str, str]
    url: str


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute one HTTP request and return the response.
    Does NOT handle:
    - Status classification
    - Retry logic
    - Response schema validation

    Implementations raise ``TransportError`` for connection failures and
    timeouts so callers never depend on a concrete HTTP library.
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL to request
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout in seconds

        Raises:
            TransportError: On network or connection errors
        """
        ...

    async def post(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute POST request with ``data`` sent as a JSON body.

        Raises:
            TransportError: On network or connection errors
        """
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...
