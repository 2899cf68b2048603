"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind IHttpClient abstraction.
"""

import asyncio
import json
from typing import Any

import aiohttp

from market_stats.common.exceptions import FatalHTTPError, TransportError
from market_stats.ingestion.config.value_objects import HttpClientConfig
from market_stats.ingestion.ports.http import HttpResponse, IHttpClient


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp."""

    def __init__(self, config: HttpClientConfig):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
        """
        self.config = config
        self._session: aiohttp.ClientSession | None = None
        self._closed = False

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session. A closed client never reopens."""
        if self._closed:
            raise RuntimeError("AiohttpClient is closed")
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        try:
            async with session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=timeout_obj,
            ) as resp:
                try:
                    text = await resp.text()
                except UnicodeDecodeError as e:
                    if resp.status == 200:
                        raise FatalHTTPError(
                            str(resp.url), resp.status, "undecodable body"
                        ) from e
                    text = (await resp.read()).decode("utf-8", errors="replace")
                final_url = str(resp.url)
                status = resp.status
                resp_headers = dict(resp.headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(url, f"{type(e).__name__}: {e}") from e

        body: Any = text
        if status == 200:
            try:
                body = json.loads(text)
            except json.JSONDecodeError as e:
                raise FatalHTTPError(final_url, status, "invalid JSON body") from e

        return HttpResponse(
            status_code=status,
            body=body,
            headers=resp_headers,
            url=final_url,
        )

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout override

        Returns:
            HttpResponse with status, body, headers

        Raises:
            TransportError: On connection errors and timeouts
            FatalHTTPError: On a 200 response whose body is not JSON
        """
        return await self._request(
            "GET", url, params=params, headers=headers, timeout=timeout
        )

    async def post(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute POST request with ``data`` as JSON body."""
        return await self._request(
            "POST", url, json_body=data, headers=headers, timeout=timeout
        )

    async def close(self) -> None:
        """Close HTTP session."""
        self._closed = True
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
