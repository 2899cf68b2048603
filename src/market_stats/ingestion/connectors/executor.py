import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from market_stats.common.exceptions import (
    AttemptsExhaustedError,
    FatalHTTPError,
    TransientHTTPError,
    TransportError,
    UnsupportedMethodError,
)
from market_stats.infrastructure.observability import get_ingestion_logger
from market_stats.ingestion.config.value_objects import RetryConfig
from market_stats.ingestion.connectors.retry_machine import (
    Outcome,
    RetryMachine,
    RetryState,
    classify_status,
    transition,
    wake,
)
from market_stats.ingestion.models.enums import HttpMethod
from market_stats.ingestion.ports.http import HttpResponse, IHttpClient

log = get_ingestion_logger("request-executor")

SleepFn = Callable[[float], Awaitable[Any]]


class RequestExecutor:
    """Performs one logical HTTP call with bounded retries.

    Single Responsibility: Drive the retry state machine around an injected
    HTTP client. Knows nothing about quote data; the parsed JSON document is
    returned verbatim.

    Dependencies injected (not instantiated):
    - http_client: Executes HTTP requests
    - retry_config: Attempt budget and inter-attempt delay
    - sleep: Awaitable delay (``asyncio.sleep`` in production)
    """

    SUPPORTED_METHODS = frozenset({HttpMethod.GET, HttpMethod.POST})

    def __init__(
        self,
        http_client: IHttpClient,
        retry_config: RetryConfig,
        sleep: SleepFn = asyncio.sleep,
    ):
        self.http_client = http_client
        self.retry_config = retry_config
        self._sleep = sleep

    @classmethod
    def _resolve_method(cls, method: HttpMethod | str) -> HttpMethod:
        try:
            resolved = HttpMethod(str(getattr(method, "value", method)).upper())
        except ValueError:
            raise UnsupportedMethodError(str(method)) from None
        if resolved not in cls.SUPPORTED_METHODS:
            raise UnsupportedMethodError(resolved.value)
        return resolved

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        headers: dict[str, str] | None,
        body: Any,
    ) -> HttpResponse:
        if method is HttpMethod.POST:
            return await self.http_client.post(url, data=body, headers=headers)
        return await self.http_client.get(url, headers=headers)

    async def execute(
        self,
        method: HttpMethod | str,
        url: str,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Execute the request, retrying transient failures.

        Args:
            method: GET or POST (anything else fails immediately)
            url: Fully built request URL
            headers: Optional request headers
            body: Optional JSON body, sent only with POST

        Returns:
            JSON-decoded body of the first 200 response

        Raises:
            UnsupportedMethodError: Method outside the supported set
            FatalHTTPError: 504 from upstream, or a 200 with an undecodable body
            AttemptsExhaustedError: No 200 within ``max_attempts``
        """
        resolved = self._resolve_method(method)
        machine = RetryMachine(max_attempts=self.retry_config.max_attempts)
        response: HttpResponse | None = None
        last_failure: TransientHTTPError | None = None

        while not machine.is_terminal:
            if machine.should_sleep:
                await self._sleep(self.retry_config.delay_seconds)
                machine = wake(machine)
                continue

            try:
                response = await self._send(resolved, url, headers, body)
            except TransportError as e:
                log.warning(
                    "transport_failure",
                    url=url,
                    attempt=machine.attempt,
                    reason=e.reason,
                )
                last_failure = e
                machine = transition(machine, Outcome.TRANSPORT_ERROR)
                continue

            outcome = classify_status(response.status_code)

            if outcome is Outcome.TRANSIENT_HTTP:
                log.error(
                    "upstream_rejected",
                    url=response.url,
                    status=response.status_code,
                    attempt=machine.attempt,
                    body=response.body,
                )
            elif outcome is Outcome.UNEXPECTED_HTTP:
                log.warning(
                    "unexpected_response",
                    url=response.url,
                    status=response.status_code,
                    attempt=machine.attempt,
                    body=response.body,
                )

            if outcome in (Outcome.TRANSIENT_HTTP, Outcome.UNEXPECTED_HTTP):
                last_failure = TransientHTTPError(
                    f"Status {response.status_code} from {response.url}",
                    url=response.url,
                    status_code=response.status_code,
                    body=str(response.body),
                )

            machine = transition(machine, outcome)

        if machine.state is RetryState.SUCCEEDED:
            log.info("request_succeeded", url=url, attempt=machine.attempt)
            return response.body

        if machine.state is RetryState.FAILED_FATAL:
            log.error(
                "request_aborted",
                url=response.url,
                status=response.status_code,
                attempt=machine.attempt,
            )
            raise FatalHTTPError(response.url, response.status_code)

        log.error("attempts_exhausted", url=url, attempts=machine.attempt)
        raise AttemptsExhaustedError(url, machine.attempt) from last_failure
