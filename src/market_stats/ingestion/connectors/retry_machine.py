"""
Retry state machine for the request executor.

The executor's loop is driven by a pure transition function so that the
backoff policy is data, not control flow:

    ATTEMPTING --SUCCESS--------------------------> SUCCEEDED
    ATTEMPTING --FATAL_HTTP-----------------------> FAILED_FATAL
    ATTEMPTING --TRANSIENT_HTTP / UNEXPECTED_HTTP-> SLEEPING    (next attempt)
    ATTEMPTING --TRANSPORT_ERROR------------------> ATTEMPTING  (next attempt, no sleep)
    SLEEPING   --wake()---------------------------> ATTEMPTING
    any failure with no attempts left ------------> FAILED_EXHAUSTED
"""

from dataclasses import dataclass, replace
from enum import Enum


class RetryState(str, Enum):
    ATTEMPTING = "attempting"
    SLEEPING = "sleeping"
    SUCCEEDED = "succeeded"
    FAILED_FATAL = "failed_fatal"
    FAILED_EXHAUSTED = "failed_exhausted"


class Outcome(str, Enum):
    """Classification of a single attempt."""

    SUCCESS = "success"
    TRANSIENT_HTTP = "transient_http"  # 404, 429
    UNEXPECTED_HTTP = "unexpected_http"  # any other non-200, retried
    FATAL_HTTP = "fatal_http"  # 504
    TRANSPORT_ERROR = "transport_error"  # connection error, timeout


TERMINAL_STATES = frozenset(
    {RetryState.SUCCEEDED, RetryState.FAILED_FATAL, RetryState.FAILED_EXHAUSTED}
)

TRANSIENT_STATUS_CODES = (404, 429)
FATAL_STATUS_CODES = (504,)


def classify_status(status_code: int) -> Outcome:
    """Map an HTTP status code to an attempt outcome."""
    if status_code == 200:
        return Outcome.SUCCESS
    if status_code in TRANSIENT_STATUS_CODES:
        return Outcome.TRANSIENT_HTTP
    if status_code in FATAL_STATUS_CODES:
        return Outcome.FATAL_HTTP
    return Outcome.UNEXPECTED_HTTP


@dataclass(frozen=True)
class RetryMachine:
    """Immutable snapshot of the retry loop.

    ``attempt`` is 1-indexed and names the attempt currently in flight (or
    about to be made after a sleep). On exhaustion it stays at the last
    attempt that was made.
    """

    max_attempts: int
    attempt: int = 1
    state: RetryState = RetryState.ATTEMPTING

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def should_sleep(self) -> bool:
        return self.state is RetryState.SLEEPING


def transition(machine: RetryMachine, outcome: Outcome) -> RetryMachine:
    """Advance ``machine`` given the outcome of the attempt in flight."""
    if machine.state is not RetryState.ATTEMPTING:
        raise ValueError(f"Cannot record an outcome while {machine.state.value}")

    if outcome is Outcome.SUCCESS:
        return replace(machine, state=RetryState.SUCCEEDED)
    if outcome is Outcome.FATAL_HTTP:
        return replace(machine, state=RetryState.FAILED_FATAL)

    if machine.attempt >= machine.max_attempts:
        return replace(machine, state=RetryState.FAILED_EXHAUSTED)

    next_attempt = machine.attempt + 1
    if outcome is Outcome.TRANSPORT_ERROR:
        return replace(machine, attempt=next_attempt, state=RetryState.ATTEMPTING)
    return replace(machine, attempt=next_attempt, state=RetryState.SLEEPING)


def wake(machine: RetryMachine) -> RetryMachine:
    """Leave SLEEPING once the inter-attempt delay has elapsed."""
    if machine.state is not RetryState.SLEEPING:
        raise ValueError(f"Cannot wake while {machine.state.value}")
    return replace(machine, state=RetryState.ATTEMPTING)
