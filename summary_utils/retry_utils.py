"""
Retry policy for the summarization call.

decide_next_action() only decides; the client does the waiting and the
calling. Attempts are counted from 0.
"""

import random
from dataclasses import dataclass
from typing import Callable, Union

from summary_utils.config_utils import MAX_ATTEMPTS

BASE_DELAY_MS = 1000
JITTER_MS = 1000


# Attempt outcomes


@dataclass(frozen=True)
class Completed:
    text: str


@dataclass(frozen=True)
class Rejected:
    status_code: int

    @property
    def message(self) -> str:
        return f"API request failed with status: {self.status_code}"

    @property
    def throttled(self) -> bool:
        return self.status_code == 429


@dataclass(frozen=True)
class Errored:
    message: str


Outcome = Union[Completed, Rejected, Errored]


# Decisions


@dataclass(frozen=True)
class Retry:
    delay_ms: float


@dataclass(frozen=True)
class Succeed:
    text: str


@dataclass(frozen=True)
class Fail:
    message: str


Action = Union[Retry, Succeed, Fail]


def backoff_delay_ms(attempt: int, jitter: Callable[[], float] = random.random) -> float:
    return (2 ** attempt) * BASE_DELAY_MS + jitter() * JITTER_MS


def failure_message(max_attempts: int, details: str) -> str:
    return f"Error: Summarization failed after {max_attempts} attempts. Details: {details}"


def decide_next_action(
    attempt: int,
    outcome: Outcome,
    max_attempts: int = MAX_ATTEMPTS,
    jitter: Callable[[], float] = random.random,
) -> Action:
    if isinstance(outcome, Completed):
        return Succeed(outcome.text)

    if attempt >= max_attempts - 1:
        return Fail(failure_message(max_attempts, outcome.message))
    return Retry(backoff_delay_ms(attempt, jitter))
