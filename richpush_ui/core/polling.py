"""Bounded-time polling for externally triggered UI state.

The automation surface has no callback for "a notification arrived", so the
suite polls a predicate at a fixed interval until it holds or the budget is
spent. The primitive does not know whether the caller wants presence or
absence; a ``TIMED_OUT`` outcome is a failure for the former and a pass for
the latter.
"""
import enum
import logging
import time
from typing import Any, Callable, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)


class PollOutcome(enum.Enum):
    """Result of a bounded wait."""

    SATISFIED = "satisfied"
    TIMED_OUT = "timed-out"

    @property
    def satisfied(self) -> bool:
        return self is PollOutcome.SATISFIED


def validate_polling(timeout: float, interval: float) -> None:
    """Validate polling configuration."""
    if timeout < 0:
        raise ValueError("timeout must not be negative")
    if interval <= 0:
        raise ValueError("interval must be greater than 0")


def poll_until(
    check: Callable[[], Optional[Any]],
    timeout: float,
    interval: float,
) -> Tuple[bool, Any, float]:
    """Poll until check returns a non-None result or timeout.

    The check runs at least once, even with a zero timeout.

    Returns:
        (found, result, waited) where waited is elapsed seconds
    """
    validate_polling(timeout, interval)
    start_time = time.monotonic()
    while True:
        result = check()
        waited = time.monotonic() - start_time
        if result is not None:
            return True, result, waited
        if waited >= timeout:
            return False, None, waited
        time.sleep(interval)


def poll_for_condition(
    predicate: Callable[[], bool],
    timeout: float,
    interval: float,
) -> Tuple[PollOutcome, float]:
    """Poll predicate() and return (outcome, waited seconds)."""
    found, _, waited = poll_until(
        lambda: True if predicate() else None,
        timeout,
        interval,
    )
    outcome = PollOutcome.SATISFIED if found else PollOutcome.TIMED_OUT
    logger.info(f"Condition {outcome.value} after {waited:.2f}s")
    return outcome, waited


def wait_for_condition(
    predicate: Callable[[], bool],
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> PollOutcome:
    """Wait until predicate() is true or the timeout elapses.

    Args:
        predicate: Side-effect free condition to evaluate
        timeout: Budget in seconds (0 evaluates the predicate once)
        interval: Fixed sleep between evaluations in seconds

    Returns:
        PollOutcome.SATISFIED as soon as the predicate holds,
        PollOutcome.TIMED_OUT once at least ``timeout`` seconds elapsed

    Raises:
        ValueError: Negative timeout or non-positive interval
    """
    outcome, _ = poll_for_condition(predicate, timeout, interval)
    return outcome
