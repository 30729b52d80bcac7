"""Wait tools for the Rich Push Sample suite.

Provides the notification wait used after a push is sent.
"""
import logging
import time
from typing import Any, Dict, Optional

from ..app.notifications import rich_push_notification_exists
from ..core import config, get_device_manager, poll_for_condition
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


def wait(seconds: float) -> Dict[str, Any]:
    """Wait for a specified duration (settle delay between actions).

    Returns:
        Dictionary with:
        - success: True
        - waited: Seconds waited
    """
    time.sleep(seconds)
    logger.info(f"Waited {seconds} seconds")

    return {
        "success": True,
        "waited": seconds,
    }


@wrap_tool_errors(logger, "Wait for rich push failed", pass_through=(ValueError,))
def wait_for_rich_push(
    device_id: Optional[str] = None,
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    poll_interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> Dict[str, Any]:
    """Wait for the rich push to show up in the open notification shade.

    A ``timed-out`` outcome is not an error: it is the expected result
    when push is disabled.

    Args:
        device_id: Device serial (None for default)
        timeout: Maximum wait time in seconds
        poll_interval: Time between checks

    Returns:
        Dictionary with:
        - found: True if the notification appeared
        - outcome: "satisfied" or "timed-out"
        - waited: Seconds waited

    Raises:
        DeviceConnectionError: Failed to connect to device
        ValueError: Invalid timeout or poll_interval
    """
    with get_device_manager().get_driver(device_id) as driver:
        outcome, waited = poll_for_condition(
            lambda: rich_push_notification_exists(driver),
            timeout,
            poll_interval,
        )

    logger.info(f"Rich push {outcome.value} after {waited:.2f}s")
    return {
        "found": outcome.satisfied,
        "outcome": outcome.value,
        "waited": waited,
    }
