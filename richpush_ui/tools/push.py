"""Push tools: trigger a rich push to the device under test."""
import logging
from typing import Any, Dict, Optional

from ..core import ConfigurationError, DeliveryError, PushSender
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


@wrap_tool_errors(
    logger,
    "Failed to send rich push",
    pass_through=(ConfigurationError, DeliveryError),
)
def send_rich_push(segment: Optional[str] = None) -> Dict[str, Any]:
    """Ask the push API to deliver a rich push.

    The notification arrives asynchronously; follow up with
    ``wait_for_rich_push``.

    Args:
        segment: Audience tag (e.g. "home"); None broadcasts to all devices

    Returns:
        Dictionary with:
        - success: True once the API accepted the push
        - audience: "all" or the segment name
        - response: Decoded API response

    Raises:
        ConfigurationError: MASTER_SECRET / APP_KEY not set
        DeliveryError: API unreachable or push rejected
    """
    with PushSender.from_env() as sender:
        response = sender.send(segment)

    return {
        "success": True,
        "audience": segment or "all",
        "response": response,
    }
