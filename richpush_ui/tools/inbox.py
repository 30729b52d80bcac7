"""Inbox tools."""
import logging
from typing import Any, Dict, Optional

from ..app.inbox import InboxMessage, inbox_message_count as _count_messages
from ..core import get_device_manager
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


@wrap_tool_errors(logger, "Failed to count inbox messages")
def inbox_message_count(device_id: Optional[str] = None) -> Dict[str, Any]:
    """Count the messages on the inbox screen.

    Returns:
        Dictionary with ``count`` and, when non-empty, the read state of
        the first message
    """
    with get_device_manager().get_driver(device_id) as driver:
        count = _count_messages(driver)
        first = None
        if count:
            message = InboxMessage(driver, 0)
            first = {"read": message.is_read(), "unread": message.is_unread()}

    logger.info(f"Inbox holds {count} messages")
    return {"count": count, "first_message": first}
