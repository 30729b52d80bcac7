"""Inbox helpers: message count and per-message read/unread/delete actions."""
import logging

from ..core import UiDriver, config

logger = logging.getLogger(__name__)


def inbox_message_count(driver: UiDriver) -> int:
    """Number of messages in the inbox list (0 if the list is not shown)."""
    message_list = driver.find(class_name=config.CLASS_LIST_VIEW)
    if not message_list.exists():
        return 0
    return message_list.child_count()


class InboxMessage:
    """A message row of the inbox, addressed by its position."""

    def __init__(self, driver: UiDriver, index: int = 0):
        self.driver = driver
        self.index = index
        self.row = driver.find(description=config.DESC_INBOX_MESSAGE, index=index)
        self.checkbox = self.row.child(class_name=config.CLASS_CHECKBOX)
        self.read_indicator = self.row.child(description=config.DESC_MESSAGE_READ)
        self.unread_indicator = self.row.child(description=config.DESC_MESSAGE_UNREAD)

    def is_read(self) -> bool:
        return self.read_indicator.exists()

    def is_unread(self) -> bool:
        return self.unread_indicator.exists()

    def _apply(self, action: str) -> None:
        self.checkbox.click()
        self.driver.find(description=action).click()
        self.driver.settle(config.ACTION_SETTLE)
        logger.info(f"Applied '{action}' to inbox message {self.index}")

    def mark_read(self) -> None:
        self._apply(config.DESC_MARK_READ)

    def mark_unread(self) -> None:
        self._apply(config.DESC_MARK_UNREAD)

    def delete(self) -> None:
        self._apply(config.DESC_DELETE)
