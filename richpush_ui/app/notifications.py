"""Rich push notification helpers.

A rich push counts as present only when both its title and its alert text
are visible in the notification shade.
"""
import logging

from ..core import (
    ElementNotFoundError,
    PollOutcome,
    UiDriver,
    config,
    wait_for_condition,
)

logger = logging.getLogger(__name__)


def rich_push_notification_exists(driver: UiDriver) -> bool:
    """Check the shade for the rich push title and alert."""
    title = driver.find(text=config.NOTIFICATION_TITLE)
    alert = driver.find(text=config.NOTIFICATION_ALERT)
    return title.exists() and alert.exists()


def wait_for_rich_push(
    driver: UiDriver,
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> PollOutcome:
    """Poll the (open) notification shade for the rich push."""
    outcome = wait_for_condition(
        lambda: rich_push_notification_exists(driver),
        timeout=timeout,
        interval=interval,
    )
    logger.info(f"Rich push notification {outcome.value}")
    return outcome


def open_rich_push_notification(driver: UiDriver) -> None:
    """Open the rich push from the notification shade.

    Raises:
        ElementNotFoundError: No rich push notification in the shade
    """
    if not rich_push_notification_exists(driver):
        raise ElementNotFoundError(
            {"text": [config.NOTIFICATION_TITLE, config.NOTIFICATION_ALERT]},
            reason="No push notifications to open",
        )
    driver.find(text=config.NOTIFICATION_ALERT).click()
    logger.info("Opened rich push notification")


def message_view_displayed(driver: UiDriver) -> bool:
    """Standalone message screen renders the message in a web view."""
    return driver.find(class_name=config.CLASS_WEB_VIEW).exists()


def message_dialog_displayed(driver: UiDriver) -> bool:
    """In-app message dialog renders the message in a described web view."""
    return driver.find(
        class_name=config.CLASS_WEB_VIEW,
        description=config.DESC_MESSAGE_DIALOG,
    ).exists()
