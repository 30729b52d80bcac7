"""End-to-end scenarios of the Rich Push Sample app.

Each scenario is a straight sequence of steps. The first unexpected
observation raises (``ScenarioFailure``, ``PersistenceViolation``,
``ElementNotFoundError`` or ``DeliveryError``) and nothing is retried or
cleaned up.

Usage:
    with get_device_manager().get_driver() as driver, PushSender.from_env() as sender:
        prepare_app(driver)
        run_inbox_scenario(driver, sender)
"""
import logging
from typing import Any, Callable, Dict, Optional, Protocol

from ..core import ScenarioFailure, UiDriver, config
from . import inbox, navigation, notifications, preferences

logger = logging.getLogger(__name__)


class Sender(Protocol):
    def send(self, segment: Optional[str] = None) -> Any: ...


def _check(condition: bool, message: str, **details) -> None:
    if not condition:
        raise ScenarioFailure(message, details)


def prepare_app(driver: UiDriver, package: str = config.APP_PACKAGE) -> None:
    """Common setup: app in the foreground, on its home screen."""
    navigation.open_app(driver, package)
    navigation.navigate_to_app_home(driver)


def enable_push(driver: UiDriver, enabled: bool = True) -> None:
    """Flip PUSH_ENABLE from the current screen and come back."""
    navigation.go_to_preferences(driver)
    preferences.set_preference_checkbox_enabled(driver, "PUSH_ENABLE", enabled)
    driver.press_back()


def _send_and_wait(
    driver: UiDriver,
    sender: Sender,
    segment: Optional[str],
    timeout: float,
    interval: float,
):
    sender.send(segment)
    navigation.open_notification_area(driver)
    return notifications.wait_for_rich_push(driver, timeout=timeout, interval=interval)


def _expect_arrival(outcome, timeout: float) -> None:
    _check(
        outcome.satisfied,
        f"Rich push notification did not arrive within {timeout}s",
        outcome=outcome.value,
    )


def run_rich_push_notification_scenario(
    driver: UiDriver,
    sender: Sender,
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> Dict[str, Any]:
    """Delivery while push is enabled, suppression once it is disabled."""
    enable_push(driver, True)

    # Give push registration time to reach the backend
    driver.settle(config.REGISTRATION_SETTLE)

    navigation.clear_notifications(driver)

    # Broadcast, opened as a standalone message
    outcome = _send_and_wait(driver, sender, None, timeout, interval)
    _expect_arrival(outcome, timeout)
    notifications.open_rich_push_notification(driver)
    driver.settle(config.WINDOW_UPDATE_SETTLE)
    _check(
        notifications.message_view_displayed(driver),
        "Failed to display notification in a webview",
    )

    # Segment push, opened inside the main activity
    outcome = _send_and_wait(driver, sender, config.HOME_SEGMENT, timeout, interval)
    _expect_arrival(outcome, timeout)
    notifications.open_rich_push_notification(driver)
    driver.settle(config.WINDOW_UPDATE_SETTLE)
    _check(
        notifications.message_dialog_displayed(driver),
        "Failed to display notification in the message dialog",
    )
    driver.press_back()

    # Push disabled: nothing may arrive
    enable_push(driver, False)
    suppressed = _send_and_wait(driver, sender, None, timeout, interval)
    _check(
        not suppressed.satisfied,
        "Received push notification when push is disabled",
    )
    driver.press_back()

    return {"suppressed_outcome": suppressed.value}


def run_inbox_scenario(
    driver: UiDriver,
    sender: Sender,
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> Dict[str, Any]:
    """Receive a message, mark it read and unread, then delete it."""
    navigation.navigate_to_inbox(driver)
    enable_push(driver, True)
    driver.settle(config.REGISTRATION_SETTLE)

    baseline = inbox.inbox_message_count(driver)

    outcome = _send_and_wait(driver, sender, None, timeout, interval)
    _expect_arrival(outcome, timeout)
    driver.press_back()

    received = inbox.inbox_message_count(driver)
    _check(
        received == baseline + 1,
        f"Expected {baseline + 1} inbox messages after delivery, found {received}",
        baseline=baseline,
        count=received,
    )

    message = inbox.InboxMessage(driver, 0)
    _check(message.is_unread(), "New message is not marked unread")
    _check(not message.is_read(), "New message is already marked read")

    message.mark_read()
    _check(message.is_read(), "Read indicator missing after Mark Read")
    _check(not message.is_unread(), "Unread indicator still shown after Mark Read")

    message.mark_unread()
    _check(message.is_unread(), "Unread indicator missing after Mark Unread")
    _check(not message.is_read(), "Read indicator still shown after Mark Unread")

    message.delete()
    remaining = inbox.inbox_message_count(driver)
    _check(
        remaining == baseline,
        f"Expected {baseline} inbox messages after delete, found {remaining}",
        baseline=baseline,
        count=remaining,
    )

    return {"baseline": baseline, "received": received, "remaining": remaining}


def _verify_dependents(driver: UiDriver, key: str, verified: list) -> None:
    dependents = preferences.children(key)

    preferences.set_preference_checkbox_enabled(driver, key, True)
    for setting in dependents:
        preferences.verify_setting(driver, setting.key)
        verified.append(setting.key)
    for setting in dependents:
        if preferences.children(setting.key):
            _verify_dependents(driver, setting.key, verified)

    preferences.set_preference_checkbox_enabled(driver, key, False)
    for setting in preferences.descendants(key):
        preferences.assert_preference_view_disabled(driver, setting.key)


def run_preferences_scenario(driver: UiDriver) -> Dict[str, Any]:
    """Round-trip every preference and check dependents follow their parent."""
    navigation.go_to_preferences(driver)

    verified = []
    for setting in preferences.root_settings():
        preferences.verify_setting(driver, setting.key)
        verified.append(setting.key)
        if preferences.children(setting.key):
            _verify_dependents(driver, setting.key, verified)

    return {"verified": verified}


SCENARIOS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "notification": run_rich_push_notification_scenario,
    "inbox": run_inbox_scenario,
    "preferences": run_preferences_scenario,
}

# Scenarios that need a push sender
PUSH_SCENARIOS = ("notification", "inbox")
