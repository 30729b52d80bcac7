"""Navigation tools for the Rich Push Sample app."""
import logging
from typing import Any, Callable, Dict, Optional

from ..app import navigation
from ..core import ElementNotFoundError, UiDriver, config, get_device_manager
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


def _navigate(
    label: str,
    action: Callable[[UiDriver], Any],
    device_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Run a navigation helper and return a standard success payload."""
    with get_device_manager().get_driver(device_id) as driver:
        result = action(driver)
    logger.info(f"Navigation done: {label}")
    return {"success": True, "result": result}


@wrap_tool_errors(logger, "Failed to open app", pass_through=(ElementNotFoundError,))
def open_rich_push_app(
    package: str = config.APP_PACKAGE,
    device_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Launch the app under test and go to its home screen.

    Args:
        package: App package name
        device_id: Device serial (None for default)

    Raises:
        ElementNotFoundError: App not detected on screen after launch
        NavigationError: Home screen could not be reached
    """
    def action(driver):
        navigation.open_app(driver, package)
        navigation.navigate_to_app_home(driver)

    payload = _navigate("open app", action, device_id)
    payload["package"] = package
    return payload


@wrap_tool_errors(logger, "Failed to open preferences", pass_through=(ElementNotFoundError,))
def go_to_preferences(device_id: Optional[str] = None) -> Dict[str, Any]:
    """Open the preferences screen (Preferences button must be visible)."""
    return _navigate("preferences", navigation.go_to_preferences, device_id)


@wrap_tool_errors(logger, "Failed to open inbox", pass_through=(ElementNotFoundError,))
def go_to_inbox(device_id: Optional[str] = None) -> Dict[str, Any]:
    """Switch the home screen to the inbox."""
    return _navigate("inbox", navigation.navigate_to_inbox, device_id)


@wrap_tool_errors(logger, "Failed to open notification area")
def open_notification_area(device_id: Optional[str] = None) -> Dict[str, Any]:
    """Pull down the notification shade."""
    return _navigate("notification area", navigation.open_notification_area, device_id)


@wrap_tool_errors(logger, "Failed to clear notifications")
def clear_notifications(device_id: Optional[str] = None) -> Dict[str, Any]:
    """Dismiss all notifications.

    Returns:
        Dictionary with success status and ``cleared`` (clear button was present)
    """
    payload = _navigate("clear notifications", navigation.clear_notifications, device_id)
    return {"success": True, "cleared": payload["result"]}
