"""Preference tools: set, read and round-trip verify settings."""
import logging
from typing import Any, Dict, Optional

from ..app import preferences
from ..core import (
    ElementNotFoundError,
    PersistenceViolation,
    UnknownSettingError,
    get_device_manager,
)
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)

_PREFERENCE_PASSTHROUGH = (UnknownSettingError, ElementNotFoundError, PersistenceViolation)


def list_settings() -> Dict[str, Any]:
    """Describe the preference registry.

    Returns:
        Dictionary with ``settings``: list of {key, kind, parent}
    """
    return {
        "settings": [
            {"key": s.key, "kind": s.kind.value, "parent": s.parent}
            for s in preferences.SETTINGS.values()
        ]
    }


@wrap_tool_errors(logger, "Failed to set preference", pass_through=_PREFERENCE_PASSTHROUGH)
def set_preference(
    setting: str,
    enabled: bool,
    device_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Switch a toggle preference on or off (preferences screen must be open).

    Clicks only when the current state differs.

    Returns:
        Dictionary with success, setting, enabled and ``changed``
    """
    with get_device_manager().get_driver(device_id) as driver:
        changed = preferences.set_preference_checkbox_enabled(driver, setting, enabled)

    return {
        "success": True,
        "setting": setting,
        "enabled": enabled,
        "changed": changed,
    }


@wrap_tool_errors(logger, "Failed to verify preference", pass_through=_PREFERENCE_PASSTHROUGH)
def verify_preference(setting: str, device_id: Optional[str] = None) -> Dict[str, Any]:
    """Round-trip a preference through leaving and re-entering the screen.

    Raises:
        PersistenceViolation: The value did not survive the round trip
    """
    with get_device_manager().get_driver(device_id) as driver:
        preferences.verify_setting(driver, setting)

    return {
        "success": True,
        "setting": setting,
        "kind": preferences.get_setting(setting).kind.value,
    }


@wrap_tool_errors(logger, "Failed to read preference", pass_through=_PREFERENCE_PASSTHROUGH)
def get_preference_state(setting: str, device_id: Optional[str] = None) -> Dict[str, Any]:
    """Read the checked/enabled flags of a preference row."""
    with get_device_manager().get_driver(device_id) as driver:
        state = preferences.preference_state(driver, setting)

    return {"setting": setting, **state}
