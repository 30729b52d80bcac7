"""MCP Tools for the Rich Push Sample UI suite.

This package contains all MCP tool implementations organized by functionality.
"""
from .device import device_list, device_select
from .navigation import (
    open_rich_push_app,
    go_to_preferences,
    go_to_inbox,
    open_notification_area,
    clear_notifications,
)
from .push import send_rich_push
from .wait import wait, wait_for_rich_push
from .preferences import (
    list_settings,
    set_preference,
    verify_preference,
    get_preference_state,
)
from .inbox import inbox_message_count
from .scenario import run_scenario

__all__ = [
    # Device tools
    "device_list",
    "device_select",
    # Navigation tools
    "open_rich_push_app",
    "go_to_preferences",
    "go_to_inbox",
    "open_notification_area",
    "clear_notifications",
    # Push tools
    "send_rich_push",
    # Wait tools
    "wait",
    "wait_for_rich_push",
    # Preference tools
    "list_settings",
    "set_preference",
    "verify_preference",
    "get_preference_state",
    # Inbox tools
    "inbox_message_count",
    # Scenario tools
    "run_scenario",
]
