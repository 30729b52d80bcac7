"""Helpers that know the Rich Push Sample app's screens."""
from .navigation import (
    open_app,
    navigate_to_app_home,
    go_to_preferences,
    navigate_to_inbox,
    open_notification_area,
    clear_notifications,
)
from .notifications import (
    rich_push_notification_exists,
    wait_for_rich_push,
    open_rich_push_notification,
    message_view_displayed,
    message_dialog_displayed,
)
from .preferences import (
    SETTINGS,
    SettingDescriptor,
    SettingKind,
    assert_preference_view_disabled,
    preference_state,
    set_preference_checkbox_enabled,
    verify_checkbox_setting,
    verify_setting,
    verify_time_picker_setting,
)
from .inbox import InboxMessage, inbox_message_count
from .scenarios import (
    SCENARIOS,
    prepare_app,
    run_inbox_scenario,
    run_preferences_scenario,
    run_rich_push_notification_scenario,
)

__all__ = [
    # Navigation
    "open_app",
    "navigate_to_app_home",
    "go_to_preferences",
    "navigate_to_inbox",
    "open_notification_area",
    "clear_notifications",
    # Notifications
    "rich_push_notification_exists",
    "wait_for_rich_push",
    "open_rich_push_notification",
    "message_view_displayed",
    "message_dialog_displayed",
    # Preferences
    "SETTINGS",
    "SettingDescriptor",
    "SettingKind",
    "assert_preference_view_disabled",
    "preference_state",
    "set_preference_checkbox_enabled",
    "verify_checkbox_setting",
    "verify_setting",
    "verify_time_picker_setting",
    # Inbox
    "InboxMessage",
    "inbox_message_count",
    # Scenarios
    "SCENARIOS",
    "prepare_app",
    "run_inbox_scenario",
    "run_preferences_scenario",
    "run_rich_push_notification_scenario",
]
