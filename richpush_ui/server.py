"""Rich Push Sample UI suite - MCP server.

Exposes the suite's building blocks as MCP tools so an agent (or the
``scripts/mcp_rich_push_suite.py`` client) can drive the device under test
step by step or run whole scenarios.

Basic Workflow:
    1. open_rich_push_app to bring the app to its home screen
    2. send_rich_push, open_notification_area, wait_for_rich_push
    3. or run_scenario("notification" | "inbox" | "preferences")

Tools Available:
    Device Management:
        - device_list: List connected devices
        - device_select: Set the device under test

    Navigation:
        - open_rich_push_app, go_to_preferences, go_to_inbox
        - open_notification_area, clear_notifications

    Push & Wait:
        - send_rich_push: Ask the push API to deliver a rich push
        - wait_for_rich_push: Poll the shade for the notification
        - wait_seconds: Fixed settle delay

    Preferences:
        - list_settings, set_preference, verify_preference, get_preference_state

    Inbox & Scenarios:
        - inbox_message_count
        - run_scenario
"""
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .tools.device import device_list as _device_list, device_select as _device_select
from .tools.inbox import inbox_message_count as _inbox_message_count
from .tools.navigation import (
    clear_notifications as _clear_notifications,
    go_to_inbox as _go_to_inbox,
    go_to_preferences as _go_to_preferences,
    open_notification_area as _open_notification_area,
    open_rich_push_app as _open_rich_push_app,
)
from .tools.preferences import (
    get_preference_state as _get_preference_state,
    list_settings as _list_settings,
    set_preference as _set_preference,
    verify_preference as _verify_preference,
)
from .tools.push import send_rich_push as _send_rich_push
from .tools.scenario import run_scenario as _run_scenario
from .tools.wait import wait as _wait, wait_for_rich_push as _wait_for_rich_push

# MCP Server
mcp = FastMCP("richpush-ui")


def _register_tool(func, name: Optional[str] = None):
    return mcp.tool(name=name)(func)


# === Tool Registrations ===

_TOOL_SECTIONS = (
    {
        # Device Management Tools
        "device_list": _device_list,
        "device_select": _device_select,
    },
    {
        # Navigation Tools
        "open_rich_push_app": _open_rich_push_app,
        "go_to_preferences": _go_to_preferences,
        "go_to_inbox": _go_to_inbox,
        "open_notification_area": _open_notification_area,
        "clear_notifications": _clear_notifications,
    },
    {
        # Push & Wait Tools
        "send_rich_push": _send_rich_push,
        "wait_for_rich_push": _wait_for_rich_push,
        "wait_seconds": _wait,
    },
    {
        # Preference Tools
        "list_settings": _list_settings,
        "set_preference": _set_preference,
        "verify_preference": _verify_preference,
        "get_preference_state": _get_preference_state,
    },
    {
        # Inbox & Scenario Tools
        "inbox_message_count": _inbox_message_count,
        "run_scenario": _run_scenario,
    },
)

for _section in _TOOL_SECTIONS:
    for _name, _func in _section.items():
        globals()[_name] = _register_tool(_func, name=_name)


# === Entry Point ===

def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
