"""
Suite configuration

Environment variables:
- MASTER_SECRET: Push API master secret (required to send pushes)
- APP_KEY: Push API application key (required to send pushes)
- RICH_PUSH_API_URL: Push endpoint (default: Urban Airship v3 push API)
- RICH_PUSH_PACKAGE: Package of the app under test
- ANDROID_SERIAL: Default device serial (optional)
"""

import os
from typing import Tuple

from .exceptions import ConfigurationError

# Push API
PUSH_API_URL = os.environ.get("RICH_PUSH_API_URL", "https://go.urbanairship.com/api/push/")
PUSH_API_ACCEPT = "application/vnd.urbanairship+json; version=3"

# App under test
APP_PACKAGE = os.environ.get("RICH_PUSH_PACKAGE", "com.urbanairship.richpush.sample")
DEFAULT_DEVICE_ID = os.environ.get("ANDROID_SERIAL") or None

# Timeouts (in seconds)
NOTIFICATION_WAIT_TIMEOUT = 60  # push to tags is slower than to a single device
NOTIFICATION_POLL_INTERVAL = 1
REGISTRATION_SETTLE = 5
WINDOW_UPDATE_SETTLE = 1
ACTION_SETTLE = 5
PUSH_REQUEST_TIMEOUT = 10

# Notification content
NOTIFICATION_TITLE = "Rich Push Sample"
NOTIFICATION_ALERT = "Rich Push Alert"
MESSAGE_TITLE = "Rich Push Sample"
MESSAGE_BODY = "<html><body><h1>Rich Push Sample</h1><p>Test message</p></body></html>"
HOME_SEGMENT = "home"

# Accessibility descriptions
DESC_PREFERENCES = "Preferences"
DESC_NAVIGATE_HOME = "Navigate home"
DESC_NAVIGATE_UP = "Navigate up"
DESC_CLEAR_NOTIFICATIONS = "Clear all notifications."
DESC_MESSAGE_DIALOG = "Rich push message dialog"
DESC_INBOX_MESSAGE = "Inbox message"
DESC_MESSAGE_READ = "Message read"
DESC_MESSAGE_UNREAD = "Message unread"
DESC_MARK_READ = "Mark Read"
DESC_MARK_UNREAD = "Mark Unread"
DESC_DELETE = "Delete"
TEXT_INBOX = "Inbox"
TEXT_OK = "OK"

# Widget classes
CLASS_BUTTON = "android.widget.Button"
CLASS_CHECKBOX = "android.widget.CheckBox"
CLASS_EDIT_TEXT = "android.widget.EditText"
CLASS_LIST_VIEW = "android.widget.ListView"
CLASS_NUMBER_PICKER = "android.widget.NumberPicker"
CLASS_SPINNER = "android.widget.Spinner"
CLASS_WEB_VIEW = "android.webkit.WebView"

# Notification shade swipe
SHADE_SWIPE_X = 50
SHADE_SWIPE_START_Y = 2
SHADE_SWIPE_STEPS = 5


def get_push_credentials() -> Tuple[str, str]:
    """Return (master_secret, app_key) from the environment.

    Read at call time so test runners can export them after import.
    """
    master_secret = os.environ.get("MASTER_SECRET", "")
    app_key = os.environ.get("APP_KEY", "")
    if not master_secret:
        raise ConfigurationError("MASTER_SECRET", "export the push API master secret")
    if not app_key:
        raise ConfigurationError("APP_KEY", "export the push API application key")
    return master_secret, app_key
