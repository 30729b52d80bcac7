"""Core modules for the Rich Push Sample UI suite."""
from .exceptions import (
    RichPushTestError,
    ConfigurationError,
    DeviceConnectionError,
    DeviceNotFoundError,
    InvalidDeviceIdError,
    ElementNotFoundError,
    NavigationError,
    DeliveryError,
    UnknownSettingError,
    ScenarioFailure,
    PersistenceViolation,
)
from .views import Selector, View, UiDriver, U2View, U2Driver
from .polling import (
    PollOutcome,
    poll_for_condition,
    poll_until,
    validate_polling,
    wait_for_condition,
)
from .push import PushSender, build_rich_push_payload
from .device_manager import DeviceManager, DeviceInfo, get_device_manager, validate_device_id

__all__ = [
    # Exceptions
    "RichPushTestError",
    "ConfigurationError",
    "DeviceConnectionError",
    "DeviceNotFoundError",
    "InvalidDeviceIdError",
    "ElementNotFoundError",
    "NavigationError",
    "DeliveryError",
    "UnknownSettingError",
    "ScenarioFailure",
    "PersistenceViolation",
    # View locator
    "Selector",
    "View",
    "UiDriver",
    "U2View",
    "U2Driver",
    # Polling
    "PollOutcome",
    "poll_for_condition",
    "poll_until",
    "validate_polling",
    "wait_for_condition",
    # Push
    "PushSender",
    "build_rich_push_payload",
    # Device Manager
    "DeviceManager",
    "DeviceInfo",
    "get_device_manager",
    "validate_device_id",
]
