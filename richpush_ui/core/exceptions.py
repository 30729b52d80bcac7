"""Custom exceptions for the Rich Push Sample UI suite.

Exception Hierarchy:
    RichPushTestError (base)
    ├── ConfigurationError
    ├── DeviceConnectionError
    │   ├── DeviceNotFoundError
    │   └── InvalidDeviceIdError
    ├── ElementNotFoundError
    │   └── NavigationError
    ├── DeliveryError
    ├── UnknownSettingError
    └── ScenarioFailure (AssertionError)
        └── PersistenceViolation
"""


class RichPushTestError(Exception):
    """Base exception for the Rich Push Sample UI suite."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert exception to dict for MCP response."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(RichPushTestError):
    """Required configuration is missing or invalid."""

    def __init__(self, setting: str, hint: str = None):
        message = f"Missing or invalid configuration: {setting}"
        if hint:
            message += f" ({hint})"
        super().__init__(message, {"setting": setting, "hint": hint})
        self.setting = setting


# === Device Errors ===


class DeviceConnectionError(RichPushTestError):
    """Failed to connect to Android device."""

    def __init__(self, device_id: str, reason: str = None):
        message = f"Failed to connect to device: {device_id}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, {"device_id": device_id, "reason": reason})
        self.device_id = device_id


class DeviceNotFoundError(DeviceConnectionError):
    """Device not found or not connected."""

    def __init__(self, device_id: str = None):
        if device_id:
            message = f"Device not found: {device_id}"
        else:
            message = "No Android devices connected"
        super().__init__(device_id or "none", message)


class InvalidDeviceIdError(RichPushTestError):
    """Invalid device ID format (potential command injection)."""

    def __init__(self, device_id: str):
        super().__init__(
            f"Invalid device_id format: {device_id}",
            {"device_id": device_id, "hint": "Device ID must match [a-zA-Z0-9._:-]+"},
        )
        self.device_id = device_id


# === UI Errors ===


class ElementNotFoundError(RichPushTestError):
    """Element matching criteria not found."""

    def __init__(self, criteria: dict, reason: str = None):
        message = f"Element not found matching criteria: {criteria}"
        if reason:
            message = f"{reason}: {criteria}"
        super().__init__(message, {"criteria": criteria})
        self.criteria = criteria


class NavigationError(ElementNotFoundError):
    """None of the elements identifying a known screen are present."""

    def __init__(self, expected: list):
        super().__init__(
            {"any_of": expected},
            reason="Unable to determine the current screen",
        )
        self.expected = expected


# === Push Errors ===


class DeliveryError(RichPushTestError):
    """The push API was unreachable or rejected the request."""

    def __init__(self, reason: str, status_code: int = None, segment: str = None):
        message = f"Push delivery failed: {reason}"
        if status_code is not None:
            message = f"Push delivery failed with HTTP {status_code}: {reason}"
        super().__init__(
            message,
            {"status_code": status_code, "reason": reason, "segment": segment},
        )
        self.status_code = status_code
        self.segment = segment


# === Preference Errors ===


class UnknownSettingError(RichPushTestError):
    """Setting key is not part of the preference registry."""

    def __init__(self, key: str, known: list = None):
        details = {"setting": key}
        if known:
            details["known_settings"] = known
        super().__init__(f"Unknown setting: {key}", details)
        self.key = key


# === Assertion Errors ===


class ScenarioFailure(RichPushTestError, AssertionError):
    """A scenario step observed a state other than the expected one."""

    pass


class PersistenceViolation(ScenarioFailure):
    """A setting did not hold the value it was set to."""

    def __init__(self, setting: str, expected, actual, reason: str = None):
        message = (
            f"Setting {setting} did not toggle correctly: "
            f"expected {expected!r}, got {actual!r}"
        )
        if reason:
            message += f" ({reason})"
        super().__init__(
            message,
            {"setting": setting, "expected": expected, "actual": actual},
        )
        self.setting = setting
        self.expected = expected
        self.actual = actual
