"""Device connection manager for the device under test.

Lists devices through adb, validates serials before they reach a shell,
remembers the selected device and caches one uiautomator2 connection per
serial, handed out as a ``U2Driver``.
"""

import contextlib
import logging
import re
import subprocess
import threading
from dataclasses import dataclass
from typing import Dict, Generator, List, Optional

import uiautomator2 as u2

from . import config
from .exceptions import (
    DeviceConnectionError,
    DeviceNotFoundError,
    InvalidDeviceIdError,
)
from .views import U2Driver

logger = logging.getLogger(__name__)

# Validation patterns
DEVICE_ID_PATTERN = re.compile(r"^[a-zA-Z0-9._:-]+$")
MAX_DEVICE_ID_LENGTH = 255


@dataclass
class DeviceInfo:
    """Information about a connected device."""

    serial: str
    state: str  # "device", "offline", "unauthorized"
    model: Optional[str] = None
    product: Optional[str] = None

    @property
    def is_available(self) -> bool:
        """Check if device is available for use."""
        return self.state == "device"


def validate_device_id(device_id: Optional[str]) -> bool:
    """Validate device ID format (Command Injection prevention).

    Args:
        device_id: ADB device serial number

    Returns:
        bool: True if valid
    """
    if device_id is None:
        return True  # None means use default device
    if not device_id or not device_id.strip():
        return False
    if len(device_id) > MAX_DEVICE_ID_LENGTH:
        return False
    return DEVICE_ID_PATTERN.match(device_id) is not None


def parse_adb_devices(output: str) -> List[DeviceInfo]:
    """Parse the output of ``adb devices -l``."""
    devices = []
    for line in output.strip().split("\n")[1:]:  # Skip header
        parts = line.split()
        if len(parts) < 2:
            continue
        extras = dict(
            part.split(":", 1) for part in parts[2:] if ":" in part
        )
        devices.append(
            DeviceInfo(
                serial=parts[0],
                state=parts[1],
                model=extras.get("model"),
                product=extras.get("product"),
            )
        )
    return devices


class DeviceManager:
    """Manages the connection to the device under test."""

    def __init__(self, default_device: Optional[str] = config.DEFAULT_DEVICE_ID):
        self._cache: Dict[str, U2Driver] = {}
        self._cache_lock = threading.Lock()
        self._selected_device: Optional[str] = default_device

    def list_devices(self) -> List[DeviceInfo]:
        """List all connected Android devices (empty list if adb fails)."""
        try:
            result = subprocess.run(
                ["adb", "devices", "-l"],
                capture_output=True,
                text=True,
                timeout=10,
            )
        except subprocess.TimeoutExpired:
            logger.error("ADB devices command timed out")
            return []
        except FileNotFoundError:
            logger.error("ADB not found in PATH")
            return []
        return parse_adb_devices(result.stdout)

    def get_available_devices(self) -> List[DeviceInfo]:
        """Get only available (state=device) devices."""
        return [d for d in self.list_devices() if d.is_available]

    def select_device(self, device_id: str) -> None:
        """Select a device as the default for subsequent operations.

        Raises:
            InvalidDeviceIdError: Invalid serial format
            DeviceNotFoundError: Serial not among available devices
        """
        if not validate_device_id(device_id):
            raise InvalidDeviceIdError(device_id)
        if not any(d.serial == device_id for d in self.get_available_devices()):
            raise DeviceNotFoundError(device_id)
        self._selected_device = device_id
        logger.info(f"Selected device: {device_id}")

    def get_selected_device(self) -> Optional[str]:
        """Get the currently selected device ID."""
        return self._selected_device

    def resolve_device_id(self, device_id: Optional[str]) -> Optional[str]:
        """Resolve device ID, using selected device if None."""
        if device_id is not None:
            return device_id
        return self._selected_device

    @contextlib.contextmanager
    def get_driver(self, device_id: Optional[str] = None) -> Generator[U2Driver, None, None]:
        """Get a driver for the device, connecting on first use.

        Args:
            device_id: Device serial (None for selected/default device)

        Yields:
            U2Driver wrapping the uiautomator2 connection

        Raises:
            InvalidDeviceIdError: Invalid device ID format
            DeviceNotFoundError: No devices available
            DeviceConnectionError: Connection failed
        """
        resolved_id = self.resolve_device_id(device_id)
        if not validate_device_id(resolved_id):
            raise InvalidDeviceIdError(resolved_id or "")

        cache_key = resolved_id or "default"

        with self._cache_lock:
            if cache_key not in self._cache:
                if resolved_id is None and not self.get_available_devices():
                    raise DeviceNotFoundError()
                try:
                    logger.info(f"Connecting to device: {cache_key}")
                    self._cache[cache_key] = U2Driver(u2.connect(resolved_id))
                except Exception as e:
                    logger.error(f"Failed to connect to device: {e}")
                    raise DeviceConnectionError(cache_key, str(e))
            driver = self._cache[cache_key]

        try:
            driver.device.info  # Ping to verify connection
        except Exception as e:
            with self._cache_lock:
                self._cache.pop(cache_key, None)
            logger.warning(f"Device connection lost, cache invalidated: {cache_key}")
            raise DeviceConnectionError(cache_key, f"Connection lost: {e}")

        yield driver

    def disconnect_all(self):
        """Drop all cached connections."""
        with self._cache_lock:
            self._cache.clear()
        logger.info("Disconnected all devices")


# Global singleton
_device_manager: Optional[DeviceManager] = None
_manager_lock = threading.Lock()


def get_device_manager() -> DeviceManager:
    """Get the global DeviceManager instance."""
    global _device_manager
    with _manager_lock:
        if _device_manager is None:
            _device_manager = DeviceManager()
        return _device_manager
