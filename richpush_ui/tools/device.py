"""Device tools: list connected devices and pick the device under test."""
import logging
from typing import Any, Dict

from ..core import DeviceNotFoundError, InvalidDeviceIdError, get_device_manager
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


def device_list() -> Dict[str, Any]:
    """List all connected Android devices.

    Returns:
        Dictionary containing:
        - count: Number of connected devices
        - available_count: Devices in "device" state
        - devices: List of {serial, state, model, product, available}
        - selected: Currently selected device (if any)
    """
    device_manager = get_device_manager()

    devices = device_manager.list_devices()
    available_count = sum(1 for d in devices if d.is_available)
    logger.info(f"Found {len(devices)} devices ({available_count} available)")

    return {
        "count": len(devices),
        "available_count": available_count,
        "devices": [
            {
                "serial": d.serial,
                "state": d.state,
                "model": d.model,
                "product": d.product,
                "available": d.is_available,
            }
            for d in devices
        ],
        "selected": device_manager.get_selected_device(),
    }


@wrap_tool_errors(
    logger,
    "Device selection failed",
    pass_through=(InvalidDeviceIdError, DeviceNotFoundError),
)
def device_select(device_id: str) -> Dict[str, Any]:
    """Select the device under test for subsequent tools.

    Raises:
        InvalidDeviceIdError: Invalid device ID format
        DeviceNotFoundError: Device not found or not available
    """
    device_manager = get_device_manager()

    previous = device_manager.get_selected_device()
    device_manager.select_device(device_id)

    return {
        "success": True,
        "selected": device_id,
        "previous": previous,
    }
