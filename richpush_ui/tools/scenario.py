"""Scenario tool: run one of the end-to-end scenarios on the device."""
import logging
from typing import Any, Dict, Optional

from ..app.scenarios import PUSH_SCENARIOS, SCENARIOS, prepare_app
from ..core import PushSender, RichPushTestError, config, get_device_manager
from ._errors import wrap_tool_errors

logger = logging.getLogger(__name__)


@wrap_tool_errors(
    logger,
    "Scenario failed",
    pass_through=(ValueError, RichPushTestError),
)
def run_scenario(
    name: str,
    device_id: Optional[str] = None,
    package: str = config.APP_PACKAGE,
    timeout: float = config.NOTIFICATION_WAIT_TIMEOUT,
    poll_interval: float = config.NOTIFICATION_POLL_INTERVAL,
) -> Dict[str, Any]:
    """Open the app and run a scenario to completion.

    Args:
        name: "notification", "inbox" or "preferences"
        device_id: Device serial (None for default)
        package: App package name
        timeout: Notification wait budget in seconds
        poll_interval: Notification poll interval in seconds

    Returns:
        Dictionary with success, scenario and its observations

    Raises:
        ValueError: Unknown scenario name
        ScenarioFailure: An assertion of the scenario failed
        PersistenceViolation: A preference did not persist
        ElementNotFoundError: A required element was missing
        DeliveryError: The push API rejected a send
    """
    if name not in SCENARIOS:
        raise ValueError(f"Unknown scenario: {name}. Must be one of: {list(SCENARIOS)}")

    scenario = SCENARIOS[name]
    with get_device_manager().get_driver(device_id) as driver:
        prepare_app(driver, package)
        if name in PUSH_SCENARIOS:
            with PushSender.from_env() as sender:
                observations = scenario(driver, sender, timeout=timeout, interval=poll_interval)
        else:
            observations = scenario(driver)

    logger.info(f"Scenario '{name}' passed: {observations}")
    return {
        "success": True,
        "scenario": name,
        "observations": observations,
    }
