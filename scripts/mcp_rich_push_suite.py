import anyio
import json
import logging
import os
import sys
from datetime import timedelta

from mcp.client.session import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client

PKG = os.environ.get("RICH_PUSH_PACKAGE", "com.urbanairship.richpush.sample")
SCENARIO_TIMEOUT = 900  # preferences round-trips and two 60s notification waits

logger = logging.getLogger("mcp_rich_push_suite")


def _unwrap(result):
    if result.isError:
        raise RuntimeError(f"Tool error: {result}")
    if result.structuredContent and "result" in result.structuredContent:
        return result.structuredContent["result"]
    if result.content:
        return json.loads(result.content[0].text)
    return {}


async def call(session, name, args=None, timeout=20):
    result = await session.call_tool(
        name,
        arguments=args or {},
        read_timeout_seconds=timedelta(seconds=timeout),
    )
    return _unwrap(result)


def check_toggle_state(setting, state):
    """A toggle row must report its checkbox, whatever its value."""
    if "checked" not in state:
        raise RuntimeError(f"{setting} did not report a checkbox state: {state}")
    return state["checked"]


async def run_scenario(session, name):
    result = await call(
        session,
        "run_scenario",
        {"name": name, "package": PKG},
        timeout=SCENARIO_TIMEOUT,
    )
    logger.info(f"{name}: {result.get('observations')}")
    return result


async def run_tests():
    server = StdioServerParameters(
        command=sys.executable,
        args=["-u", "-m", "richpush_ui.server"],
        cwd=os.getcwd(),
        env=dict(os.environ),
    )

    async with stdio_client(server) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            devices = await call(session, "device_list")
            if devices.get("available_count", 0) == 0:
                raise RuntimeError("No devices available for testing")

            # Smoke the step tools before the full scenarios
            await call(session, "open_rich_push_app", {"package": PKG}, timeout=60)
            await call(session, "go_to_preferences")
            state = await call(session, "get_preference_state", {"setting": "PUSH_ENABLE"})
            check_toggle_state("PUSH_ENABLE", state)
            await call(session, "wait_seconds", {"seconds": 1})

            await run_scenario(session, "preferences")
            await run_scenario(session, "notification")
            await run_scenario(session, "inbox")

            print("Rich push UI suite completed successfully")


def run_tests_sync():
    anyio.run(run_tests)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_tests_sync()
