"""View locator for the device under test.

Scenario code talks to the screen through two small interfaces:

    UiDriver  - device level actions and element lookup
    View      - a lazily resolved element (exists, checked, enabled, click, text)

``U2Driver`` and ``U2View`` implement them on top of uiautomator2. A view is
only a selector until it is queried, so the same ``View`` can be reused
across screen changes the way a UiObject is.

Usage:
    driver = U2Driver(u2.connect())
    preferences = driver.find(description="Preferences")
    if preferences.exists():
        preferences.click()
"""

import logging
import time
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Protocol, Tuple

import uiautomator2 as u2
from uiautomator2.exceptions import UiObjectNotFoundError

from .exceptions import ElementNotFoundError

logger = logging.getLogger(__name__)

# Selector field -> uiautomator2 keyword
_U2_KEYWORDS = {
    "description": "description",
    "class_name": "className",
    "text": "text",
    "index": "index",
    "package_name": "packageName",
}


@dataclass(frozen=True)
class Selector:
    """Logical element descriptor."""

    description: Optional[str] = None
    class_name: Optional[str] = None
    text: Optional[str] = None
    index: Optional[int] = None
    package_name: Optional[str] = None

    def criteria(self) -> Dict[str, Any]:
        """Return the fields that are set, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def to_u2_kwargs(self) -> Dict[str, Any]:
        """Build a uiautomator2 selector from the set fields."""
        return {_U2_KEYWORDS[name]: value for name, value in self.criteria().items()}


class View(Protocol):
    """Capability interface of a located element."""

    def exists(self) -> bool: ...

    def is_checked(self) -> bool: ...

    def is_enabled(self) -> bool: ...

    def click(self) -> None: ...

    def get_text(self) -> str: ...

    def child(self, **criteria) -> "View": ...

    def child_count(self) -> int: ...


class UiDriver(Protocol):
    """Capability interface of the device under test."""

    def find(self, **criteria) -> View: ...

    def press_back(self) -> None: ...

    def press_home(self) -> None: ...

    def swipe(self, fx: int, fy: int, tx: int, ty: int, steps: int) -> None: ...

    def display_size(self) -> Tuple[int, int]: ...

    def wake_up(self) -> None: ...

    def start_app(self, package: str) -> None: ...

    def settle(self, seconds: float) -> None: ...


class U2View:
    """View backed by a uiautomator2 UiObject."""

    def __init__(self, obj, path: Tuple[Selector, ...]):
        self._obj = obj
        self.path = path

    def describe(self) -> Dict[str, Any]:
        """Criteria of this view, nested for child lookups."""
        if len(self.path) == 1:
            return self.path[0].criteria()
        return {"chain": [s.criteria() for s in self.path]}

    def _info(self) -> Dict[str, Any]:
        try:
            return self._obj.info
        except UiObjectNotFoundError:
            raise ElementNotFoundError(self.describe())

    def exists(self) -> bool:
        try:
            return bool(self._obj.exists)
        except UiObjectNotFoundError:
            return False

    def is_checked(self) -> bool:
        return bool(self._info().get("checked"))

    def is_enabled(self) -> bool:
        return bool(self._info().get("enabled"))

    def click(self) -> None:
        try:
            self._obj.click()
        except UiObjectNotFoundError:
            raise ElementNotFoundError(self.describe())
        logger.debug(f"Clicked {self.describe()}")

    def get_text(self) -> str:
        try:
            return self._obj.get_text() or ""
        except UiObjectNotFoundError:
            raise ElementNotFoundError(self.describe())

    def child(self, **criteria) -> "U2View":
        selector = Selector(**criteria)
        return U2View(self._obj.child(**selector.to_u2_kwargs()), self.path + (selector,))

    def child_count(self) -> int:
        return int(self._info().get("childCount", 0))


class U2Driver:
    """UiDriver backed by a uiautomator2 Device."""

    def __init__(self, device: u2.Device):
        self.device = device

    @property
    def serial(self) -> str:
        return self.device.serial

    def find(self, **criteria) -> U2View:
        selector = Selector(**criteria)
        return U2View(self.device(**selector.to_u2_kwargs()), (selector,))

    def press_back(self) -> None:
        self.device.press("back")
        logger.info("Pressed back button")

    def press_home(self) -> None:
        self.device.press("home")
        logger.info("Pressed home button")

    def swipe(self, fx: int, fy: int, tx: int, ty: int, steps: int) -> None:
        self.device.swipe(fx, fy, tx, ty, steps=steps)
        logger.info(f"Swiped ({fx}, {fy}) -> ({tx}, {ty})")

    def display_size(self) -> Tuple[int, int]:
        width, height = self.device.window_size()
        return width, height

    def wake_up(self) -> None:
        self.device.screen_on()

    def start_app(self, package: str) -> None:
        self.device.app_start(package, wait=True)
        logger.info(f"Started app: {package}")

    def settle(self, seconds: float) -> None:
        time.sleep(seconds)
