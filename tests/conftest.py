"""Shared fixtures: an in-memory Rich Push Sample app behind the UiDriver interface.

``FakeRichPushApp`` renders a small node tree for whatever is on top (the
notification shade, the time picker dialog or the current screen) and
resolves ``FakeView`` selectors against it on every query, the way a
UiObject is re-resolved on the device.
"""
import os
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pytest

from richpush_ui.app import preferences
from richpush_ui.core import ElementNotFoundError, Selector, config, polling

PKG = config.APP_PACKAGE
SYSTEM_UI = "com.android.systemui"
LAUNCHER = "com.android.launcher"


class FakeClock:
    """Stands in for the ``time`` module of the poller."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@dataclass
class FakeNode:
    description: Optional[str] = None
    class_name: str = "android.view.View"
    text: Optional[str] = None
    index: int = 0
    package_name: str = PKG
    checked: bool = False
    enabled: bool = True
    children: list = field(default_factory=list)
    on_click: Optional[Callable[[], None]] = None

    def matches(self, selector: Selector) -> bool:
        return all(getattr(self, k) == v for k, v in selector.criteria().items())

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()


class FakeView:
    def __init__(self, app, path):
        self.app = app
        self.path = path

    def _resolve(self) -> Optional[FakeNode]:
        candidates = [n for root in self.app.render() for n in root.walk()]
        node = None
        for selector in self.path:
            node = next((n for n in candidates if n.matches(selector)), None)
            if node is None:
                return None
            candidates = [n for child in node.children for n in child.walk()]
        return node

    def _require(self) -> FakeNode:
        node = self._resolve()
        if node is None:
            raise ElementNotFoundError({"chain": [s.criteria() for s in self.path]})
        return node

    def exists(self) -> bool:
        return self._resolve() is not None

    def is_checked(self) -> bool:
        return self._require().checked

    def is_enabled(self) -> bool:
        return self._require().enabled

    def click(self) -> None:
        node = self._require()
        self.app.clicks.append(node.description or node.text or node.class_name)
        if node.on_click is not None:
            node.on_click()

    def get_text(self) -> str:
        return self._require().text or ""

    def child(self, **criteria) -> "FakeView":
        return FakeView(self.app, self.path + (Selector(**criteria),))

    def child_count(self) -> int:
        return len(self._require().children)


class FakeRichPushApp:
    """In-memory model of the sample app, the launcher and the shade."""

    def __init__(self, clock: FakeClock, delivery_delay: float = 3.0):
        self.clock = clock
        self.delivery_delay = delivery_delay
        self.prefs = {
            key: False
            for key, s in preferences.SETTINGS.items()
            if s.kind is preferences.SettingKind.TOGGLE
        }
        self.times = {
            key: [10, 0, 0]
            for key, s in preferences.SETTINGS.items()
            if s.kind is preferences.SettingKind.TIME
        }
        self.stack = ["launcher"]
        self.shade_open = False
        self.spinner_open = False
        self.picker = None
        self.message_dialog = False
        self.pending = []
        self.notifications: List[Optional[str]] = []
        self.inbox = []
        self.clicks: List[str] = []
        self.settles: List[float] = []
        self.swipes = []
        self.awake = False
        # Failure injection
        self.volatile = set()  # settings that revert when preferences are left
        self.stuck = set()  # toggles whose clicks are ignored
        self.deliver_when_disabled = False
        self.drop_deliveries = False
        self.duplicate_inbox = False
        self.shade_texts: List[str] = []  # stray texts shown in the shade
        self._entered_with = None

    # --- UiDriver ---

    def find(self, **criteria) -> FakeView:
        return FakeView(self, (Selector(**criteria),))

    def press_back(self) -> None:
        if self.shade_open:
            self.shade_open = False
        elif self.picker is not None:
            self.picker = None
        elif self.spinner_open:
            self.spinner_open = False
        elif self.message_dialog:
            self.message_dialog = False
        elif len(self.stack) > 1:
            self._pop()
        else:
            self.stack = ["launcher"]

    def press_home(self) -> None:
        self.shade_open = False
        self.picker = None
        self.spinner_open = False
        self.stack = ["launcher"]

    def swipe(self, fx, fy, tx, ty, steps) -> None:
        self.swipes.append((fx, fy, tx, ty, steps))
        if fy <= 10 and ty > fy:
            self.shade_open = True

    def display_size(self):
        return (1080, 1920)

    def wake_up(self) -> None:
        self.awake = True

    def start_app(self, package: str) -> None:
        if package == PKG:
            self.stack = ["home"]

    def settle(self, seconds: float) -> None:
        self.settles.append(seconds)
        self.clock.now += seconds

    # --- push backend ---

    def deliver(self, segment: Optional[str] = None) -> None:
        if self.drop_deliveries:
            return
        if not self.prefs["PUSH_ENABLE"] and not self.deliver_when_disabled:
            return
        self.pending.append((self.clock.now + self.delivery_delay, segment))

    def _promote(self) -> None:
        due = [p for p in self.pending if p[0] <= self.clock.now]
        self.pending = [p for p in self.pending if p[0] > self.clock.now]
        for _, segment in due:
            self.notifications.append(segment)
            copies = 2 if self.duplicate_inbox else 1
            for _ in range(copies):
                self.inbox.insert(0, {"read": False, "selected": False})

    # --- navigation state ---

    @property
    def screen(self) -> str:
        return self.stack[-1]

    def _push(self, screen: str) -> None:
        if screen == "preferences":
            self._entered_with = (dict(self.prefs), {k: list(v) for k, v in self.times.items()})
        self.stack.append(screen)

    def _pop(self) -> None:
        if self.screen == "preferences" and self._entered_with is not None:
            prefs, times = self._entered_with
            for key in self.volatile:
                if key in prefs:
                    self.prefs[key] = prefs[key]
                else:
                    self.times[key] = times[key]
        self.stack.pop()

    def _go_home(self) -> None:
        self.stack = ["home"]

    def _select_inbox(self) -> None:
        self.spinner_open = False
        self.stack[-1] = "inbox"

    # --- rendering ---

    def render(self) -> List[FakeNode]:
        self._promote()
        if self.shade_open:
            return [self._render_shade()]
        if self.picker is not None:
            return [self._render_picker()]
        return [self._render_screen()]

    def _render_shade(self) -> FakeNode:
        children = []
        for i, segment in enumerate(self.notifications):
            children.append(
                FakeNode(
                    class_name="android.widget.FrameLayout",
                    package_name=SYSTEM_UI,
                    index=i,
                    children=[
                        FakeNode(text=config.NOTIFICATION_TITLE, package_name=SYSTEM_UI),
                        FakeNode(
                            text=config.NOTIFICATION_ALERT,
                            package_name=SYSTEM_UI,
                            on_click=lambda i=i: self._open_notification(i),
                        ),
                    ],
                )
            )
        for text in self.shade_texts:
            children.append(FakeNode(text=text, package_name=SYSTEM_UI))
        if self.notifications:
            children.append(
                FakeNode(
                    description=config.DESC_CLEAR_NOTIFICATIONS,
                    package_name=SYSTEM_UI,
                    on_click=self._clear_notifications,
                )
            )
        return FakeNode(class_name="android.widget.FrameLayout", package_name=SYSTEM_UI, children=children)

    def _clear_notifications(self) -> None:
        self.notifications = []
        self.shade_open = False

    def _open_notification(self, i: int) -> None:
        segment = self.notifications.pop(i)
        self.shade_open = False
        if segment == config.HOME_SEGMENT:
            self._go_home()
            self.message_dialog = True
        else:
            self._push("message")

    def _render_picker(self) -> FakeNode:
        fields = self.picker["fields"]
        pickers = []
        for i in range(3):
            pickers.append(
                FakeNode(
                    class_name=config.CLASS_NUMBER_PICKER,
                    index=i,
                    children=[
                        FakeNode(class_name=config.CLASS_BUTTON, on_click=lambda i=i: self._step_field(i)),
                        FakeNode(class_name=config.CLASS_EDIT_TEXT, index=1, text=self._format_field(i, fields[i])),
                    ],
                )
            )
        return FakeNode(
            class_name="android.widget.FrameLayout",
            children=[
                FakeNode(class_name="android.widget.TimePicker", children=pickers),
                FakeNode(class_name=config.CLASS_BUTTON, text=config.TEXT_OK, index=1, on_click=self._commit_picker),
            ],
        )

    @staticmethod
    def _format_field(i: int, value: int) -> str:
        if i == 0:
            return str(value)
        if i == 1:
            return f"{value:02d}"
        return "PM" if value else "AM"

    def _step_field(self, i: int) -> None:
        fields = self.picker["fields"]
        if i == 0:
            fields[0] = fields[0] % 12 + 1
        elif i == 1:
            fields[1] = (fields[1] + 1) % 60
        else:
            fields[2] = 1 - fields[2]

    def _commit_picker(self) -> None:
        self.times[self.picker["key"]] = list(self.picker["fields"])
        self.picker = None

    def _open_picker(self, key: str) -> None:
        if self._enabled(key):
            self.picker = {"key": key, "fields": list(self.times[key])}

    def _toggle(self, key: str) -> None:
        if self._enabled(key) and key not in self.stuck:
            self.prefs[key] = not self.prefs[key]

    def _enabled(self, key: str) -> bool:
        return preferences.is_effectively_enabled(key, self.prefs)

    def _render_screen(self) -> FakeNode:
        screen = self.screen
        if screen == "launcher":
            return FakeNode(
                class_name="android.widget.FrameLayout",
                package_name=LAUNCHER,
                children=[FakeNode(description="Apps", package_name=LAUNCHER)],
            )
        if screen == "preferences":
            return self._render_preferences()
        if screen == "message":
            return FakeNode(
                class_name="android.widget.FrameLayout",
                children=[
                    FakeNode(description=config.DESC_NAVIGATE_UP, on_click=self._pop),
                    FakeNode(class_name=config.CLASS_WEB_VIEW),
                ],
            )
        return self._render_main(screen)

    def _render_main(self, screen: str) -> FakeNode:
        children = [
            FakeNode(description=config.DESC_NAVIGATE_HOME, on_click=self._go_home),
            FakeNode(description=config.DESC_PREFERENCES, on_click=lambda: self._push("preferences")),
            FakeNode(class_name=config.CLASS_SPINNER, on_click=lambda: setattr(self, "spinner_open", True)),
        ]
        if self.spinner_open:
            children.append(FakeNode(text="Home", on_click=lambda: setattr(self, "spinner_open", False)))
            children.append(FakeNode(text=config.TEXT_INBOX, on_click=self._select_inbox))
        if screen == "inbox":
            children.extend(self._render_inbox())
        if self.message_dialog:
            children.append(
                FakeNode(class_name=config.CLASS_WEB_VIEW, description=config.DESC_MESSAGE_DIALOG)
            )
        return FakeNode(class_name="android.widget.FrameLayout", children=children)

    def _render_inbox(self) -> List[FakeNode]:
        nodes = []
        if self.inbox:
            rows = []
            for i, message in enumerate(self.inbox):
                indicator = config.DESC_MESSAGE_READ if message["read"] else config.DESC_MESSAGE_UNREAD
                rows.append(
                    FakeNode(
                        description=config.DESC_INBOX_MESSAGE,
                        index=i,
                        children=[
                            FakeNode(
                                class_name=config.CLASS_CHECKBOX,
                                checked=message["selected"],
                                on_click=lambda m=message: m.update(selected=not m["selected"]),
                            ),
                            FakeNode(description=indicator),
                        ],
                    )
                )
            nodes.append(FakeNode(class_name=config.CLASS_LIST_VIEW, children=rows))
        for action in (config.DESC_MARK_READ, config.DESC_MARK_UNREAD, config.DESC_DELETE):
            nodes.append(FakeNode(description=action, on_click=lambda a=action: self._inbox_action(a)))
        return nodes

    def _inbox_action(self, action: str) -> None:
        selected = [m for m in self.inbox if m["selected"]]
        for message in selected:
            message["selected"] = False
            if action == config.DESC_MARK_READ:
                message["read"] = True
            elif action == config.DESC_MARK_UNREAD:
                message["read"] = False
        if action == config.DESC_DELETE:
            self.inbox = [m for m in self.inbox if m not in selected]

    def _render_preferences(self) -> FakeNode:
        rows = [FakeNode(description=config.DESC_NAVIGATE_UP, on_click=self._pop)]
        for key, setting in preferences.SETTINGS.items():
            enabled = self._enabled(key)
            if setting.kind is preferences.SettingKind.TIME:
                rows.append(
                    FakeNode(description=key, enabled=enabled, on_click=lambda k=key: self._open_picker(k))
                )
                continue
            rows.append(
                FakeNode(
                    description=key,
                    enabled=enabled,
                    on_click=lambda k=key: self._toggle(k),
                    children=[
                        FakeNode(
                            class_name=config.CLASS_CHECKBOX,
                            checked=self.prefs[key],
                            enabled=enabled,
                            on_click=lambda k=key: self._toggle(k),
                        )
                    ],
                )
            )
        return FakeNode(class_name=config.CLASS_LIST_VIEW, children=rows)


class FakeSender:
    """Push sender that delivers straight into the fake app."""

    def __init__(self, app: FakeRichPushApp):
        self.app = app
        self.sent: List[Optional[str]] = []

    def send(self, segment: Optional[str] = None) -> dict:
        self.sent.append(segment)
        self.app.deliver(segment)
        return {"ok": True}


@pytest.fixture
def clock(monkeypatch):
    clock = FakeClock()
    monkeypatch.setattr(polling, "time", clock)
    return clock


@pytest.fixture
def app(clock):
    return FakeRichPushApp(clock)


@pytest.fixture
def home_app(app):
    """Fake app already on its home screen."""
    app.start_app(PKG)
    return app


@pytest.fixture
def sender(app):
    return FakeSender(app)


class DummyManager:
    """Stands in for DeviceManager, handing out one driver."""

    def __init__(self, driver):
        self.driver = driver
        self.requested = []

    def get_driver(self, device_id=None):
        self.requested.append(device_id)
        manager = self

        class _Ctx:
            def __enter__(self_inner):
                return manager.driver

            def __exit__(self_inner, *args):
                return False

        return _Ctx()


@pytest.fixture
def dummy_manager():
    return DummyManager


# === Integration fixtures ===


@pytest.fixture
def connected_device():
    """Skip unless an Android device is connected."""
    if os.environ.get("SKIP_ANDROID_INTEGRATION") == "1":
        pytest.skip("SKIP_ANDROID_INTEGRATION=1; integration tests skipped")

    try:
        result = subprocess.run(["adb", "devices"], capture_output=True, text=True, timeout=10)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        pytest.skip("adb not available; integration tests skipped")
    lines = result.stdout.strip().split("\n")
    devices = [line for line in lines[1:] if line.strip().endswith("device")]
    if not devices:
        pytest.skip("No Android device connected")
    return None  # Use default device


@pytest.fixture
def push_credentials(connected_device):
    """Skip unless the push API credentials are configured."""
    for name in ("MASTER_SECRET", "APP_KEY"):
        if not os.environ.get(name):
            pytest.skip(f"{name} not set; push scenarios skipped")
