"""Preference round-trip verification.

Every preference of the sample app is described by a ``SettingDescriptor``.
A dependent setting is only enabled in the UI when all of its ancestors are
switched on, so the registry is also the source of the "dependents are
disabled" checks.

Round-trip contract: after a value is set, leaving the preferences screen
and coming back must show the same value.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ..core import PersistenceViolation, UiDriver, UnknownSettingError, View, config
from .navigation import go_to_preferences

logger = logging.getLogger(__name__)

TIME_PICKER_FIELDS = 3


class SettingKind(enum.Enum):
    TOGGLE = "toggle"
    TIME = "time"


@dataclass(frozen=True)
class SettingDescriptor:
    """A preference row, found by its accessibility description."""

    key: str
    kind: SettingKind = SettingKind.TOGGLE
    parent: Optional[str] = None


SETTINGS: Dict[str, SettingDescriptor] = {
    s.key: s
    for s in (
        SettingDescriptor("PUSH_ENABLE"),
        SettingDescriptor("SOUND_ENABLE", parent="PUSH_ENABLE"),
        SettingDescriptor("VIBRATE_ENABLE", parent="PUSH_ENABLE"),
        SettingDescriptor("QUIET_TIME_ENABLE", parent="PUSH_ENABLE"),
        SettingDescriptor("QUIET_TIME_START", SettingKind.TIME, parent="QUIET_TIME_ENABLE"),
        SettingDescriptor("QUIET_TIME_END", SettingKind.TIME, parent="QUIET_TIME_ENABLE"),
        SettingDescriptor("LOCATION_ENABLE"),
        SettingDescriptor("LOCATION_FOREGROUND_ENABLE", parent="LOCATION_ENABLE"),
        SettingDescriptor("LOCATION_BACKGROUND_ENABLE", parent="LOCATION_ENABLE"),
    )
}


# === Registry queries ===


def get_setting(key: str) -> SettingDescriptor:
    try:
        return SETTINGS[key]
    except KeyError:
        raise UnknownSettingError(key, list(SETTINGS))


def root_settings() -> List[SettingDescriptor]:
    return [s for s in SETTINGS.values() if s.parent is None]


def children(key: str) -> List[SettingDescriptor]:
    get_setting(key)
    return [s for s in SETTINGS.values() if s.parent == key]


def descendants(key: str) -> List[SettingDescriptor]:
    """All settings governed by key, depth first."""
    result = []
    for child in children(key):
        result.append(child)
        result.extend(descendants(child.key))
    return result


def ancestors(key: str) -> List[str]:
    """Governing settings of key, nearest first."""
    chain = []
    parent = get_setting(key).parent
    while parent is not None:
        chain.append(parent)
        parent = get_setting(parent).parent
    return chain


def is_effectively_enabled(key: str, values: Mapping[str, bool]) -> bool:
    """A setting is usable iff it exists and every ancestor toggle is on."""
    if key not in SETTINGS:
        return False
    return all(values.get(parent, False) for parent in ancestors(key))


# === UI operations ===


def _preference_view(driver: UiDriver, key: str) -> View:
    get_setting(key)
    return driver.find(description=key)


def _preference_checkbox(driver: UiDriver, key: str) -> View:
    return _preference_view(driver, key).child(class_name=config.CLASS_CHECKBOX)


def _reenter_preferences(driver: UiDriver) -> None:
    driver.press_back()
    go_to_preferences(driver)


def preference_state(driver: UiDriver, key: str) -> Dict[str, bool]:
    """Read checked/enabled flags of a preference row."""
    view = _preference_view(driver, key)
    state = {"enabled": view.is_enabled()}
    if get_setting(key).kind is SettingKind.TOGGLE:
        state["checked"] = _preference_checkbox(driver, key).is_checked()
    return state


def set_preference_checkbox_enabled(driver: UiDriver, key: str, enabled: bool) -> bool:
    """Bring a toggle to the wanted state, clicking only on mismatch.

    Returns:
        True if the checkbox was clicked
    """
    checkbox = _preference_checkbox(driver, key)
    if checkbox.is_checked() == enabled:
        return False
    checkbox.click()
    logger.info(f"Set {key} to {enabled}")
    return True


def _toggle_and_reenter(driver: UiDriver, key: str) -> bool:
    """Toggle once and check the value survives leaving the screen."""
    checkbox = _preference_checkbox(driver, key)
    before = checkbox.is_checked()

    checkbox.click()
    expected = checkbox.is_checked()
    if expected == before:
        raise PersistenceViolation(key, not before, expected, reason="toggle had no effect")

    _reenter_preferences(driver)

    actual = checkbox.is_checked()
    if actual != expected:
        raise PersistenceViolation(key, expected, actual)
    return actual


def verify_checkbox_setting(driver: UiDriver, key: str) -> None:
    """Toggle a setting twice, re-entering the screen after each toggle.

    Raises:
        PersistenceViolation: A toggle had no effect, did not survive
            re-entering the screen, or the second toggle did not restore
            the original value
    """
    original = _preference_checkbox(driver, key).is_checked()

    _toggle_and_reenter(driver, key)
    restored = _toggle_and_reenter(driver, key)

    if restored != original:
        raise PersistenceViolation(key, original, restored, reason="round trip")
    logger.info(f"Setting {key} round-tripped ({original} -> {not original} -> {restored})")


def _read_time_picker(driver: UiDriver) -> str:
    captured = ""
    for i in range(TIME_PICKER_FIELDS):
        picker = driver.find(class_name=config.CLASS_NUMBER_PICKER, index=i)
        captured += picker.child(class_name=config.CLASS_EDIT_TEXT).get_text()
    return captured


def verify_time_picker_setting(driver: UiDriver, key: str) -> str:
    """Change a time preference and check it survives re-entering the screen.

    Returns:
        The committed time text

    Raises:
        PersistenceViolation: Re-read time differs from the committed one
    """
    time_picker = _preference_view(driver, key)
    ok_button = driver.find(class_name=config.CLASS_BUTTON, text=config.TEXT_OK)

    time_picker.click()

    # One step on each of hour, minute and period
    for i in range(TIME_PICKER_FIELDS):
        picker = driver.find(class_name=config.CLASS_NUMBER_PICKER, index=i)
        picker.child(class_name=config.CLASS_BUTTON).click()

    # The edit text is only populated once the dialog is reopened
    ok_button.click()
    time_picker.click()
    captured = _read_time_picker(driver)
    ok_button.click()

    _reenter_preferences(driver)

    time_picker.click()
    current = _read_time_picker(driver)
    ok_button.click()

    if current != captured:
        raise PersistenceViolation(key, captured, current, reason="failed to set quiet times")
    logger.info(f"Time setting {key} persisted as {captured!r}")
    return captured


def verify_setting(driver: UiDriver, key: str) -> None:
    """Round-trip a setting according to its kind."""
    if get_setting(key).kind is SettingKind.TIME:
        verify_time_picker_setting(driver, key)
    else:
        verify_checkbox_setting(driver, key)


def assert_preference_view_disabled(driver: UiDriver, key: str) -> None:
    """Raises PersistenceViolation if the preference row is still enabled."""
    if _preference_view(driver, key).is_enabled():
        raise PersistenceViolation(
            key, False, True, reason="view should be disabled while its parent is off"
        )
