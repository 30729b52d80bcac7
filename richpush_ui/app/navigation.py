"""Navigation helpers for the Rich Push Sample app.

Click sequences that bring the app to a known screen: home, preferences,
inbox, and the system notification shade.
"""
import logging

from ..core import ElementNotFoundError, NavigationError, UiDriver, config

logger = logging.getLogger(__name__)


def open_app(driver: UiDriver, package: str = config.APP_PACKAGE) -> None:
    """Wake the device and bring the app to the foreground.

    Raises:
        ElementNotFoundError: No element of the package is on screen
    """
    driver.wake_up()

    # Home a few times to get past any welcome screen
    for _ in range(3):
        driver.press_home()

    driver.start_app(package)

    if not driver.find(package_name=package).exists():
        raise ElementNotFoundError(
            {"package_name": package},
            reason="Unable to detect the app under test",
        )
    logger.info(f"Opened app: {package}")


def navigate_to_app_home(driver: UiDriver) -> None:
    """Return to the app's home screen from any app screen.

    Raises:
        NavigationError: Neither the home nor the up button is visible
    """
    home_button = driver.find(description=config.DESC_NAVIGATE_HOME)
    up_button = driver.find(description=config.DESC_NAVIGATE_UP)

    if home_button.exists():
        home_button.click()
    elif up_button.exists():
        up_button.click()
        home_button.click()
    else:
        raise NavigationError([config.DESC_NAVIGATE_HOME, config.DESC_NAVIGATE_UP])
    logger.info("Navigated to app home")


def go_to_preferences(driver: UiDriver) -> None:
    """Open the preferences screen.

    Raises:
        ElementNotFoundError: Preferences button not visible
    """
    preferences_button = driver.find(description=config.DESC_PREFERENCES)
    if not preferences_button.exists():
        raise ElementNotFoundError(
            {"description": config.DESC_PREFERENCES},
            reason="Unable to detect Preferences button",
        )
    preferences_button.click()
    logger.info("Opened preferences")


def navigate_to_inbox(driver: UiDriver) -> None:
    """Switch the home screen spinner to the inbox."""
    navigate_to_app_home(driver)

    driver.find(class_name=config.CLASS_SPINNER).click()
    driver.settle(config.WINDOW_UPDATE_SETTLE)

    driver.find(text=config.TEXT_INBOX).click()
    driver.settle(config.WINDOW_UPDATE_SETTLE)
    logger.info("Opened inbox")


def open_notification_area(driver: UiDriver) -> None:
    """Pull down the notification shade."""
    _, height = driver.display_size()
    driver.swipe(
        config.SHADE_SWIPE_X,
        config.SHADE_SWIPE_START_Y,
        config.SHADE_SWIPE_X,
        height,
        config.SHADE_SWIPE_STEPS,
    )


def clear_notifications(driver: UiDriver) -> bool:
    """Dismiss every notification in the shade.

    Returns:
        True if the clear button was present and clicked
    """
    open_notification_area(driver)

    clear_button = driver.find(description=config.DESC_CLEAR_NOTIFICATIONS)
    if clear_button.exists():
        clear_button.click()
        logger.info("Cleared notifications")
        return True

    driver.press_back()
    logger.info("No notifications to clear")
    return False
