"""Navigation, modal and alert helpers shared by every storefront screen.

These are plain functions over a Playwright ``Page`` so that each page object
can hold the page by composition and still reach the navbar, modals and
alerts.
"""

import logging
import re
from typing import Awaitable, Callable, Optional, Pattern, Union

from playwright.async_api import Locator, Page, expect

from storeqa.ui.data.models import MenuOptions
from storeqa.utils.verify import verify

MENU_LINK_NAMES = {
    MenuOptions.HOME: re.compile(r"^Home"),  # rendered as "Home (current)"
    MenuOptions.CONTACT: "Contact",
    MenuOptions.ABOUT_US: "About us",
    MenuOptions.CART: "Cart",
    MenuOptions.SIGN_UP: "Sign up",
    MenuOptions.LOG_IN: "Log in",
    MenuOptions.LOG_OUT: "Log out",
}


def contains_text(text: str) -> Pattern:
    """Case-insensitive substring pattern for role-name and text matching."""
    return re.compile(re.escape(text.strip()), re.IGNORECASE)


def navbar_title(page: Page) -> Locator:
    return page.get_by_role("link", name="PRODUCT STORE")


def menu_link(page: Page, option: Union[MenuOptions, str]) -> Locator:
    try:
        option = MenuOptions(option)
    except ValueError:
        raise ValueError(f"Unknown menu option: {option}") from None
    name = MENU_LINK_NAMES[option]
    if isinstance(name, str):
        return page.get_by_role("link", name=name, exact=True)
    return page.get_by_role("link", name=name)


def modal_title(page: Page) -> Locator:
    return page.locator(".modal.show .modal-title")


def modal_body(page: Page) -> Locator:
    return page.locator(".modal.show .modal-body")


def close_modal_button(page: Page) -> Locator:
    return page.locator(".modal.show .modal-footer").get_by_role("button", name="Close")


def ok_button(page: Page) -> Locator:
    return page.get_by_role("button", name="OK")


def alert_message(page: Page) -> Locator:
    return page.locator(".alert")


async def click_menu_option(page: Page, option: Union[MenuOptions, str]):
    logging.debug(f"Clicking menu option: {option}")
    await menu_link(page, option).click()


async def wait_for_modal(page: Page, title: str):
    title_locator = modal_title(page)
    await title_locator.wait_for()
    await expect(title_locator).to_contain_text(title)


async def close_modal(page: Page):
    await close_modal_button(page).click()


async def accept_alert(page: Page):
    """Confirm an in-page (sweet) alert with its OK button."""
    await ok_button(page).click()


async def get_alert_text(page: Page) -> str:
    text = await alert_message(page).text_content()
    return text or ""


async def accept_dialog(
    page: Page, trigger: Callable[[], Awaitable], expected: Optional[str] = None, timeout: float = 10000
) -> str:
    """Run ``trigger`` and accept the native browser dialog it raises.

    Args:
        page: page the dialog is raised on
        trigger: coroutine function performing the click that opens the dialog
        expected: substring the dialog message must contain, checked case-insensitively
        timeout: milliseconds to wait for the dialog

    Returns:
        str: the dialog message
    """
    async with page.expect_event("dialog", timeout=timeout) as dialog_info:
        await trigger()
    dialog = await dialog_info.value
    message = dialog.message
    await dialog.accept()
    logging.debug(f"Accepted dialog: {message}")

    if expected is not None:
        verify(
            expected.lower() in message.lower(),
            f'Expected dialog message containing "{expected}", got "{message}"',
        )
    return message


async def navigate_to(page: Page, path: str = ""):
    await page.goto(path, wait_until="domcontentloaded")
