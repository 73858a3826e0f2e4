from typing import Union

from playwright.async_api import Page

from storeqa.ui.data.models import MenuOptions
from storeqa.ui.pages import common


class CommonActions:
    """Navbar, modal and alert verbs available on every screen."""

    def __init__(self, page: Page):
        self.page = page

    async def select_menu_option(self, option: Union[MenuOptions, str]):
        await common.click_menu_option(self.page, option)

    async def wait_for_modal(self, title: str):
        await common.wait_for_modal(self.page, title)

    async def close_modal(self):
        await common.close_modal(self.page)

    async def accept_alert(self):
        await common.accept_alert(self.page)

    async def get_alert_text(self) -> str:
        return await common.get_alert_text(self.page)

    async def navigate_to(self, path: str = ""):
        await common.navigate_to(self.page, path)
