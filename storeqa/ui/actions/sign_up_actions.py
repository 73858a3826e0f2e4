from playwright.async_api import Page, expect

from storeqa.ui.pages.common import accept_dialog
from storeqa.ui.pages.sign_up_page import SignUpPage


class SignUpActions:
    def __init__(self, page: Page, sign_up_page: SignUpPage):
        self.page = page
        self.sign_up_page = sign_up_page

    async def verify_sign_up_modal_visible(self):
        await expect(self.sign_up_page.sign_up_modal_title()).to_be_visible()

    async def fill_username(self, username: str):
        await self.sign_up_page.username_input().fill(username)

    async def fill_user_password(self, password: str):
        await self.sign_up_page.password_input().fill(password)

    async def select_sign_up(self):
        await self.sign_up_page.sign_up_button().click()

    async def sign_up_expecting_alert(self, username: str, password: str, message: str) -> str:
        await self.fill_username(username)
        await self.fill_user_password(password)
        return await accept_dialog(self.page, self.select_sign_up, expected=message)
