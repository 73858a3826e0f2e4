from playwright.async_api import Page, expect

from storeqa.ui.pages.common import accept_dialog
from storeqa.ui.pages.login_page import LoginPage


class LoginActions:
    def __init__(self, page: Page, login_page: LoginPage):
        self.page = page
        self.login_page = login_page

    async def fill_username(self, username: str):
        await self.login_page.username_input().fill(username)

    async def fill_password(self, password: str):
        await self.login_page.password_input().fill(password)

    async def click_login(self):
        await self.login_page.login_button().click()

    async def login(self, username: str, password: str):
        await self.fill_username(username)
        await self.fill_password(password)
        await self.click_login()

    async def login_expecting_alert(self, username: str, password: str, message: str) -> str:
        """Submit the login form and assert the rejection alert it raises."""
        await self.fill_username(username)
        await self.fill_password(password)
        return await accept_dialog(self.page, self.click_login, expected=message)

    async def verify_login_modal_visible(self):
        await expect(self.login_page.login_modal_title()).to_be_visible()

    async def verify_logged_in(self, username: str):
        await expect(self.login_page.welcome_user()).to_have_text(f"Welcome {username}")
