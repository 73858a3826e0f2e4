from playwright.async_api import Locator, Page


class LoginPage:
    def __init__(self, page: Page):
        self.page = page

    def login_modal_title(self) -> Locator:
        return self.page.locator("#logInModal .modal-title")

    def username_input(self) -> Locator:
        return self.page.locator("#loginusername")

    def password_input(self) -> Locator:
        return self.page.locator("#loginpassword")

    def login_button(self) -> Locator:
        return self.page.locator("#logInModal").get_by_role("button", name="Log in")

    def welcome_user(self) -> Locator:
        return self.page.locator("#nameofuser")
