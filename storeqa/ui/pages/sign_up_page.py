from playwright.async_api import Locator, Page


class SignUpPage:
    def __init__(self, page: Page):
        self.page = page

    def sign_up_modal_title(self) -> Locator:
        return self.page.locator("#signInModal .modal-title")

    def username_input(self) -> Locator:
        return self.page.locator("#sign-username")

    def password_input(self) -> Locator:
        return self.page.locator("#sign-password")

    def sign_up_button(self) -> Locator:
        return self.page.locator("#signInModal").get_by_role("button", name="Sign up")
