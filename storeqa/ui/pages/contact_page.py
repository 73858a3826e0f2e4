from playwright.async_api import Locator, Page


class ContactPage:
    def __init__(self, page: Page):
        self.page = page

    def contact_modal_title(self) -> Locator:
        return self.page.locator("#exampleModal .modal-title")

    def email_input(self) -> Locator:
        return self.page.locator("#recipient-email")

    def name_input(self) -> Locator:
        return self.page.locator("#recipient-name")

    def message_input(self) -> Locator:
        return self.page.locator("#message-text")

    def send_message_button(self) -> Locator:
        return self.page.get_by_role("button", name="Send message")
