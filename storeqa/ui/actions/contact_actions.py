from typing import Optional

from playwright.async_api import Page, expect

from storeqa.ui.pages.common import accept_dialog
from storeqa.ui.pages.contact_page import ContactPage


class ContactActions:
    def __init__(self, page: Page, contact_page: ContactPage):
        self.page = page
        self.contact_page = contact_page

    async def verify_contact_modal_visible(self):
        await expect(self.contact_page.contact_modal_title()).to_be_visible()

    async def fill_contact_form(self, email: str, name: str, message: str):
        await self.contact_page.email_input().fill(email)
        await self.contact_page.name_input().fill(name)
        await self.contact_page.message_input().fill(message)

    async def send_message(self, expected: Optional[str] = None) -> str:
        """Send the form and return the confirmation alert text."""
        return await accept_dialog(self.page, self.contact_page.send_message_button().click, expected=expected)
