from playwright.async_api import Locator, Page


class AboutUsPage:
    def __init__(self, page: Page):
        self.page = page

    def about_us_title(self) -> Locator:
        return self.page.locator("#videoModal").get_by_role("heading", name="About us")

    def close_button(self) -> Locator:
        return self.page.locator("#videoModal").get_by_text("Close", exact=True)
