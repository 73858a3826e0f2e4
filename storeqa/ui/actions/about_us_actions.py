from playwright.async_api import Page, expect

from storeqa.ui.pages.about_us_page import AboutUsPage


class AboutUsActions:
    def __init__(self, page: Page, about_us_page: AboutUsPage):
        self.page = page
        self.about_us_page = about_us_page

    async def is_about_us_title_displayed(self):
        await expect(self.about_us_page.about_us_title()).to_be_visible()

    async def close_modal(self):
        await self.about_us_page.close_button().click()
        await expect(self.about_us_page.about_us_title()).not_to_be_visible()
