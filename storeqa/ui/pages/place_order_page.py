from playwright.async_api import Locator, Page


class PlaceOrderPage:
    def __init__(self, page: Page):
        self.page = page

    def order_modal_title(self) -> Locator:
        return self.page.locator("#orderModal .modal-title")

    def name_input(self) -> Locator:
        return self.page.locator("#name")

    def country_input(self) -> Locator:
        return self.page.locator("#country")

    def city_input(self) -> Locator:
        return self.page.locator("#city")

    def card_input(self) -> Locator:
        return self.page.locator("#card")

    def month_input(self) -> Locator:
        return self.page.locator("#month")

    def year_input(self) -> Locator:
        return self.page.locator("#year")

    def purchase_button(self) -> Locator:
        return self.page.get_by_role("button", name="Purchase")

    def thank_you_message(self) -> Locator:
        return self.page.locator(".sweet-alert h2")

    def confirm_button(self) -> Locator:
        return self.page.get_by_role("button", name="OK")
