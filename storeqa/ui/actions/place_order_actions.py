import logging

from playwright.async_api import Page, expect

from storeqa.ui.data.models import CustomerData
from storeqa.ui.pages.place_order_page import PlaceOrderPage

THANK_YOU_MESSAGE = "Thank you for your purchase!"


class PlaceOrderActions:
    def __init__(self, page: Page, place_order_page: PlaceOrderPage):
        self.page = page
        self.place_order_page = place_order_page

    async def verify_order_modal_visible(self):
        await expect(self.place_order_page.order_modal_title()).to_be_visible()

    async def fill_name(self, name: str):
        await self.place_order_page.name_input().fill(name)

    async def fill_country(self, country: str):
        await self.place_order_page.country_input().fill(country)

    async def fill_city(self, city: str):
        await self.place_order_page.city_input().fill(city)

    async def fill_card(self, card: str):
        await self.place_order_page.card_input().fill(card)

    async def fill_month(self, month: str):
        await self.place_order_page.month_input().fill(month)

    async def fill_year(self, year: str):
        await self.place_order_page.year_input().fill(year)

    async def fill_order_form(self, customer: CustomerData):
        logging.debug(f"Filling order form for {customer.name}")
        await self.fill_name(customer.name)
        await self.fill_country(customer.country)
        await self.fill_city(customer.city)
        await self.fill_card(customer.card)
        await self.fill_month(customer.month)
        await self.fill_year(customer.year)

    async def select_purchase(self):
        await self.place_order_page.purchase_button().click()

    async def is_thank_you_message_displayed(self):
        await expect(self.place_order_page.thank_you_message()).to_have_text(THANK_YOU_MESSAGE)

    async def confirm_order(self):
        await self.place_order_page.confirm_button().click()
