import re
from typing import Union

from playwright.async_api import Page, expect

from storeqa.ui.pages.common import accept_dialog, contains_text
from storeqa.ui.pages.product_page import ProductPage

PRODUCT_ADDED_MESSAGE = "Product added"


class ProductActions:
    def __init__(self, page: Page, product_page: ProductPage):
        self.page = page
        self.product_page = product_page

    async def check_added_product(self, product: str):
        await expect(self.product_page.product_label(product)).to_have_text(contains_text(product))

    async def check_product_price(self, price: Union[int, str]):
        """The label reads ``$<price> *includes tax``; spacing around the suffix may vary."""
        amount = f"${price}"
        await expect(self.product_page.price_label(amount)).to_have_text(
            re.compile(rf"^\s*{re.escape(amount)}\s*\*\s*includes tax\s*$", re.IGNORECASE)
        )

    async def add_to_cart(self) -> str:
        return await accept_dialog(
            self.page, self.product_page.add_to_cart_button().click, expected=PRODUCT_ADDED_MESSAGE
        )

    async def check_product_description(self, description: str):
        await expect(self.product_page.product_description()).to_contain_text(contains_text(description))
