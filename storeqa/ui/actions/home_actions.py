import logging
import re
from typing import List, Union

from playwright.async_api import Page, expect

from storeqa.ui.data.models import Categories, MenuOptions, Product
from storeqa.ui.pages.home_page import HomePage


class HomeActions:
    def __init__(self, page: Page, home_page: HomePage):
        self.page = page
        self.home_page = home_page

    async def check_home_page_title(self):
        await expect(self.page).to_have_title(re.compile("STORE"))

    async def verify_home_page_navbar_title(self):
        await expect(self.home_page.nav_bar_title()).to_have_text("PRODUCT STORE")

    async def select_category(self, category: Union[Categories, str]):
        try:
            name = Categories(category).value
        except ValueError:
            raise ValueError(f"Unknown category: {category}") from None
        logging.debug(f"Selecting category {name}")
        await self.home_page.category_item(name).click()

    async def select_product(self, product: str):
        logging.debug(f"Opening product {product}")
        await self.home_page.product(product).click()

    async def select_menu_option(self, menu_option: Union[MenuOptions, str]):
        await self.home_page.navbar_menu_option(menu_option).click()

    async def check_product_price(self, price: Union[int, str]):
        await expect(self.home_page.product_price(f"${price}").first).to_be_visible()

    async def check_category_lists_products(self, products: List[Product]):
        """Assert that every given product card is rendered on the grid."""
        for product in products:
            await expect(self.home_page.product(product.name)).to_be_visible()
            await self.check_product_price(product.price)
