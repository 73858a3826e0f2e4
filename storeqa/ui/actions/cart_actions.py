import logging
from typing import Union

from playwright.async_api import Page, expect

from storeqa.ui.pages.cart_page import CartPage


class CartActions:
    def __init__(self, page: Page, cart_page: CartPage):
        self.page = page
        self.cart_page = cart_page

    async def check_product_is_displayed(self, product: str):
        await expect(self.cart_page.added_product_title(product)).to_be_visible()

    async def delete_product_from_cart(self, product: str):
        logging.debug(f"Deleting {product} from cart")
        await self.cart_page.delete_button(product).click()
        await expect(self.cart_page.added_product_title(product)).not_to_be_visible()

    async def select_place_order(self):
        await self.cart_page.place_order_button().click()

    async def check_cart_total(self, total: Union[int, str]):
        await expect(self.cart_page.total_price()).to_have_text(str(total))
