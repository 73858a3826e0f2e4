from playwright.async_api import Locator, Page

from storeqa.ui.pages.common import contains_text


class ProductPage:
    def __init__(self, page: Page):
        self.page = page

    def product_label(self, product: str) -> Locator:
        return self.page.get_by_role("heading", name=contains_text(product))

    def price_label(self, price: str) -> Locator:
        return self.page.locator(".price-container", has_text=price)

    def add_to_cart_button(self) -> Locator:
        return self.page.get_by_role("link", name="Add to cart", exact=True)

    def product_description(self) -> Locator:
        return self.page.locator("#more-information p")
