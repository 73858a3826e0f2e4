from playwright.async_api import Locator, Page

from storeqa.ui.pages.common import contains_text


class CartPage:
    def __init__(self, page: Page):
        self.page = page

    def added_product_title(self, product: str) -> Locator:
        return self.page.get_by_role("cell", name=contains_text(product))

    def product_row(self, product: str) -> Locator:
        return self.page.locator("#tbodyid tr", has_text=contains_text(product))

    def delete_button(self, product: str = None) -> Locator:
        if product:
            return self.product_row(product).get_by_role("link", name="Delete")
        return self.page.get_by_role("link", name="Delete").first

    def total_price(self) -> Locator:
        return self.page.locator("#totalp")

    def place_order_button(self) -> Locator:
        return self.page.get_by_role("button", name="Place Order")
