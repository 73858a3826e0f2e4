from playwright.async_api import Locator, Page

from storeqa.ui.pages.common import contains_text, menu_link, navbar_title


class HomePage:
    def __init__(self, page: Page):
        self.page = page

    def nav_bar_title(self) -> Locator:
        return navbar_title(self.page)

    def category_item(self, category: str) -> Locator:
        return self.page.get_by_role("link", name=contains_text(category))

    def product(self, product: str) -> Locator:
        return self.page.locator("#tbodyid").get_by_role("link", name=contains_text(product))

    def product_cards(self) -> Locator:
        return self.page.locator("#tbodyid .card")

    def product_price(self, price: str) -> Locator:
        return self.page.locator(".card-block h5", has_text=price)

    def navbar_menu_option(self, menu_option: str) -> Locator:
        return menu_link(self.page, menu_option)
