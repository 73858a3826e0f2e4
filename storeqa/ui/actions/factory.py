from playwright.async_api import Page

from storeqa.ui.actions.about_us_actions import AboutUsActions
from storeqa.ui.actions.cart_actions import CartActions
from storeqa.ui.actions.common_actions import CommonActions
from storeqa.ui.actions.contact_actions import ContactActions
from storeqa.ui.actions.home_actions import HomeActions
from storeqa.ui.actions.login_actions import LoginActions
from storeqa.ui.actions.place_order_actions import PlaceOrderActions
from storeqa.ui.actions.product_actions import ProductActions
from storeqa.ui.actions.sign_up_actions import SignUpActions
from storeqa.ui.pages import (
    AboutUsPage,
    CartPage,
    ContactPage,
    HomePage,
    LoginPage,
    PlaceOrderPage,
    ProductPage,
    SignUpPage,
)


class ActionFactory:
    """Wires every page object to one page and hands out action wrappers.

    The factory only borrows the page: closing it stays with whoever opened
    the browser session.
    """

    def __init__(self, page: Page):
        self.page = page
        self.home_page = HomePage(page)
        self.product_page = ProductPage(page)
        self.cart_page = CartPage(page)
        self.login_page = LoginPage(page)
        self.sign_up_page = SignUpPage(page)
        self.contact_page = ContactPage(page)
        self.about_us_page = AboutUsPage(page)
        self.place_order_page = PlaceOrderPage(page)

    def create_home_actions(self) -> HomeActions:
        return HomeActions(self.page, self.home_page)

    def create_product_actions(self) -> ProductActions:
        return ProductActions(self.page, self.product_page)

    def create_cart_actions(self) -> CartActions:
        return CartActions(self.page, self.cart_page)

    def create_login_actions(self) -> LoginActions:
        return LoginActions(self.page, self.login_page)

    def create_sign_up_actions(self) -> SignUpActions:
        return SignUpActions(self.page, self.sign_up_page)

    def create_contact_actions(self) -> ContactActions:
        return ContactActions(self.page, self.contact_page)

    def create_about_us_actions(self) -> AboutUsActions:
        return AboutUsActions(self.page, self.about_us_page)

    def create_place_order_actions(self) -> PlaceOrderActions:
        return PlaceOrderActions(self.page, self.place_order_page)

    def create_common_actions(self) -> CommonActions:
        return CommonActions(self.page)
