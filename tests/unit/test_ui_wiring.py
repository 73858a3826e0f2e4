import re

import pytest

from storeqa.ui.actions.factory import ActionFactory
from storeqa.ui.actions.home_actions import HomeActions
from storeqa.ui.actions.place_order_actions import PlaceOrderActions
from storeqa.ui.data.models import Categories, MenuOptions
from storeqa.ui.pages.common import contains_text, menu_link

pytestmark = pytest.mark.unit


class FakeLocator:
    """Records the chain of locator calls instead of querying a browser."""

    def __init__(self, chain):
        self.chain = chain

    def locator(self, selector, **kwargs):
        return FakeLocator(self.chain + [("locator", selector, kwargs)])

    def get_by_role(self, role, **kwargs):
        return FakeLocator(self.chain + [("role", role, kwargs)])


class FakePage(FakeLocator):
    def __init__(self):
        super().__init__([])


def test_factory_shares_one_page():
    page = FakePage()
    factory = ActionFactory(page)

    home = factory.create_home_actions()
    assert isinstance(home, HomeActions)
    assert home.page is page
    assert home.home_page is factory.home_page
    assert factory.create_product_actions().product_page is factory.product_page
    assert factory.create_cart_actions().cart_page is factory.cart_page
    assert factory.create_login_actions().login_page is factory.login_page
    assert factory.create_sign_up_actions().sign_up_page is factory.sign_up_page
    assert factory.create_contact_actions().contact_page is factory.contact_page
    assert factory.create_about_us_actions().about_us_page is factory.about_us_page
    assert isinstance(factory.create_place_order_actions(), PlaceOrderActions)
    assert factory.create_common_actions().page is page


def test_menu_link_uses_link_role():
    locator = menu_link(FakePage(), MenuOptions.CART)
    assert locator.chain == [("role", "link", {"name": "Cart", "exact": True})]

    home = menu_link(FakePage(), "Home")
    assert home.chain[0][2]["name"].match("Home (current)")


def test_menu_link_rejects_unknown_option():
    with pytest.raises(ValueError, match="Unknown menu option"):
        menu_link(FakePage(), "Wishlist")


def test_product_is_looked_up_in_the_grid():
    factory = ActionFactory(FakePage())
    chain = factory.home_page.product("Samsung galaxy s6").chain
    assert chain[0] == ("locator", "#tbodyid", {})
    role, name = chain[1][1], chain[1][2]["name"]
    assert role == "link"
    assert name.search("SAMSUNG GALAXY S6")


def test_contains_text_escapes_and_ignores_case():
    pattern = contains_text(" Iphone 6 32gb ")
    assert pattern.search("iphone 6 32GB")
    assert pattern.flags & re.IGNORECASE
    assert contains_text("2017 Dell 15.6 Inch").search("2017 Dell 15.6 Inch")
    assert not contains_text("15.6").search("1576")


async def test_select_unknown_category_fails_fast():
    home = ActionFactory(FakePage()).create_home_actions()
    with pytest.raises(ValueError, match="Unknown category"):
        await home.select_category("Tablets")


def test_categories_accept_plain_strings():
    assert Categories("Monitors") is Categories.MONITORS
