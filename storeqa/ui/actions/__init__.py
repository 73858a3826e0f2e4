from .about_us_actions import AboutUsActions
from .cart_actions import CartActions
from .common_actions import CommonActions
from .contact_actions import ContactActions
from .factory import ActionFactory
from .home_actions import HomeActions
from .login_actions import LoginActions
from .place_order_actions import PlaceOrderActions
from .product_actions import ProductActions
from .sign_up_actions import SignUpActions

__all__ = [
    "AboutUsActions",
    "ActionFactory",
    "CartActions",
    "CommonActions",
    "ContactActions",
    "HomeActions",
    "LoginActions",
    "PlaceOrderActions",
    "ProductActions",
    "SignUpActions",
]
