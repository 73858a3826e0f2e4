from .about_us_page import AboutUsPage
from .cart_page import CartPage
from .contact_page import ContactPage
from .home_page import HomePage
from .login_page import LoginPage
from .place_order_page import PlaceOrderPage
from .product_page import ProductPage
from .sign_up_page import SignUpPage

__all__ = [
    "AboutUsPage",
    "CartPage",
    "ContactPage",
    "HomePage",
    "LoginPage",
    "PlaceOrderPage",
    "ProductPage",
    "SignUpPage",
]
