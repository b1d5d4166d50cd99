"""Page objects for https://www.saucedemo.com."""

from .login_page import LoginPage, SAUCEDEMO_URL, STANDARD_USER, LOCKED_OUT_USER, PASSWORD
from .products_page import ProductsPage, product_slug
from .cart_page import CartPage
from .checkout_pages import CheckoutStepOnePage, CheckoutStepTwoPage, CheckoutCompletePage

__all__ = [
    "LoginPage",
    "ProductsPage",
    "CartPage",
    "CheckoutStepOnePage",
    "CheckoutStepTwoPage",
    "CheckoutCompletePage",
    "product_slug",
    "SAUCEDEMO_URL",
    "STANDARD_USER",
    "LOCKED_OUT_USER",
    "PASSWORD",
]
