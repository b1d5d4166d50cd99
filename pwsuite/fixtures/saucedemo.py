"""SauceDemo page-object fixtures."""

import pytest
from playwright.sync_api import Page

from ..pages.saucedemo import (
    CartPage,
    CheckoutCompletePage,
    CheckoutStepOnePage,
    CheckoutStepTwoPage,
    LoginPage,
    ProductsPage,
    PASSWORD,
    STANDARD_USER,
)


@pytest.fixture
def login_page(page: Page) -> LoginPage:
    return LoginPage(page)


@pytest.fixture
def products_page(page: Page) -> ProductsPage:
    return ProductsPage(page)


@pytest.fixture
def cart_page(page: Page) -> CartPage:
    return CartPage(page)


@pytest.fixture
def checkout_step_one_page(page: Page) -> CheckoutStepOnePage:
    return CheckoutStepOnePage(page)


@pytest.fixture
def checkout_step_two_page(page: Page) -> CheckoutStepTwoPage:
    return CheckoutStepTwoPage(page)


@pytest.fixture
def checkout_complete_page(page: Page) -> CheckoutCompletePage:
    return CheckoutCompletePage(page)


@pytest.fixture
def authenticated_page(page: Page, login_page: LoginPage, products_page: ProductsPage) -> Page:
    """Page logged in as the standard user and showing the inventory."""
    login_page.goto()
    login_page.login(STANDARD_USER, PASSWORD)
    products_page.verify_page_loaded()
    return page
