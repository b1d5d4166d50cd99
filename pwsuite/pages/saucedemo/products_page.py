"""SauceDemo inventory page."""

import re
from typing import List

from playwright.sync_api import Page, expect

from ..base import BasePage
from .login_page import SAUCEDEMO_URL


SORT_OPTIONS = ("az", "za", "lohi", "hilo")


def product_slug(product_name: str) -> str:
    """Test-id suffix for a product: lower case, whitespace runs become ``-``."""
    return re.sub(r"\s+", "-", product_name.lower())


class ProductsPage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.page_title = page.locator(".title")
        self.shopping_cart = page.locator(".shopping_cart_link")
        self.shopping_cart_badge = page.locator(".shopping_cart_badge")
        self.hamburger_menu = page.locator("#react-burger-menu-btn")
        self.logout_link = page.locator("#logout_sidebar_link")
        self.product_items = page.locator(".inventory_item")
        self.product_sort_dropdown = self.by_test_id("product-sort-container")

    def goto(self, path: str = "inventory.html") -> None:
        super().goto(path)

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(self.url_for("inventory.html"))
        expect(self.page_title).to_contain_text("Products")
        expect(self.shopping_cart).to_be_visible()

    def verify_title(self, expected_title: str) -> None:
        expect(self.page_title).to_contain_text(expected_title)

    def get_product_count(self) -> int:
        return self.product_items.count()

    def verify_shopping_cart_visible(self) -> None:
        expect(self.shopping_cart).to_be_visible()

    def get_cart_item_count(self) -> int:
        """Badge count at this instant, 0 when the badge is hidden."""
        if not self.shopping_cart_badge.is_visible():
            return 0
        return int(self.shopping_cart_badge.text_content() or "0")

    def verify_cart_item_count(self, count: int) -> None:
        """Wait until the cart badge shows ``count``; 0 means the badge is gone."""
        if count == 0:
            expect(self.shopping_cart_badge).to_be_hidden()
        else:
            expect(self.shopping_cart_badge).to_have_text(str(count))

    def add_product_to_cart(self, product_name: str) -> None:
        self.by_test_id(f"add-to-cart-{product_slug(product_name)}").click()

    def remove_product_from_cart(self, product_name: str) -> None:
        self.by_test_id(f"remove-{product_slug(product_name)}").click()

    def click_shopping_cart(self) -> None:
        self.shopping_cart.click()

    def open_menu(self) -> None:
        self.hamburger_menu.click()
        expect(self.logout_link).to_be_visible()

    def logout(self) -> None:
        self.open_menu()
        self.logout_link.click()

    def sort_products(self, sort_option: str) -> None:
        if sort_option not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {sort_option}")
        self.product_sort_dropdown.select_option(sort_option)

    def get_product_name(self, index: int) -> str:
        return self.product_items.nth(index).locator(".inventory_item_name").text_content() or ""

    def get_product_names(self) -> List[str]:
        return self.page.locator(".inventory_item_name").all_text_contents()

    def verify_product_visible(self, product_name: str) -> None:
        product = self.page.locator(".inventory_item_name", has_text=product_name)
        expect(product).to_be_visible()
