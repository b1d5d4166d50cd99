"""SauceDemo cart page."""

import re
from typing import List

from playwright.sync_api import Page, expect

from ..base import BasePage
from .login_page import SAUCEDEMO_URL
from .products_page import product_slug


class CartPage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.page_title = page.locator(".title")
        self.cart_items = page.locator(".cart_item")
        self.continue_shopping_button = self.by_test_id("continue-shopping")
        self.checkout_button = self.by_test_id("checkout")
        self.remove_buttons = page.locator('[data-test^="remove-"]')

    def goto(self, path: str = "cart.html") -> None:
        super().goto(path)

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(re.compile(r"cart\.html"))
        expect(self.page_title).to_contain_text("Your Cart")

    def get_cart_item_count(self) -> int:
        return self.cart_items.count()

    def verify_cart_item_count(self, count: int) -> None:
        expect(self.cart_items).to_have_count(count)

    def get_cart_item_names(self) -> List[str]:
        return self.cart_items.locator(".inventory_item_name").all_text_contents()

    def verify_product_in_cart(self, product_name: str) -> None:
        expect(self.page.locator(".inventory_item_name", has_text=product_name)).to_be_visible()

    def remove_item(self, product_name: str) -> None:
        self.by_test_id(f"remove-{product_slug(product_name)}").click()

    def continue_shopping(self) -> None:
        self.continue_shopping_button.click()

    def proceed_to_checkout(self) -> None:
        self.checkout_button.click()

    def verify_cart_empty(self) -> None:
        expect(self.cart_items).to_have_count(0)

    def get_item_price(self, product_name: str) -> str:
        item = self.cart_items.filter(has_text=product_name)
        return item.locator(".inventory_item_price").text_content() or ""
