"""SauceDemo checkout: information form, overview and confirmation."""

import re

from playwright.sync_api import Page, expect

from ..base import BasePage
from .login_page import SAUCEDEMO_URL


class CheckoutStepOnePage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.page_title = page.locator(".title")
        self.first_name_input = self.by_test_id("firstName")
        self.last_name_input = self.by_test_id("lastName")
        self.postal_code_input = self.by_test_id("postalCode")
        self.continue_button = self.by_test_id("continue")
        self.cancel_button = self.by_test_id("cancel")
        self.error_message = self.by_test_id("error")
        self.error_button = page.locator(".error-button")

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-step-one\.html"))
        expect(self.page_title).to_contain_text("Checkout: Your Information")

    def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.first_name_input.fill(first_name)
        self.last_name_input.fill(last_name)
        self.postal_code_input.fill(postal_code)

    def click_continue(self) -> None:
        self.continue_button.click()

    def click_cancel(self) -> None:
        self.cancel_button.click()

    def complete_step_one(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.fill_checkout_info(first_name, last_name, postal_code)
        self.click_continue()

    def verify_error_message(self, expected_message: str) -> None:
        expect(self.error_message).to_be_visible()
        expect(self.error_message).to_contain_text(expected_message)

    def close_error(self) -> None:
        self.error_button.click()
        expect(self.error_message).not_to_be_visible()


class CheckoutStepTwoPage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.page_title = page.locator(".title")
        self.cart_items = page.locator(".cart_item")
        self.item_total = page.locator(".summary_subtotal_label")
        self.tax = page.locator(".summary_tax_label")
        self.total_price = page.locator(".summary_total_label")
        self.finish_button = self.by_test_id("finish")
        self.cancel_button = self.by_test_id("cancel")
        self.payment_info = page.locator(".summary_value_label").first
        self.shipping_info = page.locator(".summary_value_label").nth(1)

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-step-two\.html"))
        expect(self.page_title).to_contain_text("Checkout: Overview")

    def get_item_count(self) -> int:
        return self.cart_items.count()

    def get_subtotal(self) -> str:
        return self.item_total.text_content() or ""

    def get_tax(self) -> str:
        return self.tax.text_content() or ""

    def get_total(self) -> str:
        return self.total_price.text_content() or ""

    def verify_product_in_summary(self, product_name: str) -> None:
        expect(self.page.locator(".inventory_item_name", has_text=product_name)).to_be_visible()

    def finish_order(self) -> None:
        self.finish_button.click()

    def cancel_order(self) -> None:
        self.cancel_button.click()

    def get_payment_info(self) -> str:
        return self.payment_info.text_content() or ""

    def get_shipping_info(self) -> str:
        return self.shipping_info.text_content() or ""


class CheckoutCompletePage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.page_title = page.locator(".title")
        self.complete_header = page.locator(".complete-header")
        self.complete_text = page.locator(".complete-text")
        self.pony_express_image = page.locator(".pony_express")
        self.back_home_button = self.by_test_id("back-to-products")

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(re.compile(r"checkout-complete\.html"))
        expect(self.page_title).to_contain_text("Checkout: Complete!")

    def verify_order_success(self) -> None:
        expect(self.complete_header).to_contain_text("Thank you for your order!")
        expect(self.complete_text).to_be_visible()
        expect(self.pony_express_image).to_be_visible()

    def get_success_header(self) -> str:
        return self.complete_header.text_content() or ""

    def get_success_message(self) -> str:
        return self.complete_text.text_content() or ""

    def back_to_products(self) -> None:
        self.back_home_button.click()

    def verify_checkout_complete(self) -> None:
        self.verify_page_loaded()
        self.verify_order_success()
