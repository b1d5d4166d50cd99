"""OrangeHRM login page."""

import re

from playwright.sync_api import Locator, Page, expect

from ..base import BasePage


ORANGEHRM_URL = "https://opensource-demo.orangehrmlive.com/"

ADMIN_USERNAME = "Admin"
ADMIN_PASSWORD = "admin123"


class OrangeLoginPage(BasePage):
    URL = ORANGEHRM_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.heading = page.get_by_role("heading", name="Login")
        self.username_input = page.get_by_placeholder("Username")
        self.password_input = page.get_by_placeholder("Password")
        self.login_button = page.get_by_role("button", name="Login")
        self.alert_message = page.locator(".oxd-alert-content-text")
        self.branding_logo = page.locator(".orangehrm-login-branding img")

    def goto(self, path: str = "") -> None:
        super().goto(path)
        expect(self.heading).to_be_visible()

    def login(self, username: str, password: str) -> None:
        """Fill only the non-empty credentials, then submit."""
        if username:
            self.username_input.fill(username)
        if password:
            self.password_input.fill(password)
        self.login_button.click()

    def field_error(self, label: str) -> Locator:
        """Inline validation message under the input group labelled ``label``."""
        return (
            self.page.locator(".oxd-input-group")
            .filter(has_text=label)
            .locator(".oxd-input-field-error-message")
        )

    def verify_required_error(self, label: str) -> None:
        error = self.field_error(label)
        expect(error).to_be_visible()
        expect(error).to_contain_text("Required")

    def verify_alert(self, message: str = "Invalid credentials") -> None:
        expect(self.alert_message).to_be_visible()
        expect(self.alert_message).to_contain_text(message)

    def verify_on_login_page(self) -> None:
        expect(self.page).to_have_url(re.compile(r"login"))
        expect(self.heading).to_be_visible()
