"""SauceDemo login page."""

from playwright.sync_api import Page, expect

from ..base import BasePage


SAUCEDEMO_URL = "https://www.saucedemo.com/"

STANDARD_USER = "standard_user"
LOCKED_OUT_USER = "locked_out_user"
PASSWORD = "secret_sauce"


class LoginPage(BasePage):
    URL = SAUCEDEMO_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.login_logo = page.locator(".login_logo")
        self.username_input = self.by_test_id("username")
        self.password_input = self.by_test_id("password")
        self.login_button = self.by_test_id("login-button")
        self.error_message = self.by_test_id("error")
        self.error_button = page.locator(".error-button")

    def goto(self, path: str = "") -> None:
        super().goto(path)
        expect(self.login_logo).to_be_visible()

    def login(self, username: str, password: str) -> None:
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.login_button.click()

    def fill_username(self, username: str) -> None:
        self.username_input.fill(username)

    def fill_password(self, password: str) -> None:
        self.password_input.fill(password)

    def click_login(self) -> None:
        self.login_button.click()

    def clear_username(self) -> None:
        self.username_input.clear()

    def clear_password(self) -> None:
        self.password_input.clear()

    def verify_error_message(self, expected_message: str) -> None:
        expect(self.error_message).to_be_visible()
        expect(self.error_message).to_contain_text(expected_message)

    def close_error(self) -> None:
        self.error_button.click()
        expect(self.error_message).not_to_be_visible()

    def is_password_masked(self) -> bool:
        return self.password_input.get_attribute("type") == "password"

    def verify_page_loaded(self) -> None:
        expect(self.login_logo).to_be_visible()
        expect(self.username_input).to_be_visible()
        expect(self.password_input).to_be_visible()
        expect(self.login_button).to_be_visible()
