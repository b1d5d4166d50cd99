"""OrangeHRM dashboard page."""

import re

from playwright.sync_api import Page, expect

from ..base import BasePage
from .login_page import ORANGEHRM_URL


class DashboardPage(BasePage):
    URL = ORANGEHRM_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.heading = page.get_by_role("heading", name="Dashboard")
        self.user_dropdown = page.locator(".oxd-userdropdown-tab")
        self.logout_item = page.get_by_role("menuitem", name="Logout")

    def verify_page_loaded(self) -> None:
        expect(self.page).to_have_url(re.compile(r"dashboard"))
        expect(self.heading).to_be_visible()

    def open_user_menu(self) -> None:
        self.user_dropdown.click()
        expect(self.logout_item).to_be_visible()

    def logout(self) -> None:
        self.open_user_menu()
        self.logout_item.click()
        expect(self.page).to_have_url(re.compile(r"login"))
