"""Logging out returns to the login page and protects the dashboard."""

import re

from playwright.sync_api import expect

from pwsuite.pages.orangehrm import ORANGEHRM_URL


class TestOrangeHrmLogout:
    def test_logout(self, orangehrm_dashboard, orange_login_page):
        orangehrm_dashboard.logout()

        orange_login_page.verify_on_login_page()

    def test_dashboard_requires_login_after_logout(self, orangehrm_dashboard, page):
        orangehrm_dashboard.logout()

        page.goto(f"{ORANGEHRM_URL}web/index.php/dashboard/index")
        expect(page).to_have_url(re.compile(r"login"))

    def test_user_menu_items(self, orangehrm_dashboard, page):
        orangehrm_dashboard.open_user_menu()

        for item in ("About", "Support", "Change Password", "Logout"):
            expect(page.get_by_role("menuitem", name=item)).to_be_visible()
