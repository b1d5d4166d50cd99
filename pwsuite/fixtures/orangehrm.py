"""OrangeHRM page-object fixtures."""

import pytest
from playwright.sync_api import Page

from ..pages.orangehrm import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    AddEmployeePage,
    DashboardPage,
    OrangeLoginPage,
)


@pytest.fixture
def orange_login_page(page: Page) -> OrangeLoginPage:
    login = OrangeLoginPage(page)
    login.goto()
    return login


@pytest.fixture
def dashboard_page(page: Page) -> DashboardPage:
    return DashboardPage(page)


@pytest.fixture
def add_employee_page(page: Page) -> AddEmployeePage:
    return AddEmployeePage(page)


@pytest.fixture
def orangehrm_dashboard(
    orange_login_page: OrangeLoginPage, dashboard_page: DashboardPage
) -> DashboardPage:
    """Dashboard after logging in as the demo administrator."""
    orange_login_page.login(ADMIN_USERNAME, ADMIN_PASSWORD)
    dashboard_page.verify_page_loaded()
    return dashboard_page
