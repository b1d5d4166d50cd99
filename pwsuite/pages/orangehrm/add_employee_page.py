"""OrangeHRM PIM add-employee form."""

import re

from playwright.sync_api import Page, expect

from ..base import BasePage
from .login_page import ORANGEHRM_URL


# Position of the employee id field among the form's .oxd-input elements
EMPLOYEE_ID_INDEX = 4


class AddEmployeePage(BasePage):
    URL = ORANGEHRM_URL

    def __init__(self, page: Page, base_url: str = ""):
        super().__init__(page, base_url)
        self.pim_link = page.get_by_role("link", name="PIM")
        self.add_employee_link = page.get_by_role("link", name="Add Employee")
        self.first_name_input = page.get_by_placeholder("First Name")
        self.middle_name_input = page.get_by_placeholder("Middle Name")
        self.last_name_input = page.get_by_placeholder("Last Name")
        self.employee_id_input = page.locator(".oxd-input").nth(EMPLOYEE_ID_INDEX)
        self.save_button = page.get_by_role("button", name="Save")
        self.success_toast = page.locator(".oxd-toast-content")
        self.employee_name_header = page.locator(".orangehrm-edit-employee-name h6")

    def open(self) -> None:
        """Navigate PIM -> Add Employee and wait for the form."""
        self.pim_link.click()
        expect(self.page).to_have_url(re.compile(r"pim"))
        self.add_employee_link.click()
        expect(self.page).to_have_url(re.compile(r"addEmployee"))
        expect(self.first_name_input).to_be_visible()

    def fill_names(self, first_name: str, middle_name: str, last_name: str) -> None:
        self.first_name_input.fill(first_name)
        self.middle_name_input.fill(middle_name)
        self.last_name_input.fill(last_name)

    def fill_employee_id(self, employee_id: str) -> None:
        self.employee_id_input.clear()
        self.employee_id_input.fill(employee_id)

    def save(self) -> None:
        self.save_button.click()

    def verify_saved(self, first_name: str, last_name: str) -> None:
        expect(self.success_toast).to_contain_text("Success")
        expect(self.page).to_have_url(re.compile(r"/viewPersonalDetails/"))
        expect(self.employee_name_header).to_contain_text(f"{first_name} {last_name}")

    def add_employee(
        self, first_name: str, middle_name: str, last_name: str, employee_id: str = ""
    ) -> None:
        self.open()
        self.fill_names(first_name, middle_name, last_name)
        if employee_id:
            self.fill_employee_id(employee_id)
        self.save()
