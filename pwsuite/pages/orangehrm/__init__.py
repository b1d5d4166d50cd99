"""Page objects for the OrangeHRM open-source demo."""

from .login_page import OrangeLoginPage, ORANGEHRM_URL, ADMIN_USERNAME, ADMIN_PASSWORD
from .dashboard_page import DashboardPage
from .add_employee_page import AddEmployeePage

__all__ = [
    "OrangeLoginPage",
    "DashboardPage",
    "AddEmployeePage",
    "ORANGEHRM_URL",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
]
