"""Invalid login attempts, one case per row of invalid-logins.csv."""

import pytest

from pwsuite.data.csv_reader import csv_parametrize, read_csv


INVALID_LOGINS = read_csv("invalid-logins.csv")

EXPECTED_ERRORS = {"Invalid credentials", "Required"}


@pytest.mark.data_driven
class TestLoginDataDriven:
    @csv_parametrize(
        "username, password, expectedError",
        INVALID_LOGINS,
        id_fields=["username", "password"],
    )
    def test_invalid_login(self, orange_login_page, username, password, expectedError):
        orange_login_page.login(username, password)

        if expectedError == "Invalid credentials":
            orange_login_page.verify_alert("Invalid credentials")
        else:
            if not username:
                orange_login_page.verify_required_error("Username")
            if not password:
                orange_login_page.verify_required_error("Password")

        orange_login_page.verify_on_login_page()

    def test_csv_loaded(self):
        assert len(INVALID_LOGINS) > 0
        assert set(INVALID_LOGINS[0]) == {"username", "password", "expectedError"}

    def test_csv_rows_are_valid(self):
        for row in INVALID_LOGINS:
            assert row["expectedError"] in EXPECTED_ERRORS
