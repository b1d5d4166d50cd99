"""
Unit tests for the test-data readers.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from pwsuite.core.exceptions import DataFileError
from pwsuite.data.csv_reader import (
    csv_parametrize,
    default_data_dir,
    read_csv,
    read_csv_file,
    read_csv_with_delimiter,
    read_json,
)


BUNDLED_DATA = Path(__file__).parent.parent / "test-data"


class TestReadCsv:
    """Test cases for CSV reading."""

    def test_reads_rows(self, csv_dir):
        (csv_dir / "logins.csv").write_text(
            "username,password,expectedError\n"
            "Admin,wrongpassword,Invalid credentials\n"
            ",admin123,Required\n"
        )

        rows = read_csv("logins.csv", data_dir=csv_dir)

        assert rows == [
            {"username": "Admin", "password": "wrongpassword", "expectedError": "Invalid credentials"},
            {"username": "", "password": "admin123", "expectedError": "Required"},
        ]

    def test_trims_cells_and_skips_blank_lines(self, csv_dir):
        (csv_dir / "spaced.csv").write_text(" name , role \n\n  Alice ,  admin \n   \nBob,user\n")

        rows = read_csv("spaced.csv", data_dir=csv_dir)

        assert rows == [{"name": "Alice", "role": "admin"}, {"name": "Bob", "role": "user"}]

    def test_short_rows_padded(self, csv_dir):
        (csv_dir / "short.csv").write_text("a,b,c\n1\n1,2\n")

        rows = read_csv("short.csv", data_dir=csv_dir)

        assert rows == [{"a": "1", "b": "", "c": ""}, {"a": "1", "b": "2", "c": ""}]

    def test_extra_cells_ignored(self, csv_dir):
        (csv_dir / "long.csv").write_text("a,b\n1,2,3\n")

        assert read_csv("long.csv", data_dir=csv_dir) == [{"a": "1", "b": "2"}]

    def test_header_only(self, csv_dir):
        (csv_dir / "header.csv").write_text("a,b\n")

        assert read_csv("header.csv", data_dir=csv_dir) == []

    def test_quoted_values(self, csv_dir):
        (csv_dir / "quoted.csv").write_text('name,city\n"Doe, John",Paris\n')

        assert read_csv("quoted.csv", data_dir=csv_dir) == [{"name": "Doe, John", "city": "Paris"}]

    def test_byte_order_mark_stripped(self, csv_dir):
        (csv_dir / "bom.csv").write_bytes("\ufeffid,value\n1,x\n".encode("utf-8"))

        assert read_csv("bom.csv", data_dir=csv_dir) == [{"id": "1", "value": "x"}]

    def test_custom_delimiter(self, csv_dir):
        (csv_dir / "semi.csv").write_text("name;price\nPhone;499.99\n")

        rows = read_csv_with_delimiter("semi.csv", ";", data_dir=csv_dir)

        assert rows == [{"name": "Phone", "price": "499.99"}]

    def test_missing_file(self, csv_dir):
        with pytest.raises(DataFileError, match="CSV file not found") as exc_info:
            read_csv("nope.csv", data_dir=csv_dir)

        assert exc_info.value.operation == "read"

    def test_empty_file(self, csv_dir):
        (csv_dir / "empty.csv").write_text("\n  \n")

        with pytest.raises(DataFileError, match="CSV file is empty: empty.csv"):
            read_csv("empty.csv", data_dir=csv_dir)

    def test_no_headers(self, csv_dir):
        (csv_dir / "blank-header.csv").write_text(" , \n1,2\n")

        with pytest.raises(DataFileError, match="no headers"):
            read_csv("blank-header.csv", data_dir=csv_dir)

    def test_read_csv_file_by_path(self, csv_dir):
        path = csv_dir / "devices.csv"
        path.write_text("name,color\nPixel,black\n")

        assert read_csv_file(str(path)) == [{"name": "Pixel", "color": "black"}]

    @patch.dict(os.environ, {"PWSUITE_TEST_DATA_DIR": "/srv/data"})
    def test_default_data_dir(self):
        assert str(default_data_dir()).replace("\\", "/") == "/srv/data/orangehrm"

    def test_bundled_invalid_logins(self):
        """The shipped OrangeHRM data file parses into login cases."""
        rows = read_csv("invalid-logins.csv", data_dir=BUNDLED_DATA / "orangehrm")

        assert len(rows) >= 3
        assert set(rows[0]) == {"username", "password", "expectedError"}


class TestReadJson:
    """Test cases for JSON reading."""

    def test_reads_records(self, csv_dir):
        path = csv_dir / "users.json"
        path.write_text(json.dumps([{"name": "a"}, {"name": "b"}]))

        assert read_json(path) == [{"name": "a"}, {"name": "b"}]

    def test_missing_file(self, csv_dir):
        with pytest.raises(DataFileError, match="JSON file not found"):
            read_json(csv_dir / "missing.json")

    def test_invalid_json(self, csv_dir):
        path = csv_dir / "broken.json"
        path.write_text("[{")

        with pytest.raises(DataFileError) as exc_info:
            read_json(path)

        assert exc_info.value.operation == "parse"

    def test_not_a_list_of_records(self, csv_dir):
        path = csv_dir / "object.json"
        path.write_text('{"name": "a"}')

        with pytest.raises(DataFileError, match="list of records"):
            read_json(path)


class TestCsvParametrize:
    """Test cases for csv_parametrize."""

    ROWS = [
        {"username": "Admin", "password": "bad", "expectedError": "Invalid credentials"},
        {"username": "", "password": "admin123", "expectedError": "Required"},
    ]

    def test_single_argname_gets_row(self):
        mark = csv_parametrize("row", self.ROWS)

        assert mark.args == ("row", self.ROWS)
        assert mark.kwargs["ids"] is None

    def test_multiple_argnames_get_tuples(self):
        mark = csv_parametrize("username, expectedError", self.ROWS)

        assert mark.args[1] == [("Admin", "Invalid credentials"), ("", "Required")]

    def test_missing_column_is_empty(self):
        mark = csv_parametrize("username,unknown", self.ROWS)

        assert mark.args[1][0] == ("Admin", "")

    def test_ids_from_fields(self):
        mark = csv_parametrize("row", self.ROWS, id_fields=["username", "password"])

        assert mark.kwargs["ids"] == ["Admin-bad", "empty-admin123"]
