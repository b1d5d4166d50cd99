"""
Readers for the flat test-data files behind data-driven suites.

Every CSV file is read as a header line followed by data lines. Blank lines
are skipped, header and value cells are trimmed, and a row shorter than the
header is padded with empty strings.
"""

import csv
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pytest

from ..core.config import Config
from ..core.exceptions import DataFileError


CsvRow = Dict[str, str]

ORANGEHRM_SUBDIR = "orangehrm"


def default_data_dir() -> Path:
    """Directory that bare CSV filenames resolve against."""
    return Config.from_env().test_data_dir / ORANGEHRM_SUBDIR


def _parse(content: str, delimiter: str, label: str, path: Path) -> List[CsvRow]:
    lines = [line for line in content.splitlines() if line.strip()]
    if not lines:
        raise DataFileError(
            f"CSV file is empty: {label}", file_path=str(path), operation="read"
        )

    reader = csv.reader(lines, delimiter=delimiter)
    headers = [cell.strip() for cell in next(reader)]
    if not any(headers):
        raise DataFileError(
            f"CSV file has no headers: {label}", file_path=str(path), operation="read"
        )

    rows = []
    for values in reader:
        row = {}
        for index, header in enumerate(headers):
            row[header] = values[index].strip() if index < len(values) else ""
        rows.append(row)
    return rows


def read_csv_file(path: Union[str, Path], delimiter: str = ",") -> List[CsvRow]:
    """
    Read a CSV file at an explicit path.

    Raises:
        DataFileError: If the file is missing, empty, or has no header cells
    """
    path = Path(path)
    if not path.exists():
        raise DataFileError(
            f"CSV file not found: {path}", file_path=str(path), operation="read"
        )

    content = path.read_text(encoding="utf-8-sig")
    return _parse(content, delimiter, path.name, path)


def read_csv_with_delimiter(
    filename: str, delimiter: str = ",", data_dir: Optional[Path] = None
) -> List[CsvRow]:
    """Read ``filename`` from the data directory using a custom delimiter."""
    path = (data_dir or default_data_dir()) / filename
    if not path.exists():
        raise DataFileError(
            f"CSV file not found: {path}", file_path=str(path), operation="read"
        )

    content = path.read_text(encoding="utf-8-sig")
    return _parse(content, delimiter, filename, path)


def read_csv(filename: str, data_dir: Optional[Path] = None) -> List[CsvRow]:
    """
    Read a comma separated file into a list of row dicts.

    Args:
        filename: File name relative to ``test-data/orangehrm`` unless
            ``data_dir`` is given
        data_dir: Directory to resolve ``filename`` against

    Example:
        >>> read_csv("invalid-logins.csv")[0]
        {'username': 'Admin', 'password': 'wrongpassword', 'expectedError': 'Invalid credentials'}
    """
    return read_csv_with_delimiter(filename, ",", data_dir)


def read_json(path: Union[str, Path]) -> List[Dict]:
    """Read a JSON data file holding a list of records."""
    path = Path(path)
    if not path.exists():
        raise DataFileError(
            f"JSON file not found: {path}", file_path=str(path), operation="read"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DataFileError(
            f"Invalid JSON in {path.name}: {e}", file_path=str(path), operation="parse"
        ) from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise DataFileError(
            f"JSON file must contain a list of records: {path.name}",
            file_path=str(path),
            operation="parse",
        )
    return data


def _row_id(row: CsvRow, id_fields: Sequence[str]) -> str:
    return "-".join(row.get(field) or "empty" for field in id_fields)


def csv_parametrize(
    argnames: str, rows: List[CsvRow], id_fields: Optional[Sequence[str]] = None
):
    """
    Build a ``pytest.mark.parametrize`` marker with one case per row.

    A single argname receives the whole row dict; a comma separated list of
    argnames receives the matching columns.
    """
    names = [name.strip() for name in argnames.split(",") if name.strip()]
    if len(names) == 1:
        values = list(rows)
    else:
        values = [tuple(row.get(name, "") for name in names) for row in rows]

    ids = [_row_id(row, id_fields) for row in rows] if id_fields else None
    return pytest.mark.parametrize(argnames, values, ids=ids)
