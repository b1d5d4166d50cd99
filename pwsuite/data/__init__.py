"""Test-data readers and generators."""

from .csv_reader import (
    read_csv,
    read_csv_with_delimiter,
    read_csv_file,
    read_json,
    csv_parametrize,
)
from .generators import UserDataGenerator, FakerDataGenerator, SimpleFakerHelper

__all__ = [
    "read_csv",
    "read_csv_with_delimiter",
    "read_csv_file",
    "read_json",
    "csv_parametrize",
    "UserDataGenerator",
    "FakerDataGenerator",
    "SimpleFakerHelper",
]
