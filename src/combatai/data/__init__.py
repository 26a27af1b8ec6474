"""Data layer utilities for loading JSON definitions."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_definition_file, get_definitions_path, get_package_data_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_definition_file",
    "get_definitions_path",
    "get_package_data_root",
]
