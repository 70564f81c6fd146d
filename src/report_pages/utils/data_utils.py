"""
This module provides core utilities for configuration and input handling.

It includes functions for:
1.  **Loading YAML configurations**: Safely loads and parses YAML files with
    detailed error handling.
2.  **Validating storage formats**: Normalizes a format token to a
    `StorageFormat`, rejecting anything outside the recognized set.
3.  **Describing inputs**: Produces a short, human-readable kind for any page
    input, used in error messages.
"""

import logging
from typing import Any, Dict, Union

import pandas as pd
import yaml

from ..errors import InvalidStorageFormatError
from .constants import StorageFormat

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Loads a YAML configuration file with robust error handling.

    Args:
        config_path: The path to the YAML configuration file.

    Returns:
        A dictionary containing the configuration, empty if the file is empty.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If the YAML file is invalid or does not hold a mapping.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file '{config_path}': {e}")
        raise ValueError(f"Invalid YAML in {config_path}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.error(f"Configuration file '{config_path}' does not hold a mapping.")
        raise ValueError(f"Expected a mapping at the top level of {config_path}")
    return config


def validate_dataformat(dataformat: Union[str, StorageFormat]) -> StorageFormat:
    """
    Normalizes a storage format token.

    Args:
        dataformat: A `StorageFormat` member or one of its string tokens.

    Returns:
        The matching `StorageFormat` member.

    Raises:
        InvalidStorageFormatError: If the value is not a recognized format.
    """
    if isinstance(dataformat, StorageFormat):
        return dataformat
    try:
        return StorageFormat(dataformat)
    except ValueError:
        logger.error(f"Rejected unknown storage format {dataformat!r}")
        raise InvalidStorageFormatError(dataformat) from None


def is_table(value: Any) -> bool:
    return isinstance(value, pd.DataFrame)


def has_rows(value: Any) -> bool:
    """True for a DataFrame with at least one row."""
    return isinstance(value, pd.DataFrame) and len(value) > 0


def describe_kind(value: Any) -> str:
    """Describes a value's kind for error messages, e.g. 'dict' or 'app.models.Book'."""
    if value is None:
        return "None"
    kind = type(value)
    if kind.__module__ == "builtins":
        return kind.__name__
    return f"{kind.__module__}.{kind.__qualname__}"
