"""
Configuration for building reports.

Report-wide defaults (storage format, cover page title and header, log level)
are read from a YAML file and validated with pydantic, so a project can change
them without touching the code that assembles its pages:

    settings = load_report_settings()
    configure_logging(settings.log_level)
    report = ReportTree.from_pages(body, pages, **settings.cover_kwargs())
"""

import logging
import os
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, field_validator

from .. import constants
from .utils.constants import DEFAULT_COVER_TITLE, DEFAULT_TREE_FORMAT, StorageFormat
from .utils.data_utils import load_config, validate_dataformat

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join(
    constants.PROJECT_ROOT, constants.CONFIG_DIR, constants.REPORT_PAGES_CONFIG_FILENAME
)


# =============================================================================
# CONFIGURATION MODELS (Pydantic)
# =============================================================================
class ReportSettings(BaseModel):
    """Defaults applied when assembling a report."""

    dataformat: StorageFormat = Field(
        default=DEFAULT_TREE_FORMAT,
        description="Storage format for report tables.",
    )
    cover_title: str = Field(
        default=DEFAULT_COVER_TITLE, description="Tab title of the cover page."
    )
    cover_header: str = Field(default="", description="Heading of the cover page.")
    log_level: str = Field(default="INFO", description="Console log level.")

    @field_validator("dataformat", mode="before")
    @classmethod
    def check_dataformat(cls, value: Any) -> StorageFormat:
        return validate_dataformat(value)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    def cover_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for `ReportTree.from_pages` / `from_groups`."""
        return {
            "tab_title": self.cover_title,
            "page_header": self.cover_header,
            "dataformat": self.dataformat,
        }


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================
def load_report_settings(config_path: str = DEFAULT_SETTINGS_PATH) -> ReportSettings:
    """
    Loads and validates report settings from a YAML file.

    Args:
        config_path: The path to the YAML configuration file.

    Returns:
        A validated ReportSettings object.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the config file is empty or is not valid YAML.
        ValidationError: If the file content does not match the model.
    """
    config_data = load_config(config_path)
    if not config_data:
        logger.error(f"Report settings file '{config_path}' is empty.")
        raise ValueError("Configuration file is empty.")
    try:
        return ReportSettings(**config_data.get("report", config_data))
    except ValidationError as e:
        logger.error(f"Error validating report settings from '{config_path}':\n{e}")
        raise


def configure_logging(level: str = "INFO") -> None:
    """Sets up console logging with the project's log format."""
    logging.basicConfig(level=level.upper(), format=constants.LOG_FORMAT)
