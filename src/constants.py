"""
Centralized definitions for all project-wide constants.

This module consolidates directory names, configuration filenames, and the
default file layout of a rendered report so that the report composition code
and any writer that consumes it agree on the same values.

Attributes:
    PROJECT_ROOT (str): The absolute path to the project's root directory.
    CONFIG_DIR (str): The name of the configuration directory.
    REPORT_PAGES_CONFIG_FILENAME (str): The filename for the report defaults config.
    DATA_DIR_NAME (str): The name of the shared data subdirectory of a report
        that stores its tables externally.
    HTML_EXTENSION (str): The file extension used for every generated page.
    DEFAULT_COVER_FILENAME (str): The filename of the top-level cover page.
    LOG_FORMAT (str): The format string used for console logging.
"""

import os

# --- Project Root ---
# Resolves the absolute path to the project's root directory, allowing for
# consistent pathing regardless of where the code is executed from.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# --- Top-Level Directory Names ---
CONFIG_DIR = "config"

# --- Configuration Filenames ---
REPORT_PAGES_CONFIG_FILENAME = "config_report_pages.yaml"

# --- Report Layout ---
DATA_DIR_NAME = "data"
HTML_EXTENSION = ".html"
DEFAULT_COVER_FILENAME = "index.html"

# --- Logging ---
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
