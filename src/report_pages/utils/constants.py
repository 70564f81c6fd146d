"""
This module centralizes all shared constants for the report pages package.

Using a dedicated constants module keeps the storage format tokens, label
separator and page defaults in one place, so the page, tree and navigation
modules never hardcode them.
"""

from enum import Enum

# =============================================================================
# Storage Formats
# =============================================================================


class StorageFormat(str, Enum):
    """How the tables of a page are serialized by a report writer."""

    CSV_EMBEDDED = "csv_embedded"
    JSON_EMBEDDED = "json_embedded"
    CSV_EXTERNAL = "csv_external"
    JSON_EXTERNAL = "json_external"
    PARQUET = "parquet"

    @property
    def is_external(self) -> bool:
        """True when tables live in a shared data directory instead of the HTML."""
        return self in EXTERNAL_STORAGE_FORMATS

    def __str__(self) -> str:
        return self.value


EXTERNAL_STORAGE_FORMATS = frozenset(
    {StorageFormat.CSV_EXTERNAL, StorageFormat.JSON_EXTERNAL, StorageFormat.PARQUET}
)
STORAGE_FORMAT_TOKENS = tuple(fmt.value for fmt in StorageFormat)

# =============================================================================
# Labels and Filenames
# =============================================================================

LABEL_SEPARATOR = "."  # Never valid inside a Python identifier.
FALLBACK_FILENAME = "page"  # Used when a title sanitizes to nothing.
MAX_FILENAME_LENGTH = 50

# =============================================================================
# Page and Tree Defaults
# =============================================================================

DEFAULT_PAGE_TITLE = "Report"
DEFAULT_PAGE_FORMAT = StorageFormat.CSV_EMBEDDED
DEFAULT_COVER_TITLE = "Home"
DEFAULT_TREE_FORMAT = StorageFormat.PARQUET

# =============================================================================
# Component Defaults
# =============================================================================

LINK_LIST_TITLE = "link_list"
LINK_LIST_HEADING = "Pages"
MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]
