"""
This package composes tables and visual components into multi-page reports.

It normalizes page inputs (DataFrames, or records holding DataFrames) into a
per-page data namespace, assembles pages into a tree of reports with their own
storage formats, and derives the navigation links between them. Writing the
resulting pages and data to disk is left to a report writer, which uses
`site_map` for file placement and `required_tables` to skip unused data.
"""

from .components import Component, FigureBlock, TextBlock
from .dependencies import dependencies, required_tables
from .errors import (
    EmptyTreeError,
    InvalidComponentError,
    InvalidFieldNameError,
    InvalidStorageFormatError,
    ReportPagesError,
    UnsupportedInputShapeError,
)
from .extraction import extract_tables, has_table_fields
from .navigation import (
    Link,
    LinkList,
    SiteEntry,
    build_grouped_links,
    build_links,
    site_map,
)
from .pages import Page
from .settings import ReportSettings, configure_logging, load_report_settings
from .tree import ReportNode, ReportTree
from .utils.constants import StorageFormat
from .utils.naming import Label, sanitize_chart_title, sanitize_filename

__all__ = [
    "Component",
    "EmptyTreeError",
    "FigureBlock",
    "InvalidComponentError",
    "InvalidFieldNameError",
    "InvalidStorageFormatError",
    "Label",
    "Link",
    "LinkList",
    "Page",
    "ReportNode",
    "ReportPagesError",
    "ReportSettings",
    "ReportTree",
    "SiteEntry",
    "StorageFormat",
    "TextBlock",
    "UnsupportedInputShapeError",
    "build_grouped_links",
    "build_links",
    "configure_logging",
    "dependencies",
    "extract_tables",
    "has_table_fields",
    "load_report_settings",
    "required_tables",
    "sanitize_chart_title",
    "sanitize_filename",
    "site_map",
]
