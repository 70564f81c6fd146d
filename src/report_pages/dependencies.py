"""
This module answers which tables of a page or report are actually used.

A writer uses it to avoid serializing tables no component reads. For a report,
only the cover page is considered: nested pages and reports are written on
their own, each with its own data.
"""

import logging
from typing import Dict, Set

import pandas as pd

from .pages import Page
from .tree import ReportNode, ReportTree

logger = logging.getLogger(__name__)


def _own_page(node: ReportNode) -> Page:
    if isinstance(node, Page):
        return node
    if isinstance(node, ReportTree):
        return node.cover
    raise TypeError(f"Expected a Page or ReportTree, got {type(node).__name__}")


def dependencies(node: ReportNode) -> Set[str]:
    """
    Returns the data labels declared by the components of a node's own page.

    Args:
        node: A page, or a report (whose cover page is used).

    Returns:
        The set of labels; empty when no component reads data.
    """
    return _own_page(node).dependencies()


def required_tables(node: ReportNode) -> Dict[str, pd.DataFrame]:
    """
    Returns the tables a writer must ship for a node's own page.

    Labels that a component depends on but that are missing from the page
    namespace are skipped; so are tables no component depends on.

    Args:
        node: A page, or a report (whose cover page is used).

    Returns:
        A dictionary of label to DataFrame, sorted by label.
    """
    page = _own_page(node)
    tables: Dict[str, pd.DataFrame] = {}
    for label in sorted(dependencies(page)):
        if label in page.dataframes:
            tables[label] = page.dataframes[label]
        else:
            logger.debug(f"Page '{page.tab_title}' has no table for label '{label}'.")
    return tables
