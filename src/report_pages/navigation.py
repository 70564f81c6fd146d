"""
This module derives navigation links between the pages of a report.

It provides:
1.  **Link builders**: `build_links` and `build_grouped_links` turn sibling
    report nodes into ``(title, url, blurb)`` records, using the same filename
    convention a writer uses to place each node on disk.
2.  **LinkList**: the navigation component placed on a cover page, rendered
    as a flat list or as lists grouped under subheadings.
3.  **Site map**: `site_map` lists every page of a report with the path a
    writer must use so that the generated links resolve.

Path convention, relative to the cover page that links to the nodes:
- a page is written to ``"<sanitized-title>.html"``;
- a nested report is written to ``"<sanitized-title>/<sanitized-title>.html"``.
"""

import html
import logging
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Union

from .. import constants
from .pages import Page
from .tree import ReportNode, ReportTree
from .utils.constants import LINK_LIST_HEADING, LINK_LIST_TITLE, StorageFormat
from .utils.naming import sanitize_filename

logger = logging.getLogger(__name__)


class Link(NamedTuple):
    """A single navigation entry."""

    title: str
    url: str
    blurb: str


def node_filename(node: ReportNode) -> str:
    """
    Returns the path of a node's HTML file relative to its parent cover page.

    Raises:
        TypeError: If `node` is neither a `Page` nor a `ReportTree`.
    """
    if isinstance(node, Page):
        return f"{sanitize_filename(node.tab_title)}{constants.HTML_EXTENSION}"
    if isinstance(node, ReportTree):
        stem = sanitize_filename(node.cover.tab_title)
        return f"{stem}/{stem}{constants.HTML_EXTENSION}"
    raise TypeError(f"Expected a Page or ReportTree, got {type(node).__name__}")


def link_for(node: ReportNode) -> Link:
    """Builds the link pointing at a page or at the cover of a nested report."""
    url = node_filename(node)
    page = node.cover if isinstance(node, ReportTree) else node
    return Link(title=page.tab_title, url=url, blurb=page.notes)


def build_links(nodes: Sequence[ReportNode]) -> List[Link]:
    """
    Builds one link per node, in the order given.

    Args:
        nodes: Sibling pages and nested reports.

    Returns:
        The list of links.
    """
    return [link_for(node) for node in nodes]


def build_grouped_links(
    groups: Mapping[str, Sequence[ReportNode]],
) -> Dict[str, List[Link]]:
    """
    Builds links for nodes grouped under headings.

    Args:
        groups: Ordered mapping of heading to the nodes listed under it.

    Returns:
        A dictionary with the same headings, in the same order, mapped to links.
    """
    return {heading: build_links(nodes) for heading, nodes in groups.items()}


class LinkList:
    """
    A styled list of links to other pages of a report.

    Args:
        links: Either a sequence of ``(title, url, blurb)`` tuples, or an ordered
            mapping of subheading to such sequences.
        chart_title: Identifier of the component within its page.
        notes: Optional text shown below the links.

    Attributes:
        links: All links, flattened in group order.
        groups: The grouped links, or None for a flat list.
    """

    def __init__(
        self,
        links: Union[Sequence[tuple], Mapping[str, Sequence[tuple]]],
        chart_title: str = LINK_LIST_TITLE,
        notes: str = "",
    ):
        self.chart_title = chart_title
        self.notes = notes
        self.groups: Optional[Dict[str, List[Link]]]
        if isinstance(links, Mapping):
            self.groups = {
                heading: [Link(*link) for link in group]
                for heading, group in links.items()
            }
            self.links = [link for group in self.groups.values() for link in group]
        else:
            self.groups = None
            self.links = [Link(*link) for link in links]
        self.functional_html = ""
        self.appearance_html = self._render()
        logger.debug(f"Built link list '{chart_title}' with {len(self.links)} link(s).")

    @staticmethod
    def _render_items(links: Sequence[Link], indent: str) -> str:
        items = [
            f'{indent}<li><strong><a href="{html.escape(link.url)}">'
            f"{html.escape(link.title)}</a></strong>: {link.blurb}</li>"
            for link in links
        ]
        return "\n".join([f"{indent[:-4]}<ul>", *items, f"{indent[:-4]}</ul>"])

    def _render(self) -> str:
        if self.groups is None:
            links_html = self._render_items(self.links, " " * 8)
        else:
            sections = []
            for heading, links in self.groups.items():
                sections.append(
                    f'    <h4 style="margin-top: 15px; margin-bottom: 5px;">'
                    f"{html.escape(heading)}</h4>"
                )
                sections.append(self._render_items(links, " " * 8))
            links_html = "\n".join(sections)

        notes_html = (
            '<div style="padding: 12px; background-color: #fffbdd; '
            "border-top: 1px solid #ddd; margin-top: 10px; font-size: 14px;\">"
            f"{self.notes}</div>"
            if self.notes
            else ""
        )
        return (
            '<div style="margin: 20px 0; padding: 15px; border: 1px solid #ddd; '
            'background-color: #f9f9f9;">\n'
            f"    <h3>{LINK_LIST_HEADING}</h3>\n"
            f"{links_html}\n"
            f"    {notes_html}\n"
            "</div>"
        )

    def dependencies(self) -> List[str]:
        return []


class SiteEntry(NamedTuple):
    """One HTML file of a report, as a writer should place it."""

    path: str
    page: Page
    dataformat: StorageFormat
    data_dir: Optional[str]


def site_map(
    tree: ReportTree, cover_filename: str = constants.DEFAULT_COVER_FILENAME
) -> List[SiteEntry]:
    """
    Lists every page reachable from a report with the path it is written to.

    Paths are relative to the directory holding the top-level cover page and
    always use ``/``. Each entry carries the storage format of the report that
    owns the page, since every report writes its data independently, and the
    directory that report's tables go to when they are stored externally
    (None for embedded formats).

    Args:
        tree: The top-level report.
        cover_filename: Filename of the top-level cover page.

    Returns:
        The entries, cover first, then children depth-first in navigation order.
    """
    entries = [
        SiteEntry(cover_filename, tree.cover, tree.dataformat, _data_dir(tree, ""))
    ]
    _collect_entries(tree, "", entries)

    seen: Dict[str, str] = {}
    for entry in entries:
        if entry.path in seen:
            logger.warning(
                f"Pages '{seen[entry.path]}' and '{entry.page.tab_title}' both map "
                f"to '{entry.path}'; the later one will overwrite the earlier one."
            )
        seen[entry.path] = entry.page.tab_title
    return entries


def _data_dir(tree: ReportTree, prefix: str) -> Optional[str]:
    if not tree.dataformat.is_external:
        return None
    return f"{prefix}{constants.DATA_DIR_NAME}"


def _collect_entries(tree: ReportTree, prefix: str, entries: List[SiteEntry]) -> None:
    data_dir = _data_dir(tree, prefix)
    for child in tree.children:
        path = f"{prefix}{node_filename(child)}"
        if isinstance(child, ReportTree):
            subdir = f"{prefix}{sanitize_filename(child.cover.tab_title)}/"
            entries.append(
                SiteEntry(path, child.cover, child.dataformat, _data_dir(child, subdir))
            )
            _collect_entries(child, subdir, entries)
        else:
            entries.append(SiteEntry(path, child, tree.dataformat, data_dir))
