"""
This module defines `ReportTree`, a multi-page report.

A report is a cover page plus an ordered list of child nodes, each child being
either a `Page` or another `ReportTree`. Nested reports are written to their
own subdirectory with their own data, so every report resolves its storage
format independently:

- an explicit `dataformat` passed to the constructor wins;
- otherwise the cover page's format is used.

Three ways of building a report are supported:

1.  **Direct**: `ReportTree(cover, children)` with a ready-made cover page.
2.  **Auto-navigation**: `ReportTree.from_pages(body, children)` builds the
    cover page from `body` plus a `LinkList` pointing at every child.
3.  **Grouped auto-navigation**: `ReportTree.from_groups(body, groups)` does
    the same with links grouped under subheadings.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from .errors import EmptyTreeError
from .pages import Page
from .utils.constants import DEFAULT_COVER_TITLE, DEFAULT_TREE_FORMAT, StorageFormat
from .utils.data_utils import validate_dataformat

logger = logging.getLogger(__name__)


def _validate_children(children: Sequence[Any]) -> Tuple["ReportNode", ...]:
    for position, child in enumerate(children):
        if not isinstance(child, (Page, ReportTree)):
            logger.error(
                f"Child at position {position} is a {type(child).__name__}, "
                f"not a Page or ReportTree."
            )
            raise TypeError(
                f"Report children must be Page or ReportTree instances; "
                f"position {position} is a {type(child).__name__}."
            )
    return tuple(children)


class ReportTree:
    """
    A cover page and its child pages or nested reports.

    Args:
        cover: The landing page of the report.
        children: Child pages and nested reports, in navigation order.
        dataformat: Optional storage format overriding the cover page's.

    Raises:
        InvalidStorageFormatError: If `dataformat` is given and not recognized.
        TypeError: If the cover is not a `Page` or a child is not a node.
    """

    __slots__ = ("_cover", "_children", "_dataformat", "_navigation")

    def __init__(
        self,
        cover: Page,
        children: Sequence["ReportNode"] = (),
        dataformat: Optional[Union[str, StorageFormat]] = None,
    ):
        if not isinstance(cover, Page):
            raise TypeError(f"The cover must be a Page, got {type(cover).__name__}.")
        resolved = (
            cover.dataformat if dataformat is None else validate_dataformat(dataformat)
        )
        self._assemble(cover, _validate_children(children), resolved, None)

    def _assemble(self, cover, children, dataformat, navigation) -> None:
        """Stores already validated parts; every constructor ends here."""
        self._cover = cover
        self._children = children
        self._dataformat = dataformat
        self._navigation = navigation
        logger.info(
            f"Built report '{cover.tab_title}' with {len(children)} child "
            f"node(s), dataformat={dataformat.value}."
        )

    @classmethod
    def from_pages(
        cls,
        body: Sequence[Any],
        children: Sequence["ReportNode"],
        *,
        tab_title: str = DEFAULT_COVER_TITLE,
        page_header: str = "",
        notes: str = "",
        dataformat: Union[str, StorageFormat] = DEFAULT_TREE_FORMAT,
    ) -> "ReportTree":
        """
        Builds a report whose cover page links to every child.

        The cover page carries no data: its components are `body` followed by
        a `LinkList` with one link per child, in order.

        Args:
            body: Components shown on the cover page above the links.
            children: Child pages and nested reports.
            tab_title: Title of the cover page.
            page_header: Heading of the cover page.
            notes: Notes of the cover page, shown when this report is linked
                from a parent report.
            dataformat: Storage format of the cover page and the report.

        Returns:
            The new report.

        Raises:
            InvalidStorageFormatError: If `dataformat` is not recognized.
            EmptyTreeError: If `children` is empty.
        """
        from .navigation import LinkList, build_links

        dataformat = validate_dataformat(dataformat)
        if not children:
            logger.error(f"Report '{tab_title}' was given no child pages.")
            raise EmptyTreeError(f"Report '{tab_title}' needs at least one child page.")
        children = _validate_children(children)

        navigation = LinkList(build_links(children))
        cover = Page(
            {},
            [*body, navigation],
            tab_title=tab_title,
            page_header=page_header,
            notes=notes,
            dataformat=dataformat,
        )
        tree = cls.__new__(cls)
        tree._assemble(cover, children, dataformat, navigation)
        return tree

    @classmethod
    def from_groups(
        cls,
        body: Sequence[Any],
        groups: Mapping[str, Sequence["ReportNode"]],
        *,
        tab_title: str = DEFAULT_COVER_TITLE,
        page_header: str = "",
        notes: str = "",
        dataformat: Union[str, StorageFormat] = DEFAULT_TREE_FORMAT,
    ) -> "ReportTree":
        """
        Builds a report whose cover page links to every child under subheadings.

        The report's children are the groups' nodes concatenated in heading
        order; the headings only exist in the cover page's `LinkList`.

        Args:
            body: Components shown on the cover page above the links.
            groups: Ordered mapping of subheading to the nodes listed under it.
            tab_title: Title of the cover page.
            page_header: Heading of the cover page.
            notes: Notes of the cover page.
            dataformat: Storage format of the cover page and the report.

        Returns:
            The new report.

        Raises:
            InvalidStorageFormatError: If `dataformat` is not recognized.
            EmptyTreeError: If there are no groups or every group is empty.
        """
        from .navigation import LinkList, build_grouped_links

        dataformat = validate_dataformat(dataformat)
        children = [node for nodes in groups.values() for node in nodes]
        if not children:
            logger.error(f"Report '{tab_title}' was given no grouped pages.")
            raise EmptyTreeError(
                f"Report '{tab_title}' needs at least one group with one child page."
            )
        children = _validate_children(children)

        navigation = LinkList(build_grouped_links(groups))
        cover = Page(
            {},
            [*body, navigation],
            tab_title=tab_title,
            page_header=page_header,
            notes=notes,
            dataformat=dataformat,
        )
        tree = cls.__new__(cls)
        tree._assemble(cover, children, dataformat, navigation)
        return tree

    # --- Read-only attributes ---
    @property
    def cover(self) -> Page:
        return self._cover

    @property
    def children(self) -> Tuple["ReportNode", ...]:
        return self._children

    @property
    def dataformat(self) -> StorageFormat:
        return self._dataformat

    @property
    def navigation(self):
        """The `LinkList` built by `from_pages`/`from_groups`, else None."""
        return self._navigation

    @property
    def tab_title(self) -> str:
        return self._cover.tab_title

    @property
    def notes(self) -> str:
        return self._cover.notes

    def __repr__(self) -> str:
        return (
            f"ReportTree(tab_title={self.tab_title!r}, children={len(self._children)}, "
            f"dataformat={self._dataformat.value!r})"
        )


ReportNode = Union[Page, ReportTree]
