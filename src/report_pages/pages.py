"""
This module defines `Page`, a single unit of a report.

A page owns a namespace of labelled DataFrames, an ordered list of visual
components, and its metadata (tab title, header, notes, storage format).
Construction validates and normalizes everything in one step:

1.  **Storage format**: must be one of the recognized tokens.
2.  **Data inputs**: DataFrames are stored under their label as given;
    composite records are expanded into ``"<label>.<field>"`` entries; any
    other value is rejected.
3.  **Components**: stored in the given order after checking that each one
    satisfies the `Component` protocol.

A page is read-only once built. To change anything, build a new page.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

import pandas as pd

from .components import Component
from .errors import InvalidComponentError, UnsupportedInputShapeError
from .extraction import extract_tables, has_table_fields
from .utils.constants import DEFAULT_PAGE_FORMAT, DEFAULT_PAGE_TITLE, StorageFormat
from .utils.data_utils import describe_kind, is_table, validate_dataformat
from .utils.naming import Label

logger = logging.getLogger(__name__)


def _normalize_inputs(inputs: Mapping[str, Any]) -> Dict[Label, pd.DataFrame]:
    """
    Builds a page namespace from raw inputs.

    Later entries replace earlier ones when two inputs resolve to the same
    label; each replacement is logged as a warning.

    Args:
        inputs: Mapping of label to DataFrame or composite record.

    Returns:
        A dictionary of labels to DataFrames.

    Raises:
        UnsupportedInputShapeError: If a value is neither a DataFrame nor a
            record with DataFrame fields.
    """
    namespace: Dict[Label, pd.DataFrame] = {}

    def _store(label: Label, table: pd.DataFrame) -> None:
        if label in namespace:
            logger.warning(
                f"Data label '{label}' is defined twice; keeping the later table."
            )
        namespace[label] = table

    for raw_label, value in inputs.items():
        label = Label(raw_label)
        if is_table(value):
            _store(label, value)
        elif has_table_fields(value):
            for sub_label, table in extract_tables(value, label).items():
                _store(sub_label, table)
        else:
            kind = describe_kind(value)
            logger.error(f"Unsupported input '{label}' of kind {kind}.")
            raise UnsupportedInputShapeError(label, kind)
    return namespace


def _validate_components(components: Sequence[Any]) -> Tuple[Component, ...]:
    for position, component in enumerate(components):
        if not isinstance(component, Component):
            kind = describe_kind(component)
            logger.error(f"Component at position {position} is a {kind}.")
            raise InvalidComponentError(
                f"Component at position {position} ({kind}) does not provide "
                f"functional_html, appearance_html and dependencies()."
            )
    return tuple(components)


class Page:
    """
    A single HTML page of a report together with the data it ships.

    Args:
        dataframes: Mapping of data label to a DataFrame or to a composite
            record holding DataFrames. May be empty.
        components: The visual components, in display order.
        tab_title: Browser tab title; also the basis of the page's filename.
        page_header: Main heading shown on the page.
        notes: Description shown on the page and used as the link blurb.
        dataformat: How the writer stores this page's tables.

    Raises:
        InvalidStorageFormatError: If `dataformat` is not recognized.
        UnsupportedInputShapeError: If a data input has an unsupported shape.
        InvalidComponentError: If a component lacks markup or dependencies.
    """

    __slots__ = (
        "_dataframes",
        "_components",
        "_tab_title",
        "_page_header",
        "_notes",
        "_dataformat",
    )

    def __init__(
        self,
        dataframes: Optional[Mapping[str, Any]] = None,
        components: Sequence[Any] = (),
        *,
        tab_title: str = DEFAULT_PAGE_TITLE,
        page_header: str = "",
        notes: str = "",
        dataformat: Union[str, StorageFormat] = DEFAULT_PAGE_FORMAT,
    ):
        self._dataformat = validate_dataformat(dataformat)
        self._dataframes = MappingProxyType(_normalize_inputs(dataframes or {}))
        self._components = _validate_components(components)
        self._tab_title = tab_title
        self._page_header = page_header
        self._notes = notes

    # --- Read-only attributes ---
    @property
    def dataframes(self) -> Mapping[Label, pd.DataFrame]:
        return self._dataframes

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    @property
    def tab_title(self) -> str:
        return self._tab_title

    @property
    def page_header(self) -> str:
        return self._page_header

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def dataformat(self) -> StorageFormat:
        return self._dataformat

    @property
    def labels(self) -> List[Label]:
        """The labels of the page namespace, sorted."""
        return sorted(self._dataframes)

    def dependencies(self) -> Set[str]:
        """Union of the data labels declared by this page's components."""
        labels: Set[str] = set()
        for component in self._components:
            labels.update(component.dependencies())
        return labels

    def __repr__(self) -> str:
        return (
            f"Page(tab_title={self._tab_title!r}, tables={len(self._dataframes)}, "
            f"components={len(self._components)}, "
            f"dataformat={self._dataformat.value!r})"
        )
