"""
This module extracts tables from composite records.

A composite record is any value that is not itself a DataFrame but declares
one or more DataFrame-typed fields, for example:

    @dataclass
    class OrderBook:
        trades: pd.DataFrame
        quotes: Optional[pd.DataFrame] = None
        venue: str = ""

Passing such a record to a page under the label ``"book"`` stores its non-empty
tables as ``"book.trades"`` and ``"book.quotes"``. The engine is driven by the
declared field types, not by a list of known record classes, so callers can
use their own dataclasses, NamedTuples, pydantic models or annotated classes.

A record can also opt in explicitly by defining a ``table_fields()`` method
returning ``(name, table_or_None)`` pairs. When present it takes precedence
over annotation-based discovery.
"""

import dataclasses
import logging
import numbers
import types
from collections.abc import Mapping
from typing import (
    Any,
    ClassVar,
    Dict,
    Iterator,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import pandas as pd
from pydantic import BaseModel

from .errors import InvalidFieldNameError
from .utils.constants import LABEL_SEPARATOR
from .utils.data_utils import has_rows, is_table
from .utils.naming import Label

logger = logging.getLogger(__name__)

# Values of these kinds are never treated as composite records.
_LEAF_TYPES = (
    pd.DataFrame,
    Mapping,
    list,
    tuple,
    set,
    frozenset,
    str,
    bytes,
    bytearray,
    numbers.Number,
)


def _is_table_type(annotation: Any) -> bool:
    """True for ``DataFrame`` and for ``Optional[DataFrame]`` in any spelling."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        return len(members) == 1 and _is_table_type(members[0])
    if origin is None and isinstance(annotation, type):
        return issubclass(annotation, pd.DataFrame)
    return False


def _is_named_tuple(record: Any) -> bool:
    return isinstance(record, tuple) and hasattr(type(record), "_fields")


def _declared_field_types(record: Any) -> Optional[Dict[str, Any]]:
    """
    Returns the declared type of every field of a record.

    Args:
        record: The record instance to introspect.

    Returns:
        A mapping of field name to annotation, or None when the record's shape
        cannot be resolved (e.g. a forward reference that does not exist).
    """
    record_type = type(record)

    if isinstance(record, BaseModel):
        return {
            name: info.annotation for name, info in record_type.model_fields.items()
        }

    try:
        hints = get_type_hints(record_type)
    except (AttributeError, NameError, SyntaxError, TypeError) as e:
        logger.debug(f"Cannot resolve field types of {record_type.__qualname__}: {e}")
        return None

    if dataclasses.is_dataclass(record):
        return {f.name: hints.get(f.name) for f in dataclasses.fields(record)}
    if _is_named_tuple(record):
        return {name: hints.get(name) for name in record_type._fields}
    return {
        name: annotation
        for name, annotation in hints.items()
        if get_origin(annotation) is not ClassVar and annotation is not ClassVar
    }


def _iter_table_fields(record: Any) -> Iterator[Tuple[str, Any]]:
    """Yields ``(field_name, runtime_value)`` for every table-typed field."""
    table_fields = getattr(record, "table_fields", None)
    if callable(table_fields):
        yield from table_fields()
        return

    declared = _declared_field_types(record) or {}
    for name, annotation in declared.items():
        if _is_table_type(annotation):
            yield name, getattr(record, name, None)


def has_table_fields(record: Any) -> bool:
    """
    Checks whether a value should be routed through table extraction.

    DataFrames, mappings, sequences, sets, strings, numbers and None are leaf
    values and always return False, as do classes (rather than instances) and
    records whose declared field types cannot be resolved.

    Args:
        record: Any value supplied as a page input.

    Returns:
        True if at least one declared field is a DataFrame or optional DataFrame.
    """
    if record is None or isinstance(record, type):
        return False
    if isinstance(record, _LEAF_TYPES) and not _is_named_tuple(record):
        return False
    return any(True for _ in _iter_table_fields(record))


def extract_tables(record: Any, label: str) -> Dict[Label, pd.DataFrame]:
    """
    Pulls every non-empty table out of a composite record.

    Each table is keyed by ``"<label>.<field_name>"``. Fields that are None,
    hold an empty DataFrame, or are not table-typed are left out.

    Args:
        record: The composite record.
        label: The label the record was supplied under.

    Returns:
        A dictionary of composed labels to DataFrames, in field order.

    Raises:
        InvalidFieldNameError: If a field name contains the label separator.
    """
    extracted: Dict[Label, pd.DataFrame] = {}
    for field_name, value in _iter_table_fields(record):
        if LABEL_SEPARATOR in field_name:
            logger.error(f"Record '{label}' yielded table field '{field_name}'.")
            raise InvalidFieldNameError(label, field_name)
        if not is_table(value):
            logger.debug(f"Skipping '{label}.{field_name}': no DataFrame present.")
            continue
        if not has_rows(value):
            logger.debug(f"Skipping '{label}.{field_name}': DataFrame has no rows.")
            continue
        extracted[Label.compose(label, field_name)] = value
    logger.debug(
        f"Extracted {len(extracted)} table(s) from '{label}': {list(extracted)}"
    )
    return extracted
