"""
Exception types raised while composing pages and report trees.

Every error is raised synchronously by a constructor; there is no partially
built page or tree. Each concrete error also derives from the built-in
exception a caller would expect (`ValueError` for bad values, `TypeError` for
bad shapes), so generic handlers keep working.
"""


class ReportPagesError(Exception):
    """Base class for all report composition errors."""


class InvalidStorageFormatError(ReportPagesError, ValueError):
    """Raised when a storage format token is not one of the recognized values."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"dataformat must be one of csv_embedded, json_embedded, csv_external, "
            f"json_external or parquet; got {value!r}"
        )


class UnsupportedInputShapeError(ReportPagesError, TypeError):
    """Raised when a page input is neither a table nor a record holding tables."""

    def __init__(self, label: str, kind: str):
        self.label = label
        self.kind = kind
        super().__init__(
            f"Input '{label}' is a {kind}, which is neither a DataFrame nor a "
            f"record with DataFrame fields."
        )


class EmptyTreeError(ReportPagesError, ValueError):
    """Raised when a navigation constructor is given no child nodes."""


class InvalidComponentError(ReportPagesError, TypeError):
    """Raised when a page component does not expose markup and dependencies."""


class InvalidFieldNameError(ReportPagesError, ValueError):
    """Raised when a record's table field cannot be turned into a data label."""

    def __init__(self, label: str, field_name: str):
        self.label = label
        self.field_name = field_name
        super().__init__(
            f"Record '{label}' has a table field named '{field_name}', which "
            f"contains the label separator."
        )
