"""
This module turns human-readable names into stable identifiers.

It covers the three places where a report needs a machine-safe name:
1.  **Filenames**: `sanitize_filename` maps a page title to the token used for
    its `.html` file and, for nested reports, its subdirectory.
2.  **Script identifiers**: `sanitize_chart_title` maps a chart title to a
    string usable as a JavaScript function suffix or DOM id.
3.  **Data labels**: `Label` composes and splits the namespaced labels under
    which tables extracted from a composite record are stored.
"""

import re
from typing import Tuple

from .constants import FALLBACK_FILENAME, LABEL_SEPARATOR, MAX_FILENAME_LENGTH

_FILENAME_SEPARATORS = re.compile(r"[\s\-.:/\\]")
_FILENAME_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")
_CHART_TITLE_SEPARATORS = re.compile(r"[\s\-.:]")


def sanitize_filename(title: str) -> str:
    """
    Converts a page title to a safe filename stem.

    Whitespace and the characters ``- . : / \\`` become underscores, every other
    character outside ``[A-Za-z0-9_]`` is dropped, and the result is lowercased
    and cut to 50 characters. A title with nothing left maps to ``"page"``.

    Args:
        title: The page title, e.g. "Revenue Report".

    Returns:
        The filename stem, e.g. "revenue_report".
    """
    sanitized = _FILENAME_SEPARATORS.sub("_", title)
    sanitized = _FILENAME_DISALLOWED.sub("", sanitized).lower()
    sanitized = sanitized[:MAX_FILENAME_LENGTH]
    return sanitized or FALLBACK_FILENAME


def sanitize_chart_title(title: str) -> str:
    """Replaces whitespace, hyphens, dots and colons with underscores."""
    return _CHART_TITLE_SEPARATORS.sub("_", str(title))


class Label(str):
    """
    A data label naming one table within a page's namespace.

    Labels behave exactly like strings. A label built with `compose` joins a
    parent label and a field name with `LABEL_SEPARATOR`; since field names are
    identifiers and can never contain the separator, `parts` recovers both
    parts by cutting at the last separator.
    """

    __slots__ = ()

    @classmethod
    def compose(cls, parent: str, child: str) -> "Label":
        """Builds ``"<parent>.<child>"``; the child must not contain the separator."""
        if LABEL_SEPARATOR in child:
            raise ValueError(
                f"Field name '{child}' cannot contain '{LABEL_SEPARATOR}'."
            )
        return cls(f"{parent}{LABEL_SEPARATOR}{child}")

    def parts(self) -> Tuple[str, str]:
        """
        Splits a composed label into its parent label and field name.

        Returns:
            A ``(parent, field)`` tuple. A label that was never composed has an
            empty parent.
        """
        parent, _, child = self.rpartition(LABEL_SEPARATOR)
        return parent, child

    @property
    def is_composed(self) -> bool:
        return LABEL_SEPARATOR in self

    def __repr__(self) -> str:
        return f"Label({str.__repr__(self)})"
