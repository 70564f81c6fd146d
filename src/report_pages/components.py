"""
This module defines the visual component contract and the generic components.

Every component placed on a page exposes:
- `functional_html`: a script fragment (may be empty).
- `appearance_html`: the HTML fragment rendered in the page body.
- `dependencies()`: the data labels the component reads.

The built-in components also carry a `chart_title` identifying them within
their page; it is not part of the contract a page checks.

Pages only store components and query `dependencies()`; markup is passed
through untouched to whatever writer renders the report. Chart components live
outside this package and only need to satisfy the `Component` protocol.
"""

import logging
from typing import List, Optional, Protocol, runtime_checkable

import markdown
import plotly.graph_objects as go

from .utils.constants import MARKDOWN_EXTENSIONS
from .utils.naming import sanitize_chart_title

logger = logging.getLogger(__name__)


@runtime_checkable
class Component(Protocol):
    """Structural type satisfied by every visual component."""

    functional_html: str
    appearance_html: str

    def dependencies(self) -> List[str]: ...


class TextBlock:
    """
    A block of static HTML, or Markdown rendered to HTML.

    Args:
        text: The HTML (or Markdown) content.
        chart_title: Identifier of the block within its page.
        as_markdown: Render `text` with the `markdown` library first.
    """

    def __init__(
        self, text: str, chart_title: str = "text_block", as_markdown: bool = False
    ):
        self.chart_title = chart_title
        self.text = text
        body = (
            markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
            if as_markdown
            else text
        )
        self.functional_html = ""
        self.appearance_html = f'<div class="textblock-content">\n{body}\n</div>'

    def dependencies(self) -> List[str]:
        return []


class FigureBlock:
    """
    Embeds a plotly figure in a page.

    The figure is rendered once, at construction, without the plotly.js bundle;
    the page writer is expected to load plotly.js once per page.

    Args:
        chart_title: Identifier of the figure; also the basis of its DOM id.
        figure: The plotly figure to embed.
        data_label: Label of the table the figure was drawn from, if the table
            should be shipped with the page.
        notes: Optional text shown below the figure.
    """

    def __init__(
        self,
        chart_title: str,
        figure: go.Figure,
        data_label: Optional[str] = None,
        notes: str = "",
    ):
        self.chart_title = chart_title
        self.data_label = data_label
        self.div_id = sanitize_chart_title(chart_title)
        figure_html = figure.to_html(
            full_html=False, include_plotlyjs=False, div_id=self.div_id
        )
        notes_html = f'<p class="figure-notes">{notes}</p>' if notes else ""
        self.functional_html = ""
        self.appearance_html = (
            f'<div class="figure-block">\n{figure_html}\n{notes_html}\n</div>'
        )
        logger.debug(f"Rendered figure '{chart_title}' as '{self.div_id}'.")

    def dependencies(self) -> List[str]:
        return [self.data_label] if self.data_label else []
