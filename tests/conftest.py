import pandas as pd
import pytest


class StubChart:
    """Minimal chart component reading one or more data labels."""

    def __init__(self, chart_title, *data_labels):
        self.chart_title = chart_title
        self.data_labels = list(data_labels)
        self.functional_html = f"function draw_{chart_title}() {{}}"
        self.appearance_html = f'<div id="{chart_title}"></div>'

    def dependencies(self):
        return list(self.data_labels)


@pytest.fixture
def make_chart():
    return StubChart


@pytest.fixture
def make_table():
    def _make(n_rows: int = 3) -> pd.DataFrame:
        return pd.DataFrame({"x": list(range(n_rows)), "y": [0.5] * n_rows})

    return _make
