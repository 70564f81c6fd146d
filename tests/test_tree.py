import pytest

from src.report_pages import tree as tree_module
from src.report_pages.components import TextBlock
from src.report_pages.errors import EmptyTreeError, InvalidStorageFormatError
from src.report_pages.navigation import LinkList
from src.report_pages.pages import Page
from src.report_pages.tree import ReportTree
from src.report_pages.utils.constants import StorageFormat


def _page(title, notes="", dataformat="csv_embedded", data=None, components=None):
    return Page(
        data or {},
        components or [TextBlock(f"<h2>{title}</h2>")],
        tab_title=title,
        notes=notes,
        dataformat=dataformat,
    )


def test_tree_inherits_cover_format():
    """Tests that without an override the cover page's format is used."""
    cover = _page("Cover", dataformat="json_embedded")
    tree = ReportTree(cover, [_page("P1"), _page("P2")])
    assert tree.dataformat is StorageFormat.JSON_EMBEDDED
    assert tree.cover is cover
    assert len(tree.children) == 2
    assert tree.navigation is None


def test_tree_override_wins_over_cover():
    """Tests that an explicit format overrides the cover page's format."""
    cover = _page("Cover", dataformat="csv_embedded")
    tree = ReportTree(cover, [_page("P1")], dataformat="parquet")
    assert tree.dataformat is StorageFormat.PARQUET
    assert cover.dataformat is StorageFormat.CSV_EMBEDDED


def test_tree_rejects_invalid_override():
    """Tests that an unknown override fails construction."""
    with pytest.raises(InvalidStorageFormatError):
        ReportTree(_page("Cover"), [_page("P1")], dataformat="invalid")


def test_nested_tree_format_is_independent():
    """Tests that a nested report keeps its own format."""
    inner = ReportTree(_page("Inner", dataformat="json_external"), [_page("P1")])
    outer = ReportTree(_page("Outer"), [inner], dataformat="parquet")
    assert outer.dataformat is StorageFormat.PARQUET
    assert outer.children[0].dataformat is StorageFormat.JSON_EXTERNAL


def test_tree_allows_cover_only():
    """Tests that the direct constructor accepts no children."""
    tree = ReportTree(_page("Only Cover"))
    assert tree.children == ()


def test_tree_rejects_non_nodes():
    """Tests that the cover must be a page and children must be nodes."""
    with pytest.raises(TypeError):
        ReportTree(_page("Cover"), [_page("P1"), "P2"])
    with pytest.raises(TypeError):
        ReportTree([TextBlock("<h1/>")], [_page("P1")])


def test_tree_children_are_read_only():
    """Tests that the children sequence cannot be modified."""
    tree = ReportTree(_page("Cover"), [_page("P1")])
    with pytest.raises(AttributeError):
        tree.children.append(_page("P2"))
    with pytest.raises(AttributeError):
        tree.dataformat = "csv_embedded"


def test_from_pages_builds_navigation_cover():
    """Tests the auto-navigation constructor end to end."""
    page_a = _page("A", notes="notes A")
    tree_b = ReportTree(_page("B", notes="notes B"), [_page("B1")])
    body = [TextBlock("<h1>Welcome</h1>")]
    tree = ReportTree.from_pages(body, [page_a, tree_b], page_header="Overview")

    assert tree.children == (page_a, tree_b)
    assert tree.dataformat is StorageFormat.PARQUET
    assert tree.cover.tab_title == "Home"
    assert tree.cover.page_header == "Overview"
    assert dict(tree.cover.dataframes) == {}

    components = tree.cover.components
    assert components[0] is body[0]
    assert isinstance(components[-1], LinkList)
    assert components[-1] is tree.navigation
    assert tree.navigation.links == [
        ("A", "a.html", "notes A"),
        ("B", "b/b.html", "notes B"),
    ]


def test_from_pages_format_and_titles():
    """Tests that the cover page and report share the chosen format."""
    tree = ReportTree.from_pages(
        [], [_page("P1")], tab_title="Start", notes="Entry", dataformat="csv_external"
    )
    assert tree.dataformat is StorageFormat.CSV_EXTERNAL
    assert tree.cover.dataformat is StorageFormat.CSV_EXTERNAL
    assert tree.tab_title == "Start"
    assert tree.notes == "Entry"


def test_from_pages_rejects_invalid_format():
    """Tests that the auto-navigation constructor validates its format."""
    with pytest.raises(InvalidStorageFormatError):
        ReportTree.from_pages([], [_page("P1")], dataformat="html")


def test_from_pages_rejects_empty_children():
    """Tests that an auto-navigation report needs at least one child."""
    with pytest.raises(EmptyTreeError):
        ReportTree.from_pages([TextBlock("<h1/>")], [])


def test_from_groups_flattens_children_in_group_order():
    """Tests the grouped constructor's children and link groups."""
    p1, p2, p3 = _page("P1"), _page("P2"), _page("P3")
    tree = ReportTree.from_groups([], {"G1": [p1, p2], "G2": [p3]})
    assert tree.children == (p1, p2, p3)
    groups = tree.navigation.groups
    assert list(groups) == ["G1", "G2"]
    assert len(groups["G1"]) == 2
    assert len(groups["G2"]) == 1
    assert len(tree.navigation.links) == 3
    assert tree.cover.components == (tree.navigation,)


def test_from_groups_allows_an_empty_heading():
    """Tests that one empty heading is fine when other groups have nodes."""
    tree = ReportTree.from_groups([], {"Soon": [], "Now": [_page("P1")]})
    assert len(tree.children) == 1
    assert tree.navigation.groups["Soon"] == []


@pytest.mark.parametrize("groups", [{}, {"Empty": []}, {"A": [], "B": []}])
def test_from_groups_rejects_no_nodes(groups):
    """Tests that a grouped report needs at least one node in some group."""
    with pytest.raises(EmptyTreeError):
        ReportTree.from_groups([], groups)


@pytest.mark.parametrize("build", ["pages", "groups"])
def test_navigation_constructors_validate_children_once(build, monkeypatch):
    """Tests that the children are checked a single time per construction."""
    calls = []
    original = tree_module._validate_children

    def counting(children):
        calls.append(children)
        return original(children)

    monkeypatch.setattr(tree_module, "_validate_children", counting)
    pages = [_page("P1"), _page("P2")]
    if build == "pages":
        tree = ReportTree.from_pages([], pages)
    else:
        tree = ReportTree.from_groups([], {"G": pages})
    assert len(calls) == 1
    assert tree.children == tuple(pages)
    assert tree.navigation is not None


def test_from_groups_rejects_non_nodes():
    """Tests that a grouped report refuses values that are not nodes."""
    with pytest.raises(TypeError):
        ReportTree.from_groups([], {"G": [_page("P1"), "P2"]})


def test_empty_tree_error_is_a_value_error():
    """Tests that the empty-tree error can be caught as a ValueError."""
    with pytest.raises(ValueError):
        ReportTree.from_pages([], [])


def test_end_to_end_cover_links(make_chart, make_table):
    """Tests a two-page report built with the auto-navigation constructor."""
    cost = _page(
        "Cost Analysis",
        data={"costs": make_table(3)},
        components=[make_chart("cost_chart", "costs")],
    )
    revenue = _page(
        "Revenue Report",
        data={"revenue": make_table(2)},
        components=[make_chart("rev_chart", "revenue")],
    )
    tree = ReportTree.from_pages([TextBlock("<h1>Welcome</h1>")], [cost, revenue])
    assert [link.url for link in tree.navigation.links] == [
        "cost_analysis.html",
        "revenue_report.html",
    ]
    assert 'href="cost_analysis.html"' in tree.navigation.appearance_html
    assert tree.cover.dependencies() == set()
