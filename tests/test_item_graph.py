"""Tests for the item graph model."""

import pytest

from crates_llms_txt.errors import MalformedGraph
from crates_llms_txt.item import Item
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.visibility import Visibility


def make_items() -> dict[str, Item]:
    """Create a root module with one function and one dangling child id."""
    return {
        "0": Item(
            id="0", path=("m",), kind=ItemKind.MODULE, children=("1", "missing")
        ),
        "1": Item(id="1", path=("m", "f"), kind=ItemKind.FUNCTION, docs="Does X."),
    }


def test_root_and_lookup() -> None:
    """Verify root access and id lookups."""
    graph = ItemGraph(make_items(), "0", "m", "1.0.0")
    assert graph.root().id == "0"
    assert graph.get("1").name == "f"
    assert graph.get("missing") is None
    assert len(graph) == 2
    assert "1" in graph


def test_children_of() -> None:
    """Verify children keep their native order, including unresolved ids."""
    graph = ItemGraph(make_items(), "0", "m", "1.0.0")
    assert graph.children_of("0") == ("1", "missing")
    assert graph.children_of("1") == ()
    assert graph.children_of("nope") == ()


def test_missing_root_is_malformed() -> None:
    """Verify that a root id absent from the mapping is fatal."""
    with pytest.raises(MalformedGraph):
        ItemGraph(make_items(), "absent", "m", "1.0.0")


def test_only_missing_root_is_malformed() -> None:
    """Verify that an unnamed crate is still a valid graph."""
    graph = ItemGraph(make_items(), "0", "", "1.0.0")
    assert graph.crate_name == ""
    assert graph.root().id == "0"


def test_graph_is_not_affected_by_source_mutation() -> None:
    """Verify the graph copies the mapping it is given."""
    items = make_items()
    graph = ItemGraph(items, "0", "m", "1.0.0")
    items.pop("1")
    assert graph.get("1") is not None


def test_item_properties() -> None:
    """Verify derived item attributes."""
    item = Item(id="x", path=(), kind=ItemKind.STRUCT, docs="   ")
    assert item.name == "x"
    assert not item.has_docs
    assert item.is_public
    private = Item(
        id="y", path=("m", "y"), kind=ItemKind.STRUCT, visibility=Visibility.RESTRICTED
    )
    assert not private.is_public
