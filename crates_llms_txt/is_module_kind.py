"""Predicate for checking if an item is a module."""

from crates_llms_txt.item_kind import ItemKind


def is_module_kind(kind: ItemKind) -> bool:
    """Check if the kind represents a module (rendered as an index page)."""
    return kind == ItemKind.MODULE
