"""Predicate for checking if an item owns a rendered page."""

from crates_llms_txt.item_kind import PAGE_PREFIXES, ItemKind


def is_page_kind(kind: ItemKind) -> bool:
    """Check if the kind renders onto its own page (struct, fn, macro, etc.)."""
    return kind in PAGE_PREFIXES
