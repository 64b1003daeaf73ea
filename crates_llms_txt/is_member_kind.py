"""Predicate for checking if an item is a member."""

from crates_llms_txt.item_kind import ItemKind


def is_member_kind(kind: ItemKind) -> bool:
    """Check if the kind represents a member (method, field, variant, etc.)."""
    return kind in {
        ItemKind.METHOD,
        ItemKind.STRUCT_FIELD,
        ItemKind.VARIANT,
        ItemKind.ASSOC_CONST,
        ItemKind.ASSOC_TYPE,
        ItemKind.IMPL,
    }
