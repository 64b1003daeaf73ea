"""Data model for one step of the graph traversal."""

from dataclasses import dataclass

from crates_llms_txt.item import Item


@dataclass(frozen=True)
class VisitedItem:
    """An item reached by the graph walker together with its rendered page."""

    item: Item
    link: str
    title: str  # leaf name of the path the item was reached through
    first_visit: bool = True  # False when reached again through a re-export
