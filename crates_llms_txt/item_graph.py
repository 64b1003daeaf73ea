"""Read-only index over a crate's item graph."""

from collections.abc import Mapping
from types import MappingProxyType

from crates_llms_txt.errors import MalformedGraph
from crates_llms_txt.item import Item


class ItemGraph:
    """Maps item ids to items, rooted at the crate's top-level module."""

    def __init__(
        self,
        items: Mapping[str, Item],
        root: str,
        crate_name: str,
        crate_version: str,
    ) -> None:
        """Wrap an already-acquired id -> item mapping."""
        if root not in items:
            msg = f"Root item {root!r} is missing from the item graph"
            raise MalformedGraph(msg)
        self._items = MappingProxyType(dict(items))
        self._root = root
        self.crate_name = crate_name
        self.crate_version = crate_version

    def root(self) -> Item:
        """Return the crate root module."""
        return self._items[self._root]

    def get(self, item_id: str) -> Item | None:
        """Return the item for an id, or None for unresolved references."""
        return self._items.get(item_id)

    def children_of(self, item_id: str) -> tuple[str, ...]:
        """Return the ordered child ids of an item."""
        item = self._items.get(item_id)
        if not item:
            return ()
        return item.children

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
