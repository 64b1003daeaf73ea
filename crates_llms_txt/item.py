"""Data model for representing rustdoc items."""

from dataclasses import dataclass

from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.visibility import Visibility


@dataclass(frozen=True)
class Item:
    """Represents a documented item (module, struct, function, etc.)."""

    id: str
    path: tuple[str, ...]  # e.g. ("clap", "Command", "new")
    kind: ItemKind
    visibility: Visibility = Visibility.PUBLIC
    docs: str | None = None
    children: tuple[str, ...] = ()
    target: str | None = None  # re-exports only

    @property
    def name(self) -> str:
        """Return the leaf path segment."""
        return self.path[-1] if self.path else self.id

    @property
    def is_public(self) -> bool:
        """Check if the item may appear in the generated corpora."""
        return self.visibility == Visibility.PUBLIC

    @property
    def has_docs(self) -> bool:
        """Check if the item carries non-blank documentation."""
        return bool(self.docs and self.docs.strip())
