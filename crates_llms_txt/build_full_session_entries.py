"""Logic for collecting full documentation text from the traversal."""

from collections.abc import Iterable

from crates_llms_txt.session_entry import FullSessionEntry
from crates_llms_txt.visited_item import VisitedItem


class FullContentBuilder:
    """Accumulates the docs of every item on the page it renders to."""

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self.entries: list[FullSessionEntry] = []

    def add(self, visit: VisitedItem) -> None:
        """Record a first visit; re-export aliases add no content."""
        if not visit.first_visit or not visit.item.has_docs:
            return
        content = visit.item.docs or ""
        self.entries.append(FullSessionEntry(content=content, link=visit.link))


def build_full_session_entries(
    visits: Iterable[VisitedItem],
) -> list[FullSessionEntry]:
    """Build the ungrouped full session list from a visitation stream."""
    builder = FullContentBuilder()
    for visit in visits:
        builder.add(visit)
    return builder.entries
