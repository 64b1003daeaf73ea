"""Logic for collecting concise index entries from the traversal."""

from collections.abc import Iterable

from crates_llms_txt.session_entry import SessionEntry
from crates_llms_txt.summarize_docs import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    summarize_docs,
)
from crates_llms_txt.visited_item import VisitedItem


class SessionBuilder:
    """Accumulates one SessionEntry per visited documented item."""

    def __init__(
        self,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ) -> None:
        """Initialize an empty builder."""
        self.max_description_length = max_description_length
        self.entries: list[SessionEntry] = []

    def add(self, visit: VisitedItem) -> None:
        """Record a visit; aliases are recorded too, dedup happens later."""
        if not visit.item.has_docs:
            return
        description = summarize_docs(visit.item.docs, self.max_description_length)
        self.entries.append(
            SessionEntry(title=visit.title, description=description, link=visit.link)
        )


def build_session_entries(
    visits: Iterable[VisitedItem],
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
) -> list[SessionEntry]:
    """Build the undeduplicated session list from a visitation stream."""
    builder = SessionBuilder(max_description_length)
    for visit in visits:
        builder.add(visit)
    return builder.entries
