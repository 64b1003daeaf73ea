"""Merge policy for full documentation entries."""

from collections.abc import Iterable

from crates_llms_txt.session_entry import FullSessionEntry

CONTENT_SEPARATOR = "\n\n"


def merge_full_sessions(sessions: Iterable[FullSessionEntry]) -> list[FullSessionEntry]:
    """Concatenate the content of entries sharing a link, in traversal order."""
    by_link: dict[str, list[str]] = {}
    for session in sessions:
        by_link.setdefault(session.link, []).append(session.content)
    return [
        FullSessionEntry(content=CONTENT_SEPARATOR.join(parts), link=link)
        for link, parts in by_link.items()
    ]
