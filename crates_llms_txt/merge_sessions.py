"""Dedup policy for concise index entries."""

from collections.abc import Iterable
from dataclasses import replace

from crates_llms_txt.session_entry import SessionEntry
from crates_llms_txt.title_from_link import title_from_link


def merge_sessions(sessions: Iterable[SessionEntry]) -> list[SessionEntry]:
    """Keep the last entry per link and retitle it from the link.

    Output follows the order in which each link was first seen.
    """
    by_link: dict[str, SessionEntry] = {}
    for session in sessions:
        # Reassigning an existing key keeps its original position
        by_link[session.link] = session
    return [replace(s, title=title_from_link(link)) for link, s in by_link.items()]
