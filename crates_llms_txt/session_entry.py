"""Data models for the concise and full documentation entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionEntry:
    """One concise index entry (llms.txt line)."""

    title: str
    description: str
    link: str  # rendered page URL


@dataclass(frozen=True)
class FullSessionEntry:
    """The complete documentation text rendered at one page."""

    content: str
    link: str
