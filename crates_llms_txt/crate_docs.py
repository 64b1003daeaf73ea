"""Result model handed back by the session derivation engine."""

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from crates_llms_txt.session_entry import FullSessionEntry, SessionEntry


class DocsStatus(str, Enum):
    """Outcome of a traversal that did not fail."""

    COMPLETE = "complete"
    EMPTY_DOCUMENTATION = "empty_documentation"


@dataclass(frozen=True)
class CrateDocs:
    """The concise and full corpora derived from one crate's item graph."""

    crate_name: str
    crate_version: str
    sessions: tuple[SessionEntry, ...] = ()
    full_sessions: tuple[FullSessionEntry, ...] = ()
    status: DocsStatus = DocsStatus.COMPLETE

    @property
    def is_empty(self) -> bool:
        """Check if no public documented item was reachable."""
        return self.status == DocsStatus.EMPTY_DOCUMENTATION

    def to_dict(self) -> dict[str, Any]:
        """Return the cross-runtime interchange shape."""
        return {
            "lib_name": self.crate_name,
            "version": self.crate_version,
            "sessions": [asdict(s) for s in self.sessions],
            "full_sessions": [asdict(s) for s in self.full_sessions],
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON with stable key order."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrateDocs":
        """Parse the interchange shape produced by :meth:`to_dict`."""
        sessions = tuple(
            SessionEntry(
                title=str(s.get("title", "")),
                description=str(s.get("description", "")),
                link=str(s["link"]),
            )
            for s in data.get("sessions") or []
        )
        full_sessions = tuple(
            FullSessionEntry(content=str(s.get("content", "")), link=str(s["link"]))
            for s in data.get("full_sessions") or []
        )
        status = DocsStatus.COMPLETE if sessions else DocsStatus.EMPTY_DOCUMENTATION
        return cls(
            crate_name=str(data.get("lib_name", "")),
            crate_version=str(data.get("version", "")),
            sessions=sessions,
            full_sessions=full_sessions,
            status=status,
        )
