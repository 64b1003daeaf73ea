"""Tests for the CrateDocs result model."""

import json

from crates_llms_txt.crate_docs import CrateDocs, DocsStatus
from crates_llms_txt.session_entry import FullSessionEntry, SessionEntry


def test_to_dict_shape() -> None:
    """Verify the interchange keys and entry fields."""
    docs = CrateDocs(
        "demo",
        "1.0.0",
        sessions=(SessionEntry("demo", "Crate.", "https://x/demo/index.html"),),
        full_sessions=(FullSessionEntry("Crate.", "https://x/demo/index.html"),),
    )
    assert docs.to_dict() == {
        "lib_name": "demo",
        "version": "1.0.0",
        "sessions": [
            {
                "title": "demo",
                "description": "Crate.",
                "link": "https://x/demo/index.html",
            }
        ],
        "full_sessions": [
            {"content": "Crate.", "link": "https://x/demo/index.html"}
        ],
    }
    assert CrateDocs.from_dict(json.loads(docs.to_json())) == docs


def test_from_dict_without_sessions_is_empty() -> None:
    """Verify a payload with no sessions reads back as empty documentation."""
    docs = CrateDocs.from_dict({"lib_name": "demo", "version": "1.0.0"})
    assert docs.status == DocsStatus.EMPTY_DOCUMENTATION
    assert docs.is_empty


def test_to_json_keeps_unicode() -> None:
    """Verify non-ASCII text is emitted as is."""
    docs = CrateDocs(
        "demo",
        "1.0.0",
        sessions=(SessionEntry("demo", "Größe…", "https://x/demo/index.html"),),
    )
    assert "Größe…" in docs.to_json()
