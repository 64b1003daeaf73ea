"""Shared fixtures for the test suite."""

import copy
from typing import Any

import pytest

RUSTDOC_DOC: dict[str, Any] = {
    "root": 0,
    "crate_version": "1.2.3",
    "includes_private": False,
    "format_version": 39,
    "index": {
        "0": {
            "id": 0,
            "crate_id": 0,
            "name": "demo",
            "visibility": "public",
            "docs": "Demo crate.",
            "inner": {"module": {"is_crate": True, "items": [1, 2, 5, 7, 8]}},
        },
        "1": {
            "id": 1,
            "crate_id": 0,
            "name": "Widget",
            "visibility": "public",
            "docs": "A widget.",
            "inner": {
                "struct": {
                    "kind": {"plain": {"fields": [3], "has_stripped_fields": False}},
                    "impls": [4, 9],
                }
            },
        },
        "2": {
            "id": 2,
            "crate_id": 0,
            "name": "helper",
            "visibility": "crate",
            "docs": "Internal.",
            "inner": {"function": {}},
        },
        "3": {
            "id": 3,
            "crate_id": 0,
            "name": "size",
            "visibility": "public",
            "docs": "Size in pixels.",
            "inner": {"struct_field": {"primitive": "u32"}},
        },
        "4": {
            "id": 4,
            "crate_id": 0,
            "name": None,
            "visibility": "default",
            "docs": None,
            "inner": {
                "impl": {
                    "trait": None,
                    "items": [6],
                    "is_synthetic": False,
                    "blanket_impl": None,
                }
            },
        },
        "5": {
            "id": 5,
            "crate_id": 0,
            "name": None,
            "visibility": "public",
            "docs": None,
            "inner": {
                "use": {
                    "source": "self::Widget",
                    "name": "Gadget",
                    "id": 1,
                    "is_glob": False,
                }
            },
        },
        "6": {
            "id": 6,
            "crate_id": 0,
            "name": "new",
            "visibility": "public",
            "docs": "Creates a widget.",
            "inner": {"function": {}},
        },
        "7": {
            "id": 7,
            "crate_id": 0,
            "name": "Shape",
            "visibility": "public",
            "docs": "A shape.",
            "inner": {"enum": {"variants": [10], "impls": []}},
        },
        "8": {
            "id": 8,
            "crate_id": 0,
            "name": None,
            "visibility": "public",
            "docs": None,
            "inner": {
                "use": {
                    "source": "serde::Serialize",
                    "name": "Serialize",
                    "id": None,
                    "is_glob": False,
                }
            },
        },
        "9": {
            "id": 9,
            "crate_id": 0,
            "name": None,
            "visibility": "default",
            "docs": None,
            "inner": {
                "impl": {
                    "trait": {"path": "Send"},
                    "items": [],
                    "is_synthetic": True,
                    "blanket_impl": None,
                }
            },
        },
        "10": {
            "id": 10,
            "crate_id": 0,
            "name": "Circle",
            "visibility": "default",
            "docs": "Round.",
            "inner": {"variant": {"kind": "plain"}},
        },
    },
    "paths": {
        "0": {"crate_id": 0, "path": ["demo"], "kind": "module"},
        "1": {"crate_id": 0, "path": ["demo", "Widget"], "kind": "struct"},
        "7": {"crate_id": 0, "path": ["demo", "Shape"], "kind": "enum"},
        "99": {"crate_id": 1, "path": ["serde", "Serialize"], "kind": "trait"},
    },
}


@pytest.fixture
def rustdoc_doc() -> dict[str, Any]:
    """A small rustdoc JSON document for a crate named ``demo``."""
    return copy.deepcopy(RUSTDOC_DOC)
