"""Turn rustdoc JSON into llms.txt corpora."""

from crates_llms_txt.api import (
    generate_from_file,
    generate_from_local,
    generate_from_online,
    generate_from_url,
    get_llms_config_by_url,
    get_llms_config_local,
    get_llms_config_online,
)
from crates_llms_txt.build_sessions import build_sessions
from crates_llms_txt.crate_docs import CrateDocs, DocsStatus
from crates_llms_txt.errors import (
    AcquisitionError,
    CoreError,
    CratesLlmsError,
    FetchError,
    GraphFormatError,
    MalformedGraph,
    ToolchainError,
)
from crates_llms_txt.item import Item
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.session_entry import FullSessionEntry, SessionEntry
from crates_llms_txt.visibility import Visibility

__all__ = [
    "AcquisitionError",
    "CoreError",
    "CrateDocs",
    "CratesLlmsError",
    "DocsStatus",
    "FetchError",
    "FullSessionEntry",
    "GraphFormatError",
    "Item",
    "ItemGraph",
    "ItemKind",
    "MalformedGraph",
    "SessionEntry",
    "ToolchainError",
    "Visibility",
    "build_sessions",
    "generate_from_file",
    "generate_from_local",
    "generate_from_online",
    "generate_from_url",
    "get_llms_config_by_url",
    "get_llms_config_local",
    "get_llms_config_online",
]
