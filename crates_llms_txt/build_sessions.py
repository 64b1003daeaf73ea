"""Derive the concise index and full corpus from an item graph."""

import logging

from crates_llms_txt.build_full_session_entries import FullContentBuilder
from crates_llms_txt.build_session_entries import SessionBuilder
from crates_llms_txt.crate_docs import CrateDocs, DocsStatus
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.merge_full_sessions import merge_full_sessions
from crates_llms_txt.merge_sessions import merge_sessions
from crates_llms_txt.resolve_link import DOCS_RS_BASE_URL, resolve_link
from crates_llms_txt.session_entry import SessionEntry
from crates_llms_txt.summarize_docs import DEFAULT_MAX_DESCRIPTION_LENGTH
from crates_llms_txt.walk_graph import walk_graph

logger = logging.getLogger(__name__)


def build_sessions(
    graph: ItemGraph,
    *,
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    base_url: str = DOCS_RS_BASE_URL,
    include_crate_root: bool = False,
) -> CrateDocs:
    """Traverse the graph once and return the merged session lists.

    Raises MalformedGraph only for structurally invalid input. A crate with
    no reachable public documentation yields an empty result whose status is
    ``DocsStatus.EMPTY_DOCUMENTATION``.
    """
    sessions = SessionBuilder(max_description_length)
    full_sessions = FullContentBuilder()

    if include_crate_root:
        root = graph.root()
        root_link = resolve_link(
            graph.crate_name,
            graph.crate_version,
            root.path,
            root.kind,
            base_url=base_url,
        )
        sessions.entries.append(
            SessionEntry(title=graph.crate_name, description="", link=root_link)
        )

    documented = 0
    for visit in walk_graph(graph, base_url=base_url):
        sessions.add(visit)
        full_sessions.add(visit)
        documented += 1

    merged_sessions = tuple(merge_sessions(sessions.entries))
    merged_full = tuple(merge_full_sessions(full_sessions.entries))

    if documented == 0:
        logger.warning(
            "No public documented items reachable in %s %s",
            graph.crate_name,
            graph.crate_version,
        )
        return CrateDocs(
            crate_name=graph.crate_name,
            crate_version=graph.crate_version,
            status=DocsStatus.EMPTY_DOCUMENTATION,
        )

    logger.info(
        "Built %d sessions and %d full sessions for %s %s",
        len(merged_sessions),
        len(merged_full),
        graph.crate_name,
        graph.crate_version,
    )
    return CrateDocs(
        crate_name=graph.crate_name,
        crate_version=graph.crate_version,
        sessions=merged_sessions,
        full_sessions=merged_full,
        status=DocsStatus.COMPLETE,
    )
