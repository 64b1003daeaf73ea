"""Depth-first traversal of an item graph from the crate root."""

import logging
from collections.abc import Iterator

from crates_llms_txt.is_member_kind import is_member_kind
from crates_llms_txt.item import Item
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.resolve_link import DOCS_RS_BASE_URL, resolve_link
from crates_llms_txt.visited_item import VisitedItem

logger = logging.getLogger(__name__)


def walk_graph(
    graph: ItemGraph,
    *,
    base_url: str = DOCS_RS_BASE_URL,
) -> Iterator[VisitedItem]:
    """Yield every reachable public documented item in native child order.

    Private items are skipped together with everything below them. A
    re-export yields its target; when the target was already visited the
    visit is flagged ``first_visit=False`` so that only an index entry is
    produced for the alias. Unresolved ids and re-export chains that lead
    back to themselves are skipped silently.
    """
    visited: dict[str, str] = {}  # item id -> resolved link
    following: set[str] = set()  # re-export ids on the current chain
    root = graph.root()
    yield from _visit(graph, root.id, None, None, visited, following, base_url)


def _visit(
    graph: ItemGraph,
    item_id: str,
    page_link: str | None,
    alias: str | None,
    visited: dict[str, str],
    following: set[str],
    base_url: str,
) -> Iterator[VisitedItem]:
    item = graph.get(item_id)
    if item is None:
        logger.debug("Skipping unresolved item id %s", item_id)
        return
    if not item.is_public:
        return

    if item.kind == ItemKind.RE_EXPORT:
        if item.target is None:
            return
        if item.id in following:
            logger.debug("Skipping re-export cycle through %s", item.id)
            return
        following.add(item.id)
        # The target renders on its own canonical page, not under the alias.
        yield from _visit(
            graph, item.target, None, alias or item.name, visited, following, base_url
        )
        following.discard(item.id)
        return

    title = alias or item.name
    if item.id in visited:
        if item.has_docs:
            yield VisitedItem(item, visited[item.id], title, first_visit=False)
        return

    link = _link_for(graph, item, page_link, base_url)
    visited[item.id] = link

    if not item.has_docs and not item.children:
        return
    if item.has_docs:
        yield VisitedItem(item, link, title)

    for child_id in item.children:
        yield from _visit(graph, child_id, link, None, visited, following, base_url)


def _link_for(
    graph: ItemGraph,
    item: Item,
    page_link: str | None,
    base_url: str,
) -> str:
    """Members render on the page of their owner; everything else on its own."""
    if is_member_kind(item.kind) and page_link is not None:
        return page_link
    return resolve_link(
        graph.crate_name,
        graph.crate_version,
        item.path,
        item.kind,
        base_url=base_url,
    )
