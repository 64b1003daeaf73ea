"""Utility for determining the docs.rs page URL of an item."""

from collections.abc import Sequence
from urllib.parse import quote

from crates_llms_txt.is_module_kind import is_module_kind
from crates_llms_txt.is_page_kind import is_page_kind
from crates_llms_txt.item_kind import PAGE_PREFIXES, ItemKind

DOCS_RS_BASE_URL = "https://docs.rs"


def _segment(name: str) -> str:
    return quote(name, safe="") or "_"


def resolve_link(
    crate_name: str,
    crate_version: str,
    path: Sequence[str],
    kind: ItemKind,
    *,
    base_url: str = DOCS_RS_BASE_URL,
) -> str:
    """Generate the rendered page URL for an item path and kind.

    Modules render to ``<path>/index.html``; page-owning items render to
    ``<parent path>/<prefix>.<name>.html``. Any other kind falls back to the
    page of the module enclosing its path.
    """
    # clap 4.5.39, (clap, Command), struct -> /clap/4.5.39/clap/struct.Command.html
    segments = list(path) or [crate_name]
    root = f"{base_url.rstrip('/')}/{_segment(crate_name)}/{_segment(crate_version)}"

    if is_module_kind(kind):
        module_path = "/".join(_segment(s) for s in segments)
        return f"{root}/{module_path}/index.html"

    if is_page_kind(kind) and len(segments) > 1:
        parent = "/".join(_segment(s) for s in segments[:-1])
        leaf = f"{PAGE_PREFIXES[kind]}.{_segment(segments[-1])}.html"
        return f"{root}/{parent}/{leaf}"

    parent_segments = segments[:-1] or segments
    parent = "/".join(_segment(s) for s in parent_segments)
    return f"{root}/{parent}/index.html"
