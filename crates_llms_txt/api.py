"""Public entry points combining acquisition with session derivation.

``generate_*`` functions raise CratesLlmsError subclasses. The
``get_llms_config*`` functions collapse every failure into ``None`` for
callers that only distinguish "result" from "no result".
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from crates_llms_txt.build_sessions import build_sessions
from crates_llms_txt.crate_docs import CrateDocs
from crates_llms_txt.errors import CratesLlmsError
from crates_llms_txt.fetch_docs import fetch_docs, fetch_docs_by_url
from crates_llms_txt.gen_docs import gen_docs
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.load_config import load_config
from crates_llms_txt.load_rustdoc_json import load_rustdoc_file

logger = logging.getLogger(__name__)


def _build(graph: ItemGraph, config: dict[str, Any]) -> CrateDocs:
    return build_sessions(
        graph,
        max_description_length=config["sessions"]["max_description_length"],
        base_url=config["docs"]["base_url"],
        include_crate_root=config["sessions"]["include_crate_root"],
    )


def generate_from_online(
    crate_name: str,
    version: str | None = None,
    config: dict[str, Any] | None = None,
) -> CrateDocs:
    """Build sessions for a crate published on docs.rs."""
    config = config or load_config()
    graph = fetch_docs(
        crate_name,
        version,
        crate_api_url=config["docs"]["crate_api_url"],
        timeout=config["http"]["timeout"],
    )
    return _build(graph, config)


def generate_from_url(url: str, config: dict[str, Any] | None = None) -> CrateDocs:
    """Build sessions from a rustdoc JSON document at a URL."""
    config = config or load_config()
    return _build(fetch_docs_by_url(url, timeout=config["http"]["timeout"]), config)


def generate_from_local(
    manifest_path: Path | str,
    *,
    toolchain: str | None = None,
    all_features: bool = False,
    no_default_features: bool = False,
    features: Sequence[str] | None = None,
    config: dict[str, Any] | None = None,
) -> CrateDocs:
    """Build sessions for a local crate by running rustdoc on it."""
    config = config or load_config()
    graph = gen_docs(
        manifest_path,
        toolchain=toolchain,
        all_features=all_features,
        no_default_features=no_default_features,
        features=features,
    )
    return _build(graph, config)


def generate_from_file(
    json_path: Path | str,
    config: dict[str, Any] | None = None,
) -> CrateDocs:
    """Build sessions from a rustdoc JSON file already on disk."""
    config = config or load_config()
    return _build(load_rustdoc_file(Path(json_path)), config)


def get_llms_config_online(
    crate_name: str,
    version: str | None = None,
) -> CrateDocs | None:
    """Like generate_from_online, returning None on any failure."""
    try:
        return generate_from_online(crate_name, version)
    except CratesLlmsError:
        logger.exception("Failed to build docs for %s", crate_name)
        return None


def get_llms_config_by_url(url: str) -> CrateDocs | None:
    """Like generate_from_url, returning None on any failure."""
    try:
        return generate_from_url(url)
    except CratesLlmsError:
        logger.exception("Failed to build docs from %s", url)
        return None


def get_llms_config_local(
    manifest_path: Path | str,
    *,
    toolchain: str | None = None,
    all_features: bool = False,
    no_default_features: bool = False,
    features: Sequence[str] | None = None,
) -> CrateDocs | None:
    """Like generate_from_local, returning None on any failure."""
    try:
        return generate_from_local(
            manifest_path,
            toolchain=toolchain,
            all_features=all_features,
            no_default_features=no_default_features,
            features=features,
        )
    except CratesLlmsError:
        logger.exception("Failed to build docs for %s", manifest_path)
        return None
