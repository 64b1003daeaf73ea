"""Logic for converting rustdoc JSON output into an item graph."""

import json
import logging
from collections import deque
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from crates_llms_txt.errors import GraphFormatError
from crates_llms_txt.item import Item
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.visibility import Visibility

logger = logging.getLogger(__name__)

DEFAULT_CRATE_NAME = "unknown"
DEFAULT_CRATE_VERSION = "latest"

# rustdoc `inner` tags, including names used by older format versions.
INNER_KINDS: dict[str, ItemKind] = {
    "module": ItemKind.MODULE,
    "struct": ItemKind.STRUCT,
    "enum": ItemKind.ENUM,
    "union": ItemKind.UNION,
    "trait": ItemKind.TRAIT,
    "trait_alias": ItemKind.TRAIT_ALIAS,
    "function": ItemKind.FUNCTION,
    "macro": ItemKind.MACRO,
    "proc_macro": ItemKind.DERIVE_MACRO,
    "type_alias": ItemKind.TYPE_ALIAS,
    "typedef": ItemKind.TYPE_ALIAS,
    "constant": ItemKind.CONSTANT,
    "static": ItemKind.STATIC,
    "struct_field": ItemKind.STRUCT_FIELD,
    "variant": ItemKind.VARIANT,
    "assoc_const": ItemKind.ASSOC_CONST,
    "assoc_type": ItemKind.ASSOC_TYPE,
    "impl": ItemKind.IMPL,
    "use": ItemKind.RE_EXPORT,
    "import": ItemKind.RE_EXPORT,
    "primitive": ItemKind.PRIMITIVE,
    "extern_crate": ItemKind.EXTERN_CRATE,
}

# `inner.proc_macro.kind`; function-like macros share the `macro.` pages.
PROC_MACRO_KINDS: dict[str, ItemKind] = {
    "derive": ItemKind.DERIVE_MACRO,
    "attr": ItemKind.ATTRIBUTE_MACRO,
    "bang": ItemKind.MACRO,
}


def load_rustdoc_file(path: Path, *, crate_name: str | None = None) -> ItemGraph:
    """Load a rustdoc JSON file from disk."""
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot read rustdoc JSON from {path}: {e}"
        raise GraphFormatError(msg) from e
    return load_rustdoc_json(doc, crate_name=crate_name or path.stem)


def load_rustdoc_json(
    doc: Any,
    *,
    crate_name: str | None = None,
    crate_version: str | None = None,
) -> ItemGraph:
    """Build an ItemGraph from a parsed rustdoc JSON document."""
    if not isinstance(doc, dict) or "root" not in doc:
        msg = "Document has no 'root' field; not rustdoc JSON output"
        raise GraphFormatError(msg)
    index = doc.get("index")
    if not isinstance(index, dict):
        msg = "Document has no 'index' mapping; not rustdoc JSON output"
        raise GraphFormatError(msg)

    raw_items = dict(iter_index_items(index))
    root = str(doc["root"])
    paths = _summary_paths(doc.get("paths") or {})
    parents = _assign_parents(raw_items, root)
    derived_paths = _derive_paths(raw_items, root, parents, paths)

    items: dict[str, Item] = {}
    for item_id, raw in raw_items.items():
        parent_raw = raw_items.get(parents.get(item_id, ""))
        kind = _item_kind(raw, parent_raw)
        items[item_id] = Item(
            id=item_id,
            path=derived_paths.get(item_id) or (_item_name(raw) or item_id,),
            kind=kind,
            visibility=_visibility(raw.get("visibility"), kind, parent_raw),
            docs=raw.get("docs"),
            children=tuple(_children(raw, raw_items)),
            target=_reexport_target(raw) if kind == ItemKind.RE_EXPORT else None,
        )

    root_raw = raw_items.get(root) or {}
    name = crate_name or str(root_raw.get("name") or DEFAULT_CRATE_NAME)
    version = crate_version or doc.get("crate_version") or DEFAULT_CRATE_VERSION
    logger.debug("Loaded %d items for %s %s", len(items), name, version)
    return ItemGraph(items, root, name, str(version))


def iter_index_items(index: dict[str, Any]) -> Iterable[tuple[str, dict[str, Any]]]:
    """Iterate over the well-formed entries of a rustdoc index."""
    for key, raw in index.items():
        if isinstance(raw, dict) and isinstance(raw.get("inner"), dict):
            yield str(raw.get("id", key)), raw


def _inner_tag(raw: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    inner = raw.get("inner") or {}
    for tag, payload in inner.items():
        return tag, payload if isinstance(payload, dict) else {}
    return "", {}


def _item_kind(raw: dict[str, Any], parent: dict[str, Any] | None) -> ItemKind:
    tag, payload = _inner_tag(raw)
    if tag == "proc_macro":
        return PROC_MACRO_KINDS.get(str(payload.get("kind")), ItemKind.DERIVE_MACRO)
    kind = INNER_KINDS.get(tag, ItemKind.UNKNOWN)
    if kind == ItemKind.FUNCTION and parent is not None:
        parent_tag, _ = _inner_tag(parent)
        if parent_tag in {"impl", "trait"}:
            return ItemKind.METHOD
    return kind


def _is_trait_impl(raw: dict[str, Any] | None) -> bool:
    if raw is None:
        return False
    tag, payload = _inner_tag(raw)
    return tag == "impl" and payload.get("trait") is not None


def _is_hidden_impl(raw: dict[str, Any]) -> bool:
    tag, payload = _inner_tag(raw)
    if tag != "impl":
        return False
    return bool(payload.get("is_synthetic")) or payload.get("blanket_impl") is not None


def _visibility(
    value: Any,
    kind: ItemKind,
    parent: dict[str, Any] | None,
) -> Visibility:
    if value == "public":
        return Visibility.PUBLIC
    if value == "default":
        # Impl blocks, enum variants and trait members carry no own modifier
        if kind in {ItemKind.IMPL, ItemKind.VARIANT}:
            return Visibility.PUBLIC
        if parent is not None and (
            _inner_tag(parent)[0] == "trait" or _is_trait_impl(parent)
        ):
            return Visibility.PUBLIC
    return Visibility.RESTRICTED


def _raw_children(raw: dict[str, Any]) -> list[Any]:
    tag, payload = _inner_tag(raw)
    children: list[Any] = []
    if tag in {"module", "trait", "impl"}:
        children.extend(payload.get("items") or [])
    if tag == "enum":
        children.extend(payload.get("variants") or [])
    if tag in {"struct", "union"}:
        children.extend(_struct_fields(payload))
    if tag in {"struct", "union", "enum", "primitive"}:
        children.extend(payload.get("impls") or [])
    return [c for c in children if c is not None]


def _struct_fields(payload: dict[str, Any]) -> list[Any]:
    if "fields" in payload:
        return list(payload.get("fields") or [])
    kind = payload.get("kind")
    if isinstance(kind, dict):
        if "plain" in kind:
            return list((kind["plain"] or {}).get("fields") or [])
        if "tuple" in kind:
            return list(kind["tuple"] or [])
    return []


def _children(raw: dict[str, Any], raw_items: dict[str, dict[str, Any]]) -> list[str]:
    result = []
    for child in _raw_children(raw):
        child_id = str(child)
        child_raw = raw_items.get(child_id)
        if child_raw is not None and _is_hidden_impl(child_raw):
            continue
        result.append(child_id)
    return result


def _item_name(raw: dict[str, Any]) -> str | None:
    name = raw.get("name")
    if name:
        return str(name)
    tag, payload = _inner_tag(raw)
    if tag in {"use", "import"} and payload.get("name"):
        # Re-exports are named by their alias, e.g. `pub use a::B as C`
        return str(payload["name"])
    return None


def _reexport_target(raw: dict[str, Any]) -> str | None:
    _, payload = _inner_tag(raw)
    target = payload.get("id")
    return None if target is None else str(target)


def _summary_paths(paths: dict[str, Any]) -> dict[str, tuple[str, ...]]:
    """Collect canonical paths of items local to the documented crate."""
    result: dict[str, tuple[str, ...]] = {}
    for key, summary in paths.items():
        if not isinstance(summary, dict) or summary.get("crate_id") not in (0, None):
            continue
        segments = summary.get("path") or []
        if segments:
            result[str(key)] = tuple(str(s) for s in segments)
    return result


def _assign_parents(raw_items: dict[str, dict[str, Any]], root: str) -> dict[str, str]:
    """Breadth-first from the root; the first parent to reach an item wins."""
    parents: dict[str, str] = {}
    queue = deque([root])
    seen = {root}
    while queue:
        current = queue.popleft()
        raw = raw_items.get(current)
        if raw is None:
            continue
        for child in _raw_children(raw):
            child_id = str(child)
            if child_id in seen:
                continue
            seen.add(child_id)
            parents[child_id] = current
            queue.append(child_id)
    return parents


def _derive_paths(
    raw_items: dict[str, dict[str, Any]],
    root: str,
    parents: dict[str, str],
    paths: dict[str, tuple[str, ...]],
) -> dict[str, tuple[str, ...]]:
    derived: dict[str, tuple[str, ...]] = {}

    def path_of(item_id: str) -> tuple[str, ...]:
        if item_id in derived:
            return derived[item_id]
        name = _item_name(raw_items.get(item_id) or {})
        if item_id in paths:
            result = paths[item_id]
        elif item_id == root or item_id not in parents:
            result = (str(name or item_id),)
        else:
            parent_path = path_of(parents[item_id])
            # Impl blocks are anonymous and share their owner's path
            result = parent_path + (str(name),) if name else parent_path
        derived[item_id] = result
        return result

    # Parents are assigned breadth-first, so ancestors resolve before children
    for item_id in [root, *parents]:
        path_of(item_id)
    return derived
