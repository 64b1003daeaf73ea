"""Render crate documentation as llms.txt and llms-full.txt."""

from pathlib import Path
from typing import Any

from crates_llms_txt.crate_docs import CrateDocs
from crates_llms_txt.title_from_link import title_from_link


def render_llms_txt(docs: CrateDocs) -> str:
    """Render the concise index: one bullet per session."""
    parts: list[str] = [
        f"# {docs.crate_name}",
        "",
        f"> API documentation for the `{docs.crate_name}` crate, "
        f"version {docs.crate_version}.",
        "",
        "## Docs",
        "",
    ]
    for s in docs.sessions:
        line = f"- [{s.title}]({s.link})"
        if s.description:
            line += f": {s.description}"
        parts.append(line)
    return "\n".join(parts).rstrip() + "\n"


def render_llms_full_txt(docs: CrateDocs) -> str:
    """Render the full corpus: one section per rendered page."""
    parts: list[str] = [f"# {docs.crate_name} {docs.crate_version}", ""]
    for s in docs.full_sessions:
        parts += [f"## {title_from_link(s.link)}", "", f"Source: {s.link}", ""]
        parts += [s.content.rstrip(), ""]
    return "\n".join(parts).rstrip() + "\n"


def write_outputs(
    docs: CrateDocs,
    out_dir: Path,
    config: dict[str, Any],
) -> tuple[Path, Path]:
    """Write both corpora into out_dir and return their paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    index_file = out_dir / config["output"]["index_file"]
    full_file = out_dir / config["output"]["full_file"]
    index_file.write_text(render_llms_txt(docs), encoding="utf-8")
    full_file.write_text(render_llms_full_txt(docs), encoding="utf-8")
    return index_file, full_file
