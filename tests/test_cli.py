"""Tests for the command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest

from crates_llms_txt.cli import build_parser, main


@pytest.fixture
def json_file(tmp_path: Path, rustdoc_doc: dict[str, Any]) -> Path:
    """The sample rustdoc document written to disk."""
    path = tmp_path / "demo.json"
    path.write_text(json.dumps(rustdoc_doc), encoding="utf-8")
    return path


def test_source_is_required() -> None:
    """Verify one acquisition source must be named."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_sources_are_exclusive() -> None:
    """Verify two acquisition sources are rejected."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--crate", "clap", "--url", "https://x"])


def test_writes_outputs(json_file: Path, tmp_path: Path) -> None:
    """Verify llms.txt and llms-full.txt are written to the output directory."""
    out_dir = tmp_path / "out"

    assert main(["--json-file", str(json_file), "--out-dir", str(out_dir)]) == 0

    index = (out_dir / "llms.txt").read_text(encoding="utf-8")
    assert "- [Widget](https://docs.rs/demo/1.2.3/demo/struct.Widget.html)" in index
    full = (out_dir / "llms-full.txt").read_text(encoding="utf-8")
    assert "Size in pixels." in full


def test_json_output(json_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify --json prints the interchange shape."""
    args = ["--json-file", str(json_file), "--json", "--include-crate-root"]
    assert main(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["lib_name"] == "demo"
    assert data["version"] == "1.2.3"
    assert [s["title"] for s in data["sessions"]] == ["demo", "Widget", "Shape"]


def test_max_description_length(
    json_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify the description limit is applied from the command line."""
    args = ["--json-file", str(json_file), "--json", "--max-description-length", "5"]
    assert main(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["sessions"][1]["description"] == "A wi…"


def test_empty_crate(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify a crate without documented items is reported as a failure."""
    path = tmp_path / "bare.json"
    doc = {
        "root": 0,
        "index": {
            "0": {
                "id": 0,
                "name": "bare",
                "visibility": "public",
                "inner": {"module": {}},
            }
        },
    }
    path.write_text(json.dumps(doc), encoding="utf-8")

    assert main(["--json-file", str(path), "--out-dir", str(tmp_path)]) == 1
    assert "No public documented items" in capsys.readouterr().out
    assert not (tmp_path / "llms.txt").exists()


def test_invalid_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify unreadable input is reported as an error."""
    path = tmp_path / "broken.json"
    path.write_text("nope", encoding="utf-8")

    assert main(["--json-file", str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error:")
