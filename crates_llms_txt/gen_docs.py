"""Generate rustdoc JSON for a local crate with cargo.

Generation writes into the manifest's shared ``target/`` directory, so two
runs against the same manifest path must not overlap. In-process callers can
hold ``manifest_lock(path)`` around ``gen_docs``; separate processes need
their own coordination.
"""

import json
import logging
import os
import subprocess
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from crates_llms_txt.errors import ToolchainError
from crates_llms_txt.item_graph import ItemGraph
from crates_llms_txt.load_rustdoc_json import load_rustdoc_file

logger = logging.getLogger(__name__)

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def manifest_lock(manifest_path: Path | str) -> threading.Lock:
    """Return the process-wide lock guarding one manifest's build directory."""
    key = Path(manifest_path).resolve()
    with _locks_guard:
        return _locks.setdefault(key, threading.Lock())


def run_command(
    cmd_list: Sequence[str],
    *,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a cargo command, raising ToolchainError if it fails."""
    cmd_str = " ".join(cmd_list)
    logger.info("Running: %s", cmd_str)
    try:
        return subprocess.run(
            cmd_list, check=True, capture_output=True, text=True, env=env
        )
    except FileNotFoundError as e:
        msg = f"Cannot run {cmd_list[0]}: {e}"
        raise ToolchainError(msg) from e
    except subprocess.CalledProcessError as e:
        msg = f"Error executing command: {cmd_str}\n{e.stderr or ''}".rstrip()
        raise ToolchainError(msg) from e


def rustdoc_command(
    manifest_path: Path,
    *,
    toolchain: str | None = None,
    all_features: bool = False,
    no_default_features: bool = False,
    features: Sequence[str] | None = None,
) -> list[str]:
    """Build the ``cargo rustdoc`` invocation emitting JSON output."""
    cmd = ["cargo"]
    if toolchain:
        cmd.append(f"+{toolchain}")
    cmd += ["rustdoc", "--lib", "--quiet", "--manifest-path", str(manifest_path)]
    if all_features:
        cmd.append("--all-features")
    else:
        if no_default_features:
            cmd.append("--no-default-features")
        if features:
            cmd += ["--features", ",".join(features)]
    cmd += ["--", "-Z", "unstable-options", "--output-format", "json"]
    return cmd


def read_metadata(manifest_path: Path, toolchain: str | None = None) -> dict[str, Any]:
    """Return ``cargo metadata`` for the manifest's own package."""
    cmd = ["cargo"]
    if toolchain:
        cmd.append(f"+{toolchain}")
    cmd += [
        "metadata",
        "--format-version",
        "1",
        "--no-deps",
        "--manifest-path",
        str(manifest_path),
    ]
    result = run_command(cmd)
    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        msg = f"cargo metadata returned invalid JSON: {e}"
        raise ToolchainError(msg) from e


def lib_target_name(metadata: dict[str, Any], manifest_path: Path) -> str:
    """Return the underscored library target name of the manifest's package."""
    wanted = manifest_path.resolve()
    for package in metadata.get("packages") or []:
        if Path(package.get("manifest_path", "")).resolve() != wanted:
            continue
        for target in package.get("targets") or []:
            kinds = set(target.get("kind") or [])
            if kinds & {"lib", "rlib", "proc-macro"}:
                return str(target["name"]).replace("-", "_")
    msg = f"No library target found for {manifest_path}"
    raise ToolchainError(msg)


def gen_docs(
    manifest_path: Path | str,
    *,
    toolchain: str | None = None,
    all_features: bool = False,
    no_default_features: bool = False,
    features: Sequence[str] | None = None,
) -> ItemGraph:
    """Run rustdoc on a local crate and load the resulting JSON.

    Without a toolchain the default cargo toolchain is used; stable
    toolchains are unlocked for the unstable JSON output via RUSTC_BOOTSTRAP.
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        msg = f"Manifest not found: {manifest_path}"
        raise ToolchainError(msg)

    metadata = read_metadata(manifest_path, toolchain)
    lib_name = lib_target_name(metadata, manifest_path)

    env = dict(os.environ)
    if toolchain != "nightly":
        env["RUSTC_BOOTSTRAP"] = "1"
    cmd = rustdoc_command(
        manifest_path,
        toolchain=toolchain,
        all_features=all_features,
        no_default_features=no_default_features,
        features=features,
    )
    run_command(cmd, env=env)

    target_dir = metadata.get("target_directory")
    if not target_dir:
        msg = "cargo metadata did not report a target directory"
        raise ToolchainError(msg)
    json_path = Path(target_dir) / "doc" / f"{lib_name}.json"
    if not json_path.is_file():
        msg = f"rustdoc did not produce {json_path}"
        raise ToolchainError(msg)
    # The crate is named after the generated file, e.g. target/doc/clap.json
    return load_rustdoc_file(json_path, crate_name=json_path.stem)
