"""Orchestration logic for generating llms.txt files for a crate."""

import argparse
from pathlib import Path
from typing import Any

from crates_llms_txt.api import (
    generate_from_file,
    generate_from_local,
    generate_from_online,
    generate_from_url,
)
from crates_llms_txt.crate_docs import CrateDocs
from crates_llms_txt.errors import CratesLlmsError
from crates_llms_txt.load_config import load_config
from crates_llms_txt.render_llms_txt import write_outputs


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    config = _init_config(args)

    try:
        docs = _acquire(args, config)
    except CratesLlmsError as e:
        print(f"Error: {e}")
        return 1

    if docs.is_empty:
        print(f"No public documented items found in {docs.crate_name}.")
        return 1

    if args.json:
        print(docs.to_json(indent=2))
        return 0

    index_file, full_file = write_outputs(docs, Path(args.out_dir), config)
    print(
        f"Generated {len(docs.sessions)} sessions and {len(docs.full_sessions)} "
        f"full sessions for {docs.crate_name} {docs.crate_version}"
    )
    print(f"  {index_file}")
    print(f"  {full_file}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.max_description_length is not None:
        config["sessions"]["max_description_length"] = args.max_description_length
    if args.include_crate_root:
        config["sessions"]["include_crate_root"] = True
    return config


def _acquire(args: argparse.Namespace, config: dict[str, Any]) -> CrateDocs:
    """Pick the acquisition source named on the command line."""
    if args.crate:
        return generate_from_online(args.crate, args.version, config)
    if args.url:
        return generate_from_url(args.url, config)
    if args.json_file:
        return generate_from_file(args.json_file, config)

    toolchain_cfg = config["toolchain"]
    features = sorted({*toolchain_cfg["features"], *(args.features or [])})
    return generate_from_local(
        args.manifest_path,
        toolchain=args.toolchain or toolchain_cfg["default"],
        all_features=args.all_features or toolchain_cfg["all_features"],
        no_default_features=(
            args.no_default_features or toolchain_cfg["no_default_features"]
        ),
        features=features,
        config=config,
    )
