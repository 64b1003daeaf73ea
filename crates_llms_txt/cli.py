"""Command-line interface for generating llms.txt files from rustdoc JSON."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from crates_llms_txt.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        description="Generate llms.txt and llms-full.txt from Rust crate docs.",
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--crate", help="Crate name to fetch from docs.rs")
    source.add_argument("--url", help="Direct URL of a rustdoc JSON document")
    source.add_argument(
        "--manifest-path",
        type=Path,
        help="Cargo.toml of a local crate to document with rustdoc",
    )
    source.add_argument(
        "--json-file",
        type=Path,
        help="rustdoc JSON file already on disk",
    )
    ap.add_argument(
        "--version",
        help="Crate version for --crate (default: latest)",
    )
    ap.add_argument(
        "--toolchain",
        help="Rust toolchain for --manifest-path, e.g. stable or nightly",
    )
    features = ap.add_mutually_exclusive_group()
    features.add_argument(
        "--all-features",
        action="store_true",
        help="Enable every cargo feature",
    )
    features.add_argument(
        "--features",
        nargs="+",
        help="Cargo features to enable",
    )
    ap.add_argument(
        "--no-default-features",
        action="store_true",
        help="Disable the crate's default features",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        default=Path(),
        help="Directory for llms.txt and llms-full.txt (default: .)",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the sessions as JSON instead of writing files",
    )
    ap.add_argument(
        "--max-description-length",
        type=int,
        help="Truncate descriptions to this many characters",
    )
    ap.add_argument(
        "--include-crate-root",
        action="store_true",
        help="Prepend an index entry for the crate itself",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generation process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
