"""Main orchestration script for generating llms.txt files for a Rust crate."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from crates_llms_txt.cli import main as cli_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Run the documentation pipeline, optionally after development checks."""
    parser = argparse.ArgumentParser(
        description="Generate llms.txt files; other options go to the generator.",
        add_help=False,
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating",
    )
    args, rest = parser.parse_known_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\n✅ Development checks passed. Proceeding with generation.\n")

    return cli_main(rest)


if __name__ == "__main__":
    raise SystemExit(main())
