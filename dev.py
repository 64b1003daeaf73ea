"""Developer entry point: lint, test, then try a real crate end to end."""

import argparse
import subprocess
import sys

CHECKS: list[tuple[str, list[str]]] = [
    ("Ruff Linting", ["ruff", "check"]),
    ("Ruff Format Check", ["ruff", "format", "--check"]),
    ("Tests", ["pytest", "--cov=crates_llms_txt", "--cov-fail-under=80"]),
]
FIXES: list[tuple[str, list[str]]] = [
    ("Ruff Formatting", ["ruff", "format"]),
    ("Ruff Linting & Fixes", ["ruff", "check", "--fix", "--unsafe-fixes"]),
]


def run_step(step_name: str, command: list[str]) -> None:
    """Run one tool through uv and stop the script if it fails."""
    full_command = ["uv", "run", *command]
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(full_command)}")
    result = subprocess.run(full_command, check=False)
    if result.returncode != 0:
        print(f"\n❌ Failed: {step_name} (exit code {result.returncode})")
        sys.exit(1)


def main() -> None:
    """Run the checks, and unless --ci is given, a sample generation."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Only verify lint and tests; do not fix or generate",
    )
    parser.add_argument(
        "--crate",
        default="clap",
        help="Crate fetched from docs.rs for the sample run (default: clap)",
    )
    args = parser.parse_args()

    steps = CHECKS if args.ci else FIXES + CHECKS
    for step_name, command in steps:
        run_step(step_name, command)

    if args.ci:
        print("\n✅ CI checks passed.")
        return

    run_step(
        "Sample Generation",
        ["python", "main.py", "--crate", args.crate, "--out-dir", "out"],
    )
    print(f"\n✅ Checks passed and llms.txt written to out/ for {args.crate}.")


if __name__ == "__main__":
    main()
