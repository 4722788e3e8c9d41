"""Development script: format, lint and test the doxymd package."""

import argparse
import subprocess
import sys

CHECKS = [
    (["uv", "run", "ruff", "format", "--check", "doxymd", "tests"], "Format"),
    (["uv", "run", "ruff", "check", "doxymd", "tests"], "Lint"),
    (["uv", "run", "pytest", "-q"], "Tests"),
]

FIXES = [
    (["uv", "run", "ruff", "format", "doxymd", "tests"], "Format"),
    (["uv", "run", "ruff", "check", "--fix", "doxymd", "tests"], "Lint fixes"),
]


def main() -> int:
    """Apply fixes unless ``--ci`` is given, then run the checks."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--ci", action="store_true", help="Only check; do not rewrite any files"
    )
    args = parser.parse_args()

    steps = CHECKS if args.ci else FIXES + CHECKS
    for command, name in steps:
        print(f"--- {name}: {' '.join(command)}")
        if subprocess.run(command).returncode != 0:
            print(f"Failed: {name}")
            return 1
    print("All checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
