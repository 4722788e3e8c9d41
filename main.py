"""Main orchestration script for generating Doxygen XML and Docusaurus pages."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Doxygen XML and Docusaurus Markdown documentation."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documentation",
    )
    parser.add_argument(
        "--config",
        default="doxymd.yml",
        help="Path to configuration file (default: doxymd.yml)",
    )
    parser.add_argument(
        "--skip-doxygen",
        action="store_true",
        help="Reuse previously generated Doxygen XML",
    )
    parser.add_argument(
        "--copy-to",
        help="Docusaurus docs folder receiving the generated pages",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Generating documentation.\n")

    print("--- Converting Doxygen XML to Docusaurus Markdown ---")
    cmd = [
        sys.executable,
        "-m",
        "doxymd.doxygen_xml_to_md",
        "--config",
        args.config,
    ]
    if args.skip_doxygen:
        cmd.append("--skip-doxygen")
    if args.copy_to:
        cmd.extend(["--copy-to", args.copy_to])

    run_command(cmd, cwd=root_dir)

    print("\nSUCCESS: Documentation generated")


if __name__ == "__main__":
    main()
