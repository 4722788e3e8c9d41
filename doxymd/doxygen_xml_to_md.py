"""Convert Doxygen XML output for C++ headers to Docusaurus Markdown.

Each configured project is run through Doxygen (unless ``--skip-doxygen``),
its XML is loaded into an object model, and one Markdown page per class,
struct or union is written together with an index page.
"""

import argparse
import logging
import os
from pathlib import Path

from doxymd.run_conversion import run_conversion

DOCUSAURUS_DOCS_ENV = "DOCUSAURUS_DOCS"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    ap = argparse.ArgumentParser(
        description="Convert Doxygen XML to Docusaurus Markdown pages.",
    )
    ap.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the project configuration file (YAML or JSON)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Override the output directory from the configuration",
    )
    ap.add_argument(
        "--skip-doxygen",
        action="store_true",
        help="Reuse existing XML under <output>/xml instead of running doxygen",
    )
    ap.add_argument(
        "--doxygen",
        default="doxygen",
        help="Doxygen executable to run (default: doxygen)",
    )
    env_copy_to = os.environ.get(DOCUSAURUS_DOCS_ENV)
    ap.add_argument(
        "--copy-to",
        type=Path,
        default=Path(env_copy_to) if env_copy_to else None,
        help=f"Copy pages into this docs folder (default: ${DOCUSAURUS_DOCS_ENV})",
    )
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details",
    )
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = parse_args(argv)
    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
