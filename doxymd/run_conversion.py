"""Orchestration logic for converting Doxygen XML to Docusaurus Markdown."""

import argparse
import logging
import subprocess
from pathlib import Path

from doxymd.build_doc_model import DocModelBuilder
from doxymd.doc_model import DocModel
from doxymd.errors import ConfigurationError, ParseError
from doxymd.load_dox_model import load_dox_model
from doxymd.project_config import ProjectConfig, iter_project_configs
from doxymd.run_doxygen import run_doxygen
from doxymd.transform_options import TransformOptions
from doxymd.write_compound_pages import (
    copy_pages,
    write_compound_pages,
    write_index_page,
)

logger = logging.getLogger(__name__)


def build_project_model(project: ProjectConfig) -> DocModel:
    """Load the project's XML and build its documentation model."""
    options = TransformOptions.from_config(project.settings)
    dox_model = load_dox_model(project.xml_dir, options.compound_kinds)
    return DocModelBuilder(options).build(dox_model)


def convert_project(
    project: ProjectConfig,
    *,
    skip_doxygen: bool = False,
    doxygen: str = "doxygen",
    copy_to: Path | None = None,
) -> int:
    """Run the pipeline for one project and return the number of pages written."""
    logger.info("Processing project %s", project.input)
    if skip_doxygen:
        logger.info("Skipping doxygen; reading XML from %s", project.xml_dir)
    else:
        run_doxygen(project, doxygen)

    doc_model = build_project_model(project)
    out_root = project.markdown_dir
    pages = write_compound_pages(doc_model, out_root)
    pages.append(write_index_page(doc_model, out_root, project.index))
    written = len(pages)
    print(f"Generated {written} Markdown pages into: {out_root}")

    if copy_to is not None:
        copy_pages(pages, copy_to)
    return written


def run_conversion(args: argparse.Namespace) -> int:
    """Convert every configured project; return 1 if any of them failed."""
    try:
        projects = list(iter_project_configs(args.config, args.output))
    except (ParseError, ConfigurationError) as e:
        logger.error("Cannot load configuration: %s", e)
        return 1

    failed = 0
    for project in projects:
        try:
            convert_project(
                project,
                skip_doxygen=args.skip_doxygen,
                doxygen=args.doxygen,
                copy_to=args.copy_to,
            )
        except (ParseError, ConfigurationError) as e:
            logger.error("Project %s failed: %s", project.input, e)
            failed += 1
        except subprocess.CalledProcessError as e:
            logger.error(
                "Project %s failed: doxygen exited with status %d\n%s",
                project.input,
                e.returncode,
                (e.stderr or "").strip(),
            )
            failed += 1
        except OSError as e:
            logger.error("Project %s failed: %s", project.input, e)
            failed += 1

    if failed:
        logger.error("%d project(s) failed", failed)
        return 1
    return 0
