"""Logic for writing compound and index pages to disk."""

import logging
import shutil
from pathlib import Path, PurePosixPath

from doxymd.doc_model import DocModel
from doxymd.render_compound_page import render_compound_page
from doxymd.render_index_page import render_index_page

logger = logging.getLogger(__name__)


def write_compound_pages(doc_model: DocModel, out_root: Path) -> list[Path]:
    """Write one ``<doc_id>.md`` page per compound and return their paths."""
    out_root.mkdir(parents=True, exist_ok=True)
    pages: list[Path] = []
    total = len(doc_model.compounds)
    print(f"Writing {total} compound pages...")
    for doc_id, compound in doc_model.compounds.items():
        out_file = out_root / f"{doc_id}.md"
        logger.debug("Writing %s", out_file)
        out_file.write_text(render_compound_page(compound), encoding="utf-8")
        pages.append(out_file)
        if len(pages) % 50 == 0:
            print(f"  ... wrote {len(pages)}/{total} compounds")
    return pages


def write_index_page(doc_model: DocModel, out_root: Path, index: str) -> Path:
    """Write the index page named by the ``index`` setting."""
    out_root.mkdir(parents=True, exist_ok=True)
    out_file = out_root / index
    doc_id = PurePosixPath(index).stem
    out_file.write_text(render_index_page(doc_model, doc_id=doc_id), encoding="utf-8")
    return out_file


def copy_pages(pages: list[Path], target: Path) -> int:
    """Copy the pages written by this run into a Docusaurus docs folder."""
    target.mkdir(parents=True, exist_ok=True)
    copied = 0
    for source in pages:
        logger.debug("Copying %s to %s", source, target)
        shutil.copyfile(source, target / source.name)
        copied += 1
    print(f"Copied {copied} pages to: {target}")
    return copied
