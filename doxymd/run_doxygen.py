"""Generate Doxygen XML for a project by running the Doxygen binary."""

import logging
import subprocess
from pathlib import Path

from doxymd.project_config import ProjectConfig

logger = logging.getLogger(__name__)


def doxyfile_options(project: ProjectConfig) -> dict[str, str]:
    """Return the Doxyfile settings producing XML only."""
    patterns = project.settings.get("file_patterns") or []
    return {
        "PROJECT_NAME": f'"{project.input.name}"',
        "OUTPUT_DIRECTORY": f'"{project.output}"',
        "INPUT": f'"{project.input}"',
        "FILE_PATTERNS": " ".join(patterns),
        "RECURSIVE": "YES",
        "EXTRACT_ALL": "NO",
        "GENERATE_HTML": "NO",
        "GENERATE_LATEX": "NO",
        "GENERATE_XML": "YES",
        "XML_OUTPUT": "xml",
        "XML_PROGRAMLISTING": "NO",
        "QUIET": "YES",
    }


def write_doxyfile(project: ProjectConfig) -> Path:
    """Write ``<output>/Doxyfile`` for the project and return its path."""
    project.output.mkdir(parents=True, exist_ok=True)
    path = project.output / "Doxyfile"
    lines = [f"{k} = {v}" for k, v in doxyfile_options(project).items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def run_doxygen(
    project: ProjectConfig, doxygen: str = "doxygen"
) -> subprocess.CompletedProcess[str]:
    """Run Doxygen for the project; raises ``CalledProcessError`` on failure."""
    doxyfile = write_doxyfile(project)
    cmd = [doxygen, str(doxyfile)]
    logger.info("Running: %s", " ".join(cmd))
    result = subprocess.run(
        cmd,
        check=True,
        cwd=project.input,
        capture_output=True,
        text=True,
    )
    for line in result.stderr.splitlines():
        if line.strip():
            logger.warning("doxygen: %s", line)
    return result
