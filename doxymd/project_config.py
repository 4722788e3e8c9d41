"""Discovery of documentation projects from a root config file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from doxymd.deep_merge import deep_merge
from doxymd.load_config import CONFIG_FILENAME, load_config, read_config_file

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Settings a sub-project never inherits from its parent.
NOT_INHERITED = ("input", "output", "projects")


@dataclass(frozen=True)
class ProjectConfig:
    """Resolved settings for one documentation project."""

    input: Path
    output: Path
    prefix: str
    index: str
    projects: list[Path] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)

    @property
    def xml_dir(self) -> Path:
        """Directory where Doxygen writes its XML."""
        return self.output / "xml"

    @property
    def markdown_dir(self) -> Path:
        """Directory receiving the generated Markdown pages."""
        return self.output / "out"


def iter_project_configs(
    config_path: Path,
    output: Path | None = None,
) -> Iterator[ProjectConfig]:
    """Yield every project described by a config file and its sub-projects."""
    config_path = config_path.resolve()
    config = load_config(config_path)
    config_dir = config_path.parent
    out = output.resolve() if output else resolve_path(config["output"], config_dir)
    yield from _iter_projects(config, config_dir, out)


def _iter_projects(
    config: dict[str, Any], config_dir: Path, output: Path
) -> Iterator[ProjectConfig]:
    projects = [resolve_path(p, config_dir) for p in config.get("projects") or []]
    if not projects:
        yield _make_project(config, config_dir, output)
        return

    inherited = {k: v for k, v in config.items() if k not in NOT_INHERITED}
    for project_dir in projects:
        project_config_path = project_dir / CONFIG_FILENAME
        if project_config_path.exists():
            logger.debug("Loading sub-project config %s", project_config_path)
            child = read_config_file(project_config_path)
            merged = deep_merge(inherited, child)
            child_output = output / str(child.get("output") or project_dir.name)
            yield from _iter_projects(merged, project_dir, child_output)
        else:
            yield _make_project(
                {**inherited, "input": str(project_dir)},
                config_dir,
                output / project_dir.name,
            )


def _make_project(
    config: dict[str, Any], config_dir: Path, output: Path
) -> ProjectConfig:
    """Normalize a merged config into a ``ProjectConfig`` with absolute paths."""
    input_dir = config_dir
    if config.get("input"):
        input_dir = resolve_path(config["input"], config_dir)
    return ProjectConfig(
        input=input_dir,
        output=output,
        prefix=config.get("prefix") or "",
        index=config.get("index") or "index.md",
        projects=[resolve_path(p, config_dir) for p in config.get("projects") or []],
        settings=config,
    )


def resolve_path(path: str | Path, current_dir: Path) -> Path:
    """Make a config path absolute relative to the config file's directory."""
    p = Path(path)
    if not p.is_absolute():
        p = current_dir / p
    return p.resolve()
