"""Create the project tree for a resolved configuration."""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from .config import BuildSystem, ResolvedConfig, ScaffoldError
from .models import SOURCE_DIRS, ProjectLayout, ScaffoldResult
from .templates import (
    render_cmakelists,
    render_doxyfile,
    render_gitignore,
    render_main_source,
    render_makefile,
    render_readme,
    render_test_cmakelists,
    render_test_source,
)

CURRENT_DIR = "."
_SEPARATORS = ("/", "\\")


def resolve_layout(project: str, cwd: Path | None = None) -> ProjectLayout:
    """Work out where the project lives and what it is called.

    ``.`` means the current directory. An argument containing a path
    separator is taken as a path; anything else is a new directory below
    ``cwd``. Nothing is created here.
    """

    base = (cwd or Path.cwd()).resolve()
    if project == CURRENT_DIR:
        return ProjectLayout(root=base, name=base.name)
    if any(sep in project for sep in _SEPARATORS):
        root = (base / Path(project.replace("\\", "/"))).resolve()
        return ProjectLayout(root=root, name=root.name)
    return ProjectLayout(root=base / project, name=project)


def _make_dir(path: Path, result: ScaffoldResult) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldError(path, exc) from exc
    result.directories.append(path)
    logger.debug("Created directory {}", path)


def _write(path: Path, content: str, result: ScaffoldResult) -> None:
    try:
        path.write_text(content)
    except OSError as exc:
        raise ScaffoldError(path, exc) from exc
    result.files.append(path)
    logger.debug("Wrote {}", path)


def init_git(root: Path) -> bool:
    """Run ``git init`` in ``root``. Failures are logged, never raised."""

    try:
        completed = subprocess.run(
            ["git", "init"],
            cwd=str(root),
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        logger.warning("Could not run git init: {}", exc)
        return False
    if completed.returncode != 0:
        logger.warning("git init failed: {}", (completed.stderr or "").strip())
        return False
    logger.info("Initialized git repository in {}", root)
    return True


def scaffold_project(config: ResolvedConfig, cwd: Path | None = None) -> ScaffoldResult:
    """Write the full project skeleton described by ``config``."""

    layout = resolve_layout(config.project, cwd)
    result = ScaffoldResult(layout=layout)
    name = layout.name

    _make_dir(layout.root, result)
    for directory in SOURCE_DIRS:
        _make_dir(layout.root / directory, result)

    _write(layout.src / config.source_name, render_main_source(config), result)

    if config.build_system == BuildSystem.MAKE:
        _write(layout.root / "Makefile", render_makefile(config, name), result)
    else:
        _write(layout.root / "CMakeLists.txt", render_cmakelists(config, name), result)

    if config.wants_tests:
        _make_dir(layout.test, result)
        _write(layout.test / "test.cpp", render_test_source(), result)
        if config.build_system == BuildSystem.CMAKE:
            _write(layout.test / "CMakeLists.txt", render_test_cmakelists(name), result)

    if config.init_git:
        result.git_initialized = init_git(layout.root)
        _write(layout.root / ".gitignore", render_gitignore(), result)

    _write(layout.root / "README.md", render_readme(config, name), result)

    if config.wants_docs:
        _write(layout.root / "Doxyfile", render_doxyfile(config, name), result)

    return result


__all__ = ["CURRENT_DIR", "init_git", "resolve_layout", "scaffold_project"]
