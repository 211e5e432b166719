"""Shared models describing the generated project tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


SOURCE_DIRS = ("src", "inc", "vendor", "build")


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Resolved location and name of the project being scaffolded."""

    root: Path
    name: str

    @property
    def src(self) -> Path:
        return self.root / "src"

    @property
    def inc(self) -> Path:
        return self.root / "inc"

    @property
    def vendor(self) -> Path:
        return self.root / "vendor"

    @property
    def build(self) -> Path:
        return self.root / "build"

    @property
    def test(self) -> Path:
        return self.root / "test"


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a scaffolding run."""

    layout: ProjectLayout
    directories: List[Path] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)
    git_initialized: bool = False

    def relative_files(self) -> List[str]:
        return [path.relative_to(self.layout.root).as_posix() for path in self.files]


__all__ = ["SOURCE_DIRS", "ProjectLayout", "ScaffoldResult"]
