"""Configuration models and defaults file handling for cini."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

CONFIG_ENV_VAR = "CINI_CONFIG"


class Linking(str, Enum):
    """How the produced binary is linked."""

    STATIC = "static"
    DYNAMIC = "dynamic"


class Language(str, Enum):
    C = "c"
    CPP = "c++"


class BuildSystem(str, Enum):
    MAKE = "make"
    CMAKE = "cmake"


_WARNING_FLAGS = {
    0: "",
    1: "-Wall",
    2: "-Wall -Wextra -pedantic -fsanitize=address",
}


class ScaffoldOptions(BaseModel):
    """Every scaffolding option except the project itself."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    linking: Linking = Linking.STATIC
    language: Language = Language.CPP
    compiler: str = "clang++"
    strictness: int = 1
    build_system: BuildSystem = BuildSystem.CMAKE
    init_git: bool = True
    with_docs: bool = True
    with_tests: bool = False

    @field_validator("strictness")
    @classmethod
    def _check_strictness(cls, value: int) -> int:
        if value not in _WARNING_FLAGS:
            raise ValueError(f"strictness must be 0, 1 or 2 (got {value})")
        return value


class ResolvedConfig(ScaffoldOptions):
    """Options for a single run, resolved from defaults and the command line."""

    project: str

    @field_validator("project")
    @classmethod
    def _require_project(cls, value: str) -> str:
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @property
    def is_c(self) -> bool:
        return self.language == Language.C

    @property
    def wants_tests(self) -> bool:
        return self.with_tests and not self.is_c

    @property
    def wants_docs(self) -> bool:
        return self.with_docs and not self.is_c

    @property
    def source_name(self) -> str:
        return "main.c" if self.is_c else "main.cpp"

    @property
    def warning_flags(self) -> str:
        return _WARNING_FLAGS[self.strictness]

    @property
    def standard_flag(self) -> str:
        return "-std=c11" if self.is_c else "-std=c++23"


class CiniError(Exception):
    """Base class for errors reported to the user."""


class UsageError(CiniError):
    """Raised when the command line does not name a project."""


class ConfigError(CiniError):
    """Raised when an option value or defaults file is invalid."""


class ScaffoldError(CiniError):
    """Raised when writing the project tree fails."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"Failed to write {path}: {error.strerror or error}")
        self.path = path
        self.error = error


def _describe(exc: ValidationError) -> str:
    """First validation problem as a one-line message."""

    error = exc.errors()[0]
    message = error["msg"].removeprefix("Value error, ")
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {message}" if field else message


def resolve_config(project: str, options: ScaffoldOptions, **overrides: Any) -> ResolvedConfig:
    """Combine base options with command line overrides into a ResolvedConfig."""

    data: Dict[str, Any] = options.model_dump()
    data.update(overrides)
    data["project"] = project
    try:
        return ResolvedConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid options: {_describe(exc)}") from exc


def default_config_path() -> Optional[Path]:
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value).expanduser() if value else None


def load_options(path: Path | None) -> ScaffoldOptions:
    """Load option defaults from a YAML file, or return the built-in ones."""

    if path is None:
        return ScaffoldOptions()
    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    if data is None:
        return ScaffoldOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")
    try:
        return ScaffoldOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {_describe(exc)}") from exc


def save_options(options: ScaffoldOptions, path: Path) -> None:
    """Persist option defaults to disk as YAML."""

    rendered = options.model_dump(mode="json")
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


__all__ = [
    "BuildSystem",
    "CiniError",
    "ConfigError",
    "Language",
    "Linking",
    "ResolvedConfig",
    "ScaffoldError",
    "ScaffoldOptions",
    "UsageError",
    "default_config_path",
    "load_options",
    "resolve_config",
    "save_options",
]
