"""Turn raw command line arguments into a ResolvedConfig.

Two grammars are supported and picked automatically: if any argument starts
with ``--`` the whole invocation is parsed as flags, otherwise arguments are
read positionally in a fixed order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from loguru import logger

from .config import (
    BuildSystem,
    ConfigError,
    Language,
    Linking,
    ResolvedConfig,
    ScaffoldOptions,
    UsageError,
    resolve_config,
)

FLAG_PREFIX = "--"

USAGE = (
    "Usage (positional): cini <project_name> [linking] [language] [compiler] "
    "[strict_compiler] [build_system] [init_git_repo] [documentation] [test]\n"
    "Or use flagged mode:\n"
    "  cini [project_name or --name=<name>] [--link=static|dynamic] "
    "[--lang=c++|c] [--compiler=clang++|...]\n"
    "       [--strict=0|1|2] [--build=cmake|make] [--[no-]git] [--[no-]docs] [--[no-]test]"
)

_CPP_ALIASES = {"c++", "cpp", "cxx"}


def parse_linking(value: str) -> Linking:
    lowered = value.lower()
    if lowered == Linking.DYNAMIC.value:
        return Linking.DYNAMIC
    if lowered != Linking.STATIC.value:
        logger.warning("Unknown linking mode '{}', using static", value)
    return Linking.STATIC


def parse_language(value: str) -> Language:
    lowered = value.lower()
    if lowered == Language.C.value:
        return Language.C
    if lowered not in _CPP_ALIASES:
        logger.warning("Unknown language '{}', using c++", value)
    return Language.CPP


def parse_build_system(value: str) -> BuildSystem:
    lowered = value.lower()
    if lowered == BuildSystem.MAKE.value:
        return BuildSystem.MAKE
    if lowered != BuildSystem.CMAKE.value:
        logger.warning("Unknown build system '{}', using cmake", value)
    return BuildSystem.CMAKE


def parse_strictness(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Strictness must be an integer, got '{value}'") from exc


def _is_yes(value: str) -> bool:
    return value == "yes"


_VALUE_FLAGS: Dict[str, tuple[str, Callable[[str], Any]]] = {
    "--link=": ("linking", parse_linking),
    "--lang=": ("language", parse_language),
    "--compiler=": ("compiler", str),
    "--strict=": ("strictness", parse_strictness),
    "--build=": ("build_system", parse_build_system),
}

_SWITCHES: Dict[str, tuple[str, bool]] = {
    "--git": ("init_git", True),
    "--no-git": ("init_git", False),
    "--docs": ("with_docs", True),
    "--no-docs": ("with_docs", False),
    "--test": ("with_tests", True),
    "--no-test": ("with_tests", False),
}

_POSITIONAL: List[tuple[str, Callable[[str], Any]]] = [
    ("linking", parse_linking),
    ("language", parse_language),
    ("compiler", str),
    ("strictness", parse_strictness),
    ("build_system", parse_build_system),
    ("init_git", _is_yes),
    ("with_docs", _is_yes),
    ("with_tests", _is_yes),
]


def is_flagged(args: Sequence[str]) -> bool:
    return any(arg.startswith(FLAG_PREFIX) for arg in args)


def _parse_flagged(args: Sequence[str], options: ScaffoldOptions) -> ResolvedConfig:
    project = ""
    overrides: Dict[str, Any] = {}
    for arg in args:
        if arg.startswith("--name="):
            project = arg[len("--name="):]
            continue
        if arg in _SWITCHES:
            field, value = _SWITCHES[arg]
            overrides[field] = value
            continue
        for prefix, (field, convert) in _VALUE_FLAGS.items():
            if arg.startswith(prefix):
                overrides[field] = convert(arg[len(prefix):])
                break
        else:
            if not arg.startswith(FLAG_PREFIX) and not project:
                project = arg
            else:
                logger.warning("Ignoring unrecognized argument '{}'", arg)

    if not project:
        raise UsageError(
            "Error: project name must be specified (either as a positional "
            "argument or with --name=<name>)."
        )
    return resolve_config(project, options, **overrides)


def _parse_positional(args: Sequence[str], options: ScaffoldOptions) -> ResolvedConfig:
    project, rest = args[0], args[1:]
    if not project:
        raise UsageError(USAGE)
    overrides: Dict[str, Any] = {}
    for (field, convert), value in zip(_POSITIONAL, rest):
        overrides[field] = convert(value)
    for extra in rest[len(_POSITIONAL):]:
        logger.warning("Ignoring extra argument '{}'", extra)
    return resolve_config(project, options, **overrides)


def resolve_arguments(
    args: Sequence[str], options: ScaffoldOptions | None = None
) -> ResolvedConfig:
    """Resolve ``args`` against ``options`` (built-in defaults when omitted)."""

    if options is None:
        options = ScaffoldOptions()
    if not args:
        raise UsageError(USAGE)
    if is_flagged(args):
        config = _parse_flagged(args, options)
    else:
        config = _parse_positional(args, options)
    logger.debug("Resolved configuration: {}", config.model_dump(mode="json"))
    return config


__all__ = [
    "USAGE",
    "is_flagged",
    "parse_build_system",
    "parse_language",
    "parse_linking",
    "parse_strictness",
    "resolve_arguments",
]
