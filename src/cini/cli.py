"""Typer-based CLI for cini."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import (
    ConfigError,
    ScaffoldError,
    UsageError,
    default_config_path,
    load_options,
    save_options,
)
from .resolver import USAGE, resolve_arguments
from .scaffold import scaffold_project

app = typer.Typer(help="Scaffold a new C or C++ project.", add_completion=False)
console = Console()
err_console = Console(stderr=True)


class LogLevel(str, Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(
        lambda message: err_console.print(message, end="", markup=False, highlight=False, soft_wrap=True),
        level=level,
        format="{level}: {message}",
    )
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _usage_error(message: str) -> typer.Exit:
    err_console.print(escape(message), soft_wrap=True)
    return typer.Exit(code=1)


def _config_error(exc: ConfigError) -> typer.Exit:
    err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
    return typer.Exit(code=2)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def scaffold(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="PROJECT [OPTIONS...]",
        help="Project name followed by positional options, or --name=/--link=/... flags.",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="YAML file with option defaults (or set CINI_CONFIG)"
    ),
    init_config: Optional[Path] = typer.Option(
        None, "--init-config", help="Write the current option defaults as YAML to this path and exit"
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False, help="Logging level"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file"),
) -> None:
    """Create the project directory, starter source and build files."""

    if init_config is None and not args:
        raise _usage_error(USAGE)

    _configure_logging(log_level.value, log_file)
    try:
        options = load_options(config or default_config_path())
    except ConfigError as exc:
        raise _config_error(exc)

    if init_config is not None:
        try:
            save_options(options, init_config)
        except OSError as exc:
            err_console.print(f"[red]ERROR:[/red] Failed to write {escape(str(init_config))}: {exc}")
            raise typer.Exit(code=3)
        console.print(f"Wrote option defaults to {escape(str(init_config))}", soft_wrap=True, highlight=False)
        return

    try:
        resolved = resolve_arguments(args or [], options)
        result = scaffold_project(resolved)
    except UsageError as exc:
        raise _usage_error(str(exc))
    except ConfigError as exc:
        raise _config_error(exc)
    except ScaffoldError as exc:
        err_console.print(f"[red]ERROR:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=3)

    layout = result.layout
    logger.info("Wrote {} files: {}", len(result.files), ", ".join(result.relative_files()))
    console.print(
        f"Project '{escape(layout.name)}' initialized successfully at {escape(str(layout.root))}",
        soft_wrap=True,
        highlight=False,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
