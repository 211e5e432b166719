"""Scaffold C and C++ projects from the command line."""

from .config import ResolvedConfig, ScaffoldOptions
from .resolver import resolve_arguments
from .scaffold import scaffold_project

__version__ = "1.0.0"

__all__ = ["ResolvedConfig", "ScaffoldOptions", "resolve_arguments", "scaffold_project", "__version__"]
