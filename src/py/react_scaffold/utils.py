"""Utility helpers for react-scaffold."""

import logging
import os
from importlib.util import find_spec
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from react_scaffold.config import LogLevel

__all__ = (
    "console",
    "configure_logging",
    "display_path",
    "get_package_path",
    "get_template_dir",
    "write_text_file",
)

console = Console()

_LOG_LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def configure_logging(level: LogLevel = "normal") -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Console verbosity.

    Returns:
        The ``react_scaffold`` logger.
    """
    logger = logging.getLogger("react_scaffold")
    logger.setLevel(_LOG_LEVELS[level])
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed react-scaffold package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("react_scaffold")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def get_template_dir() -> Path:
    """Get the directory containing the Jinja2 templates.

    Returns:
        Path to the templates directory.
    """
    return get_package_path("templates")


def write_text_file(path: Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Write a text file, creating parent directories as needed.

    Existing files are overwritten.

    Args:
        path: File path to write.
        content: File contents.
        encoding: Text encoding.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
    return path


def display_path(path: Path, start: "Path | None" = None) -> str:
    """Render ``path`` relative to ``start`` (default: the working directory).

    Falls back to the absolute path when the two do not share a root.

    Returns:
        The path as shown to the user, using forward slashes.
    """
    start = start or Path.cwd()
    try:
        relative = os.path.relpath(path, start)
    except ValueError:
        return path.as_posix()
    return Path(relative).as_posix()
