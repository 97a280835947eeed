"""Utility helpers for litestar-asset-mix."""

import logging
import shutil
from importlib.util import find_spec
from pathlib import Path

from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]

__all__ = (
    "copy_tree",
    "get_package_path",
    "log_info",
    "log_success",
    "log_warn",
    "logger",
    "read_text_file",
    "write_text_file",
)

logger = logging.getLogger("litestar_asset_mix")

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_WARN = "[yellow]![/]"


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed litestar-asset-mix package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("litestar_asset_mix")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    logger.debug("Reading %s", path)
    return path.read_text(encoding=encoding)


def write_text_file(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write a text file, replacing any existing content.

    Args:
        path: File path to write.
        content: Text to write.
        encoding: Text encoding.
    """
    logger.debug("Writing %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)


def copy_tree(source: Path, destination: Path) -> list[Path]:
    """Recursively copy ``source`` into ``destination``.

    Existing files with the same relative path are overwritten; anything else
    already present in ``destination`` is left untouched.

    Args:
        source: Directory to copy from.
        destination: Directory to copy into. Created if missing.

    Returns:
        The copied files, as paths inside ``destination``.
    """
    logger.debug("Copying %s to %s", source, destination)
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return sorted(destination / path.relative_to(source) for path in source.rglob("*") if path.is_file())


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    console.print(f"{_INFO} {message}")


def log_warn(message: str) -> None:
    """Print a warning message with consistent styling."""

    console.print(f"{_WARN} {message}")
