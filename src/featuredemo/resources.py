# src/featuredemo/resources.py
"""Helpers for locating and reading the bundled data files."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path, PurePath

from .result import Result

logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = "data"


def _validate_file_name(file_name: str) -> str:
    if PurePath(file_name).name != file_name or "\\" in file_name:
        raise ValueError(f"resource name must not contain path separators: {file_name!r}")
    return file_name


def resource_path(name: str, ext: str) -> Path:
    """Resolve the path of a bundled resource.

    The path is returned even when no such file is bundled, so reading it is
    where a missing resource surfaces. Names that would leave the data
    directory raise ValueError.
    """
    file_name = _validate_file_name(f"{name}.{ext}")
    candidate = resources.files(__package__).joinpath(PACKAGE_DATA_DIR, file_name)
    path = Path(str(candidate))
    logger.info("Resolved resource %s.%s to %s", name, ext, path)
    return path


def read_text(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def read_resource(name: str, ext: str) -> Result:
    """Read a bundled resource into ``Success(text)`` or ``Failure(error)``."""
    result = Result.catching(lambda: read_text(resource_path(name, ext)))
    if result.is_failure:
        logger.info("Reading %s.%s failed: %r", name, ext, result.error)
    return result
