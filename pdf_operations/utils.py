"""Utility helpers shared by the :mod:`pdf_operations` modules."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Tuple, Union

from .types import PathLike

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TOKEN_PATTERN = re.compile(r"(\d+)")


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a single stream handler to the ``pdf_operations`` logger."""

    logger = logging.getLogger("pdf_operations")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    return logger


def ensure_path(path: PathLike) -> Path:
    """Return an expanded, absolute :class:`~pathlib.Path` for *path*."""

    return Path(path).expanduser().resolve(strict=False)


def natural_key(name: str) -> Tuple[Tuple[Tuple[int, Union[int, str]], ...], str]:
    """Sort key comparing embedded numbers numerically.

    ``"page2.pdf"`` sorts before ``"page10.pdf"``. Text runs compare
    case-insensitively; the raw name breaks ties so the order is total.
    """

    tokens = []
    for token in _TOKEN_PATTERN.split(name):
        if not token:
            continue
        if token.isdigit():
            tokens.append((0, int(token)))
        else:
            tokens.append((1, token.lower()))
    return tuple(tokens), name


def sort_naturally(paths: Iterable[PathLike]) -> list[Path]:
    """Return *paths* as :class:`Path` objects ordered by :func:`natural_key` on their names."""

    return sorted((Path(path) for path in paths), key=lambda path: natural_key(path.name))


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 B")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "ensure_path",
    "natural_key",
    "sort_naturally",
    "format_file_size",
]
