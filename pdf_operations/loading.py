"""Load every readable PDF from a directory or a list of files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pypdf import PdfReader

from .documents import load_document
from .exceptions import PDFOperationsException
from .types import PathLike
from .utils import sort_naturally

LOGGER = logging.getLogger("pdf_operations.loading")

Source = Union[PathLike, Iterable[PathLike]]


def is_pdf(file_name: str) -> bool:
    """Return ``True`` when the text after the last dot is ``pdf`` (any case)."""

    _, dot, extension = file_name.rpartition(".")
    return bool(dot) and extension.lower() == "pdf"


def list_directory(source: Source) -> Optional[List[Path]]:
    """Expand *source* into a list of paths.

    A directory yields its entries, a single file path yields itself and an
    iterable yields its non-``None`` members. Anything else yields ``None``.
    """

    if isinstance(source, (str, Path)):
        path = Path(source).expanduser()
        if path.is_dir():
            return list(path.iterdir())
        if path.exists():
            return [path]
        return None
    try:
        return [Path(item) for item in source if item is not None]
    except TypeError:
        return None


def load_documents(source: Source, password: Optional[str] = None) -> List[PdfReader]:
    """Load all valid PDFs in *source*, ordered naturally by file name.

    Directories and non-PDF names are skipped. A file that cannot be loaded
    is logged and skipped so the rest of the batch still loads.
    """

    files = list_directory(source)
    if files is None:
        LOGGER.warning("Nothing to load from %s", source)
        return []

    documents: List[PdfReader] = []
    for path in sort_naturally(files):
        if path.is_dir() or not is_pdf(path.name):
            LOGGER.debug("Skipping %s", path)
            continue
        try:
            documents.append(load_document(path, password=password))
        except PDFOperationsException as exc:
            LOGGER.warning("Could not load file: %s (%s)", path.name, exc)

    LOGGER.info("Loaded %d document(s)", len(documents))
    return documents


__all__ = ["is_pdf", "list_directory", "load_documents"]
