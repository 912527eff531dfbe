"""Helpers for creating, inspecting and persisting tracked documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pypdf import PdfReader, PdfWriter

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .exceptions import InvalidPDFError, PDFOperationsException
from .registry import track_document
from .types import Document, PathLike, PDFInfo
from .utils import ensure_path

LOGGER = logging.getLogger("pdf_operations.documents")

BACKEND: PDFBackend = PypdfBackend()


def new_document() -> PdfWriter:
    """Return an empty, tracked document."""

    return track_document(BACKEND.new_writer())


def load_document(pdf_path: PathLike, password: Optional[str] = None) -> PdfReader:
    """Open a single PDF and track it.

    Raises:
        InvalidPDFError: If the file is missing or unreadable.
        EncryptedPDFError: If the file cannot be decrypted.
    """

    reader = BACKEND.load(str(ensure_path(pdf_path)), password=password)
    return track_document(reader)


def page_count(document: Document) -> int:
    return len(document.pages)


def get_document_info(document: Document) -> PDFInfo:
    """Return :class:`PDFInfo` describing *document*."""

    metadata = getattr(document, "metadata", None)
    return PDFInfo(
        num_pages=page_count(document),
        title=getattr(metadata, "title", None) if metadata else None,
        author=getattr(metadata, "author", None) if metadata else None,
        producer=getattr(metadata, "producer", None) if metadata else None,
        is_encrypted=bool(getattr(document, "is_encrypted", False)),
    )


def save_document(document: Document, output: PathLike) -> Path:
    """Write *document* to *output*, creating parent directories."""

    output_path = ensure_path(output)
    try:
        BACKEND.write(document, str(output_path))
    except PDFOperationsException:
        raise
    except Exception as exc:
        LOGGER.error("Failed to write PDF to %s: %s", output_path, exc)
        raise InvalidPDFError(f"Failed to write PDF to {output_path}") from exc
    LOGGER.info("Wrote %d page(s) to %s", page_count(document), output_path)
    return output_path


def save_documents(
    documents: Iterable[Document],
    output_dir: PathLike,
    prefix: str = "part",
    padding: int = 3,
) -> List[Path]:
    """Write each document as ``{prefix}_{index}.pdf`` inside *output_dir*."""

    directory = ensure_path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    created: List[Path] = []
    for index, document in enumerate(documents, start=1):
        destination = directory / f"{prefix}_{index:0{padding}d}.pdf"
        created.append(save_document(document, destination))
    return created


__all__ = [
    "BACKEND",
    "new_document",
    "load_document",
    "page_count",
    "get_document_info",
    "save_document",
    "save_documents",
]
