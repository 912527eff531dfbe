"""Merge documents or loose pages into a new document."""

from __future__ import annotations

import logging
from typing import Iterable

from pypdf import PageObject, PdfWriter

from .documents import new_document
from .registry import track_document
from .types import Document

LOGGER = logging.getLogger("pdf_operations.merging")


def merge_pages(pages: Iterable[PageObject]) -> PdfWriter:
    """Return a new tracked document holding *pages* in order."""

    output = new_document()
    for page in pages:
        output.add_page(page)
    LOGGER.debug("Merged %d page(s) into a new document", len(output.pages))
    return output


def merge(documents: Iterable[Document]) -> PdfWriter:
    """Append every page of every document in *documents* to a new document.

    Inputs are tracked alongside the output so a later
    :func:`~pdf_operations.registry.close_all_documents` releases them too.
    """

    output = new_document()
    merged = 0
    for document in documents:
        track_document(document)
        for page_index, page in enumerate(document.pages):
            LOGGER.debug("Adding page %s of document %d", page_index, merged)
            output.add_page(page)
        merged += 1
    LOGGER.info("Merged %d document(s) into %d page(s)", merged, len(output.pages))
    return output


__all__ = ["merge", "merge_pages"]
