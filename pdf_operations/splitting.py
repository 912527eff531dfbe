"""Split documents at fixed intervals or explicit page indices."""

from __future__ import annotations

import logging
from typing import Iterable, List

from pypdf import PdfWriter

from .exceptions import InvalidSplitError
from .merging import merge_pages
from .registry import track_document
from .types import Document

LOGGER = logging.getLogger("pdf_operations.splitting")


def split(document: Document, number_of_pages: int) -> List[PdfWriter]:
    """Split *document* into documents of ``number_of_pages`` pages each.

    The last document holds the remainder. A document without pages yields an
    empty list.

    Raises:
        InvalidSplitError: If ``number_of_pages`` is not a positive integer.
    """

    if isinstance(number_of_pages, bool) or not isinstance(number_of_pages, int) or number_of_pages < 1:
        raise InvalidSplitError(
            f"Number of pages per document must be a positive integer, got {number_of_pages!r}"
        )

    track_document(document)
    pages = list(document.pages)
    documents = [
        merge_pages(pages[start:start + number_of_pages])
        for start in range(0, len(pages), number_of_pages)
    ]
    LOGGER.info(
        "Split %d page(s) into %d document(s) of up to %d page(s)",
        len(pages),
        len(documents),
        number_of_pages,
    )
    return documents


def split_at(document: Document, indices: Iterable[int]) -> List[PdfWriter]:
    """Split *document* before each 0-based page index in *indices*.

    ``split_at(doc, [2, 5])`` on a seven page document yields pages ``0-1``,
    ``2-4`` and ``5-6``. Repeated indices produce empty documents.

    Raises:
        InvalidSplitError: If an index is not an integer, lies outside
            ``[0, page_count]`` or the indices decrease.
    """

    indices = list(indices)
    track_document(document)
    pages = list(document.pages)
    total = len(pages)

    previous = 0
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidSplitError(f"Split index must be an integer, got {index!r}")
        if index < 0 or index > total:
            raise InvalidSplitError(
                f"Split index {index} is outside the document ({total} pages)"
            )
        if index < previous:
            raise InvalidSplitError(
                f"Split indices must be non-decreasing, got {indices!r}"
            )
        previous = index

    boundaries = [0, *indices, total]
    documents = [
        merge_pages(pages[start:end])
        for start, end in zip(boundaries, boundaries[1:])
    ]
    LOGGER.info("Split %d page(s) at %s into %d document(s)", total, indices, len(documents))
    return documents


__all__ = ["split", "split_at"]
