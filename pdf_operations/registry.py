"""Process-wide bookkeeping of documents opened or created by this package.

Every operation that creates or loads a document, or receives one as input,
records it here so a single :func:`close_all_documents` call can release them
all. A document is tracked at most once and is removed exactly once.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List

LOGGER = logging.getLogger("pdf_operations.registry")


class DocumentRegistry:
    """Ordered, identity based collection of documents awaiting cleanup."""

    def __init__(self) -> None:
        self._documents: List[Any] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document: object) -> bool:
        return any(tracked is document for tracked in self._documents)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._documents))

    def track(self, document: Any) -> Any:
        """Record *document* unless it is already tracked and return it."""

        if document is not None and document not in self:
            self._documents.append(document)
        return document

    def discard(self, document: Any) -> bool:
        """Stop tracking *document* without closing it."""

        for index, tracked in enumerate(self._documents):
            if tracked is document:
                del self._documents[index]
                return True
        return False

    def close_all(self) -> int:
        """Close and remove every tracked document in insertion order.

        Returns the number of documents that could not be closed. Failures
        are logged and do not stop the drain.
        """

        failures = 0
        while self._documents:
            document = self._documents.pop(0)
            try:
                document.close()
            except Exception as exc:
                failures += 1
                LOGGER.warning("A document could not be closed properly: %s", exc)
        if failures:
            LOGGER.info("Closed documents with %d failure(s)", failures)
        return failures


USED_DOCUMENTS = DocumentRegistry()


def track_document(document: Any) -> Any:
    """Track *document* in the shared registry."""

    return USED_DOCUMENTS.track(document)


def close_all_documents() -> int:
    """Close every document tracked in the shared registry."""

    LOGGER.debug("Closing %d tracked document(s)", len(USED_DOCUMENTS))
    return USED_DOCUMENTS.close_all()


@contextmanager
def document_session() -> Iterator[DocumentRegistry]:
    """Drain the shared registry when the ``with`` block exits."""

    try:
        yield USED_DOCUMENTS
    finally:
        close_all_documents()


__all__ = [
    "DocumentRegistry",
    "USED_DOCUMENTS",
    "track_document",
    "close_all_documents",
    "document_session",
]
