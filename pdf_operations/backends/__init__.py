"""Backend abstractions for PDF Operations."""

from .base import PageRenderer, PDFBackend
from .pymupdf_backend import PymupdfRenderer
from .pypdf_backend import PypdfBackend

__all__ = [
    "PageRenderer",
    "PDFBackend",
    "PymupdfRenderer",
    "PypdfBackend",
]
