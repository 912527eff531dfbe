"""Backend protocols for PDF reading, writing and rendering."""

from __future__ import annotations

from typing import List, Protocol

from PIL import Image


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, pdf_path: str, password: str | None = None) -> object:
        """Load a PDF file and return the backend document."""

    def new_writer(self) -> object:
        """Return an empty backend writer."""

    def write(self, document: object, destination: str) -> None:
        """Persist a document to the destination path."""

    def to_bytes(self, document: object) -> bytes:
        """Serialize a document to PDF bytes."""


class PageRenderer(Protocol):
    """Protocol for rasterizing serialized PDF documents."""

    def render(self, pdf_bytes: bytes, scale: float) -> List[Image.Image]:
        """Render every page of ``pdf_bytes`` at ``scale`` and return RGB images."""
