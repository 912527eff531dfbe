"""PyMuPDF renderer used to rasterize pages."""

from __future__ import annotations

import logging
from typing import List

import fitz  # PyMuPDF
from PIL import Image

from ..exceptions import RenderError
from .base import PageRenderer

LOGGER = logging.getLogger("pdf_operations.backends.pymupdf")


class PymupdfRenderer(PageRenderer):
    """Render pages with `PyMuPDF`, scaling the 72 DPI page space by ``scale``."""

    def render(self, pdf_bytes: bytes, scale: float) -> List[Image.Image]:
        if scale <= 0:
            raise RenderError(f"Render scale must be positive, got {scale}")

        try:
            document = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as exc:
            raise RenderError(f"Unable to open document for rendering: {exc}") from exc

        images: List[Image.Image] = []
        matrix = fitz.Matrix(scale, scale)
        try:
            for page in document:
                LOGGER.debug("Rendering page %s at scale %s", page.number, scale)
                pix = page.get_pixmap(matrix=matrix, alpha=False)
                images.append(Image.frombytes("RGB", (pix.width, pix.height), pix.samples))
        except Exception as exc:
            raise RenderError(f"Unable to render page: {exc}") from exc
        finally:
            document.close()
        return images
