"""pypdf backend implementation for PDF Operations."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import EncryptedPDFError, InvalidPDFError
from .base import PDFBackend

LOGGER = logging.getLogger("pdf_operations.backends.pypdf")


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str, password: str | None = None) -> PdfReader:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            reader = PdfReader(str(path))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", path)
            try:
                decrypted = reader.decrypt(password or "")
            except Exception as exc:
                reader.close()
                raise EncryptedPDFError(f"Unable to decrypt encrypted PDF: {pdf_path}") from exc
            if decrypted == 0:
                reader.close()
                raise EncryptedPDFError(f"Unable to decrypt encrypted PDF: {pdf_path}")

        return reader

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def write(self, document: PdfReader | PdfWriter, destination: str) -> None:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('wb') as handle:
            self._as_writer(document).write(handle)

    def to_bytes(self, document: PdfReader | PdfWriter) -> bytes:
        buffer = io.BytesIO()
        self._as_writer(document).write(buffer)
        return buffer.getvalue()

    @staticmethod
    def _as_writer(document: PdfReader | PdfWriter) -> PdfWriter:
        if isinstance(document, PdfWriter):
            return document
        return PdfWriter(clone_from=document)
