"""
Custom exceptions for PDF Operations.

Document-producing operations raise these; batch readers catch them per item,
log and move on.
"""


class PDFOperationsException(Exception):
    """Base exception for all PDF Operations errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF operation error occurred."


class InvalidPDFError(PDFOperationsException):
    """Raised when a PDF file is invalid, unreadable or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFOperationsException):
    """Raised when a PDF is encrypted and cannot be decrypted."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class InvalidSplitError(PDFOperationsException):
    """Raised when a chunk size or a list of cut indices is invalid."""

    @property
    def default_message(self) -> str:
        return "Invalid split specification."


class InvalidCropError(PDFOperationsException):
    """Raised when a crop would produce an empty or inverted crop box."""

    @property
    def default_message(self) -> str:
        return "Invalid crop specification."


class RenderError(PDFOperationsException):
    """Raised when pages cannot be rasterized."""

    @property
    def default_message(self) -> str:
        return "Unable to render PDF pages."


class ImageConversionError(PDFOperationsException):
    """Raised when an image cannot be turned into a PDF page."""

    @property
    def default_message(self) -> str:
        return "Unable to convert image into a PDF page."
