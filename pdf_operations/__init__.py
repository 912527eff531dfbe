"""
PDF Operations - helpers for merging, splitting, cropping and rasterizing PDFs.

All PDF handling is delegated to pypdf, rendering to PyMuPDF and image
decoding to Pillow. Every document created or loaded through this package is
recorded in a shared registry; call :func:`close_all_documents` (or use
:func:`document_session`) once you are done with them.

Quick Start:
    >>> from pdf_operations import load_documents, merge, save_document, close_all_documents
    >>> merged = merge(load_documents('chapters/'))
    >>> save_document(merged, 'book.pdf')
    >>> close_all_documents()

For CLI usage, use the 'pdf-operations' command after installation.
"""

import logging

# pypdf reports recoverable parsing problems as warnings; keep only errors.
logging.getLogger("pypdf").setLevel(logging.ERROR)

# Document operations
from pdf_operations.cropping import clip_pages_header_footer, split_pages_vertically
from pdf_operations.documents import (
    get_document_info,
    load_document,
    new_document,
    page_count,
    save_document,
    save_documents,
)
from pdf_operations.images import (
    get_images,
    save_images,
    to_document,
    to_images,
    to_images_document,
)
from pdf_operations.loading import is_pdf, load_documents
from pdf_operations.merging import merge, merge_pages
from pdf_operations.splitting import split, split_at

# Resource tracking
from pdf_operations.registry import (
    USED_DOCUMENTS,
    DocumentRegistry,
    close_all_documents,
    document_session,
    track_document,
)

# Data types
from pdf_operations.types import CropBox, Document, PDFInfo

# Exceptions
from pdf_operations.exceptions import (
    EncryptedPDFError,
    ImageConversionError,
    InvalidCropError,
    InvalidPDFError,
    InvalidSplitError,
    PDFOperationsException,
    RenderError,
)

# Utility functions
from pdf_operations.config import Settings, get_settings
from pdf_operations.utils import configure_logging, format_file_size, natural_key

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Operations
    "get_images",
    "to_images",
    "to_document",
    "to_images_document",
    "split",
    "split_at",
    "merge",
    "merge_pages",
    "clip_pages_header_footer",
    "split_pages_vertically",
    "load_documents",
    "load_document",
    "new_document",
    "is_pdf",
    "save_document",
    "save_documents",
    "save_images",
    "get_document_info",
    "page_count",
    # Resource tracking
    "DocumentRegistry",
    "USED_DOCUMENTS",
    "track_document",
    "close_all_documents",
    "document_session",
    # Data types
    "Document",
    "PDFInfo",
    "CropBox",
    # Exceptions
    "PDFOperationsException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "InvalidSplitError",
    "InvalidCropError",
    "RenderError",
    "ImageConversionError",
    # Configuration and utilities
    "Settings",
    "get_settings",
    "configure_logging",
    "format_file_size",
    "natural_key",
    # Version info
    "__version__",
]
