"""
Type definitions and dataclasses for PDF Operations.

This module defines the aliases and small data structures shared by the
operation modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pypdf import PdfReader, PdfWriter

#: Any document this package can read pages from.
Document = Union[PdfReader, PdfWriter]
PathLike = Union[str, Path]


@dataclass(frozen=True)
class PDFInfo:
    """
    Summary information describing an open document.

    Attributes:
        num_pages: Number of pages in the document
        title: Title metadata
        author: Author metadata
        producer: Producer application
        is_encrypted: Whether the underlying file was encrypted
    """
    num_pages: int
    title: Optional[str] = None
    author: Optional[str] = None
    producer: Optional[str] = None
    is_encrypted: bool = False

    def __str__(self) -> str:
        return f"PDFInfo(pages={self.num_pages}, title={self.title!r})"


@dataclass(frozen=True)
class CropBox:
    """Plain crop box coordinates in PDF points."""

    lower_left_x: float
    lower_left_y: float
    upper_right_x: float
    upper_right_y: float

    @property
    def height(self) -> float:
        return self.upper_right_y - self.lower_left_y

    @property
    def width(self) -> float:
        return self.upper_right_x - self.lower_left_x

    def as_list(self) -> list[float]:
        return [self.lower_left_x, self.lower_left_y, self.upper_right_x, self.upper_right_y]


__all__ = ["Document", "PathLike", "PDFInfo", "CropBox"]
