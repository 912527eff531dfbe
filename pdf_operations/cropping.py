"""Crop-box manipulation: header/footer clipping and vertical bisection."""

from __future__ import annotations

import logging

from pypdf import PageObject, PdfWriter
from pypdf.generic import RectangleObject

from .documents import new_document
from .exceptions import InvalidCropError
from .registry import track_document
from .types import CropBox, Document

LOGGER = logging.getLogger("pdf_operations.cropping")


def get_crop_box(page: PageObject) -> CropBox:
    """Return the effective crop box of *page* (the media box when unset)."""

    box = page.cropbox
    return CropBox(
        lower_left_x=float(box.left),
        lower_left_y=float(box.bottom),
        upper_right_x=float(box.right),
        upper_right_y=float(box.top),
    )


def _add_cropped_copy(output: PdfWriter, page: PageObject, box: CropBox) -> PageObject:
    copy = output.add_page(page)
    copy.cropbox = RectangleObject(box.as_list())
    return copy


def clip_pages_header_footer(document: Document, padding: float) -> PdfWriter:
    """Return a copy of *document* with ``padding`` points cut from top and bottom.

    Only the copies' crop boxes change; horizontal bounds are kept.

    Raises:
        InvalidCropError: If ``padding`` is negative or would leave no visible area.
    """

    if padding < 0:
        raise InvalidCropError(f"Padding must not be negative, got {padding}")

    track_document(document)
    output = new_document()
    for page_index, page in enumerate(document.pages):
        box = get_crop_box(page)
        clipped = CropBox(
            lower_left_x=box.lower_left_x,
            lower_left_y=box.lower_left_y + padding,
            upper_right_x=box.upper_right_x,
            upper_right_y=box.upper_right_y - padding,
        )
        if clipped.height <= 0:
            raise InvalidCropError(
                f"Padding {padding} exceeds half the height of page {page_index + 1} ({box.height})"
            )
        _add_cropped_copy(output, page, clipped)

    LOGGER.info("Clipped %d page(s) by %s point(s)", len(output.pages), padding)
    return output


def split_pages_vertically(document: Document) -> PdfWriter:
    """Return a document where every page is replaced by its upper then lower half."""

    track_document(document)
    output = new_document()
    for page in document.pages:
        box = get_crop_box(page)
        split_line = box.upper_right_y - box.height / 2
        upper = CropBox(box.lower_left_x, split_line, box.upper_right_x, box.upper_right_y)
        lower = CropBox(box.lower_left_x, box.lower_left_y, box.upper_right_x, split_line)
        _add_cropped_copy(output, page, upper)
        _add_cropped_copy(output, page, lower)

    LOGGER.info("Split pages vertically into %d half page(s)", len(output.pages))
    return output


__all__ = ["get_crop_box", "clip_pages_header_footer", "split_pages_vertically"]
