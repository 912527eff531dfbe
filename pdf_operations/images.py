"""Conversions between documents and raster images.

Rendering is delegated to PyMuPDF and image decoding/encoding to Pillow;
this module only moves pages and pixels between them and tracks every
document it touches.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from PIL import Image
from pypdf import PdfReader, PdfWriter

from .backends import PymupdfRenderer
from .backends.base import PageRenderer
from .config import get_settings
from .documents import BACKEND, new_document
from .exceptions import ImageConversionError
from .loading import Source, list_directory
from .registry import track_document
from .types import Document, PathLike
from .utils import ensure_path, sort_naturally

LOGGER = logging.getLogger("pdf_operations.images")

RENDERER: PageRenderer = PymupdfRenderer()

# Pillow's PDF writer cannot store an alpha channel.
_PDF_COMPATIBLE_MODES = {"1", "L", "RGB", "CMYK"}


def get_images(source: Source) -> List[Image.Image]:
    """Read every image in *source*.

    *source* may be a directory, a single image path or an iterable of paths.
    Files that cannot be read as images are logged and skipped.
    """

    files = list_directory(source)
    if files is None:
        LOGGER.warning("No images found at %s", source)
        return []
    if isinstance(source, (str, Path)) and Path(source).expanduser().is_dir():
        files = sort_naturally(files)

    images: List[Image.Image] = []
    for path in files:
        try:
            with Image.open(path) as image:
                image.load()
                images.append(image.copy())
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            LOGGER.warning("Could not load %s (%s)", path.name, exc)
    LOGGER.info("Loaded %d image(s)", len(images))
    return images


def to_images(document: Document, scale: Optional[float] = None) -> List[Image.Image]:
    """Render each page of *document* to an RGB image.

    ``scale`` multiplies the 72 DPI page space; it defaults to the configured
    render scale.
    """

    track_document(document)
    if scale is None:
        scale = get_settings().render_scale
    images = RENDERER.render(BACKEND.to_bytes(document), scale)
    LOGGER.info("Rendered %d page(s) at scale %s", len(images), scale)
    return images


def _image_to_page_reader(image: Image.Image) -> PdfReader:
    if image.mode not in _PDF_COMPATIBLE_MODES:
        image = image.convert("RGB")
    buffer = io.BytesIO()
    # 72 DPI makes one pixel one point.
    image.save(buffer, format="PDF", resolution=72.0)
    buffer.seek(0)
    return PdfReader(buffer)


def to_document(images: Iterable[Optional[Image.Image]]) -> PdfWriter:
    """Return a new document with one page per image, sized to the image.

    ``None`` entries are skipped.

    Raises:
        ImageConversionError: If Pillow cannot encode an image as PDF.
    """

    output = new_document()
    for index, image in enumerate(images):
        if image is None:
            continue
        try:
            reader = _image_to_page_reader(image)
        except (OSError, ValueError) as exc:
            LOGGER.error("Failed to convert image %d: %s", index, exc)
            raise ImageConversionError(f"Unable to convert image {index} into a page: {exc}") from exc
        output.add_page(reader.pages[0])
    LOGGER.info("Assembled %d image page(s)", len(output.pages))
    return output


def to_images_document(document: Document, scale: Optional[float] = None) -> PdfWriter:
    """Rasterize *document* and reassemble the images into a new document."""

    return to_document(to_images(document, scale=scale))


def save_images(
    images: Sequence[Image.Image],
    output_dir: PathLike,
    prefix: str = "page",
    image_format: Optional[str] = None,
    padding: int = 3,
) -> List[Path]:
    """Write *images* as ``{prefix}_{index}.{format}`` files inside *output_dir*."""

    image_format = (image_format or get_settings().image_format).lower()
    extension = "jpg" if image_format == "jpeg" else image_format
    pillow_format = "JPEG" if image_format in {"jpg", "jpeg"} else image_format.upper()

    directory = ensure_path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    created: List[Path] = []
    for index, image in enumerate(images, start=1):
        destination = directory / f"{prefix}_{index:0{padding}d}.{extension}"
        if pillow_format == "JPEG" and image.mode not in {"L", "RGB", "CMYK"}:
            image = image.convert("RGB")
        image.save(destination, format=pillow_format)
        created.append(destination)
    LOGGER.info("Wrote %d image(s) to %s", len(created), directory)
    return created


__all__ = [
    "RENDERER",
    "get_images",
    "to_images",
    "to_document",
    "to_images_document",
    "save_images",
]
