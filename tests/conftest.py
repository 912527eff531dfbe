from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from PIL import Image
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_operations.registry import USED_DOCUMENTS, close_all_documents


@pytest.fixture(autouse=True)
def drain_registry() -> Iterator[None]:
    yield
    close_all_documents()
    assert len(USED_DOCUMENTS) == 0


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        pages: int = 1,
        title: str | None = None,
        width: float = 200,
        height: float = 200,
    ) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=width, height=height)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", pages=5, title="Sample")


@pytest.fixture()
def sample_reader(sample_pdf: Path) -> PdfReader:
    return PdfReader(str(sample_pdf))


@pytest.fixture()
def image_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        size: tuple[int, int] = (40, 30),
        color: str = "red",
        mode: str = "RGB",
    ) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path)
        return path

    return _create


@pytest.fixture()
def blank_document() -> Callable[..., PdfWriter]:
    def _create(pages: int = 1, width: float = 200, height: float = 200) -> PdfWriter:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=width, height=height)
        return writer

    return _create


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger("pdf_operations")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)
