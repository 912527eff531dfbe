from __future__ import annotations

from pathlib import Path
from typing import Callable

from pypdf import PdfReader, PdfWriter

from pdf_operations import USED_DOCUMENTS, merge, merge_pages, save_document


def test_merge_two_single_page_documents(blank_document: Callable[..., PdfWriter]) -> None:
    first = blank_document(pages=1, width=100, height=100)
    second = blank_document(pages=1, width=300, height=100)

    merged = merge([first, second])

    assert len(merged.pages) == 2
    assert [float(page.mediabox.width) for page in merged.pages] == [100, 300]
    assert first in USED_DOCUMENTS
    assert second in USED_DOCUMENTS
    assert merged in USED_DOCUMENTS


def test_merge_readers_and_writers(sample_reader: PdfReader, blank_document: Callable[..., PdfWriter]) -> None:
    merged = merge([sample_reader, blank_document(pages=2)])
    assert len(merged.pages) == 7


def test_merge_empty_list() -> None:
    merged = merge([])
    assert len(merged.pages) == 0
    assert merged in USED_DOCUMENTS


def test_merge_pages_preserves_order(sample_reader: PdfReader, tmp_path: Path) -> None:
    pages = [sample_reader.pages[4], sample_reader.pages[0]]
    merged = merge_pages(pages)

    output = save_document(merged, tmp_path / "merged.pdf")
    assert len(PdfReader(str(output)).pages) == 2


def test_merged_document_round_trips(sample_pdf: Path, tmp_path: Path) -> None:
    reader = PdfReader(str(sample_pdf))
    output = save_document(merge([reader, reader]), tmp_path / "out" / "double.pdf")

    assert output.exists()
    assert len(PdfReader(str(output)).pages) == 10
