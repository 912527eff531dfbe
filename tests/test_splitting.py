from __future__ import annotations

from typing import Callable

import pytest
from pypdf import PdfReader, PdfWriter

from pdf_operations import USED_DOCUMENTS, split, split_at
from pdf_operations.exceptions import InvalidSplitError


def _counts(documents: list[PdfWriter]) -> list[int]:
    return [len(document.pages) for document in documents]


def test_split_into_fixed_chunks(sample_reader: PdfReader) -> None:
    documents = split(sample_reader, 2)

    assert _counts(documents) == [2, 2, 1]
    assert sample_reader in USED_DOCUMENTS
    assert all(document in USED_DOCUMENTS for document in documents)


def test_split_chunk_larger_than_document(sample_reader: PdfReader) -> None:
    assert _counts(split(sample_reader, 10)) == [5]


def test_split_empty_document() -> None:
    assert split(PdfWriter(), 3) == []


@pytest.mark.parametrize("size", [0, -1, 1.5, True])
def test_split_rejects_invalid_size(sample_reader: PdfReader, size: object) -> None:
    with pytest.raises(InvalidSplitError):
        split(sample_reader, size)  # type: ignore[arg-type]


def test_split_keeps_page_dimensions(blank_document: Callable[..., PdfWriter]) -> None:
    source = blank_document(pages=3, width=300, height=150)
    first = split(source, 1)[0]
    assert float(first.pages[0].mediabox.width) == 300
    assert float(first.pages[0].mediabox.height) == 150


def test_split_at_indices(sample_reader: PdfReader) -> None:
    documents = split_at(sample_reader, [2, 3])
    assert _counts(documents) == [2, 1, 2]


def test_split_at_without_indices_copies_document(sample_reader: PdfReader) -> None:
    assert _counts(split_at(sample_reader, [])) == [5]


def test_split_at_boundaries_produce_empty_documents(sample_reader: PdfReader) -> None:
    assert _counts(split_at(sample_reader, [0, 5])) == [0, 5, 0]
    assert _counts(split_at(sample_reader, [2, 2])) == [2, 0, 3]


@pytest.mark.parametrize("indices", [[6], [-1], [3, 1], ["2"]])
def test_split_at_rejects_invalid_indices(sample_reader: PdfReader, indices: list[object]) -> None:
    with pytest.raises(InvalidSplitError):
        split_at(sample_reader, indices)  # type: ignore[arg-type]


def test_split_at_accepts_generator(sample_reader: PdfReader) -> None:
    documents = split_at(sample_reader, (index for index in [1, 3]))
    assert _counts(documents) == [1, 2, 2]
