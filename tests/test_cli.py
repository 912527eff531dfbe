from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner
from pypdf import PdfReader

from pdf_operations import USED_DOCUMENTS
from pdf_operations.cli import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _pages(path: Path) -> int:
    return len(PdfReader(str(path)).pages)


def test_merge_directory_and_file(runner: CliRunner, pdf_factory: Callable[..., Path], tmp_path: Path) -> None:
    pdf_factory("chapters/ch2.pdf", pages=2)
    pdf_factory("chapters/ch10.pdf", pages=3)
    appendix = pdf_factory("appendix.pdf", pages=1)
    output = tmp_path / "book.pdf"

    result = runner.invoke(cli, ["merge", str(tmp_path / "chapters"), str(appendix), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert _pages(output) == 6
    assert len(USED_DOCUMENTS) == 0


def test_merge_without_pdfs_fails(runner: CliRunner, tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    result = runner.invoke(cli, ["merge", str(empty), "-o", str(tmp_path / "out.pdf")])
    assert result.exit_code == 1
    assert "No readable PDF documents" in result.output


def test_split(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "parts"
    result = runner.invoke(cli, ["split", str(sample_pdf), "-n", "2", "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    created = sorted(output_dir.glob("*.pdf"))
    assert [path.name for path in created] == ["part_001.pdf", "part_002.pdf", "part_003.pdf"]
    assert [_pages(path) for path in created] == [2, 2, 1]


def test_split_invalid_size(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["split", str(sample_pdf), "-n", "0", "-o", str(tmp_path)])
    assert result.exit_code == 1
    assert "positive integer" in result.output
    assert len(USED_DOCUMENTS) == 0


def test_split_at(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "parts"
    result = runner.invoke(cli, ["split-at", str(sample_pdf), "1", "4", "-o", str(output_dir), "-p", "section"])

    assert result.exit_code == 0, result.output
    created = sorted(output_dir.glob("section_*.pdf"))
    assert [_pages(path) for path in created] == [1, 3, 1]


def test_clip_and_bisect(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    clipped = tmp_path / "clipped.pdf"
    halves = tmp_path / "halves.pdf"

    assert runner.invoke(cli, ["clip", str(sample_pdf), "-d", "25", "-o", str(clipped)]).exit_code == 0
    assert runner.invoke(cli, ["bisect", str(clipped), "-o", str(halves)]).exit_code == 0

    reader = PdfReader(str(halves))
    assert len(reader.pages) == 10
    assert float(reader.pages[0].cropbox.top) == 175
    assert float(reader.pages[1].cropbox.bottom) == 25


def test_rasterize(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "pages"
    result = runner.invoke(cli, ["rasterize", str(sample_pdf), "-o", str(output_dir), "-s", "1"])

    assert result.exit_code == 0, result.output
    assert len(list(output_dir.glob("page_*.png"))) == 5


def test_images_to_pdf(runner: CliRunner, image_factory: Callable[..., Path], tmp_path: Path) -> None:
    image_factory("scans/a1.png")
    image_factory("scans/a2.png")
    output = tmp_path / "scans.pdf"

    result = runner.invoke(cli, ["images-to-pdf", str(tmp_path / "scans"), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert _pages(output) == 2


def test_flatten(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "flat.pdf"
    result = runner.invoke(cli, ["flatten", str(sample_pdf), "-o", str(output), "-s", "0.5"])

    assert result.exit_code == 0, result.output
    page = PdfReader(str(output)).pages[0]
    assert float(page.mediabox.width) == 100


def test_info(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["info", str(sample_pdf)])

    assert result.exit_code == 0, result.output
    assert "Number of Pages" in result.output
    assert "Sample" in result.output


def test_info_rejects_broken_pdf(runner: CliRunner, tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf")
    result = runner.invoke(cli, ["info", str(broken)])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_log_level_accepts_critical(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["--log-level", "critical", "info", str(sample_pdf)])
    assert result.exit_code == 0, result.output
