"""
Command-line interface for PDF Operations.
"""

import os
import sys
from functools import wraps

import click
from rich.console import Console
from rich.table import Table

from pdf_operations import __version__
from pdf_operations.config import get_settings
from pdf_operations.cropping import clip_pages_header_footer, split_pages_vertically
from pdf_operations.documents import get_document_info, load_document, save_document, save_documents
from pdf_operations.images import get_images, save_images, to_document, to_images, to_images_document
from pdf_operations.loading import load_documents
from pdf_operations.merging import merge
from pdf_operations.registry import close_all_documents
from pdf_operations.splitting import split, split_at
from pdf_operations.utils import configure_logging, format_file_size

console = Console()


def _fail(error):
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


def _print_created(paths, limit=5):
    console.print("\n[bold]Created files:[/bold]")
    for file_path in paths[:limit]:
        console.print(f"  • {os.path.basename(str(file_path))}")
    if len(paths) > limit:
        console.print(f"  ... and {len(paths) - limit} more")
    console.print()


def closes_documents(command):
    """Report errors uniformly and drain the document registry afterwards."""

    @wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except Exception as e:
            _fail(e)
        finally:
            close_all_documents()

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--log-level',
    default=None,
    help='Logging level (defaults to PDF_OPERATIONS_LOG_LEVEL or WARNING)',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
)
def cli(log_level):
    """
    PDF Operations CLI - Merge, split, crop and rasterize PDF files.
    """
    configure_logging((log_level or get_settings().log_level).upper())


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@closes_documents
def merge_command(inputs, output):
    """
    Merge PDFs (or directories of PDFs) into one document.

    Directories are expanded in natural filename order.

    Example:

        pdf-operations merge chapters/ appendix.pdf -o book.pdf
    """
    documents = []
    for source in inputs:
        documents.extend(load_documents(source))
    if not documents:
        _fail("No readable PDF documents found")

    console.print(f"\n[bold cyan]Merging {len(documents)} document(s)...[/bold cyan]")
    merged = merge(documents)
    path = save_document(merged, output)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {path} ({len(merged.pages)} pages)\n")


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--pages', '-n', required=True, help='Number of pages per output document', type=int)
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@click.option('--prefix', '-p', default='part', help='Prefix for output filenames', type=str)
@closes_documents
def split_command(input_pdf, pages, output_dir, prefix):
    """
    Split a PDF into documents of N pages.

    Example:

        pdf-operations split input.pdf -n 5 -o chunks
    """
    document = load_document(input_pdf)
    console.print(f"\n[bold cyan]Splitting into documents of {pages} page(s)...[/bold cyan]")
    created = save_documents(split(document, pages), output_dir, prefix=prefix)
    console.print(f"\n[bold green]✓ Successfully split into {len(created)} files[/bold green]")
    console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")
    _print_created(created)


@cli.command(name="split-at")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.argument('indices', nargs=-1, required=True, type=int)
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@click.option('--prefix', '-p', default='part', help='Prefix for output filenames', type=str)
@closes_documents
def split_at_command(input_pdf, indices, output_dir, prefix):
    """
    Split a PDF before each 0-based page INDEX.

    Example:

        pdf-operations split-at input.pdf 2 5 -o parts
    """
    document = load_document(input_pdf)
    console.print(f"\n[bold cyan]Splitting at {', '.join(map(str, indices))}...[/bold cyan]")
    created = save_documents(split_at(document, list(indices)), output_dir, prefix=prefix)
    console.print(f"\n[bold green]✓ Successfully split into {len(created)} files[/bold green]")
    _print_created(created)


@cli.command(name="clip")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--padding', '-d', required=True, help='Points to remove from top and bottom', type=float)
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@closes_documents
def clip_command(input_pdf, padding, output):
    """
    Clip header and footer from every page.

    Example:

        pdf-operations clip scan.pdf -d 36 -o clipped.pdf
    """
    document = load_document(input_pdf)
    path = save_document(clip_pages_header_footer(document, padding), output)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {path}\n")


@cli.command(name="bisect")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@closes_documents
def bisect_command(input_pdf, output):
    """
    Split every page into its upper and lower half.

    Example:

        pdf-operations bisect spreads.pdf -o halves.pdf
    """
    document = load_document(input_pdf)
    result = split_pages_vertically(document)
    path = save_document(result, output)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {path} ({len(result.pages)} pages)\n")


@cli.command(name="rasterize")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@click.option('--scale', '-s', default=None, help='Zoom factor over 72 DPI', type=float)
@click.option('--prefix', '-p', default='page', help='Prefix for output filenames', type=str)
@click.option('--format', '-f', 'image_format', default=None, help='Image format (png, jpeg, tiff, bmp)', type=str)
@closes_documents
def rasterize_command(input_pdf, output_dir, scale, prefix, image_format):
    """
    Render every page to an image file.

    Example:

        pdf-operations rasterize input.pdf -o pages -s 2
    """
    document = load_document(input_pdf)
    console.print(f"\n[bold cyan]Rendering {len(document.pages)} page(s)...[/bold cyan]")
    created = save_images(to_images(document, scale=scale), output_dir, prefix=prefix, image_format=image_format)
    console.print(f"\n[bold green]✓ Successfully rendered {len(created)} image(s)[/bold green]")
    _print_created(created)


@cli.command(name="images-to-pdf")
@click.argument('sources', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@closes_documents
def images_to_pdf_command(sources, output):
    """
    Assemble images (or directories of images) into a PDF.

    Example:

        pdf-operations images-to-pdf scans/ -o scans.pdf
    """
    images = []
    for source in sources:
        images.extend(get_images(source))
    if not images:
        _fail("No readable images found")
    path = save_document(to_document(images), output)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {path} ({len(images)} pages)\n")


@cli.command(name="flatten")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@click.option('--scale', '-s', default=None, help='Zoom factor over 72 DPI', type=float)
@closes_documents
def flatten_command(input_pdf, output, scale):
    """
    Replace every page with a rendered image of itself.

    Example:

        pdf-operations flatten form.pdf -o flat.pdf
    """
    document = load_document(input_pdf)
    path = save_document(to_images_document(document, scale=scale), output)
    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {path}\n")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@closes_documents
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        pdf-operations info input.pdf
    """
    info = get_document_info(load_document(input_pdf))

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(os.path.getsize(input_pdf)))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")
    if info.title:
        table.add_row("Title", info.title)
    if info.author:
        table.add_row("Author", info.author)
    if info.producer:
        table.add_row("Producer", info.producer)

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
