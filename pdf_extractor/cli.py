"""
Command-line interface for PDF extractor.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdf_extractor.backends import PypdfBackend
from pdf_extractor.config import get_config
from pdf_extractor.exceptions import PDFExtractorException
from pdf_extractor.extractor import get_pdf_info, run_extraction, validate_request
from pdf_extractor.ranges import parse_page_range
from pdf_extractor.resolver import resolve_selection
from pdf_extractor.types import FAILURE_MARK, ExtractionRequest
from pdf_extractor.utils import coerce_path, describe_pages, format_file_size, get_logger

console = Console()


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_config().log_level
    get_logger("pdf_extractor", level=level)


def _fail(message: str) -> None:
    console.print(f"\n[bold red]{FAILURE_MARK} Error:[/bold red] {message}")
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    PDF Extractor CLI - Extract selected pages of a PDF into a new PDF.
    """
    pass


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(dir_okay=False))
@click.option(
    '--pages', '-p',
    required=True,
    help="Pages to extract (e.g., '1-3,5,7-9')",
    type=str
)
@click.option(
    '--output', '-o',
    required=True,
    help='Output PDF path',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--password',
    default=None,
    help='Password for encrypted input PDFs',
    type=str
)
@click.option(
    '--max-pages',
    default=None,
    help='Maximum number of pages a range expression may expand to',
    type=click.IntRange(min=1)
)
@click.option(
    '--dry-run',
    is_flag=True,
    help='Show which pages would be kept and deleted without writing'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def extract(input_pdf, pages, output, password, max_pages, dry_run, verbose):
    """
    Extract specific pages into a single new PDF.

    Pages are written in document order; a page named twice is written once.

    Examples:

        pdf-extractor extract input.pdf -p '1-5' -o first_five.pdf

        pdf-extractor extract input.pdf -p '1,3,5' -o odd.pdf

        pdf-extractor extract input.pdf --pages '1-3,7-9' --output parts.pdf
    """
    request = ExtractionRequest(
        input_path=input_pdf,
        output_path=output,
        page_range=pages,
        password=password,
    )

    # The expression is parsed before the PDF is opened.
    try:
        setup_logging(verbose)
        validate_request(request)
        page_list = parse_page_range(pages, max_pages=max_pages)
        backend = PypdfBackend()
        document = backend.load(str(coerce_path(input_pdf)), password=password)
    except PDFExtractorException as e:
        _fail(e.message)

    info = document.to_pdf_info()

    # Display PDF information
    info_table = Table(title="PDF Information", show_header=False)
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="green")

    info_table.add_row("File", os.path.basename(input_pdf))
    info_table.add_row("Total Pages", str(info.num_pages))
    info_table.add_row("Size", format_file_size(info.file_size))

    console.print(info_table)

    console.print(f"[dim]Pages to extract: {describe_pages(page_list)}[/dim]")

    if dry_run:
        try:
            selection = resolve_selection(info.page_ids, page_list)
        except PDFExtractorException as e:
            _fail(e.message)

        plan = Table(title="Extraction Plan", show_header=False)
        plan.add_column("Property", style="cyan")
        plan.add_column("Value", style="green")
        plan.add_row("Kept page ids", ", ".join(map(str, selection.selected)))
        plan.add_row("Deleted page ids", ", ".join(map(str, selection.deleted)) or "-")
        plan.add_row("Pages written", f"{selection.kept_count} of {selection.total}")
        console.print(plan)
        console.print()
        return

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        task = progress.add_task("Extracting pages...", total=None)
        result = run_extraction(
            request,
            backend=backend,
            max_pages=max_pages,
            document=document,
        )
        progress.update(task, completed=True)

    if not result.success:
        _fail(result.error)

    output_path = coerce_path(output)
    console.print(f"\n[bold green]{result.status_line}[/bold green]")
    console.print(f"[dim]Output: {output_path.resolve()}[/dim]")
    if output_path.exists():
        console.print(f"[dim]Output size: {format_file_size(output_path.stat().st_size)}[/dim]")
    console.print(f"[dim]Pages written: {result.pages_written} of {result.total_pages}[/dim]")
    console.print()


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--password',
    default=None,
    help='Password for encrypted input PDFs',
    type=str
)
def show_info(input_pdf, password):
    """
    Display information about a PDF file and its page ids.

    Example:

        pdf-extractor info input.pdf
    """
    try:
        info = get_pdf_info(input_pdf, password=password)
    except PDFExtractorException as e:
        _fail(e.message)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")

    if info.title:
        table.add_row("Title", info.title)
    if info.author:
        table.add_row("Author", info.author)
    if info.producer:
        table.add_row("Producer", info.producer)

    pages_table = Table(title="Pages")
    pages_table.add_column("Page", style="cyan", justify="right")
    pages_table.add_column("Object Id", style="green", justify="right")
    for number, ident in enumerate(sorted(info.page_ids), 1):
        pages_table.add_row(str(number), str(ident))

    console.print()
    console.print(table)
    console.print(pages_table)
    console.print()


if __name__ == '__main__':
    cli()
