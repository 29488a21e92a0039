"""Page extraction built around :mod:`pdf_extractor.resolver`."""

from __future__ import annotations

import logging
from typing import Optional

from .backends import PypdfBackend
from .backends.base import BackendDocument, PDFBackend
from .exceptions import InputNotFoundError, MissingFieldError, PDFExtractorException
from .ranges import parse_page_range
from .resolver import resolve_and_apply
from .types import ExtractionRequest, ExtractionResult, PDFInfo
from .utils import coerce_path, describe_pages

LOGGER = logging.getLogger("pdf_extractor.extractor")

_REQUIRED_FIELDS = (
    ("input_path", "an input PDF file"),
    ("output_path", "an output PDF file"),
    ("page_range", "page range"),
)


def validate_request(request: ExtractionRequest) -> None:
    """Check that every field is filled in and the input file exists."""

    for name, description in _REQUIRED_FIELDS:
        if not getattr(request, name):
            raise MissingFieldError(name, description)

    if not coerce_path(request.input_path).exists():
        raise InputNotFoundError(request.input_path)


def extract_pages(
    request: ExtractionRequest,
    *,
    backend: Optional[PDFBackend] = None,
    max_pages: Optional[int] = None,
    document: Optional[BackendDocument] = None,
) -> ExtractionResult:
    """Write the pages named by ``request.page_range`` to ``request.output_path``.

    ``document`` may be an already loaded copy of the input. It is used
    instead of loading the file again.

    Raises:
        RequestError: The request is incomplete or the input is missing.
        RangeParseError: The range expression is invalid.
        ResolveError: A page is out of range, or loading or saving failed.
    """

    validate_request(request)
    pages = parse_page_range(request.page_range, max_pages=max_pages)

    if document is None:
        backend = backend or PypdfBackend()
        document = backend.load(str(coerce_path(request.input_path)), password=request.password)

    LOGGER.info(
        "Extracting pages %s from %s", describe_pages(pages), request.input_path
    )
    selection = resolve_and_apply(document, pages, str(coerce_path(request.output_path)))

    return ExtractionResult(
        success=True,
        source_file=request.input_path,
        output_path=request.output_path,
        pages_requested=pages,
        pages_written=selection.kept_count,
        total_pages=selection.total,
    )


def run_extraction(
    request: ExtractionRequest,
    *,
    backend: Optional[PDFBackend] = None,
    max_pages: Optional[int] = None,
    document: Optional[BackendDocument] = None,
) -> ExtractionResult:
    """Like :func:`extract_pages` but reports failures in the returned result."""

    try:
        return extract_pages(request, backend=backend, max_pages=max_pages, document=document)
    except PDFExtractorException as exc:
        LOGGER.error("Extraction from %s failed: %s", request.input_path, exc.message)
        return ExtractionResult(
            success=False,
            source_file=request.input_path,
            error=exc.message,
        )


def get_pdf_info(
    pdf_path: str,
    password: Optional[str] = None,
    *,
    backend: Optional[PypdfBackend] = None,
) -> PDFInfo:
    """Return information about a PDF document using :class:`PDFInfo`."""

    document = (backend or PypdfBackend()).load(pdf_path, password=password)
    return document.to_pdf_info()


__all__ = ["validate_request", "extract_pages", "run_extraction", "get_pdf_info"]
