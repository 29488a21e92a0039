"""
PDF Extractor - Extract a selection of pages from a PDF into a new file.

Pages are chosen with a compact range expression such as ``"1-3,5,7-9"``.
The expression is parsed into 1-based page numbers, the numbers are mapped
onto the document's page objects, and every page that was not selected is
deleted before the document is saved to the output path.

Quick Start:
    >>> from pdf_extractor import ExtractionRequest, run_extraction
    >>> result = run_extraction(ExtractionRequest('in.pdf', 'out.pdf', '1-3,5'))
    >>> print(result.status_line)

Functions:
    - parse_page_range: Parse a range expression into page numbers
    - resolve_selection: Map page numbers onto physical page ids
    - resolve_and_apply: Delete unselected pages and save
    - extract_pages: Full extraction, raising on failure
    - run_extraction: Full extraction, reporting failure in the result

For CLI usage, use the 'pdf-extractor' command after installation.
"""

from pdf_extractor.config import ExtractorConfig, get_config, reload_config

from pdf_extractor.exceptions import (
    PDFExtractorException,
    ConfigurationError,
    RangeParseError,
    MalformedRangeError,
    InvalidNumberError,
    DescendingRangeError,
    EmptyOrInvalidTermError,
    RangeLimitExceededError,
    ResolveError,
    PageOutOfRangeError,
    LoadFailureError,
    EncryptedPDFError,
    SaveFailureError,
    RequestError,
    MissingFieldError,
    InputNotFoundError,
)

from pdf_extractor.types import ExtractionRequest, ExtractionResult, PageSelection, PDFInfo

from pdf_extractor.ranges import parse_page_range
from pdf_extractor.resolver import resolve_selection, resolve_and_apply
from pdf_extractor.extractor import extract_pages, run_extraction, validate_request, get_pdf_info

__version__ = "1.0.0"
__author__ = "PDF Extractor Contributors"
__license__ = "MIT"

__all__ = [
    # Configuration
    "ExtractorConfig",
    "get_config",
    "reload_config",
    # Exceptions
    "PDFExtractorException",
    "ConfigurationError",
    "RangeParseError",
    "MalformedRangeError",
    "InvalidNumberError",
    "DescendingRangeError",
    "EmptyOrInvalidTermError",
    "RangeLimitExceededError",
    "ResolveError",
    "PageOutOfRangeError",
    "LoadFailureError",
    "EncryptedPDFError",
    "SaveFailureError",
    "RequestError",
    "MissingFieldError",
    "InputNotFoundError",
    # Data types
    "ExtractionRequest",
    "ExtractionResult",
    "PageSelection",
    "PDFInfo",
    # Operations
    "parse_page_range",
    "resolve_selection",
    "resolve_and_apply",
    "extract_pages",
    "run_extraction",
    "validate_request",
    "get_pdf_info",
    # Version info
    "__version__",
]
