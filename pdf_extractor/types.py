"""
Type definitions and dataclasses for PDF Extractor.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SUCCESS_MARK = "✓"
FAILURE_MARK = "✗"


@dataclass
class ExtractionRequest:
    """
    A single page extraction request.

    Attributes:
        input_path: Path to the source PDF
        output_path: Path the extracted PDF is written to
        page_range: Range expression such as ``"1-3,5,7-9"``
        password: Optional password for encrypted sources
    """
    input_path: str
    output_path: str
    page_range: str
    password: Optional[str] = None


@dataclass(frozen=True)
class PageSelection:
    """
    Partition of a document's physical page ids produced by one request.

    Attributes:
        total: Number of pages in the document
        requested: Logical page numbers as parsed, 1-based
        selected: Physical ids that are kept, ascending
        deleted: Physical ids that are removed, ascending
    """
    total: int
    requested: Tuple[int, ...]
    selected: Tuple[int, ...]
    deleted: Tuple[int, ...]

    @property
    def kept_count(self) -> int:
        return len(self.selected)

    @property
    def has_duplicates(self) -> bool:
        return len(set(self.requested)) != len(self.requested)

    @property
    def is_reordered(self) -> bool:
        """True when the requested order differs from document order."""
        return any(a > b for a, b in zip(self.requested, self.requested[1:]))


@dataclass
class PDFInfo:
    """
    PDF document information and metadata.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        page_ids: Physical page ids in document order
        title: PDF title metadata
        author: PDF author metadata
        producer: PDF producer application
        is_encrypted: Whether the PDF is encrypted
    """
    num_pages: int
    file_size: int
    page_ids: List[int] = field(default_factory=list)
    title: Optional[str] = None
    author: Optional[str] = None
    producer: Optional[str] = None
    is_encrypted: bool = False


@dataclass
class ExtractionResult:
    """
    Result of a page extraction.

    Attributes:
        success: Whether the operation was successful
        source_file: Path to source PDF file
        output_path: Path of the written PDF, if any
        pages_requested: Logical pages as parsed from the range expression
        pages_written: Number of pages in the written PDF
        total_pages: Number of pages in the source PDF
        error: Error message if operation failed
    """
    success: bool
    source_file: str
    output_path: Optional[str] = None
    pages_requested: List[int] = field(default_factory=list)
    pages_written: int = 0
    total_pages: int = 0
    error: Optional[str] = None

    @property
    def status_line(self) -> str:
        """Single human-readable line describing the outcome."""
        if self.success:
            return f"{SUCCESS_MARK} Pages extracted successfully!"
        return f"{FAILURE_MARK} Error: {self.error}"

    def __str__(self) -> str:
        """String representation of the result."""
        if self.success:
            return f"ExtractionResult(success=True, pages={self.pages_written})"
        else:
            return f"ExtractionResult(success=False, error='{self.error}')"
