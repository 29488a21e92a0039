"""
Custom exceptions for PDF Extractor.

This module defines all custom exceptions used throughout the library.
Parsing, resolution and request errors each have their own branch so callers
can tell a bad range expression apart from a bad document.
"""

from typing import Optional


class PDFExtractorException(Exception):
    """Base exception for all PDF Extractor errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF extractor error occurred."


class ConfigurationError(PDFExtractorException, ValueError):
    """Raised when a configuration value is invalid."""

    def __init__(self, name: str, value: object, expected: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r} (expected {expected})")


# ----------------------------------------------------------------------
# Range expression errors
# ----------------------------------------------------------------------
class RangeParseError(PDFExtractorException):
    """Raised when a page range expression cannot be parsed."""

    @property
    def default_message(self) -> str:
        return "Invalid page range specification."


class MalformedRangeError(RangeParseError):
    """Raised when a range term does not split into exactly two bounds."""

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f"Invalid range: {term}")


class InvalidNumberError(RangeParseError):
    """Raised when a token is not a positive integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid page number: {token}")


class DescendingRangeError(RangeParseError):
    """Raised when a range term has its start after its end."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: {start} > {end}")


class EmptyOrInvalidTermError(RangeParseError):
    """Raised for an empty expression or an empty term inside one."""

    @property
    def default_message(self) -> str:
        return "Page range is empty or contains an empty term."


class RangeLimitExceededError(RangeParseError):
    """Raised when an expression would expand past the configured page limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"Page range expands to more than {limit} pages. "
            "Raise the limit with --max-pages or PDF_EXTRACTOR_MAX_PAGES."
        )


# ----------------------------------------------------------------------
# Resolution and container errors
# ----------------------------------------------------------------------
class ResolveError(PDFExtractorException):
    """Raised when a parsed page sequence cannot be applied to a document."""

    @property
    def default_message(self) -> str:
        return "Unable to apply page selection to the document."


class PageOutOfRangeError(ResolveError):
    """Raised when a requested page number is outside the document."""

    def __init__(self, page: int, total: int) -> None:
        self.page = page
        self.total = total
        super().__init__(f"Page {page} is out of range (1-{total})")


class LoadFailureError(ResolveError):
    """Raised when a PDF cannot be loaded."""

    def __init__(self, message: str = "", cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Failed to load PDF."


class EncryptedPDFError(LoadFailureError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class SaveFailureError(ResolveError):
    """Raised when the rewritten PDF cannot be persisted."""

    def __init__(self, message: str = "", cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return "Failed to save PDF."


# ----------------------------------------------------------------------
# Request pre-flight errors
# ----------------------------------------------------------------------
class RequestError(PDFExtractorException):
    """Raised when an extraction request is incomplete."""

    @property
    def default_message(self) -> str:
        return "Invalid extraction request."


class MissingFieldError(RequestError):
    """Raised when a required request field is empty."""

    def __init__(self, field: str, description: str) -> None:
        self.field = field
        super().__init__(f"Please specify {description}")


class InputNotFoundError(RequestError):
    """Raised when the input PDF does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")
