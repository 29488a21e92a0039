"""Parsing of page range expressions such as ``"1-3,5,7-9"``."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .config import get_config
from .exceptions import (
    DescendingRangeError,
    EmptyOrInvalidTermError,
    InvalidNumberError,
    MalformedRangeError,
    RangeLimitExceededError,
)

LOGGER = logging.getLogger("pdf_extractor.ranges")

PageList = List[int]

_NUMBER_RE = re.compile(r"[0-9]+")


def _parse_positive(token: str) -> int:
    token = token.strip()
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidNumberError(token)
    value = int(token)
    if value < 1:
        raise InvalidNumberError(token)
    return value


def parse_page_range(expression: str, *, max_pages: Optional[int] = None) -> PageList:
    """Parse a range expression into an ordered list of 1-based page numbers.

    Terms are separated by commas and are either a single page (``"5"``) or an
    inclusive range (``"7-9"``). Pages are emitted in the order the terms
    appear; duplicates are kept and nothing is sorted.

    Args:
        expression: The range expression.
        max_pages: Upper bound on the length of the resulting list. Defaults to
            the configured ``max_pages``. A range term is checked against the
            bound before it is expanded.

    Raises:
        EmptyOrInvalidTermError: The expression or one of its terms is empty.
        MalformedRangeError: A range term does not have exactly two bounds.
        InvalidNumberError: A bound or page is not a positive integer.
        DescendingRangeError: A range term has ``start > end``.
        RangeLimitExceededError: The expansion would exceed ``max_pages``.
    """

    limit = max_pages if max_pages is not None else get_config().max_pages

    if not expression or not expression.strip():
        raise EmptyOrInvalidTermError()

    pages: PageList = []
    for term in expression.split(","):
        term = term.strip()
        if not term:
            raise EmptyOrInvalidTermError()

        if "-" in term:
            bounds = [bound.strip() for bound in term.split("-")]
            if len(bounds) != 2 or not all(bounds):
                raise MalformedRangeError(term)
            start = _parse_positive(bounds[0])
            end = _parse_positive(bounds[1])
            if start > end:
                raise DescendingRangeError(start, end)
            if len(pages) + (end - start + 1) > limit:
                raise RangeLimitExceededError(limit)
            pages.extend(range(start, end + 1))
        else:
            page = _parse_positive(term)
            if len(pages) + 1 > limit:
                raise RangeLimitExceededError(limit)
            pages.append(page)

    LOGGER.debug("Parsed %r into %d page(s)", expression, len(pages))
    return pages


__all__ = ["PageList", "parse_page_range"]
