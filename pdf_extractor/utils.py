"""Utility functions shared by PDF Extractor modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """Return ``name``'s logger with a single stream handler attached."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger


def coerce_path(path: Union[str, Path]) -> Path:
    """Return a :class:`~pathlib.Path` object for ``path``."""

    return Path(path).expanduser()


def describe_pages(pages: Iterable[int]) -> str:
    """Collapse consecutive runs of page numbers into a compact label.

    ``[1, 2, 3, 5, 7, 8, 9]`` becomes ``"1-3,5,7-9"``. Order is preserved, so
    a label for an unsorted sequence only merges runs that ascend by one.
    """

    parts: List[str] = []
    run_start = run_end = None
    for page in pages:
        if run_end is not None and page == run_end + 1:
            run_end = page
            continue
        if run_start is not None:
            parts.append(_run_label(run_start, run_end))
        run_start = run_end = page
    if run_start is not None:
        parts.append(_run_label(run_start, run_end))
    return ",".join(parts)


def _run_label(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
