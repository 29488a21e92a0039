from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional
import logging
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pdf_extractor.backends.base import BackendDocument  # noqa: E402

PAGE_HEIGHT = 200


def page_width(index: int) -> int:
    """Width given to the ``index``-th (0-based) page of generated PDFs."""
    return 100 + 10 * index


def write_pdf(path: Path, num_pages: int, title: Optional[str] = None, password: Optional[str] = None) -> Path:
    writer = PdfWriter()
    for index in range(num_pages):
        writer.add_blank_page(width=page_width(index), height=PAGE_HEIGHT)
    if title is not None:
        writer.add_metadata({"/Title": title, "/Author": "Test Author"})
    if password is not None:
        writer.encrypt(password)
    with path.open("wb") as handle:
        writer.write(handle)
    return path


def page_widths(path: Path) -> List[int]:
    """Widths of the pages in ``path``, used to tell generated pages apart."""
    return [int(round(float(page.mediabox.width))) for page in PdfReader(str(path)).pages]


class FakeDocument(BackendDocument):
    """In-memory document with caller-chosen physical ids."""

    def __init__(self, ids: Iterable[int]) -> None:
        super().__init__(file_size=0)
        self._pages: Dict[int, str] = {ident: f"page-{ident}" for ident in ids}
        self.calls: List[str] = []
        self.saved_to: Optional[str] = None

    def pages(self) -> Dict[int, str]:
        return dict(self._pages)

    def delete(self, ids: Iterable[int]) -> None:
        self.calls.append("delete")
        for ident in ids:
            del self._pages[ident]

    def compact(self) -> None:
        self.calls.append("compact")

    def save(self, destination: str) -> None:
        self.calls.append("save")
        self.saved_to = destination


@pytest.fixture()
def fake_document() -> Callable[[Iterable[int]], FakeDocument]:
    return FakeDocument


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, num_pages: int = 5, title: Optional[str] = None, password: Optional[str] = None) -> Path:
        return write_pdf(tmp_path / filename, num_pages, title=title, password=password)

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", 5, title="Sample")


@pytest.fixture()
def ten_page_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("ten.pdf", 10)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("pdf_extractor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
