"""pypdf backend implementation for PDF Extractor."""

from __future__ import annotations

import io
import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, cast

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..config import get_config
from ..exceptions import EncryptedPDFError, LoadFailureError, SaveFailureError
from ..types import PDFInfo
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("pdf_extractor.backends.pypdf")


def page_id(page: PageObject) -> int:
    """Return the object number of ``page``, its physical id in the file."""
    reference = page.indirect_reference
    if reference is None:
        raise LoadFailureError("Page object has no indirect reference in the source PDF.")
    return reference.idnum


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader
    producer: str = "PDF Page Extractor"
    _deleted: Set[int] = field(default_factory=set, init=False, repr=False)
    _writer: Optional[PdfWriter] = field(default=None, init=False, repr=False)

    def pages(self) -> Dict[int, PageObject]:
        remaining: Dict[int, PageObject] = {}
        for page in self.reader.pages:
            ident = page_id(page)
            if ident not in self._deleted:
                remaining[ident] = page
        return remaining

    def delete(self, ids: Iterable[int]) -> None:
        doomed = set(ids)
        unknown = doomed - set(self.pages())
        if unknown:
            raise ValueError(f"Unknown page ids: {sorted(unknown)}")
        self._deleted.update(doomed)
        self._writer = None
        LOGGER.debug("Marked %d page(s) for deletion", len(doomed))

    def compact(self) -> None:
        """Clone the document and drop the deleted pages from the clone.

        The document catalog is carried over, so the outline, page labels,
        named destinations, form fields and XMP metadata survive. Deleted
        pages are replaced by null objects and objects left unreferenced are
        removed. Content streams are Flate-compressed.
        """
        writer = PdfWriter(clone_from=self.reader)
        doomed = [
            index
            for index, page in enumerate(self.reader.pages)
            if page_id(page) in self._deleted
        ]
        for index in reversed(doomed):
            writer.remove_page(index, clean=True)
        for page in writer.pages:
            page.compress_content_streams()
        # Identical pages must stay distinct objects, so only orphans are swept.
        writer.compress_identical_objects(remove_duplicates=False)
        self._copy_metadata(writer)
        self._writer = writer

    def save(self, destination: str) -> None:
        if self._writer is None:
            self.compact()
        writer = cast(PdfWriter, self._writer)

        path = Path(destination)
        temp_path: Optional[Path] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("wb", delete=False, dir=path.parent, suffix=".tmp") as handle:
                temp_path = Path(handle.name)
                writer.write(handle)
            temp_path.replace(path)
        except Exception as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise SaveFailureError(f"Failed to save PDF: {exc}", cause=exc) from exc
        LOGGER.info("Wrote %d page(s) to %s", len(writer.pages), path)

    def to_pdf_info(self) -> PDFInfo:
        metadata = self.reader.metadata
        return PDFInfo(
            num_pages=len(self.reader.pages),
            file_size=self.file_size,
            page_ids=[page_id(page) for page in self.reader.pages],
            title=metadata.title if metadata else None,
            author=metadata.author if metadata else None,
            producer=metadata.producer if metadata else None,
            is_encrypted=self.reader.is_encrypted,
        )

    def _copy_metadata(self, writer: PdfWriter) -> None:
        metadata_dict = {}
        metadata = self.reader.metadata

        if metadata and metadata.title:
            metadata_dict['/Title'] = metadata.title
        if metadata and metadata.author:
            metadata_dict['/Author'] = metadata.author
        if metadata and metadata.subject:
            metadata_dict['/Subject'] = metadata.subject
        if metadata and metadata.creator:
            metadata_dict['/Creator'] = metadata.creator

        metadata_dict['/Producer'] = self.producer
        writer.add_metadata(metadata_dict)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def __init__(self, producer: Optional[str] = None) -> None:
        self.producer = producer or get_config().producer

    def load(self, pdf_path: str, password: str | None = None) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise LoadFailureError(f"Failed to load PDF: file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise LoadFailureError(f"Failed to load PDF: {exc}", cause=exc) from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise LoadFailureError(f"Failed to load PDF: {exc}", cause=exc) from exc
        except Exception as exc:
            raise LoadFailureError(f"Failed to load PDF: unexpected error: {exc}", cause=exc) from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

        try:
            num_pages = len(reader.pages)
        except PdfReadError as exc:
            raise LoadFailureError(f"Failed to load PDF: {exc}", cause=exc) from exc
        if num_pages == 0:
            raise LoadFailureError(f"Failed to load PDF: no pages in {pdf_path}")

        # Pages are keyed by object number, so each page object may appear once.
        ids = [page_id(page) for page in reader.pages]
        if len(set(ids)) != num_pages:
            raise LoadFailureError(
                f"Failed to load PDF: page tree references the same page object more than once in {pdf_path}"
            )

        LOGGER.debug("Loaded %s (%d pages, %d bytes)", pdf_path, num_pages, len(raw_bytes))
        return PypdfDocument(
            file_size=len(raw_bytes),
            reader=reader,
            producer=self.producer,
        )
