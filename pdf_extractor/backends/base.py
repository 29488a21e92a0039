"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers.

    Pages are addressed by physical id: the container's own handle for the
    page object. Ids are opaque and need not be contiguous or start at 1.
    """

    file_size: int

    def pages(self) -> Dict[int, object]:
        """Return ``{physical_id: page}`` for the remaining pages, in document order."""
        raise NotImplementedError

    def delete(self, ids: Iterable[int]) -> None:
        raise NotImplementedError

    def compact(self) -> None:
        raise NotImplementedError

    def save(self, destination: str) -> None:
        raise NotImplementedError

    @property
    def num_pages(self) -> int:
        return len(self.pages())


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, pdf_path: str, password: str | None = None) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""
