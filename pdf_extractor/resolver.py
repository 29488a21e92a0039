"""Resolution of logical page numbers onto a document's physical page ids."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .backends.base import BackendDocument
from .exceptions import EmptyOrInvalidTermError, PageOutOfRangeError
from .types import PageSelection
from .utils import describe_pages

LOGGER = logging.getLogger("pdf_extractor.resolver")


def resolve_selection(page_ids: Iterable[int], sequence: Sequence[int]) -> PageSelection:
    """Partition ``page_ids`` into kept and deleted ids for ``sequence``.

    Logical page ``p`` maps to the ``p``-th smallest physical id. Every page in
    ``sequence`` is bounds-checked before anything is computed, so a single
    bad page rejects the whole request.

    Raises:
        EmptyOrInvalidTermError: ``sequence`` is empty.
        PageOutOfRangeError: A page is below 1 or above the page count.
    """

    sorted_ids = sorted(page_ids)
    total = len(sorted_ids)

    if not sequence:
        raise EmptyOrInvalidTermError("No pages requested.")
    for page in sequence:
        if page < 1 or page > total:
            raise PageOutOfRangeError(page, total)

    keep = {sorted_ids[page - 1] for page in sequence}
    return PageSelection(
        total=total,
        requested=tuple(sequence),
        selected=tuple(ident for ident in sorted_ids if ident in keep),
        deleted=tuple(ident for ident in sorted_ids if ident not in keep),
    )


def resolve_and_apply(
    document: BackendDocument,
    sequence: Sequence[int],
    destination: str,
) -> PageSelection:
    """Delete every page not named by ``sequence`` and save ``document``.

    Pages are written in document order. Repeated pages appear once.
    """

    selection = resolve_selection(document.pages().keys(), sequence)

    if selection.has_duplicates or selection.is_reordered:
        LOGGER.warning(
            "Requested pages %s will be written once each in document order",
            describe_pages(selection.requested),
        )
    LOGGER.debug(
        "Keeping %d of %d page(s), deleting ids %s",
        selection.kept_count,
        selection.total,
        list(selection.deleted),
    )

    document.delete(selection.deleted)
    document.compact()
    document.save(destination)
    return selection


__all__ = ["resolve_selection", "resolve_and_apply"]
