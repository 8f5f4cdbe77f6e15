"""Pagination helpers: split a sequence into fixed-size pages."""

from typing import Generic, Sequence, TypeVar

import structlog
from pydantic import BaseModel

from sutil.core.config import get_settings
from sutil.core.exceptions import InvalidLimitError, InvalidPageError, InvalidSequenceError
from sutil.core.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


def _log_rejection(event: str, **values) -> None:
    # Silent until the host configures structlog; the default config prints to stdout
    if structlog.is_configured():
        log.debug(event, **values)


class Page(BaseModel, Generic[T]):
    items: list[T]
    page: int
    limit: int
    offset: int
    total: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages


def _validate(sequence: Sequence[T] | None, limit: int, event: str) -> None:
    max_limit = get_settings().max_limit
    # bool is an int subclass; True must not pass as a page size of 1
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= max_limit:
        _log_rejection(event, reason="invalid_limit", limit=limit, max_limit=max_limit)
        raise InvalidLimitError(details={"limit": limit, "max_limit": max_limit})
    if sequence is None:
        _log_rejection(event, reason="invalid_sequence", limit=limit)
        raise InvalidSequenceError()


def total_pages(length: int, limit: int) -> int:
    """Number of pages needed for `length` items; limit must already be validated."""
    assert limit >= 1, "limit must be at least 1"
    page, remain = divmod(length, limit)
    if remain > 0:
        page += 1
    return page


def bounds(page: int, limit: int, length: int) -> tuple[int, int]:
    """Half-open (start, end) range of a zero-based page, clamped to length."""
    if page < 0:
        return 0, 0
    start = min(page * limit, length)
    end = min(start + limit, length)
    return start, end


def content(sequence: Sequence[T], page: int, limit: int) -> Sequence[T]:
    """Slice of `sequence` for one page; empty past the end."""
    start, end = bounds(page, limit, len(sequence))
    return sequence[start:end]


def split(sequence: Sequence[T] | None, limit: int) -> list[Sequence[T]]:
    """
    Split a sequence into pages of at most `limit` items.

    Every page but the last holds exactly `limit` items and the pages
    concatenate back to the input. Pages are slices, so a list yields lists
    and a tuple yields tuples. Useful for paginating results or for breaking
    up parameters of SQL IN statements:

        >>> split(["a", "b", "c", "d", "e"], 2)
        [['a', 'b'], ['c', 'd'], ['e']]

    Raises InvalidLimitError when limit is outside [1, max_limit] and
    InvalidSequenceError when sequence is None. An empty sequence gives [].
    """
    _validate(sequence, limit, "split_rejected")
    length = len(sequence)
    return [content(sequence, page, limit) for page in range(total_pages(length, limit))]


def page_of(sequence: Sequence[T] | None, page: int, limit: int) -> Page[T]:
    """Return one zero-based page of `sequence` with its pagination metadata."""
    _validate(sequence, limit, "page_rejected")
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        _log_rejection("page_rejected", reason="invalid_page", page=page)
        raise InvalidPageError(details={"page": page})
    length = len(sequence)
    start, end = bounds(page, limit, length)
    return Page(
        items=list(sequence[start:end]),
        page=page,
        limit=limit,
        offset=start,
        total=length,
        total_pages=total_pages(length, limit),
    )
