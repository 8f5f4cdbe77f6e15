"""Slice utilities: pagination and small functional helpers for sequences."""

from sutil.core.config import MAX_INT32, Settings, get_settings
from sutil.core.exceptions import InvalidLimitError, InvalidPageError, InvalidSequenceError, SutilError
from sutil.core.logging import configure_logging, get_logger
from sutil.core.pagination import Page, bounds, content, page_of, split, total_pages
from sutil.services.functional import equal, filter_by, pluck, reduce, transform, unique

__version__ = "0.1.0"

__all__ = [
    "MAX_INT32",
    "Settings",
    "get_settings",
    "SutilError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidSequenceError",
    "configure_logging",
    "get_logger",
    "Page",
    "bounds",
    "content",
    "page_of",
    "split",
    "total_pages",
    "equal",
    "filter_by",
    "pluck",
    "reduce",
    "transform",
    "unique",
]
