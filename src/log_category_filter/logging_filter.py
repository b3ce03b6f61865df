"""
Adapter that plugs category matching into the standard logging module
"""

import logging
from typing import List, Optional

from .category import MessageCategoryFilter
from .filtering.category_filter import build_category_filter, resolve_category


class CategoryLoggingFilter(logging.Filter):
    """
    ``logging.Filter`` that drops records whose category is excluded.

    The category is taken from ``record.category`` when set (e.g. via
    ``extra={"category": ...}``), otherwise from the logger name. Attach it to a
    logger or a handler like any other filter. ``include``/``exclude`` given together
    with a shared ``category_filter`` are set on that shared instance.
    """

    def __init__(
        self,
        include: Optional[List[str]] = None,
        exclude: Optional[List[str]] = None,
        category_filter: Optional[MessageCategoryFilter] = None,
    ):
        super().__init__()
        self.category_filter = build_category_filter(include, exclude, category_filter)

    def filter(self, record: logging.LogRecord) -> bool:
        return not self.category_filter.is_excluded(resolve_category(record, {}))
