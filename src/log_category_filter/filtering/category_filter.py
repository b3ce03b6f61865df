"""
Category-based log filtering
"""

import logging
from typing import Any, Dict, List, Optional

from ..category import DEFAULT_CATEGORY, MessageCategoryFilter
from .base import FilterResult, LogFilter


def resolve_category(record: logging.LogRecord, context: Dict[str, Any]) -> str:
    """
    Pick the category of a record: context first, then record attribute, then logger name.

    An empty string is a valid category and is returned as is; ``DEFAULT_CATEGORY``
    is used only when none of the sources holds a string.
    """
    category = context.get("category")
    if category is None:
        category = getattr(record, "category", None)
    if category is None:
        category = getattr(record, "name", None)
    if not isinstance(category, str):
        return DEFAULT_CATEGORY
    return category


def build_category_filter(
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    category_filter: Optional[MessageCategoryFilter] = None,
) -> MessageCategoryFilter:
    """
    Create a category filter, or reuse the given one.

    When ``category_filter`` is passed together with ``include`` or ``exclude``, those
    lists are set on the passed instance, so every other holder of that instance sees
    the new lists as well.
    """
    if category_filter is None:
        return MessageCategoryFilter(include=include, exclude=exclude)
    if include is not None:
        category_filter.include(include)
    if exclude is not None:
        category_filter.exclude(exclude)
    return category_filter


class CategoryFilter(LogFilter):
    """Filter logs based on their category"""

    def __init__(
        self,
        include: Optional[List[str]] = None,
        exclude: Optional[List[str]] = None,
        category_filter: Optional[MessageCategoryFilter] = None,
    ):
        # See build_category_filter for how a shared category_filter is updated
        self.category_filter = build_category_filter(include, exclude, category_filter)

    def should_log(
        self, record: logging.LogRecord, context: Dict[str, Any]
    ) -> FilterResult:
        category = resolve_category(record, context)
        excluded = self.category_filter.is_excluded(category)
        return FilterResult(
            should_log=not excluded,
            reason=f"category_filter: {category} {'excluded' if excluded else 'included'}",
            metadata={"category": category},
        )
