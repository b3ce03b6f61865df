"""
Record-level filtering built on category matching
"""

from .base import FilterResult, LogFilter
from .category_filter import CategoryFilter, build_category_filter, resolve_category
from .config import FilterConfig
from .engine import FilterEngine

__all__ = [
    "FilterResult",
    "LogFilter",
    "CategoryFilter",
    "FilterConfig",
    "FilterEngine",
    "build_category_filter",
    "resolve_category",
]
