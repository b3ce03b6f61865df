"""
Log Category Filter

Include/exclude filtering of log messages by category, with exact and prefix patterns.
"""

__version__ = "0.1.0"

from .category import (
    DEFAULT_CATEGORY,
    InvalidArgumentError,
    InvalidInputError,
    MessageCategoryFilter,
)
from .config import CategoryFilterConfig, get_default_config, set_default_config
from .filtering import (
    CategoryFilter,
    FilterConfig,
    FilterEngine,
    FilterResult,
    LogFilter,
)
from .logging_filter import CategoryLoggingFilter

__all__ = [
    "DEFAULT_CATEGORY",
    "InvalidArgumentError",
    "InvalidInputError",
    "MessageCategoryFilter",
    "CategoryFilterConfig",
    "get_default_config",
    "set_default_config",
    "CategoryFilter",
    "FilterConfig",
    "FilterEngine",
    "FilterResult",
    "LogFilter",
    "CategoryLoggingFilter",
]
