import os
from dataclasses import dataclass, field
from typing import List, Optional

from .category import MessageCategoryFilter
from .filtering import CategoryFilter, FilterConfig


@dataclass
class CategoryFilterConfig:
    """Configuration for category filtering"""

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    enabled: bool = True
    collect_metrics: bool = True

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def _parse_list_env(cls, key: str) -> List[str]:
        """Parse a comma-separated list from environment variable"""
        return [item.strip() for item in os.getenv(key, "").split(",") if item.strip()]

    @classmethod
    def from_env(cls) -> "CategoryFilterConfig":
        """Create configuration from environment variables"""
        return cls(
            include=cls._parse_list_env("LOG_CATEGORY_INCLUDE"),
            exclude=cls._parse_list_env("LOG_CATEGORY_EXCLUDE"),
            enabled=cls._parse_bool_env("LOG_CATEGORY_FILTERING", "true"),
            collect_metrics=cls._parse_bool_env("LOG_CATEGORY_COLLECT_METRICS", "true"),
        )

    def build_filter(self) -> MessageCategoryFilter:
        """Create a category filter holding the configured lists"""
        return MessageCategoryFilter(include=self.include, exclude=self.exclude)

    def to_filter_config(self) -> FilterConfig:
        """Create a filter engine configuration from this configuration"""
        return FilterConfig(
            enabled=self.enabled,
            filters=[CategoryFilter(category_filter=self.build_filter())],
            collect_metrics=self.collect_metrics,
        )


_default_config: Optional[CategoryFilterConfig] = None


def get_default_config() -> CategoryFilterConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = CategoryFilterConfig.from_env()
    return _default_config


def set_default_config(config: CategoryFilterConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
