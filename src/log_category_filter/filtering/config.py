"""
Configuration for the filter engine
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import LogFilter
from .category_filter import CategoryFilter


@dataclass
class FilterConfig:
    """Configuration for the filter engine"""

    enabled: bool = True
    filters: List[LogFilter] = field(default_factory=list)
    collect_metrics: bool = True

    @classmethod
    def create_category_config(
        cls,
        include: Optional[List[str]] = None,
        exclude: Optional[List[str]] = None,
        collect_metrics: bool = True,
    ) -> "FilterConfig":
        """Create a configuration with a single category filter"""
        return cls(
            enabled=True,
            filters=[CategoryFilter(include=include, exclude=exclude)],
            collect_metrics=collect_metrics,
        )
