"""
Filtering engine that tallies category decisions
"""

import logging
from collections import Counter, defaultdict
from typing import Any, Dict, Optional

from .base import FilterResult
from .category_filter import resolve_category
from .config import FilterConfig


class FilterEngine:
    """
    Resolves the category of each record once, runs the configured filters against it
    and counts included/excluded decisions per category.
    """

    def __init__(self, config: FilterConfig):
        self.config = config
        self._totals: Counter = Counter()
        self._categories: Dict[str, Counter] = defaultdict(Counter)

    def should_log(
        self, record: logging.LogRecord, context: Optional[Dict[str, Any]] = None
    ) -> FilterResult:
        """Return the first rejection, or a pass if every filter accepts the category"""
        if not self.config.enabled:
            return FilterResult(should_log=True, reason="filtering_disabled")

        category = resolve_category(record, context or {})
        # Every filter sees the same resolved category
        filter_context = dict(context or {}, category=category)

        result = None
        for filter_obj in self.config.filters:
            outcome = filter_obj.should_log(record, filter_context)
            if not outcome.should_log:
                result = outcome
                break

        if result is None:
            result = FilterResult(
                should_log=True,
                reason=f"category_filter: {category} included",
                metadata={"category": category},
            )

        decision = "included" if result.should_log else "excluded"
        self._totals[decision] += 1
        if self.config.collect_metrics:
            self._categories[category][decision] += 1
        return result

    def get_category_stats(self, category: str) -> Dict[str, int]:
        """Included/excluded counts seen so far for one category"""
        counts = self._categories.get(category, Counter())
        return {"included": counts["included"], "excluded": counts["excluded"]}

    def get_metrics(self) -> Dict[str, Any]:
        included = self._totals["included"]
        excluded = self._totals["excluded"]
        evaluated = included + excluded
        return {
            "summary": {
                "total_evaluated": evaluated,
                "included": included,
                "excluded": excluded,
            },
            "categories": {
                category: self.get_category_stats(category)
                for category in sorted(self._categories)
            },
            "include_rate": included / max(1, evaluated),
        }

    def reset_metrics(self):
        self._totals.clear()
        self._categories.clear()
