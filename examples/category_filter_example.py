#!/usr/bin/env python3
"""
Example demonstrating category-based log filtering
"""

import logging
import sys

from log_category_filter import (
    CategoryFilterConfig,
    CategoryLoggingFilter,
    FilterEngine,
    MessageCategoryFilter,
)


def direct_matching():
    """Ask the filter directly"""
    category_filter = MessageCategoryFilter()
    category_filter.include(["Yiisoft\\Db\\*"])
    category_filter.exclude(["Yiisoft\\Db\\Command"])

    for category in ["Yiisoft\\Db\\Connection", "Yiisoft\\Db\\Command", "Other\\Module"]:
        state = "excluded" if category_filter.is_excluded(category) else "included"
        print(f"{category}: {state}")


def stdlib_logging():
    """Attach the filter to a standard logging handler"""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CategoryLoggingFilter(exclude=["payments.debug*"]))

    logger = logging.getLogger("payments")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    logger.info("Shown: logger name is the category")
    logger.info("Hidden", extra={"category": "payments.debug.sql"})


def engine_from_env():
    """Build a filter engine from LOG_CATEGORY_* environment variables"""
    engine = FilterEngine(CategoryFilterConfig.from_env().to_filter_config())
    record = logging.LogRecord("app.web", logging.INFO, "", 0, "msg", (), None)
    print(engine.should_log(record, {}))
    print(engine.get_metrics())


if __name__ == "__main__":
    direct_matching()
    stdlib_logging()
    engine_from_env()
