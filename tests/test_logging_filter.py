"""
Tests for the standard logging adapter
"""

import logging

import pytest

from log_category_filter import CategoryLoggingFilter, MessageCategoryFilter


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def handler():
    return ListHandler()


class TestCategoryLoggingFilter:
    def test_logger_name_is_category(self, handler):
        handler.addFilter(CategoryLoggingFilter(exclude=["noisy.*"]))
        for name in ["noisy.child", "app.web", "noisy"]:
            handler.handle(logging.LogRecord(name, logging.INFO, "", 0, name, (), None))

        assert [record.getMessage() for record in handler.records] == ["app.web", "noisy"]

    def test_extra_category(self, handler):
        logger = logging.getLogger("test_logging_filter.extra")
        logger.addFilter(CategoryLoggingFilter(include=["Yiisoft\\Db\\*"]))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        try:
            logger.info("kept", extra={"category": "Yiisoft\\Db\\Connection"})
            logger.info("dropped", extra={"category": "Other\\Module"})
            logger.info("dropped too")
        finally:
            logger.removeHandler(handler)

        assert [record.getMessage() for record in handler.records] == ["kept"]

    def test_shares_existing_filter(self):
        category_filter = MessageCategoryFilter()
        logging_filter = CategoryLoggingFilter(category_filter=category_filter)
        record = logging.LogRecord("app", logging.INFO, "", 0, "msg", (), None)
        assert logging_filter.filter(record) is True

        category_filter.exclude(["app"])
        assert logging_filter.filter(record) is False

    def test_empty_category_matches_core(self):
        category_filter = MessageCategoryFilter(exclude=[""])
        logging_filter = CategoryLoggingFilter(category_filter=category_filter)
        record = logging.LogRecord("app", logging.INFO, "", 0, "msg", (), None)
        record.category = ""

        assert category_filter.is_excluded("") is True
        assert logging_filter.filter(record) is False

    def test_lists_applied_to_shared_filter(self):
        category_filter = MessageCategoryFilter(exclude=["a"])
        logging_filter = CategoryLoggingFilter(
            include=["app*"], category_filter=category_filter
        )
        assert logging_filter.category_filter is category_filter
        assert category_filter.get_included() == ["app*"]
        assert category_filter.get_excluded() == ["a"]
