"""
Include/exclude matching of log message categories
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "application"
WILDCARD = "*"


class InvalidInputError(TypeError):
    """Raised when categories are not given as a list of strings"""

    def __init__(self, value: object, message: Optional[str] = None):
        self.received_type = type(value).__name__
        super().__init__(
            (message or "The log message category must be a string, %s received.")
            % self.received_type
        )


# Kept for callers that use the argument-error naming
InvalidArgumentError = InvalidInputError


def _check_structure(categories: Iterable[object]) -> Tuple[str, ...]:
    """Validate categories and return them as an immutable tuple"""
    if isinstance(categories, (str, bytes)):
        raise InvalidInputError(
            categories,
            "The log message categories must be a list of strings, %s received.",
        )
    checked = tuple(categories)
    for category in checked:
        if not isinstance(category, str):
            raise InvalidInputError(category)
    return checked


class MessageCategoryFilter:
    """
    Stores the included and excluded log message categories and matches against them.

    Both lists default to empty: no include list means every category is accepted,
    no exclude list means nothing is rejected. A trailing asterisk turns an entry into
    a prefix pattern, so ``Yiisoft\\Db\\*`` matches ``Yiisoft\\Db\\Connection``.
    Exclusions always win over inclusions.
    """

    def __init__(
        self,
        include: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
    ):
        self._lock = threading.Lock()
        # (include, exclude) is swapped as a whole so readers never see a half update
        self._patterns: Tuple[Tuple[str, ...], Tuple[str, ...]] = ((), ())
        if include is not None:
            self.include(include)
        if exclude is not None:
            self.exclude(exclude)

    def include(self, categories: Iterable[str]) -> None:
        """Replace the list of included categories"""
        checked = _check_structure(categories)
        with self._lock:
            self._patterns = (checked, self._patterns[1])
        logger.debug("Included log categories set to %s", list(checked))

    def get_included(self) -> List[str]:
        return list(self._patterns[0])

    def exclude(self, categories: Iterable[str]) -> None:
        """Replace the list of excluded categories"""
        checked = _check_structure(categories)
        with self._lock:
            self._patterns = (self._patterns[0], checked)
        logger.debug("Excluded log categories set to %s", list(checked))

    def get_excluded(self) -> List[str]:
        return list(self._patterns[1])

    set_included = include
    set_excluded = exclude

    def is_excluded(self, category: str) -> bool:
        """Check whether messages of the given category should be dropped"""
        include, exclude = self._patterns

        for pattern in exclude:
            prefix = pattern.rstrip(WILDCARD)
            if category == pattern or (
                prefix != pattern and category.startswith(prefix)
            ):
                return True

        if not include:
            return False

        for pattern in include:
            if category == pattern or (
                pattern
                and pattern.endswith(WILDCARD)
                and category.startswith(pattern.rstrip(WILDCARD))
            ):
                return False

        return True

    def __repr__(self) -> str:
        include, exclude = self._patterns
        return (
            f"{self.__class__.__name__}(include={list(include)!r}, "
            f"exclude={list(exclude)!r})"
        )
