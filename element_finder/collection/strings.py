"""Collection of strings extracted from a document."""

import re
from typing import Any, Callable

from element_finder.helper.regex_helper import Pattern, RegexHelper

from .base import BaseCollection


class StringCollection(BaseCollection[str]):
    """Strings with regex and transformation helpers."""

    def _validate(self, item: Any) -> None:
        if not isinstance(item, str):
            raise TypeError(f"Expect string, got {type(item).__name__}")

    def replace(self, pattern: Pattern, replacement: str | Callable[[re.Match], str]) -> "StringCollection":
        """Replace regex matches in every string.

        Args:
            pattern: Regex string or compiled pattern
            replacement: Replacement string or function

        Returns:
            New collection with replaced strings
        """
        return StringCollection(RegexHelper.replace(pattern, replacement, self._items))

    def match(self, pattern: Pattern, group: int = 1) -> "StringCollection":
        """Collect capture group of every regex match.

        Args:
            pattern: Regex string or compiled pattern
            group: Capture group index

        Returns:
            New collection with matched values
        """
        return RegexHelper.match(pattern, group, self._items)

    def split(self, pattern: Pattern) -> "StringCollection":
        """Split every string by regex."""
        return StringCollection(RegexHelper.split(pattern, self._items))

    def unique(self) -> "StringCollection":
        """Drop duplicated strings keeping the first occurrence."""
        return StringCollection(dict.fromkeys(self._items))

    def map(self, func: Callable[[str], str]) -> "StringCollection":
        """Apply function to every string.

        Args:
            func: Function returning a string

        Returns:
            New collection with modified strings
        """
        return StringCollection(func(item) for item in self._items)

    def filter(self, func: Callable[[str], bool]) -> "StringCollection":
        """Keep strings accepted by function."""
        return StringCollection(item for item in self._items if func(item))
