"""Regular expression helpers working over lists of strings."""

import re
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from element_finder.collection.strings import StringCollection

Pattern = str | re.Pattern


def _compile(pattern: Pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


class RegexHelper:
    """Apply regular expressions to every string of a list."""

    @staticmethod
    def match(pattern: Pattern, group: int, strings: Iterable[str]) -> "StringCollection":
        """Collect one capture group of every match.

        Args:
            pattern: Regex string or compiled pattern
            group: Capture group index (0 is the whole match)
            strings: Strings to search

        Returns:
            StringCollection with the group value of each match
        """
        from element_finder.collection.strings import StringCollection

        regex = _compile(pattern)
        result = []
        for string in strings:
            for found in regex.finditer(string):
                value = found.group(group)
                if value is not None:
                    result.append(value)

        return StringCollection(result)

    @staticmethod
    def match_callback(
        pattern: Pattern,
        callback: Callable[[list[re.Match]], Iterable[str]],
        strings: Iterable[str],
    ) -> "StringCollection":
        """Let a callback turn the matches of each string into values.

        The callback receives the list of match objects found in one string
        and must return an iterable of strings.

        Args:
            pattern: Regex string or compiled pattern
            callback: Function building values from matches
            strings: Strings to search

        Returns:
            StringCollection with all values returned by the callback

        Example:
            >>> RegexHelper.match_callback(
            ...     r"(\\d+)-(\\d+)",
            ...     lambda matches: [m.group(1) + m.group(2) for m in matches],
            ...     ["10-20 30-40"],
            ... ).get_items()
            ['1020', '3040']
        """
        from element_finder.collection.strings import StringCollection

        regex = _compile(pattern)
        result: list[str] = []
        for string in strings:
            values = callback(list(regex.finditer(string)))
            if values is None or isinstance(values, str) or not isinstance(values, Iterable):
                raise TypeError("Invalid callback result. Expect iterable of strings")
            result.extend(values)

        return StringCollection(result)

    @staticmethod
    def replace(pattern: Pattern, replacement: str | Callable[[re.Match], str], strings: Iterable[str]) -> list[str]:
        """Replace every match in every string."""
        regex = _compile(pattern)
        return [regex.sub(replacement, string) for string in strings]

    @staticmethod
    def split(pattern: Pattern, strings: Iterable[str]) -> list[str]:
        """Split every string and flatten the parts."""
        regex = _compile(pattern)
        result = []
        for string in strings:
            result.extend(part for part in regex.split(string) if part is not None)
        return result
