"""Collection of document elements."""

from typing import Any

from element_finder.core.element import Element

from .base import BaseCollection


class ElementCollection(BaseCollection[Element]):
    """Elements returned by a query."""

    def _validate(self, item: Any) -> None:
        if not isinstance(item, Element):
            raise TypeError(f"Expect Element, got {type(item).__name__}")
