"""Collection of sub-documents."""

from typing import TYPE_CHECKING, Any

from .base import BaseCollection

if TYPE_CHECKING:
    from element_finder.core.finder import ElementFinder


class ObjectCollection(BaseCollection["ElementFinder"]):
    """ElementFinder instances built from query results."""

    def _validate(self, item: Any) -> None:
        from element_finder.core.finder import ElementFinder

        if not isinstance(item, ElementFinder):
            raise TypeError(f"Expect ElementFinder, got {type(item).__name__}")
