"""Base class for typed result collections."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound="BaseCollection")


class BaseCollection(ABC, Generic[T]):
    """Immutable list of query results of one type.

    Operations that change the content return a new collection and leave
    the source untouched.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        """Initialize collection.

        Args:
            items: Collection items

        Raises:
            TypeError: An item has an unexpected type
        """
        self._items: list[T] = []
        for item in items or []:
            self._validate(item)
            self._items.append(item)

    @abstractmethod
    def _validate(self, item: Any) -> None:
        """Raise TypeError if item does not belong in this collection."""
        pass

    def get(self, index: int) -> T | None:
        """Get item by position.

        Args:
            index: Zero-based position

        Returns:
            Item or None if there is no item at this position
        """
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def get_first(self) -> T | None:
        """Get first item or None for an empty collection."""
        return self.get(0)

    def get_last(self) -> T | None:
        """Get last item or None for an empty collection."""
        return self.get(len(self._items) - 1)

    def get_items(self) -> list[T]:
        """Get copy of all items."""
        return list(self._items)

    def walk(self: C, callback: Callable[[T], Any]) -> C:
        """Call callback for every item.

        Args:
            callback: Function receiving each item

        Returns:
            Self for chaining
        """
        for item in self._items:
            callback(item)
        return self

    def merge(self: C, collection: C) -> C:
        """Create collection with the items of both collections.

        Args:
            collection: Collection of the same type

        Returns:
            New collection
        """
        if not isinstance(collection, type(self)):
            raise TypeError(
                f"Cannot merge {type(collection).__name__} into {type(self).__name__}"
            )
        return type(self)(self._items + collection.get_items())

    def add(self: C, item: T) -> C:
        """Create collection with one more item.

        Args:
            item: Item to append

        Returns:
            New collection
        """
        return type(self)(self._items + [item])

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
