"""Collection module - Typed wrappers around query results."""

from .base import BaseCollection
from .elements import ElementCollection
from .objects import ObjectCollection
from .strings import StringCollection

__all__ = ["BaseCollection", "StringCollection", "ElementCollection", "ObjectCollection"]
