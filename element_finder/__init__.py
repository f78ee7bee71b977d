"""ElementFinder - Query HTML and XML documents with XPath or CSS expressions."""

from .collection import ElementCollection, ObjectCollection, StringCollection
from .core.element import Element
from .core.finder import DocumentType, ElementFinder, LoadError
from .translator import CssExpression, ExpressionTranslator, XpathExpression

__version__ = "1.0.0"

__all__ = [
    "ElementFinder",
    "DocumentType",
    "LoadError",
    "Element",
    "StringCollection",
    "ElementCollection",
    "ObjectCollection",
    "ExpressionTranslator",
    "XpathExpression",
    "CssExpression",
]
