"""Translator module - Query expression to XPath conversion."""

from .base import ExpressionTranslator, XpathExpression
from .css import CssExpression

__all__ = ["ExpressionTranslator", "XpathExpression", "CssExpression"]
