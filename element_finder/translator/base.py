"""Expression translator interface."""

from abc import ABC, abstractmethod


class ExpressionTranslator(ABC):
    """Base class for translators turning query expressions into XPath."""

    @abstractmethod
    def convert_to_xpath(self, expression: str) -> str:
        """Convert expression to XPath.

        Args:
            expression: Query expression

        Returns:
            XPath expression
        """
        pass

    def __call__(self, expression: str) -> str:
        """Allow translator to be called directly."""
        return self.convert_to_xpath(expression)


class XpathExpression(ExpressionTranslator):
    """Pass-through translator for expressions that already are XPath."""

    def convert_to_xpath(self, expression: str) -> str:
        return expression
