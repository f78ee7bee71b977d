"""CSS selector to XPath translation using cssselect."""

from cssselect import GenericTranslator, HTMLTranslator
from cssselect.parser import FunctionalPseudoElement
from cssselect.xpath import ExpressionError, XPathExpr

from element_finder.monitoring.logger import get_logger

from .base import ExpressionTranslator

logger = get_logger(__name__)


class _PseudoElementMixin:
    """Adds ``::text`` and ``::attr(name)`` pseudo-elements.

    cssselect only calls this for the last compound selector, so the
    node test can be appended to the element path.
    """

    def xpath_pseudo_element(self, xpath: XPathExpr, pseudo_element) -> XPathExpr:
        if isinstance(pseudo_element, FunctionalPseudoElement):
            if pseudo_element.name != "attr":
                raise ExpressionError(f"The functional pseudo-element ::{pseudo_element.name}() is unknown")
            if pseudo_element.argument_types() not in (["STRING"], ["IDENT"]):
                raise ExpressionError(f"Expected a single string or ident for ::attr(), got {pseudo_element.arguments!r}")
            node_test = "@" + pseudo_element.arguments[0].value
        elif pseudo_element == "text":
            node_test = "text()"
        else:
            raise ExpressionError(f"The pseudo-element ::{pseudo_element} is unknown")

        return XPathExpr(path=f"{xpath}/", element=node_test)


class _HTMLTranslator(_PseudoElementMixin, HTMLTranslator):
    pass


class _GenericTranslator(_PseudoElementMixin, GenericTranslator):
    pass


class CssExpression(ExpressionTranslator):
    """Translator for CSS selectors.

    Example:
        >>> CssExpression().convert_to_xpath("a::attr(href)")
        'descendant-or-self::a/@href'
    """

    def __init__(self, html: bool = True) -> None:
        """Initialize CSS translator.

        Args:
            html: Use HTML rules (case-insensitive names, :checked etc.)
                  instead of generic XML rules
        """
        self.html = html
        self._translator = _HTMLTranslator() if html else _GenericTranslator()
        self._cache: dict[str, str] = {}  # Cache translated selectors

    def convert_to_xpath(self, expression: str) -> str:
        """Convert CSS selector to XPath.

        Args:
            expression: CSS selector, groups separated by commas

        Returns:
            XPath expression

        Raises:
            cssselect.SelectorError: Selector cannot be parsed or translated
        """
        if expression in self._cache:
            return self._cache[expression]

        xpath = self._translator.css_to_xpath(expression)
        self._cache[expression] = xpath
        logger.debug(f"Translated CSS: {expression} -> {xpath}")
        return xpath
