"""Document wrapper evaluating queries and returning typed collections."""

import re
from dataclasses import dataclass
from html import escape
from enum import Enum
from typing import Any, Callable

from lxml import etree

from element_finder.collection.elements import ElementCollection
from element_finder.collection.objects import ObjectCollection
from element_finder.collection.strings import StringCollection
from element_finder.core.config import settings
from element_finder.helper.node_helper import NodeHelper
from element_finder.helper.regex_helper import Pattern, RegexHelper
from element_finder.helper.string_helper import StringHelper
from element_finder.monitoring.logger import get_logger, log_load_event
from element_finder.translator.base import ExpressionTranslator, XpathExpression

from .element import Element
from .parser_factory import make_html_parser, make_xml_parser

logger = get_logger(__name__)


class DocumentType(str, Enum):
    """Supported document types."""

    HTML = "html"
    XML = "xml"


@dataclass(frozen=True)
class LoadError:
    """Parser message collected while loading a document."""

    level: str
    line: int
    column: int
    message: str

    @classmethod
    def from_log_entry(cls, entry: Any) -> "LoadError":
        """Create load error from lxml error log entry.

        Args:
            entry: lxml ``_LogEntry``

        Returns:
            LoadError instance
        """
        return cls(
            level=entry.level_name,
            line=entry.line,
            column=entry.column,
            message=entry.message.strip(),
        )


class ElementFinder:
    """Parsed HTML or XML document with query helpers.

    Example:
        >>> finder = ElementFinder("<html><div>test</div></html>")
        >>> finder.content("//div").get_first()
        'test'
    """

    def __init__(
        self,
        data: str,
        document_type: DocumentType | str | None = None,
        translator: ExpressionTranslator | None = None,
    ) -> None:
        """Parse document.

        Args:
            data: Document markup
            document_type: html or xml (default from settings)
            translator: Expression translator (default: XPath pass-through)

        Raises:
            TypeError: Data is not a string
            ValueError: Data is empty or document type is unknown
            lxml.etree.XMLSyntaxError: XML document is malformed
        """
        if not isinstance(data, str):
            raise TypeError(f"Expect string, got {type(data).__name__}")
        if data == "":
            raise ValueError("Expect not empty string")

        self.document_type = self._resolve_document_type(document_type)
        self.translator = translator or XpathExpression()
        self._namespaces: dict[str, str] = {}
        self._load_errors: list[LoadError] = []
        self._root: Element = self._load(data)

    @staticmethod
    def _resolve_document_type(document_type: DocumentType | str | None) -> DocumentType:
        if document_type is None:
            document_type = settings.default_document_type
        try:
            return DocumentType(document_type)
        except ValueError:
            raise ValueError("Doc type not valid. use xml or html") from None

    def _load(self, data: str) -> Element:
        if self.document_type is DocumentType.HTML:
            parser = make_html_parser()
        else:
            parser = make_xml_parser()

        data = StringHelper.safe_encode_str(data)
        root = etree.fromstring(data.encode("utf-8"), parser)

        self._load_errors = [LoadError.from_log_entry(entry) for entry in parser.error_log]
        log_load_event(self.document_type.value, len(data), len(self._load_errors))

        if root is None:
            raise ValueError("Document has no root element")

        return root

    @property
    def method(self) -> str:
        """Serialization method for the document type."""
        return self.document_type.value

    @property
    def load_errors(self) -> list[LoadError]:
        """Errors reported by the parser while loading the document."""
        return list(self._load_errors)

    def get_load_errors(self) -> list[LoadError]:
        """Get parser errors collected while loading the document."""
        return self.load_errors

    def register_namespace(self, prefix: str, uri: str) -> "ElementFinder":
        """Register namespace prefix usable in expressions.

        Args:
            prefix: Prefix used in expressions
            uri: Namespace URI

        Returns:
            Self for chaining
        """
        self._namespaces[prefix] = uri
        return self

    def evaluate(self, expression: str) -> Any:
        """Evaluate expression and return the raw XPath result.

        Unlike query(), the result may be a number, string or boolean,
        e.g. for ``count(//a)``.
        """
        xpath = self.translator.convert_to_xpath(expression)
        logger.debug(f"Evaluating: {xpath}")
        return self._root.xpath(xpath, namespaces=self._namespaces or None)

    def query(self, expression: str) -> list[Any]:
        """Fetch nodes from document.

        Args:
            expression: Query expression understood by the translator

        Returns:
            Matching elements, attribute and text nodes

        Raises:
            ValueError: Expression does not select nodes
            lxml.etree.XPathEvalError: Invalid XPath
        """
        result = self.evaluate(expression)
        if not isinstance(result, list):
            raise ValueError(f"Expression does not select nodes: {expression}")
        return result

    def content(self, expression: str, outer: bool = False) -> StringCollection:
        """Get markup of matching nodes.

        Args:
            expression: Query expression
            outer: Include the node's own tag

        Returns:
            StringCollection with inner or outer markup
        """
        result = []
        for node in self.query(expression):
            if outer:
                result.append(NodeHelper.get_outer_content(node, self.method))
            else:
                result.append(NodeHelper.get_inner_content(node, self.method))

        return StringCollection(result)

    def value(self, expression: str) -> StringCollection:
        """Get text values of matching nodes.

        Args:
            expression: Query expression

        Returns:
            StringCollection with node values
        """
        return StringCollection(NodeHelper.get_node_value(node) for node in self.query(expression))

    def key_value(self, key_expression: str, value_expression: str) -> dict[str, str]:
        """Build mapping from two parallel queries.

        Args:
            key_expression: Expression selecting keys
            value_expression: Expression selecting values

        Returns:
            Dictionary of key node value to value node value

        Raises:
            RuntimeError: Queries return different numbers of nodes
        """
        key_nodes = self.query(key_expression)
        value_nodes = self.query(value_expression)
        if len(key_nodes) != len(value_nodes):
            raise RuntimeError("Keys and values must have equal numbers of elements")

        return {
            NodeHelper.get_node_value(key): NodeHelper.get_node_value(value)
            for key, value in zip(key_nodes, value_nodes)
        }

    def object(self, expression: str, outer: bool = False) -> ObjectCollection:
        """Build sub-documents from matching nodes.

        Args:
            expression: Query expression
            outer: Use outer markup of the node

        Returns:
            ObjectCollection of ElementFinder instances
        """
        result = []
        for node in self.query(expression):
            if outer:
                markup = NodeHelper.get_outer_content(node, self.method)
            else:
                markup = NodeHelper.get_inner_content(node, self.method)

            # Attribute and text values are text, not markup
            if isinstance(node, str):
                markup = escape(markup, quote=False)

            if markup.strip() == "":
                markup = settings.empty_document_html
            if self.document_type is DocumentType.XML and "<?xml" not in markup:
                tag = settings.xml_wrapper_tag
                markup = f"<{tag}>{markup}</{tag}>"

            finder = ElementFinder(markup, self.document_type, self.translator)
            finder._namespaces = dict(self._namespaces)
            result.append(finder)

        return ObjectCollection(result)

    def element(self, expression: str) -> ElementCollection:
        """Get matching elements.

        Args:
            expression: Query expression selecting elements

        Returns:
            ElementCollection

        Raises:
            TypeError: Expression selects attributes, text or comments
        """
        return ElementCollection(self.query(expression))

    def remove(self, expression: str) -> "ElementFinder":
        """Remove matching elements and attributes.

        Example:
            >>> finder.remove("//span/@class")
            >>> finder.remove("//input")

        Args:
            expression: Query expression

        Returns:
            Self for chaining
        """
        removed = sum(1 for node in self.query(expression) if NodeHelper.remove_node(node))
        logger.debug(f"Removed {removed} nodes: {expression}")
        return self

    def match(self, pattern: Pattern, group: int | Callable[[list[re.Match]], Any] = 1) -> StringCollection:
        """Match regex against the document markup.

        Example:
            >>> finder.match(r"([0-9]{4,6})")

        Args:
            pattern: Regex string or compiled pattern
            group: Capture group index or callback receiving the list of matches

        Returns:
            StringCollection with matched values

        Raises:
            TypeError: group is neither int nor callable
        """
        document = str(self)

        if isinstance(group, int) and not isinstance(group, bool):
            return RegexHelper.match(pattern, group, [document])
        if callable(group):
            return RegexHelper.match_callback(pattern, group, [document])

        raise TypeError("Invalid argument. Expect int or callable")

    def __str__(self) -> str:
        # Whole tree: doctype, comments and processing instructions around the root
        return etree.tostring(self._root.getroottree(), encoding="unicode", method=self.method)

    def __repr__(self) -> str:
        return f"ElementFinder(type={self.document_type.value}, root={self._root.tag!r})"
