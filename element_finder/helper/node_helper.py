"""Serialization and mutation helpers for lxml query results."""

from html import escape
from typing import Any

from lxml import etree

from element_finder.monitoring.logger import get_logger

logger = get_logger(__name__)

# Raw text elements are serialized without entity escaping in HTML
RAW_TEXT_TAGS = frozenset({"script", "style"})


def _is_smart_string(node: Any) -> bool:
    return isinstance(node, str) and hasattr(node, "getparent")


class NodeHelper:
    """Helpers for nodes returned by XPath queries.

    A node is either an lxml element (comments and processing instructions
    included) or a "smart string" lxml returns for attribute and text nodes.
    """

    @staticmethod
    def get_outer_content(node: Any, method: str = "html") -> str:
        """Serialize node including its own tag.

        Args:
            node: Query result node
            method: Serialization method (html, xml)

        Returns:
            Node markup
        """
        if isinstance(node, str):
            return str(node)

        return etree.tostring(node, encoding="unicode", method=method, with_tail=False)

    @staticmethod
    def get_inner_content(node: Any, method: str = "html") -> str:
        """Serialize the children of a node.

        Args:
            node: Query result node
            method: Serialization method (html, xml)

        Returns:
            Markup between the opening and closing tag
        """
        if isinstance(node, str):
            return str(node)

        if not isinstance(node.tag, str):
            # Comment or processing instruction
            return node.text or ""

        parts = []
        if node.text:
            raw = method == "html" and node.tag.lower() in RAW_TEXT_TAGS
            parts.append(node.text if raw else escape(node.text, quote=False))

        for child in node:
            parts.append(etree.tostring(child, encoding="unicode", method=method, with_tail=True))

        return "".join(parts)

    @staticmethod
    def get_node_value(node: Any) -> str:
        """Get text value of node.

        Elements give the concatenation of all descendant text nodes,
        attribute and text nodes give their value.
        """
        if isinstance(node, str):
            return str(node)

        if not isinstance(node.tag, str):
            return node.text or ""

        return str(node.xpath("string()"))

    @staticmethod
    def remove_node(node: Any) -> bool:
        """Detach node from the document.

        Args:
            node: Query result node

        Returns:
            True if the node was removed
        """
        if _is_smart_string(node):
            parent = node.getparent()
            if parent is None:
                return False
            if node.is_attribute:
                parent.attrib.pop(node.attrname, None)
            elif node.is_tail:
                parent.tail = None
            else:
                parent.text = None
            return True

        if isinstance(node, str):
            return False

        parent = node.getparent()
        if parent is None:
            if isinstance(node.tag, str):
                logger.warning(f"Cannot remove root node: {node.tag}")
            else:
                logger.warning(f"Cannot remove node outside the root element: {node!r}")
            return False

        # Keep the text that follows the node in the document
        if node.tail:
            previous = node.getprevious()
            if previous is not None:
                previous.tail = (previous.tail or "") + node.tail
            else:
                parent.text = (parent.text or "") + node.tail

        parent.remove(node)
        return True
