"""lxml parser construction per document type."""

from lxml import etree

from element_finder.core.config import settings

from .element import Element

_ELEMENT_LOOKUP = etree.ElementDefaultClassLookup(element=Element)


def make_html_parser() -> etree.HTMLParser:
    """Create an error tolerant HTML parser.

    Input is always handed over as UTF-8 bytes, so the encoding is fixed
    instead of being sniffed from meta tags.
    """
    parser = etree.HTMLParser(
        encoding="utf-8",
        recover=True,
        default_doctype=False,
        no_network=True,
        huge_tree=settings.huge_tree,
    )
    parser.set_element_class_lookup(_ELEMENT_LOOKUP)
    return parser


def make_xml_parser() -> etree.XMLParser:
    """Create a strict XML parser with entity loading disabled."""
    parser = etree.XMLParser(
        encoding="utf-8",
        recover=False,
        strip_cdata=settings.strip_cdata,
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
        huge_tree=settings.huge_tree,
    )
    parser.set_element_class_lookup(_ELEMENT_LOOKUP)
    return parser
