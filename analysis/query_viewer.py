"""Query Viewer - Shows what an expression selects in a document.

This script loads an HTML or XML file, runs one expression against it
and prints the results and the parser errors as tables.

Usage:
    python -m analysis.query_viewer page.html "//a/@href"
    python -m analysis.query_viewer feed.xml "item > title" --xml --css --mode value
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tabulate import tabulate
from element_finder import CssExpression, DocumentType, ElementFinder
from element_finder.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)

MODES = ("content", "outer", "value")
MAX_CELL_WIDTH = 80


def print_separator(title=""):
    """Print a visual separator."""
    if title:
        print(f"\n{'='*70}")
        print(f"  {title}")
        print(f"{'='*70}")
    else:
        print("-" * 70)


def shorten(text, width=MAX_CELL_WIDTH):
    """Collapse whitespace and cut long cell values."""
    text = " ".join(text.split())
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def load_document(path, xml=False, css=False):
    """Load document file into an ElementFinder."""
    document_type = DocumentType.XML if xml else DocumentType.HTML
    translator = CssExpression(html=not xml) if css else None
    data = Path(path).read_text(encoding="utf-8")
    return ElementFinder(data, document_type, translator)


def collect_results(finder, expression, mode="content"):
    """Run expression in the given mode and return result strings."""
    if mode == "value":
        collection = finder.value(expression)
    else:
        collection = finder.content(expression, outer=(mode == "outer"))
    return collection.get_items()


def show_results(results, expression):
    """Show query results table."""
    print_separator(f"RESULTS: {expression}")

    if not results:
        print("  (no matches)")
        return

    data = [[index, shorten(item)] for index, item in enumerate(results)]
    print(tabulate(data, headers=["#", "Result"], tablefmt="grid"))
    print(f"\nTotal: {len(results)}")


def show_load_errors(finder):
    """Show parser errors table."""
    print_separator("LOAD ERRORS")

    errors = finder.get_load_errors()
    if not errors:
        print("  (none)")
        return

    data = [[e.level, e.line, e.column, shorten(e.message)] for e in errors]
    print(tabulate(data, headers=["Level", "Line", "Column", "Message"], tablefmt="grid"))


def build_arg_parser():
    """Build command line parser."""
    parser = argparse.ArgumentParser(description="Show query results for a document")
    parser.add_argument("path", help="HTML or XML file")
    parser.add_argument("expression", help="XPath expression (or CSS selector with --css)")
    parser.add_argument("--xml", action="store_true", help="Parse file as XML")
    parser.add_argument("--css", action="store_true", help="Treat expression as CSS selector")
    parser.add_argument("--mode", choices=MODES, default="content", help="Result type")
    return parser


def main(argv=None):
    """Main function to display query results."""
    args = build_arg_parser().parse_args(argv)
    setup_logging()

    finder = load_document(args.path, xml=args.xml, css=args.css)
    results = collect_results(finder, args.expression, args.mode)
    logger.info(f"Query finished | expression={args.expression} | mode={args.mode} | results={len(results)}")

    show_results(results, args.expression)
    show_load_errors(finder)
    return 0


if __name__ == "__main__":
    sys.exit(main())
