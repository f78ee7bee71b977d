"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ["ELEMENT_FINDER_DEBUG"] = "true"
os.environ["ELEMENT_FINDER_LOG_LEVEL"] = "DEBUG"
os.environ["ELEMENT_FINDER_DEFAULT_DOCUMENT_TYPE"] = "html"


@pytest.fixture
def sample_html():
    """Sample HTML page for testing."""
    return """
    <html>
    <head><title>Catalogue</title></head>
    <body>
        <div class="item" id="first"><a href="/one" class="link">One</a><span>1</span></div>
        <div class="item" id="second"><a href="/two">Two</a><span>2</span></div>
        <div class="empty"></div>
        <p>tel: 12345, fax: 67890</p>
        <ul>
            <li>alpha</li>
            <li>beta</li>
        </ul>
    </body>
    </html>
    """


@pytest.fixture
def sample_xml():
    """Sample XML document for testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<catalog>
    <book id="bk101"><title>XML Developer's Guide</title><price>44.95</price></book>
    <book id="bk102"><title>Midnight Rain</title><price>5.95</price></book>
</catalog>
"""
