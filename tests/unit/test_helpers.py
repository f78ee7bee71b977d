"""Tests for string, regex and node helpers."""

import pytest
from lxml import etree

from element_finder import StringCollection
from element_finder.helper import NodeHelper, RegexHelper, StringHelper


class TestStringHelper:
    """Tests for StringHelper."""

    def test_plain_text_unchanged(self):
        """Test valid text passes through."""
        assert StringHelper.safe_encode_str("<p>Grüße 😀</p>") == "<p>Grüße 😀</p>"

    def test_control_chars_removed(self):
        """Test control characters are removed."""
        assert StringHelper.safe_encode_str("a\x00b\x1fc\x0bd") == "abcd"

    def test_whitespace_kept(self):
        """Test tab and newlines are allowed."""
        assert StringHelper.safe_encode_str("a\tb\nc\rd") == "a\tb\nc\rd"

    def test_lone_surrogate_removed(self):
        """Test lone surrogates are removed."""
        assert StringHelper.safe_encode_str("a\ud800b") == "ab"

    def test_noncharacters_removed(self):
        """Test U+FFFE and U+FFFF are removed."""
        assert StringHelper.safe_encode_str("a\ufffeb\uffffc") == "abc"


class TestRegexHelper:
    """Tests for RegexHelper."""

    def test_match(self):
        """Test collecting group of every match in every string."""
        result = RegexHelper.match(r"id=([0-9]+)", 1, ["id=1 id=2", "id=3"])
        assert isinstance(result, StringCollection)
        assert result.get_items() == ["1", "2", "3"]

    def test_match_skips_missing_group(self):
        """Test non-participating groups are skipped."""
        result = RegexHelper.match(r"a(b)?", 1, ["ab a"])
        assert result.get_items() == ["b"]

    def test_match_invalid_group(self):
        """Test unknown group index."""
        with pytest.raises(IndexError):
            RegexHelper.match(r"(a)", 2, ["a"])

    def test_match_callback(self):
        """Test callback builds values from matches."""
        result = RegexHelper.match_callback(
            r"(\d+)-(\d+)",
            lambda matches: [m.group(1) + m.group(2) for m in matches],
            ["10-20 30-40", "50-60"],
        )
        assert result.get_items() == ["1020", "3040", "5060"]

    def test_match_callback_receives_all_matches(self):
        """Test callback is called once per string."""
        calls = []

        def callback(matches):
            calls.append(len(matches))
            return []

        RegexHelper.match_callback(r"x", callback, ["xx", "", "x"])
        assert calls == [2, 0, 1]

    def test_match_callback_invalid_result(self):
        """Test callback must return iterable of strings."""
        with pytest.raises(TypeError):
            RegexHelper.match_callback(r"x", lambda matches: None, ["x"])
        with pytest.raises(TypeError):
            RegexHelper.match_callback(r"x", lambda matches: "x", ["x"])
        with pytest.raises(TypeError):
            RegexHelper.match_callback(r"x", lambda matches: [1], ["x"])

    def test_replace(self):
        """Test replacing in every string."""
        assert RegexHelper.replace(r"\s+", " ", ["a  b", "c\n\nd"]) == ["a b", "c d"]

    def test_split(self):
        """Test splitting and flattening."""
        assert RegexHelper.split(r"[,;]", ["a,b;c", "d"]) == ["a", "b", "c", "d"]


class TestNodeHelper:
    """Tests for NodeHelper."""

    @pytest.fixture
    def root(self):
        """Parsed XML tree."""
        return etree.fromstring('<r><p class="x">a<b>bold</b>c<!--note--></p></r>')

    def test_outer_content(self, root):
        """Test outer markup of element."""
        p = root.find("p")
        assert NodeHelper.get_outer_content(p, "xml") == '<p class="x">a<b>bold</b>c<!--note--></p>'

    def test_inner_content(self, root):
        """Test inner markup of element."""
        p = root.find("p")
        assert NodeHelper.get_inner_content(p, "xml") == "a<b>bold</b>c<!--note-->"

    def test_outer_content_excludes_tail(self, root):
        """Test tail text is not part of outer markup."""
        b = root.find("p/b")
        assert NodeHelper.get_outer_content(b, "xml") == "<b>bold</b>"

    def test_comment(self, root):
        """Test comment node content and value."""
        comment = root.xpath("//comment()")[0]
        assert NodeHelper.get_inner_content(comment) == "note"
        assert NodeHelper.get_outer_content(comment, "xml") == "<!--note-->"
        assert NodeHelper.get_node_value(comment) == "note"

    def test_attribute(self, root):
        """Test attribute result content and value."""
        attribute = root.xpath("//p/@class")[0]
        assert NodeHelper.get_inner_content(attribute) == "x"
        assert NodeHelper.get_outer_content(attribute) == "x"
        assert NodeHelper.get_node_value(attribute) == "x"

    def test_node_value_skips_comments(self, root):
        """Test element value is text content only."""
        assert NodeHelper.get_node_value(root.find("p")) == "aboldc"

    def test_remove_attribute(self, root):
        """Test removing attribute node."""
        assert NodeHelper.remove_node(root.xpath("//p/@class")[0]) is True
        assert root.find("p").attrib == {}

    def test_remove_tail_text(self, root):
        """Test removing tail text node."""
        tail = root.xpath("//p/text()")[1]
        assert NodeHelper.remove_node(tail) is True
        assert root.find("p/b").tail is None

    def test_remove_root(self, root):
        """Test root cannot be removed."""
        assert NodeHelper.remove_node(root) is False

    def test_remove_plain_string(self):
        """Test plain strings are not nodes."""
        assert NodeHelper.remove_node("text") is False
