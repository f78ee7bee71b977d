"""Tests for ObjectCollection."""

import pytest

from element_finder import ElementFinder, ObjectCollection


class TestObjectCollection:
    """Tests for ObjectCollection."""

    def test_invalid_object_index(self):
        """Test missing index gives None."""
        collection = ObjectCollection([ElementFinder("<a>0</a>"), ElementFinder("<a>1</a>")])
        assert collection.get(0) is not None
        assert collection.get(2) is None

    def test_walk(self):
        """Test walking over documents."""
        collection = ObjectCollection([ElementFinder("<a>1</a>"), ElementFinder("<a>2</a>")])

        links = []
        collection.walk(lambda finder: links.append(finder.content("//a").get_first()))
        assert links == ["1", "2"]

    def test_iterate(self):
        """Test iteration keeps order."""
        collection = ObjectCollection([ElementFinder("<a>0</a>"), ElementFinder("<a>1</a>")])

        collected = 0
        for index, item in enumerate(collection):
            collected += 1
            assert item.match(r"<a>(.*)</a>").get_first() == str(index)

        assert collected == 2

    def test_merge(self):
        """Test merging document collections."""
        source = ObjectCollection([ElementFinder("<a>0</a>"), ElementFinder("<a>1</a>")])
        merged = source.merge(ObjectCollection([ElementFinder("<a>0</a>")]))

        texts = []
        merged.walk(lambda finder: texts.append(finder.value("//a").get_first()))
        assert texts == ["0", "1", "0"]

    def test_add(self):
        """Test adding document."""
        source = ObjectCollection([ElementFinder("<a>0</a>"), ElementFinder("<a>1</a>")])
        result = source.add(ElementFinder("<a>2</a>"))
        assert len(source) == 2
        assert len(result) == 3
        assert result.get_last().content("//a").get_first() == "2"

    def test_get(self):
        """Test getting documents."""
        collection = ObjectCollection([ElementFinder("<b>0</b>"), ElementFinder("<a>data1</a>")])
        assert collection.get(0).content("//b").get_first() == "0"
        assert collection.get(1).content("//a").get_first() == "data1"
        assert collection.get(2) is None

    def test_invalid_data_type(self):
        """Test non-document items are rejected."""
        with pytest.raises(TypeError):
            ObjectCollection([None])
