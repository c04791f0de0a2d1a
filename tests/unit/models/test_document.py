"""Tests for the document layout models."""

from bibextract.models import Line, LineBlock, Word


class TestLine:
    def test_y_max_from_words(self):
        line = Line(
            text="a b",
            y_min=0,
            words=(Word(font=1, font_size=10, y_max=9), Word(font=1, font_size=12, y_max=11)),
        )
        assert line.y_max == 11

    def test_y_max_without_words(self):
        assert Line(text="", y_min=5).y_max == 5


class TestLineBlock:
    def test_last_word(self):
        last = Word(font=2, font_size=10, y_max=30)
        block = LineBlock(
            lines=[
                Line(text="a", y_min=0, words=(Word(font=1, font_size=10, y_max=10),)),
                Line(text="b c", y_min=20, words=(Word(font=1, font_size=10, y_max=30), last)),
            ]
        )
        assert block.last_word is last

    def test_text_keeps_inner_hyphens(self):
        block = LineBlock(lines=[Line(text="key-words", y_min=0), Line(text="next", y_min=10)])
        assert block.text == "key-words next "
