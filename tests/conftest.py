"""Shared fixtures for building document layouts."""

import pytest

from bibextract.models import Document, Line, Page, Word

BODY_FONT = 1
HEADING_FONT = 2


def make_line(
    text: str,
    y_min: float,
    font=BODY_FONT,
    font_size: float = 10.0,
    height: float | None = None,
) -> Line:
    """Build a one-word-per-token line whose words sit between y_min and y_min + height."""
    y_max = y_min + (height if height is not None else font_size)
    words = tuple(
        Word(font=font, font_size=font_size, y_max=y_max, text=token) for token in text.split()
    )
    return Line(text=text, y_min=y_min, words=words)


def make_page(*lines: Line, text: str | None = None) -> Page:
    return Page(
        text=text if text is not None else "\n".join(line.text for line in lines),
        lines=tuple(lines),
    )


@pytest.fixture
def line_factory():
    return make_line


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def keywords_document() -> Document:
    """Title, a keywords paragraph wrapped over two lines, then body text."""
    return Document(
        pages=(
            make_page(
                make_line("Parsing Scanned Articles", 0, font=HEADING_FONT, font_size=16),
                make_line("Keywords: machine learning, natural lan-", 40),
                make_line("guage processing, parsing", 52),
                make_line("1 Introduction", 80, font=HEADING_FONT, font_size=12),
            ),
        )
    )
