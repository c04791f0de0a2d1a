"""Data models for parsed document layout.

Documents are produced by an external layout parser and are never mutated
here. Ordering of pages, lines and words is top-to-bottom, left-to-right as
given by the producer.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Word:
    """A positioned token. Only equality of `font` is meaningful."""

    font: Hashable
    font_size: float
    y_max: float
    text: str = ""


@dataclass(frozen=True)
class Line:
    """One visually contiguous horizontal run of text."""

    text: str
    y_min: float
    words: tuple[Word, ...] = ()

    @property
    def y_max(self) -> float:
        if not self.words:
            return self.y_min
        return max(word.y_max for word in self.words)


@dataclass(frozen=True)
class Page:
    """A page's lines plus its concatenated raw text."""

    text: str
    lines: tuple[Line, ...] = ()


@dataclass(frozen=True)
class Document:
    """An ordered sequence of pages."""

    pages: tuple[Page, ...] = ()


@dataclass
class LineBlock:
    """Adjacent lines judged to belong to one logical paragraph."""

    lines: list[Line] = field(default_factory=list)

    @property
    def last_word(self) -> Word:
        return self.lines[-1].words[-1]

    @property
    def text(self) -> str:
        """Joined line text; a trailing hyphen joins the next line directly."""
        text = ""
        for line in self.lines:
            text += line.text
            if text.endswith("-"):
                text = text[:-1]
            else:
                text += " "
        return text
