"""Ingestion schemas for the document layout contract.

Payloads use the layout parser's camelCase keys; snake_case is accepted too.
Shape is validated once here so the extractors can trust their input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bibextract.exceptions import InvalidDocumentError
from bibextract.models import Document, Line, Page, Word


class WordSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    font: int | str
    font_size: float = Field(alias="fontSize", gt=0)
    y_max: float = Field(alias="yMax")
    text: str = ""


class LineSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    y_min: float = Field(alias="yMin")
    words: list[WordSchema]


class PageSchema(BaseModel):
    text: str
    lines: list[LineSchema]


class DocumentSchema(BaseModel):
    pages: list[PageSchema]

    def to_document(self) -> Document:
        """Build the immutable Document, interning font identities."""
        fonts: dict[int | str, int] = {}

        def intern(font: int | str) -> int:
            return fonts.setdefault(font, len(fonts))

        return Document(
            pages=tuple(
                Page(
                    text=page.text,
                    lines=tuple(
                        Line(
                            text=line.text,
                            y_min=line.y_min,
                            words=tuple(
                                Word(
                                    font=intern(word.font),
                                    font_size=word.font_size,
                                    y_max=word.y_max,
                                    text=word.text,
                                )
                                for word in line.words
                            ),
                        )
                        for line in page.lines
                    ),
                )
                for page in self.pages
            )
        )


def parse_document(payload: dict[str, Any]) -> Document:
    """
    Validate a layout payload and convert it to a Document.

    Args:
        payload: `{"pages": [{"text", "lines": [{"text", "yMin", "words": [...]}]}]}`

    Returns:
        Immutable Document

    Raises:
        InvalidDocumentError: if the payload does not match the contract
    """
    try:
        schema = DocumentSchema.model_validate(payload)
    except ValidationError as e:
        raise InvalidDocumentError(f"Invalid document payload: {e.error_count()} error(s)") from e
    return schema.to_document()
