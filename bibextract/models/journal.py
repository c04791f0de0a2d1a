"""Journal model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bibextract.database import Base


class Journal(Base):
    __tablename__ = "journals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Letters-only, diacritic-free, lowercased form used for lookups
    name_normalized: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
