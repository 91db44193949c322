"""Game ORM — a title that scores are recorded against."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from scoreboard.db.base import Base


class Game(Base):
    """Game row. Deleting it cascades to scores at the store level."""
    __tablename__ = "games"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    genre: Mapped[str] = mapped_column(Text, nullable=False)
