"""Player ORM — a person who records scores.

Invariants:
    - id is an auto-incrementing integer primary key, never updated
    - name and join_date are non-nullable
    - Deleting a player deletes their scores (FK ON DELETE CASCADE on scores)
"""

from datetime import date

from sqlalchemy import Date, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from scoreboard.db.base import Base


class Player(Base):
    """Player row."""
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
