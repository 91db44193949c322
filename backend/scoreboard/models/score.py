"""Score ORM — one result of one player in one game.

Invariants:
    - player_id and game_id must name existing rows (FK enforced by the store)
    - ON DELETE CASCADE on both FKs: the store removes scores with their parent
    - score is a non-negative integer (checked at the boundary, not by a constraint)

Design Decisions:
    - No ORM relationship()/cascade: deletes are single DELETE statements and
      the cascade is the database's, so ORM-level cascades would never run
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from scoreboard.db.base import Base


class Score(Base):
    """Score row."""
    __tablename__ = "scores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    game_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    date_played: Mapped[date] = mapped_column(Date, nullable=False)
