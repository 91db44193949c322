"""ORM Models — SQLAlchemy declarative models for the three record tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Player and Game are independent; Score references both

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all() or Alembic autogenerate runs
"""

from scoreboard.models.player import Player  # noqa: F401
from scoreboard.models.game import Game  # noqa: F401
from scoreboard.models.score import Score  # noqa: F401
