"""Initial schema — players, games, scores.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Both score FKs carry ON DELETE CASCADE: deleting a player or a game removes
its scores in the same statement.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("join_date", sa.Date, nullable=False),
    )

    op.create_table(
        "games",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("genre", sa.Text, nullable=False),
    )

    op.create_table(
        "scores",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "player_id", sa.Integer,
            sa.ForeignKey("players.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "game_id", sa.Integer,
            sa.ForeignKey("games.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("score", sa.Integer, nullable=False),
        sa.Column("date_played", sa.Date, nullable=False),
    )
    op.create_index("ix_scores_player_id", "scores", ["player_id"])
    op.create_index("ix_scores_game_id", "scores", ["game_id"])


def downgrade() -> None:
    op.drop_index("ix_scores_game_id", table_name="scores")
    op.drop_index("ix_scores_player_id", table_name="scores")
    op.drop_table("scores")
    op.drop_table("games")
    op.drop_table("players")
