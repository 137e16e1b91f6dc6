"""Initial schema: songs and battle votes.

Revision ID: 001
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Songs table
    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("artist", sa.String(255), nullable=False),
        sa.Column("album", sa.String(255), nullable=True),
        sa.Column("release_year", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False, server_default="1500.0"),
        sa.Column("album_art_url", sa.String(1024), nullable=True),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("duration_ms", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_songs"),
        sa.UniqueConstraint("artist", "title", name="uq_songs_artist"),
    )
    op.create_index("ix_songs_artist", "songs", ["artist"])
    op.create_index("ix_songs_rating", "songs", ["rating"])

    # Battle votes table (winner_id NULL = skipped battle)
    op.create_table(
        "battle_votes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("song_a_id", sa.Integer(), nullable=False),
        sa.Column("song_b_id", sa.Integer(), nullable=False),
        sa.Column("winner_id", sa.Integer(), nullable=True),
        sa.Column("voter_id", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_battle_votes"),
        sa.ForeignKeyConstraint(["song_a_id"], ["songs.id"], name="fk_battle_votes_song_a_id_songs", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["song_b_id"], ["songs.id"], name="fk_battle_votes_song_b_id_songs", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["winner_id"], ["songs.id"], name="fk_battle_votes_winner_id_songs", ondelete="CASCADE"),
        sa.CheckConstraint("song_a_id <> song_b_id", name="ck_battle_votes_distinct_songs"),
    )
    op.create_index("ix_battle_votes_song_a_id", "battle_votes", ["song_a_id"])
    op.create_index("ix_battle_votes_song_b_id", "battle_votes", ["song_b_id"])
    op.create_index("ix_battle_votes_voter_id", "battle_votes", ["voter_id"])


def downgrade() -> None:
    op.drop_table("battle_votes")
    op.drop_table("songs")
