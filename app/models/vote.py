from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class BattleVote(Base):
    """Immutable record of one submitted matchup; winner_id is NULL for a skip."""

    __tablename__ = "battle_votes"
    __table_args__ = (CheckConstraint("song_a_id <> song_b_id", name="distinct_songs"),)

    song_a_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("songs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    song_b_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("songs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    winner_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("songs.id", ondelete="CASCADE"),
        nullable=True,
    )
    voter_id: Mapped[str | None] = mapped_column(String(255), index=True)

    @property
    def skipped(self) -> bool:
        return self.winner_id is None
