from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base

DEFAULT_SONG_RATING = 1500.0


class Song(Base):
    __tablename__ = "songs"
    __table_args__ = (UniqueConstraint("artist", "title"),)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    album: Mapped[str | None] = mapped_column(String(255))
    release_year: Mapped[int | None] = mapped_column(Integer)
    # Owned by the rating engine; stored unrounded
    rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=DEFAULT_SONG_RATING,
        server_default=str(DEFAULT_SONG_RATING),
        index=True,
    )

    # Enrichment, written by the metadata collaborator only
    album_art_url: Mapped[str | None] = mapped_column(String(1024))
    genre: Mapped[str | None] = mapped_column(String(100))
    duration_ms: Mapped[int | None] = mapped_column(Integer)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Song id={self.id} {self.artist!r} - {self.title!r} rating={self.rating}>"
