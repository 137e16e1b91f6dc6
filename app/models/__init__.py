from app.models.base import Base
from app.models.song import Song
from app.models.vote import BattleVote

__all__ = [
    "Base",
    "Song",
    "BattleVote",
]
