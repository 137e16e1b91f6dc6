from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.battle_service import BattleService
from app.stores.song_store import SongStore, SqlAlchemySongStore


async def get_song_store(db: AsyncSession = Depends(get_db)) -> SongStore:
    return SqlAlchemySongStore(db)


async def get_battle_service(store: SongStore = Depends(get_song_store)) -> BattleService:
    return BattleService(store)
