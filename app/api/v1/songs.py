import structlog
from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import get_song_store
from app.config import settings
from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import AdminDep
from app.models.song import Song
from app.schemas.common import MAX_SONG_ID, SongOrder
from app.schemas.song import SongCreate, SongListResponse, SongResponse
from app.stores.song_store import SongStore

router = APIRouter(prefix="/songs", tags=["songs"])
logger = structlog.get_logger()


@router.get("", response_model=SongListResponse)
async def list_songs(
    order: SongOrder = SongOrder.RATING,
    limit: int = Query(default=100, ge=1, le=1000),
    store: SongStore = Depends(get_song_store),
) -> SongListResponse:
    total = await store.count_songs()
    songs = await store.list_songs(limit=limit, order_by_rating_desc=order == SongOrder.RATING)
    items = [SongResponse.model_validate(s) for s in songs]
    return SongListResponse(total=total, limit=limit, items=items)


@router.post("", response_model=SongResponse, status_code=201, dependencies=[AdminDep])
async def create_song(
    body: SongCreate,
    store: SongStore = Depends(get_song_store),
) -> SongResponse:
    async with store.atomic():
        if await store.find_song(body.artist, body.title):
            raise ConflictError(f"Song '{body.title}' by {body.artist} already exists")

        song = await store.add_song(
            Song(
                title=body.title,
                artist=body.artist,
                album=body.album or None,
                release_year=body.release_year,
                rating=settings.default_rating,
            )
        )
    logger.info("song_added", song_id=song.id, artist=song.artist, title=song.title)
    return SongResponse.model_validate(song)


@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: int = Path(ge=1, le=MAX_SONG_ID),
    store: SongStore = Depends(get_song_store),
) -> SongResponse:
    song = await store.get_song(song_id)
    if not song:
        raise NotFoundError("Song", song_id)
    return SongResponse.model_validate(song)


@router.delete("/{song_id}", status_code=204, dependencies=[AdminDep])
async def delete_song(
    song_id: int = Path(ge=1, le=MAX_SONG_ID),
    store: SongStore = Depends(get_song_store),
) -> None:
    async with store.atomic():
        if not await store.delete_song(song_id):
            raise NotFoundError("Song", song_id)
    logger.info("song_deleted", song_id=song_id)
