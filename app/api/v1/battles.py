"""Battle endpoints: fetch the next matchup, submit its outcome."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_battle_service, get_song_store
from app.core.security import get_voter_id
from app.schemas.battle import (
    BattleSubmitRequest,
    BattleSubmitResponse,
    BattleVoteResponse,
    PairingResponse,
)
from app.schemas.common import ErrorResponse
from app.schemas.song import SongResponse
from app.services.battle_service import BattleService
from app.stores.song_store import SongStore

router = APIRouter(prefix="/battles", tags=["battles"])


@router.get(
    "/next",
    response_model=PairingResponse,
    responses={204: {"description": "Fewer than two songs available"}},
)
async def next_battle(
    voter_id: str | None = Depends(get_voter_id),
    service: BattleService = Depends(get_battle_service),
) -> PairingResponse | Response:
    pairing = await service.next_pairing(voter_id=voter_id)
    if pairing is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return PairingResponse(
        a=SongResponse.model_validate(pairing.song_a),
        b=SongResponse.model_validate(pairing.song_b),
    )


@router.post(
    "/submit",
    response_model=BattleSubmitResponse,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def submit_battle(
    payload: BattleSubmitRequest,
    voter_id: str | None = Depends(get_voter_id),
    service: BattleService = Depends(get_battle_service),
) -> BattleSubmitResponse:
    outcome = await service.submit_result(
        winner_id=payload.winner_id,
        loser_id=payload.loser_id,
        skipped=payload.skipped,
        voter_id=voter_id,
    )
    return BattleSubmitResponse(
        skipped=outcome.skipped,
        vote_id=outcome.vote_id,
        winner_rating=outcome.elo.winner_new_rating if outcome.elo else None,
        loser_rating=outcome.elo.loser_new_rating if outcome.elo else None,
    )


@router.get("/votes", response_model=list[BattleVoteResponse])
async def list_votes(
    limit: int = Query(default=50, ge=1, le=500),
    store: SongStore = Depends(get_song_store),
) -> list[BattleVoteResponse]:
    votes = await store.list_votes(limit=limit)
    return [BattleVoteResponse.model_validate(v) for v in votes]
