import structlog
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from app.config import settings

logger = structlog.get_logger()


class BandRankError(Exception):
    """Base exception for BandRank."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(BandRankError):
    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            status_code=404,
        )


class SongNotFoundError(NotFoundError):
    def __init__(self, song_id: int) -> None:
        self.song_id = song_id
        super().__init__("Song", song_id)


class ConflictError(BandRankError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=409)


class ValidationError(BandRankError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=422)


class StoreUnavailableError(BandRankError):
    """The song/vote store failed or timed out. Never retried here."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=503)


async def bandrank_error_handler(request: Request, exc: BandRankError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": type(exc).__name__},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "type": "HTTPException"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full error server-side; only leak details in debug mode."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    message = str(exc) if settings.debug else "An unexpected error occurred"
    return JSONResponse(
        status_code=500,
        content={"error": message, "type": "InternalServerError"},
    )
