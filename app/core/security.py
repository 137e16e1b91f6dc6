from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import APIKeyHeader

from app.config import settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> str:
    """Verify the admin API key header. Skip if no key configured."""
    if not settings.api_key or settings.api_key == "changeme":
        return "anonymous"
    if not api_key or api_key != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return api_key


async def get_voter_id(x_voter_id: str | None = Header(default=None, max_length=255)) -> str | None:
    """Opaque voter identity supplied by the fronting auth layer, if any."""
    return x_voter_id or None


AdminDep = Depends(verify_api_key)
