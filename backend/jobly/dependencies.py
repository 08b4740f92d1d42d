from fastapi import Header

from jobly.config import settings
from jobly.errors import UnauthorizedError
from jobly.utils.security import verify_token


async def require_admin(authorization: str | None = Header(None)):
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError("Missing bearer token")
    token = authorization[7:]
    if not settings.admin_token_hash or not verify_token(settings.admin_token_hash, token):
        raise UnauthorizedError("Admin privileges required")
    return token
