"""Bearer token gate for the bookmarks API."""
import hmac
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings


logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized request",
        headers={"WWW-Authenticate": "Bearer"},
    )


def is_valid_token(token: str, expected: str) -> bool:
    """
    Compare a presented token against the configured one in constant time.

    An empty configured token never matches, so a deployment without
    API_TOKEN rejects every request instead of accepting any.
    """
    if not expected:
        return False
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


async def require_api_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that rejects requests without the configured bearer token.

    In DEV_MODE, the check is skipped.
    """
    if settings.dev_mode:
        return

    if credentials is None:
        raise _unauthorized()

    if not is_valid_token(credentials.credentials, settings.api_token):
        logger.warning("Rejected request with invalid API token")
        raise _unauthorized()
