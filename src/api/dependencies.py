"""FastAPI dependencies for injection."""
from core.auth import require_api_token
from db.session import get_async_session

__all__ = [
    "get_async_session",
    "require_api_token",
]
