"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import bookmarks, health
from core.config import get_settings
from db.session import engine
from schemas.errors import error_body
from services.exceptions import StoreError


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    configure_logging(get_settings().log_level)
    logger.info("Bookmarks API starting")

    yield

    # Shutdown: release pooled database connections
    await engine.dispose()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # HSTS: enforce HTTPS for 1 year, including subdomains
        response.headers["Strict-Transport-Security"] = (
            "max-age=31536000; includeSubDomains"
        )
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Prevent clickjacking - API shouldn't be framed
        response.headers["X-Frame-Options"] = "DENY"
        return response


def validation_error_message(exc: RequestValidationError) -> str:
    """
    Turn the first request parsing error into a single readable message.

    Locations look like ("body", "rating") or ("path", "bookmark_id").
    """
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return "Request body must be valid JSON"
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1:
            return f"Invalid '{loc[-1]}' in request {loc[0]}"
        if loc:
            return f"Invalid request {loc[0]}"
    return "Invalid request"


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="CRUD for bookmarks. Text fields are sanitized before they are returned.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    _request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    """Render HTTP errors as {"error": {"message": ...}}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed requests as 400 rather than FastAPI's default 422."""
    return JSONResponse(status_code=400, content=error_body(validation_error_message(exc)))


@app.exception_handler(StoreError)
async def store_exception_handler(_request: Request, exc: StoreError) -> JSONResponse:
    """Fallback for database failures. Details are only exposed in DEV_MODE."""
    logger.error("Store failure: %s", exc, exc_info=exc)
    message = str(exc) if get_settings().dev_mode else "server error"
    return JSONResponse(status_code=500, content=error_body(message))


# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router, prefix="/api")
