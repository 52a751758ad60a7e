"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, require_api_token
from schemas.bookmark import BookmarkCreate, BookmarkPatch, BookmarkResponse
from schemas.errors import ErrorResponse
from services import bookmark_service
from services.exceptions import BookmarkNotFoundError, BookmarkValidationError

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": ErrorResponse}},
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Bookmark doesn't exist"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid request body"}}


@router.get("/", response_model=list[BookmarkResponse])
@router.get("", response_model=list[BookmarkResponse], include_in_schema=False)
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    return await bookmark_service.list_bookmarks(db)


@router.post(
    "/",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_bookmark(
    request: Request,
    response: Response,
    data: BookmarkCreate | None = None,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    All of title, url, rating and description are required. The response
    carries a Location header pointing at the new bookmark.
    """
    try:
        bookmark = await bookmark_service.create_bookmark(db, data or BookmarkCreate())
    except BookmarkValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{bookmark.id}"
    return bookmark


@router.get("/{bookmark_id}", response_model=BookmarkResponse, responses=NOT_FOUND_RESPONSE)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    try:
        return await bookmark_service.get_bookmark(db, bookmark_id)
    except BookmarkNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.delete(
    "/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark."""
    try:
        await bookmark_service.delete_bookmark(db, bookmark_id)
    except BookmarkNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.patch(
    "/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_bookmark(
    bookmark_id: int,
    data: BookmarkPatch | None = None,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """
    Partially update a bookmark.

    Only the fields present in the body are changed. At least one of title,
    url, rating or description must be supplied with a non-empty value.
    """
    try:
        await bookmark_service.update_bookmark(db, bookmark_id, data or BookmarkPatch())
    except BookmarkNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except BookmarkValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
