"""
Noteful API - Folder Route Handlers
=====================================

What:  list, create, get, delete and partial update for folders.
How:   Each handler receives its AsyncSession through Depends(get_db_session).
       Handlers on /api/folder/{folder_id} look the folder up first, so a
       missing id is a 404 whatever the verb.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import (
    FOLDER_REQUIRED_FIELDS,
    FOLDER_UPDATABLE_FIELDS,
    FolderCreate,
    FolderResponse,
    FolderUpdate,
    serialize_folder,
)
from noteful.services.folder_service import folder_service
from noteful.validation import require_any_field, require_fields

router = APIRouter(prefix="/api/folder", tags=["Folders"])


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(
    db: AsyncSession = Depends(get_db_session),
) -> List[FolderResponse]:
    folders = await folder_service.list_folders(db)
    return [serialize_folder(folder) for folder in folders]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FolderResponse,
    responses={400: {"description": "Missing folder_name", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: FolderCreate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    """
    Insert a folder and answer 201 with its sanitized form.

    The Location header points at GET /api/folder/{id} for the new row.
    """
    body = payload.model_dump() if payload else {}
    require_fields(body, FOLDER_REQUIRED_FIELDS)

    folder = await folder_service.insert_folder(
        db, {field: body[field] for field in FOLDER_REQUIRED_FIELDS}
    )

    response.headers["Location"] = request.url_for("get_folder", folder_id=folder.id).path
    return serialize_folder(folder)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a folder by id",
)
async def get_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    folder = await folder_service.get_folder(db, folder_id)
    return serialize_folder(folder)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder and its notes",
)
async def delete_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.get_folder(db, folder_id)
    await folder_service.delete_folder(db, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Folder not found", "model": ErrorResponse},
    },
    summary="Rename a folder",
)
async def update_folder(
    folder_id: int,
    payload: FolderUpdate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.get_folder(db, folder_id)

    body = payload.model_dump() if payload else {}
    values = require_any_field(body, FOLDER_UPDATABLE_FIELDS)

    await folder_service.update_folder(db, folder_id, values)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
