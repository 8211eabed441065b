"""
Noteful API - Note Route Handlers
===================================

What:  list, create, get, delete and partial update for notes.
How:   Same shape as the folder routes. Required on create: note_name and
       folder_id (content is optional). Updatable: note_name, folder_id,
       content; omitted fields keep their stored values.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import (
    NOTE_REQUIRED_FIELDS,
    NOTE_UPDATABLE_FIELDS,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
    serialize_note,
)
from noteful.services.note_service import note_service
from noteful.validation import require_any_field, require_fields

router = APIRouter(prefix="/api/note", tags=["Notes"])


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    notes = await note_service.list_notes(db)
    return [serialize_note(note) for note in notes]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteResponse,
    responses={
        400: {"description": "Missing note_name or folder_id", "model": ErrorResponse},
        500: {"description": "Store error, e.g. unknown folder_id", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    payload: NoteCreate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    body = payload.model_dump() if payload else {}
    require_fields(body, NOTE_REQUIRED_FIELDS)

    note = await note_service.insert_note(
        db,
        {
            "note_name": body["note_name"],
            "folder_id": body["folder_id"],
            "content": body.get("content"),
        },
    )

    response.headers["Location"] = request.url_for("get_note", note_id=note.id).path
    return serialize_note(note)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a note by id",
)
async def get_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    note = await note_service.get_note(db, note_id)
    return serialize_note(note)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.get_note(db, note_id)
    await note_service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Partially update a note",
)
async def update_note(
    note_id: int,
    payload: NoteUpdate | None = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Apply the supplied fields only. Extra keys in the body are ignored.
    """
    await note_service.get_note(db, note_id)

    body = payload.model_dump() if payload else {}
    values = require_any_field(body, NOTE_UPDATABLE_FIELDS)

    await note_service.update_note(db, note_id, values)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
