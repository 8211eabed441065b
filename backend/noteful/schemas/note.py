"""
Noteful API - Note Schemas
============================

What:  Request bodies and the sanitized wire representation of a note.

Free-text fields (note_name, content) are sanitized on output. folder_id and
modified are passed through unchanged; modified is assigned by the store and
is not accepted in request bodies.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from noteful.models.note import Note
from noteful.sanitize import sanitize_text

NOTE_REQUIRED_FIELDS = ("note_name", "folder_id")
NOTE_UPDATABLE_FIELDS = ("note_name", "folder_id", "content")


class NoteCreate(BaseModel):
    note_name: Optional[str] = Field(default=None, description="Note title")
    folder_id: Optional[int] = Field(default=None, description="Id of the owning folder")
    content: Optional[str] = Field(default=None, description="Note body")


class NoteUpdate(BaseModel):
    note_name: Optional[str] = Field(default=None, description="New note title")
    folder_id: Optional[int] = Field(default=None, description="Id of the folder to move the note to")
    content: Optional[str] = Field(default=None, description="New note body")


class NoteResponse(BaseModel):
    """Externally visible note. `note_name` and `content` are sanitized."""
    id: int = Field(description="Store-assigned note id")
    note_name: str = Field(description="Sanitized note title")
    content: Optional[str] = Field(default=None, description="Sanitized note body")
    modified: datetime = Field(description="When the note was created")
    folder_id: int = Field(description="Id of the owning folder")


def serialize_note(note: Note) -> NoteResponse:
    """Map a stored note row to its sanitized wire form."""
    return NoteResponse(
        id=note.id,
        note_name=sanitize_text(note.note_name),
        content=sanitize_text(note.content),
        modified=note.modified,
        folder_id=note.folder_id,
    )
