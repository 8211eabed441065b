"""
Noteful API - Folder Schemas
==============================

What:  Request bodies and the sanitized wire representation of a folder.

Request models make every field optional so that presence checks produce
the `Missing '<field>' in request body` message (see noteful.validation)
instead of a generic schema error. Unknown keys are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field

from noteful.models.folder import Folder
from noteful.sanitize import sanitize_text

FOLDER_REQUIRED_FIELDS = ("folder_name",)
FOLDER_UPDATABLE_FIELDS = ("folder_name",)


class FolderCreate(BaseModel):
    folder_name: Optional[str] = Field(default=None, description="Folder display name")


class FolderUpdate(BaseModel):
    folder_name: Optional[str] = Field(default=None, description="New folder display name")


class FolderResponse(BaseModel):
    """Externally visible folder. `folder_name` is sanitized."""
    id: int = Field(description="Store-assigned folder id")
    folder_name: str = Field(description="Sanitized folder name")


def serialize_folder(folder: Folder) -> FolderResponse:
    """Map a stored folder row to its sanitized wire form."""
    return FolderResponse(
        id=folder.id,
        folder_name=sanitize_text(folder.folder_name),
    )
