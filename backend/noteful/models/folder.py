"""
Noteful API - Folder SQLAlchemy Model
=======================================

What:  ORM model representing the `folder` table.
Who:   Used by FolderService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: integer primary key assigned by the store
    - folder_name: free text, sanitized on output (stored as sent)
    - notes: deleted by the store (ON DELETE CASCADE on note.folder_id)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named grouping container for notes."""

    __tablename__ = "folder"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    folder_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, folder_name='{self.folder_name}')>"
