"""
Noteful API - Note SQLAlchemy Model
=====================================

What:  ORM model representing the `note` table.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: integer primary key assigned by the store
    - note_name: free text, required
    - content: free text, optional
    - folder_id: FK to folder.id with ON DELETE CASCADE, so deleting a folder
      removes its notes in the same statement
    - modified: set by the store at insert time (CURRENT_TIMESTAMP); the API
      never writes it
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Note(Base):
    """A text record belonging to exactly one folder."""

    __tablename__ = "note"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    note_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folder.id", ondelete="CASCADE"),
        nullable=False,
    )

    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Listing notes of a folder and the cascade both scan by folder_id
    __table_args__ = (
        Index("idx_note_folder_id", folder_id),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
