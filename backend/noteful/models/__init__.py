"""ORM models. Importing this package registers every table on Base.metadata."""

from noteful.models.folder import Folder
from noteful.models.note import Note

__all__ = ["Folder", "Note"]
