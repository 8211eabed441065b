"""
Noteful API - Note Storage Accessor
=====================================

What:  Read/insert/update/delete against the `note` table.
Who:   Called by noteful.routes.notes.

folder_id is not checked against the folder table here. A note pointing at a
missing folder fails the foreign key in the store and surfaces as
DatabaseError (→ 500). `modified` is set by the store on insert and is never
written by updates.
"""

from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.note import Note
from noteful.services.base import TableService


class NoteService(TableService[Note]):
    model = Note
    resource = "note"
    not_found_message = "note doesn't exist"

    async def list_notes(self, db: AsyncSession) -> List[Note]:
        return await self.list_all(db)

    async def get_note(self, db: AsyncSession, note_id: int) -> Note:
        return await self.get(db, note_id)

    async def insert_note(self, db: AsyncSession, values: Dict[str, Any]) -> Note:
        return await self.insert(db, values)

    async def update_note(self, db: AsyncSession, note_id: int, values: Dict[str, Any]) -> int:
        return await self.update(db, note_id, values)

    async def delete_note(self, db: AsyncSession, note_id: int) -> int:
        return await self.delete(db, note_id)


note_service = NoteService()
