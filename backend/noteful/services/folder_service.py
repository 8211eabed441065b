"""
Noteful API - Folder Storage Accessor
=======================================

What:  Read/insert/update/delete against the `folder` table.
Who:   Called by noteful.routes.folders.

Deleting a folder issues one DELETE; the note rows that reference it are
removed by the store (ON DELETE CASCADE).
"""

from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.folder import Folder
from noteful.services.base import TableService


class FolderService(TableService[Folder]):
    model = Folder
    resource = "folder"
    not_found_message = "Folder doesn't exist"

    async def list_folders(self, db: AsyncSession) -> List[Folder]:
        return await self.list_all(db)

    async def get_folder(self, db: AsyncSession, folder_id: int) -> Folder:
        return await self.get(db, folder_id)

    async def insert_folder(self, db: AsyncSession, values: Dict[str, Any]) -> Folder:
        return await self.insert(db, values)

    async def update_folder(self, db: AsyncSession, folder_id: int, values: Dict[str, Any]) -> int:
        return await self.update(db, folder_id, values)

    async def delete_folder(self, db: AsyncSession, folder_id: int) -> int:
        return await self.delete(db, folder_id)


folder_service = FolderService()
