# Services package init
"""
Noteful API - Storage Accessors
=================================

What:  One accessor per table, sitting between routes (HTTP) and the database.
How:   Each accessor is a TableService subclass bound to one ORM model. It takes
       the request's AsyncSession as its first argument and wraps driver errors
       in DatabaseError.

Service Inventory:
    - TableService (base.py):  list / get / insert / update / delete
    - FolderService:           folder table ("Folder doesn't exist")
    - NoteService:             note table ("note doesn't exist")
"""
