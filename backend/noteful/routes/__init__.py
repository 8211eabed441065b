# Routes package init
"""
Noteful API - API Routes Package
==================================

Route Inventory:
    - folders.py: GET/POST /api/folder, GET/DELETE/PATCH /api/folder/{folder_id}
    - notes.py:   GET/POST /api/note,   GET/DELETE/PATCH /api/note/{note_id}
    - health.py:  GET /health

Routes are thin: validate the body, call the storage accessor, serialize.
Errors are raised as exceptions and formatted by the handlers in main.py.
"""
