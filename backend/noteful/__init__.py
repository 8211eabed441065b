"""
Noteful API - Application Package
===================================

Layered structure:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, body validation
    ├─────────────────────────────────────┤
    │   Services (Storage Accessors)      │  ← one per table
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic + sanitizer
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
