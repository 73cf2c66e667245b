"""
QuickNotes Backend: Application Package Initializer
=====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Imported by uvicorn (quicknotes.main:app), the CLI entry point and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← ID parsing, field validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Pydantic models
    ├─────────────────────────────────────┤
    │        NoteStore (In-Memory)        │  ← Locked append-only sequence
    └─────────────────────────────────────┘

    Notes live in process memory only; a restart starts from an empty store.
"""

__version__ = "1.0.0"
