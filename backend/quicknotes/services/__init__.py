# Services package init
"""
QuickNotes Backend: Services Layer
=====================================

Service Inventory:
    - NoteStore:   Locked, append-only in-memory note sequence
    - NoteService: Identifier parsing and create validation on top of NoteStore
"""
