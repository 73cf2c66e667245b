# Routes package init
"""
QuickNotes Backend: API Routes Package
=========================================

Route Inventory:
    - notes.py:   GET  /notes          (list every note, creation order)
                  GET  /notes/{id}     (single note)
                  POST /notes          (create a note)
    - health.py:  GET  /health         (service health check)

Routes stay thin: decode the request, call NoteService, wrap the result in
the response envelope. Errors are raised, never rendered here.
"""
