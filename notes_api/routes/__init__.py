# Routes package init
"""
Notes API — Routes Package
============================

Route Inventory:
    - notes.py:   POST/GET /notes, GET/PUT/DELETE /notes/{id}
    - health.py:  GET / (welcome), GET /health (service health check)

Routes are THIN: they parse the request, call NoteService, and return the
result. Status codes for failures come from the exception handlers in main.py.
"""
