# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:   POST   /notes            (create note)
                  GET    /notes            (list own notes)
                  GET    /notes/{id}       (get one note)
                  PUT    /notes/{id}       (replace note)
                  PATCH  /notes/{id}       (partial update)
                  DELETE /notes/{id}       (delete note)
    - health.py:  GET    /health           (service health check, no auth)

Design Principle:
    Routes are THIN. They pull the identity from the auth gate, call
    NoteService, and pick the status code. Ownership rules live in the
    service.
"""
