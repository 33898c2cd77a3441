"""
Notes API — Request-Scoped Dependencies
========================================

What:  FastAPI dependencies that hand the app's NoteStore and a NoteService
       to route handlers.
Why:   The store is created by create_app() and lives on app.state, never as
       a module global. Tests build a fresh app (and store) per test case.

Example usage in a route:
    @router.get("/notes")
    async def list_notes(service: NoteService = Depends(get_note_service)):
        ...
"""

from fastapi import Depends, Request

from app.services.note_service import NoteService
from app.storage import NoteStore


def get_note_store(request: Request) -> NoteStore:
    return request.app.state.store


def get_note_service(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> NoteService:
    """Build a NoteService bound to this app's store and ownership policy."""
    return NoteService(store=store, policy=request.app.state.settings.ownership_policy)
