"""
Notes API — Notes Route Handlers
=================================

What:  CRUD endpoints under /notes.
How:   Every handler depends on the auth gate (get_current_user) and a
       NoteService. Handlers translate between HTTP and the service and
       nothing more; 401/403/404 come from exceptions the gate and the
       service raise.

Route table:
    POST   /notes        create          204
    GET    /notes        list own notes  200
    GET    /notes/{id}   get one note    200
    PUT    /notes/{id}   replace         204
    PATCH  /notes/{id}   partial update  204
    DELETE /notes/{id}   delete          204

Why `note_id: str`:
    The id is parsed by the service, so a non-numeric id is a 404 like any
    other unknown id instead of FastAPI's 422.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from app.auth import get_current_user
from app.dependencies import get_note_service
from app.schemas.note import NoteCreate, NotePatch, NoteReplace, NoteResponse
from app.services.note_service import NoteService, parse_note_id

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/notes", tags=["Notes"])

_ERRORS = {
    401: {"description": "Authorization header missing"},
    404: {"description": "Note not found or not accessible"},
}


@router.post(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        401: _ERRORS[401],
        403: {"description": "Body user differs from the authenticated user"},
    },
    summary="Create a note for the authenticated user",
)
async def create_note(
    payload: NoteCreate,
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.create_note(identity, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={401: _ERRORS[401]},
    summary="List the authenticated user's notes",
)
async def list_notes(
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return [NoteResponse.model_validate(note) for note in service.list_notes(identity)]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Get one of the authenticated user's notes",
    description=(
        "Returns 404 both for unknown ids and for notes owned by another user, "
        "so the existence of other users' notes is not revealed."
    ),
)
async def get_note(
    note_id: str,
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    note = service.get_note(identity, parse_note_id(note_id))
    return NoteResponse.model_validate(note)


@router.put(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_ERRORS, 403: {"description": "Note would be assigned to another user"}},
    summary="Replace title, content and owner of a note",
)
async def replace_note(
    note_id: str,
    payload: NoteReplace,
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.replace_note(identity, parse_note_id(note_id), payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_ERRORS, 403: {"description": "Note would be assigned to another user"}},
    summary="Update only the supplied fields of a note",
)
async def patch_note(
    note_id: str,
    payload: Optional[NotePatch] = None,
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Response:
    # No body at all is an empty patch
    service.patch_note(identity, parse_note_id(note_id), payload or NotePatch())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    identity: str = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(identity, parse_note_id(note_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
