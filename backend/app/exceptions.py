"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios of the notes API.
Why:   Services raise these instead of building responses, so the HTTP status
       and the German user-facing message are decided in one place.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return plain-text responses with the matching status code.
Who:   Raised by the auth gate and NoteService; caught by global handlers.

Exception Hierarchy:
    NotesError (base)          → 500 Internal Server Error
    ├── UnauthorizedError      → 401 Unauthorized (no Authorization header)
    ├── ForbiddenError         → 403 Forbidden (ownership mismatch)
    ├── NotFoundError          → 404 Not Found (missing or hidden note)
    └── ValidationError        → 422 Unprocessable Entity (malformed body)

Response format:
    The body is the message only, as text/plain. There are no error codes;
    clients branch on the HTTP status.
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all notes API errors.

    Attributes:
        message:  User-facing error description (returned in the response body)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Ein unerwarteter Fehler ist aufgetreten.",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(NotesError):
    """
    Raised by the auth gate when the request carries no Authorization header.

    HTTP: 401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Nicht autorisiert. Authorization-Header fehlt.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(NotesError):
    """
    Raised when the caller may see the note but not perform the action.

    When:  Creating a note for another user, or (strict policy) handing an
           existing note to another user through replace/patch.
    HTTP:  403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "Unberechtigt, diese Aktion auszuführen.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotesError):
    """
    Raised when a note does not exist or must not be revealed to the caller.

    HTTP: 404 Not Found

    The default message names the requested id. Get-by-id uses its own
    message that covers both cases, so a caller cannot tell a foreign
    note apart from a missing one.
    """

    status_code = 404

    def __init__(
        self,
        note_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            if note_id is None:
                message = "Die Notiz wurde nicht gefunden."
            else:
                message = f"Die Notiz mit ID {note_id} wurde nicht gefunden."
        ctx = context or {}
        if note_id is not None:
            ctx["note_id"] = note_id
        super().__init__(message=message, context=ctx)
        self.note_id = note_id


class ValidationError(NotesError):
    """
    Raised when the request body cannot be read as a note payload.

    HTTP: 422 Unprocessable Entity

    Only field types are checked (strings or null). Content rules such as
    non-empty titles are not enforced.
    """

    status_code = 422

    def __init__(
        self,
        message: str = "Ungültiger Anfrageinhalt.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
