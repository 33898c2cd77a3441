"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract of the notes routes.
Why:   FastAPI uses these to parse request bodies, serialize responses and
       generate the OpenAPI docs.
How:   Request bodies only check that fields are strings (or null for PATCH).
       Empty strings, long strings and odd characters are all accepted.

Design Decision:
    Schemas are separate from the Note dataclass because the wire format
    and the storage format change for different reasons: the store may gain
    internal fields, the API must not leak them.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    `user` must name the caller; creating a note on behalf of someone else
    is rejected with 403.
    """
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")
    user: str = Field(description="Owner identity; must equal the authenticated user")


class NoteReplace(BaseModel):
    """Body of PUT /notes/{id}: every field is overwritten."""
    title: str
    content: str
    user: str


class NotePatch(BaseModel):
    """
    Body of PATCH /notes/{id}.

    Fields that are missing or null keep their stored value.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    user: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a note, returned by GET /notes and GET /notes/{id}."""
    id: int = Field(description="Note id, assigned by the server")
    title: str
    content: str
    user: str = Field(description="Owner identity")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Service status returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    ownership_policy: str = Field(description="Active ownership policy: strict or legacy")
    uptime_seconds: float = Field(description="Seconds since service started")
