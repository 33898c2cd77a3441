"""
Notes API — Note Model
=======================

What:  The in-memory representation of a stored note.
Why:   Keeps the storage shape separate from the API schemas, so the
       store can later be swapped for a database model without touching
       the request/response contract.
Who:   Created and copied by NoteStore; read by NoteService.

Lifecycle:
    1. Created by NoteStore.add() with the next free id
    2. Overwritten in place by NoteStore.update() (replace and patch)
    3. Removed by NoteStore.delete(); the id is never handed out again
"""

from dataclasses import dataclass


@dataclass
class Note:
    """A single owned note."""

    id: int
    title: str
    content: str
    user: str

    def is_owned_by(self, identity: str) -> bool:
        return self.user == identity
