"""
Notes API — In-Memory Note Store
=================================

What:  Holds the note collection and assigns note ids.
Why:   An explicit store object (instead of a module-level list) gives every
       app instance, and therefore every test, its own collection.
How:   A dict keyed by id plus a monotonic id counter. create_app() builds
       one NoteStore and puts it on app.state; routes get it through the
       get_note_store dependency.

Concurrency:
    All route handlers are `async def` and no store method awaits, so on a
    single event loop each call runs to completion before the next request
    touches the collection. Separate worker processes get separate stores.

Copies:
    Every Note handed out is a copy. Mutating a returned note never changes
    stored state; only update() and delete() do.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

from app.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    In-memory note collection.

    Ids start at 1 and are never reused, even after a delete, so a stale
    id from a deleted note can never point at somebody else's new note.
    """

    def __init__(self) -> None:
        self._notes: Dict[int, Note] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._notes)

    def add(self, title: str, content: str, user: str) -> Note:
        note = Note(id=self._next_id, title=title, content=content, user=user)
        self._notes[note.id] = note
        self._next_id += 1
        logger.debug("Stored note %d", note.id)
        return replace(note)

    def all(self) -> List[Note]:
        """Snapshot of every note, ascending by id."""
        return [replace(note) for _, note in sorted(self._notes.items())]

    def get(self, note_id: int) -> Optional[Note]:
        note = self._notes.get(note_id)
        return replace(note) if note is not None else None

    def update(self, note_id: int, title: str, content: str, user: str) -> Optional[Note]:
        """Overwrite all fields of an existing note. Returns None if the id is unknown."""
        note = self._notes.get(note_id)
        if note is None:
            return None
        note.title = title
        note.content = content
        note.user = user
        return replace(note)

    def delete(self, note_id: int) -> bool:
        return self._notes.pop(note_id, None) is not None

    def clear(self) -> None:
        """Drop every note. The id counter keeps running."""
        self._notes.clear()
