"""
Notes API — Note Service (Ownership Rules)
===========================================

What:  All decisions about who may do what with which note.
Why:   Routes stay thin and the ownership policy lives in one place, so
       strict and legacy behavior can be compared side by side.
How:   Wraps a NoteStore; every method takes the caller's identity and
       raises NotFoundError / ForbiddenError instead of returning codes.
Who:   Called by the /notes route handlers.

Decision table:

    operation        strict                          legacy
    ───────────────  ──────────────────────────────  ─────────────────────
    create           403 if body user != caller      403 if body user != caller
    list             only caller's notes             only caller's notes
    get              404 if missing or foreign       404 if missing or foreign
    replace / patch  404 if missing or foreign,      404 if missing only
                     403 if new user != caller
    delete           404 if missing or foreign       404 if missing only
"""

import logging
import re
from typing import List

from app.auth import identity_fingerprint
from app.config import OwnershipPolicy
from app.exceptions import ForbiddenError, NotFoundError
from app.models.note import Note
from app.schemas.note import NoteCreate, NotePatch, NoteReplace
from app.storage import NoteStore

logger = logging.getLogger(__name__)

# Same message for "missing" and "someone else's", so get-by-id never
# reveals that a foreign note exists.
NOT_FOUND_OR_FORBIDDEN = "Notiz nicht gefunden oder nicht autorisiert zum Zugriff."
CREATE_FOR_OTHER_USER = "Unberechtigt, eine Notiz für einen anderen Benutzer zu erstellen."
ASSIGN_TO_OTHER_USER = "Unberechtigt, eine Notiz einem anderen Benutzer zuzuweisen."


# Plain ASCII decimal only: int() would also take "1_0", " 1" or "١"
NOTE_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_note_id(raw_id: str) -> int:
    """
    Parse a path id. Anything that is not a plain decimal integer cannot
    name a note, so it gets the same 404 as an id that does not exist.
    """
    if not NOTE_ID_PATTERN.fullmatch(raw_id):
        raise NotFoundError(note_id=raw_id)
    return int(raw_id)


class NoteService:
    """
    Business logic layer for note operations.

    Args:
        store:  The note collection this service reads and writes.
        policy: Which ownership rules to apply (see module docstring).
    """

    def __init__(self, store: NoteStore, policy: OwnershipPolicy = OwnershipPolicy.STRICT):
        self.store = store
        self.policy = policy

    @property
    def strict(self) -> bool:
        return self.policy is OwnershipPolicy.STRICT

    # ── Create / Read ─────────────────────────────────────────────────────

    def create_note(self, identity: str, payload: NoteCreate) -> Note:
        if payload.user != identity:
            logger.warning(
                "User %s tried to create a note for user %s",
                identity_fingerprint(identity),
                identity_fingerprint(payload.user),
            )
            raise ForbiddenError(
                message=CREATE_FOR_OTHER_USER,
                context={
                    "identity": identity_fingerprint(identity),
                    "requested_user": identity_fingerprint(payload.user),
                },
            )

        note = self.store.add(payload.title, payload.content, payload.user)
        logger.info("Note %d created by %s", note.id, identity_fingerprint(identity))
        return note

    def list_notes(self, identity: str) -> List[Note]:
        return [note for note in self.store.all() if note.is_owned_by(identity)]

    def get_note(self, identity: str, note_id: int) -> Note:
        """
        Fetch one of the caller's notes.

        Raises:
            NotFoundError: The note does not exist or belongs to someone else.
                           Both cases share one message.
        """
        note = self.store.get(note_id)
        if note is None or not note.is_owned_by(identity):
            raise NotFoundError(
                note_id=note_id,
                message=NOT_FOUND_OR_FORBIDDEN,
                context={"identity": identity_fingerprint(identity)},
            )
        return note

    # ── Update / Delete ───────────────────────────────────────────────────

    def replace_note(self, identity: str, note_id: int, payload: NoteReplace) -> Note:
        self._writable_note(identity, note_id)
        self._check_assignment(identity, note_id, payload.user)

        note = self.store.update(note_id, payload.title, payload.content, payload.user)
        logger.info("Note %d replaced by %s", note_id, identity_fingerprint(identity))
        return note

    def patch_note(self, identity: str, note_id: int, payload: NotePatch) -> Note:
        existing = self._writable_note(identity, note_id)

        title = payload.title if payload.title is not None else existing.title
        content = payload.content if payload.content is not None else existing.content
        user = payload.user if payload.user is not None else existing.user
        self._check_assignment(identity, note_id, user)

        note = self.store.update(note_id, title, content, user)
        logger.info("Note %d patched by %s", note_id, identity_fingerprint(identity))
        return note

    def delete_note(self, identity: str, note_id: int) -> None:
        self._writable_note(identity, note_id)
        self.store.delete(note_id)
        logger.info("Note %d deleted by %s", note_id, identity_fingerprint(identity))

    # ── Helpers ───────────────────────────────────────────────────────────

    def _writable_note(self, identity: str, note_id: int) -> Note:
        """
        Look up a note the caller is about to change.

        Under the legacy policy ownership is not checked here, which is
        exactly the gap the strict policy closes.
        """
        note = self.store.get(note_id)
        if note is None:
            raise NotFoundError(note_id=note_id)

        if not note.is_owned_by(identity):
            if self.strict:
                logger.warning(
                    "User %s tried to modify note %d owned by %s",
                    identity_fingerprint(identity),
                    note_id,
                    identity_fingerprint(note.user),
                )
                raise NotFoundError(
                    note_id=note_id, context={"identity": identity_fingerprint(identity)}
                )
            logger.warning(
                "Legacy policy: user %s modifies note %d owned by %s",
                identity_fingerprint(identity),
                note_id,
                identity_fingerprint(note.user),
            )
        return note

    def _check_assignment(self, identity: str, note_id: int, new_user: str) -> None:
        if self.strict and new_user != identity:
            logger.warning(
                "User %s tried to assign note %d to %s",
                identity_fingerprint(identity),
                note_id,
                identity_fingerprint(new_user),
            )
            raise ForbiddenError(
                message=ASSIGN_TO_OTHER_USER,
                context={
                    "identity": identity_fingerprint(identity),
                    "requested_user": identity_fingerprint(new_user),
                },
            )
