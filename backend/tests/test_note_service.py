"""
Notes API — Note Service Unit Tests
====================================

What:  Tests for NoteService business logic under both ownership policies.
How:   Uses a real in-memory NoteStore (no HTTP).

What we test:
    ✅ Create rejects notes for other users (both policies)
    ✅ List/get only show the caller's notes
    ✅ Strict: foreign notes look missing on replace/patch/delete,
       and notes cannot be handed to another user
    ✅ Legacy: replace/patch/delete accept any caller
    ✅ Patch keeps fields that were not supplied
"""

import pytest

from app.exceptions import ForbiddenError, NotFoundError
from app.schemas.note import NoteCreate, NotePatch, NoteReplace
from app.services.note_service import (
    CREATE_FOR_OTHER_USER,
    NOT_FOUND_OR_FORBIDDEN,
    parse_note_id,
)


def _create(service, user="alice", title="Titel", content="Inhalt"):
    return service.create_note(user, NoteCreate(title=title, content=content, user=user))


class TestParseNoteId:

    def test_integer_string(self):
        assert parse_note_id("17") == 17

    def test_non_integer_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            parse_note_id("abc")

        assert exc_info.value.message == "Die Notiz mit ID abc wurde nicht gefunden."

    @pytest.mark.parametrize("raw_id", ["1_0", " 1", "1 ", "+1", "\u0661", ""])
    def test_only_plain_decimal_digits(self, raw_id):
        with pytest.raises(NotFoundError):
            parse_note_id(raw_id)

    def test_negative_id_parses(self):
        assert parse_note_id("-3") == -3


class TestNoteServiceCreate:

    def test_create_assigns_id_and_stores(self, strict_service, store):
        note = _create(strict_service)

        assert note.id == 1
        assert store.get(1).title == "Titel"

    @pytest.mark.parametrize("service_fixture", ["strict_service", "legacy_service"])
    def test_create_for_other_user_is_forbidden(self, request, store, service_fixture):
        service = request.getfixturevalue(service_fixture)

        with pytest.raises(ForbiddenError) as exc_info:
            service.create_note(
                "alice", NoteCreate(title="t", content="c", user="bob")
            )

        assert exc_info.value.message == CREATE_FOR_OTHER_USER
        assert len(store) == 0


class TestNoteServiceRead:

    def test_list_only_returns_own_notes(self, strict_service):
        _create(strict_service, user="alice", title="a1")
        _create(strict_service, user="bob", title="b1")
        _create(strict_service, user="alice", title="a2")

        titles = [n.title for n in strict_service.list_notes("alice")]

        assert titles == ["a1", "a2"]
        assert strict_service.list_notes("carol") == []

    def test_get_own_note(self, strict_service):
        created = _create(strict_service)

        note = strict_service.get_note("alice", created.id)

        assert (note.title, note.content, note.user) == ("Titel", "Inhalt", "alice")

    @pytest.mark.parametrize("service_fixture", ["strict_service", "legacy_service"])
    def test_get_foreign_note_looks_missing(self, request, service_fixture):
        service = request.getfixturevalue(service_fixture)
        created = _create(service, user="bob")

        with pytest.raises(NotFoundError) as foreign:
            service.get_note("alice", created.id)
        with pytest.raises(NotFoundError) as missing:
            service.get_note("alice", 999)

        assert foreign.value.message == missing.value.message == NOT_FOUND_OR_FORBIDDEN


class TestNoteServiceStrictWrites:

    def test_replace_own_note(self, strict_service, store):
        created = _create(strict_service)

        strict_service.replace_note(
            "alice", created.id, NoteReplace(title="neu", content="neu", user="alice")
        )

        assert store.get(created.id).title == "neu"

    def test_replace_missing_note(self, strict_service):
        with pytest.raises(NotFoundError):
            strict_service.replace_note(
                "alice", 5, NoteReplace(title="t", content="c", user="alice")
            )

    def test_replace_foreign_note_looks_missing(self, strict_service, store):
        created = _create(strict_service, user="bob")

        with pytest.raises(NotFoundError):
            strict_service.replace_note(
                "alice", created.id, NoteReplace(title="x", content="x", user="alice")
            )

        assert store.get(created.id).user == "bob"

    def test_replace_cannot_hand_note_to_other_user(self, strict_service, store):
        created = _create(strict_service)

        with pytest.raises(ForbiddenError):
            strict_service.replace_note(
                "alice", created.id, NoteReplace(title="x", content="x", user="bob")
            )

        assert store.get(created.id).title == "Titel"

    def test_patch_content_keeps_title_and_user(self, strict_service, store):
        created = _create(strict_service)

        strict_service.patch_note("alice", created.id, NotePatch(content="nur Inhalt"))

        note = store.get(created.id)
        assert (note.title, note.content, note.user) == ("Titel", "nur Inhalt", "alice")

    def test_patch_user_to_other_is_forbidden(self, strict_service, store):
        created = _create(strict_service)

        with pytest.raises(ForbiddenError):
            strict_service.patch_note("alice", created.id, NotePatch(user="bob"))

        assert store.get(created.id).user == "alice"

    def test_delete_foreign_note_looks_missing(self, strict_service, store):
        created = _create(strict_service, user="bob")

        with pytest.raises(NotFoundError):
            strict_service.delete_note("alice", created.id)

        assert len(store) == 1

    def test_delete_own_note(self, strict_service, store):
        created = _create(strict_service)

        strict_service.delete_note("alice", created.id)

        assert len(store) == 0


class TestNoteServiceLegacyWrites:
    """The legacy policy keeps the original gaps on replace/patch/delete."""

    def test_replace_foreign_note_and_owner(self, legacy_service, store):
        created = _create(legacy_service, user="bob")

        legacy_service.replace_note(
            "alice", created.id, NoteReplace(title="x", content="y", user="alice")
        )

        assert store.get(created.id).user == "alice"

    def test_patch_foreign_note(self, legacy_service, store):
        created = _create(legacy_service, user="bob")

        legacy_service.patch_note("alice", created.id, NotePatch(title="gekapert"))

        note = store.get(created.id)
        assert (note.title, note.user) == ("gekapert", "bob")

    def test_delete_foreign_note(self, legacy_service, store):
        created = _create(legacy_service, user="bob")

        legacy_service.delete_note("alice", created.id)

        assert len(store) == 0

    def test_missing_note_still_404(self, legacy_service):
        with pytest.raises(NotFoundError) as exc_info:
            legacy_service.delete_note("alice", 3)

        assert exc_info.value.message == "Die Notiz mit ID 3 wurde nicht gefunden."
