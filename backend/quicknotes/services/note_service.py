"""
QuickNotes Backend: Note Service (Business Logic)
====================================================

What:  Request-level note operations: parse path identifiers, validate create
       parameters, delegate to the NoteStore.
Who:   Called by route handlers in routes/notes.py.

Validation order (POST /notes):
    1. title empty   → NoteTitleInvalidError   (checked first)
    2. content empty → NoteContentInvalidError
    3. store.add()

Lookup order (GET /notes/{id}):
    1. id not a base-10 integer → NoteIDInvalidError (store is not consulted)
    2. no match                 → NoteNotFoundError
"""

import logging
import re
from typing import List

from quicknotes.exceptions import NoteContentInvalidError, NoteIDInvalidError, NoteTitleInvalidError
from quicknotes.models.note import Note
from quicknotes.schemas.note import NoteCreateParams
from quicknotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits; int() alone would also accept
# surrounding whitespace, underscores and non-ASCII digits.
_BASE10_INT = re.compile(r"[+-]?[0-9]+")

# Identifiers are signed 64-bit integers
NOTE_ID_MIN = -(2 ** 63)
NOTE_ID_MAX = 2 ** 63 - 1


def parse_note_id(raw_id: str) -> int:
    """
    Parse a path parameter as a base-10 integer.

    Raises:
        NoteIDInvalidError: `raw_id` is not a plain base-10 integer, or is
            outside the signed 64-bit range.
    """
    if not _BASE10_INT.fullmatch(raw_id):
        raise NoteIDInvalidError(raw_id)
    note_id = int(raw_id)
    if not NOTE_ID_MIN <= note_id <= NOTE_ID_MAX:
        raise NoteIDInvalidError(raw_id)
    return note_id


class NoteService:
    """
    Business logic layer for note operations.

    The service holds no state of its own; the NoteStore it wraps is the
    single owner of the notes sequence.
    """

    def __init__(self, store: NoteStore) -> None:
        self.store = store

    def list_notes(self) -> List[Note]:
        return self.store.list()

    def get_note(self, raw_id: str) -> Note:
        """
        Retrieve a single note by its path identifier.

        Raises:
            NoteIDInvalidError: `raw_id` is not a base-10 integer (→ 400)
            NoteNotFoundError:  No note with that id (→ 404)
        """
        note_id = parse_note_id(raw_id)
        return self.store.get(note_id, raw_id=raw_id)

    def create_note(self, params: NoteCreateParams) -> Note:
        """
        Validate and store a new note.

        Strings are checked as sent: a whitespace-only title is accepted.

        Raises:
            NoteTitleInvalidError:   title is empty (→ 422)
            NoteContentInvalidError: content is empty (→ 422)
        """
        if params.title == "":
            raise NoteTitleInvalidError()
        if params.content == "":
            raise NoteContentInvalidError()

        note = self.store.add(title=params.title, content=params.content)
        logger.debug("Stored note %d (%d chars)", note.id, len(note.content))
        return note
