"""
QuickNotes Backend: In-Memory Note Store
===========================================

What:  Owns the append-only, creation-ordered sequence of Notes.
How:   A plain list guarded by a lock. Every read and write takes the lock, so
       the id assigned by add() (the current length) and the append happen as
       one step even when handlers run on the threadpool.
Who:   Created by the app factory (or a test) and attached to app.state;
       only NoteService talks to it.

ID allocation:
    id = len(notes) at creation time. This is collision-free only because
    nothing is ever removed. Adding deletion requires switching to a separate
    monotonically increasing counter.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from quicknotes.exceptions import NoteNotFoundError
from quicknotes.models.note import Note

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NoteStore:
    """
    Process-lifetime note collection.

    Args:
        clock: Returns the current time; defaults to UTC wall clock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._notes: List[Note] = []
        self._lock = threading.Lock()
        self._clock = clock or _utcnow

    def list(self) -> List[Note]:
        """All notes in creation order. Returns a copy; never fails."""
        with self._lock:
            return list(self._notes)

    def get(self, note_id: int, raw_id: Optional[str] = None) -> Note:
        """
        Linear scan for the note with `note_id`.

        `raw_id` is the identifier as the client sent it, echoed in the
        not-found message when given.

        Raises:
            NoteNotFoundError: No note has that id.
        """
        with self._lock:
            for note in self._notes:
                if note.id == note_id:
                    return note
        raise NoteNotFoundError(raw_id if raw_id is not None else str(note_id))

    def add(self, title: str, content: str) -> Note:
        """Create, append and return a new note. Callers validate the fields."""
        with self._lock:
            created_at = self._clock()
            # Wall clock may step backwards; creation times must not.
            if self._notes and created_at < self._notes[-1].created_at:
                created_at = self._notes[-1].created_at

            note = Note(
                id=len(self._notes),
                title=title,
                content=content,
                created_at=created_at,
            )
            self._notes.append(note)

        logger.info("Note %d created", note.id)
        return note

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def __len__(self) -> int:
        return self.count
