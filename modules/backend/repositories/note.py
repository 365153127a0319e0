"""
Note Repository.

In-memory note collection. Holds notes newest-first for the lifetime of
the board; nothing is written anywhere else.
"""

from collections.abc import Iterable, Iterator

from modules.backend.core.exceptions import ConflictError, NotFoundError
from modules.backend.core.logging import get_logger
from modules.backend.schemas.note import Note

logger = get_logger(__name__)


class NoteRepository:
    """
    Ordered collection of notes, most recently added at index 0.

    Ids are unique within the collection. Notes are never updated or
    removed once stored.
    """

    def __init__(self) -> None:
        self._notes: list[Note] = []
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)

    def contains(self, note_id: int) -> bool:
        """Check whether a note with the given id is stored."""
        return note_id in self._ids

    def replace_all(self, notes: Iterable[Note]) -> None:
        """
        Install a complete collection, keeping the given order.

        Raises:
            ConflictError: If two notes share an id
        """
        notes = list(notes)
        ids = {note.id for note in notes}
        if len(ids) != len(notes):
            raise ConflictError("Duplicate note id in collection")

        self._notes = notes
        self._ids = ids
        logger.debug("Collection replaced", extra={"count": len(notes)})

    def prepend(self, note: Note) -> Note:
        """
        Store a note at the front of the collection.

        Raises:
            ConflictError: If the id is already taken
        """
        if note.id in self._ids:
            raise ConflictError(f"Note {note.id} already exists")

        self._notes.insert(0, note)
        self._ids.add(note.id)
        return note

    def get_by_id(self, note_id: int) -> Note:
        """
        Get a single note by ID.

        Raises:
            NotFoundError: If note not found
        """
        for note in self._notes:
            if note.id == note_id:
                return note
        raise NotFoundError("Note not found")

    def get_all(self, limit: int | None = None, offset: int = 0) -> list[Note]:
        """Get notes newest-first, optionally windowed by limit/offset."""
        stop = None if limit is None else offset + limit
        return self._notes[offset:stop]
