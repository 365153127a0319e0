"""
Seed Loader.

Reads the static starter notes shipped with the application.
"""

from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from modules.backend.core.exceptions import ValidationError
from modules.backend.schemas.note import Note
from modules.backend.services.base import BaseService

_NOTE_LIST = TypeAdapter(list[Note])


class SeedLoader(BaseService):
    """
    Loads seed notes from a JSON array of note records.

    Records use `id`, `text`, `color` and an optional `imageUrl`
    (or `image_url`). The array order is the display order.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Note]:
        """
        Read and validate the seed file.

        Returns:
            Seed notes in file order

        Raises:
            FileNotFoundError: If the seed file does not exist
            ValidationError: If the file is not a valid list of notes
        """
        raw = self._path.read_bytes()
        try:
            notes = _NOTE_LIST.validate_json(raw)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid seed data in {self._path.name}",
                details={
                    "path": str(self._path),
                    "errors": [err["msg"] for err in e.errors()],
                },
            ) from e

        self._log_debug("Seed data read", path=str(self._path), count=len(notes))
        return notes
