"""
Unit Tests for the Seed Loader.

Tests reading and validating the static seed file.
"""

import json

import pytest

from modules.backend.core.exceptions import ValidationError
from modules.backend.schemas.note import NoteColor
from modules.backend.services.seed import SeedLoader


class TestSeedLoader:
    """Tests for SeedLoader.load."""

    def test_loads_notes_in_file_order(self, seed_loader):
        notes = seed_loader.load()

        assert [n.id for n in notes] == [3, 2, 1]
        assert notes[0].color is NoteColor.PURPLE
        assert notes[0].image_url == "https://example.com/3.png"
        assert notes[1].image_url is None

    def test_empty_array(self, empty_seed_loader):
        assert empty_seed_loader.load() == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SeedLoader(tmp_path / "missing.json").load()

    def test_non_array_rejected(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            SeedLoader(path).load()
        assert exc_info.value.details["path"] == str(path)

    def test_invalid_record_rejected(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"id": 1, "text": "", "color": "blue"}]), encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            SeedLoader(path).load()
        assert exc_info.value.details["errors"]

    def test_shipped_seed_file_is_valid(self):
        from modules.backend.core.config import get_seed_path

        notes = SeedLoader(get_seed_path()).load()
        assert notes
        assert len({n.id for n in notes}) == len(notes)
