"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Boards built here use a plain counter for note ids so tests can assert
exact identifiers, and small board settings independent of board.yaml.
"""

import itertools
import json
from pathlib import Path
from typing import Any

import pytest

from modules.backend.core.config_schema import BoardSchema
from modules.backend.services.board import NoteBoard
from modules.backend.services.seed import SeedLoader


# =============================================================================
# Board Fixtures
# =============================================================================


@pytest.fixture
def board_settings() -> BoardSchema:
    """Board settings with one note per page."""
    return BoardSchema(
        title="Test Board",
        tagline="Notes for tests",
        empty_message="Nothing here yet",
        page_size=1,
        low_remaining_threshold=20,
        seed_path="data/notes.json",
    )


@pytest.fixture
def board(board_settings: BoardSchema) -> NoteBoard:
    """
    Empty, unseeded board with deterministic ids starting at 1000.

    Usage:
        def test_submit(board: NoteBoard):
            board.open_compose()
            board.update_draft(text="Hello")
            assert board.submit().id == 1000
    """
    return NoteBoard(board_settings, id_factory=itertools.count(1000).__next__)


# =============================================================================
# Seed Data Fixtures
# =============================================================================


@pytest.fixture
def seed_records() -> list[dict[str, Any]]:
    """Three seed records, newest first."""
    return [
        {"id": 3, "text": "Third", "color": "purple", "imageUrl": "https://example.com/3.png"},
        {"id": 2, "text": "Second", "color": "green"},
        {"id": 1, "text": "First", "color": "blue"},
    ]


@pytest.fixture
def seed_file(tmp_path: Path, seed_records: list[dict[str, Any]]) -> Path:
    """Write seed records to a temporary JSON file."""
    path = tmp_path / "notes.json"
    path.write_text(json.dumps(seed_records), encoding="utf-8")
    return path


@pytest.fixture
def seed_loader(seed_file: Path) -> SeedLoader:
    """SeedLoader reading the temporary seed file."""
    return SeedLoader(seed_file)


@pytest.fixture
def empty_seed_loader(tmp_path: Path) -> SeedLoader:
    """SeedLoader for an empty seed file."""
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    return SeedLoader(path)


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def anyio_backend() -> str:
    """Specify the async backend for anyio."""
    return "asyncio"
