"""
Unit Tests for the Terminal View.

Drives NoteBoardTUI headlessly with Textual's pilot and checks both the
board state and what the widgets show.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from textual.widgets import Button, ContentSwitcher, Input, Label, Static

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modules.backend.schemas.board import BoardMode
from modules.backend.schemas.note import NOTE_MAX_CHARS
from tui import NoteBoardTUI, NoteCard


@pytest.fixture
def seeded_app(board, seed_loader) -> NoteBoardTUI:
    return NoteBoardTUI(board, seed_loader=seed_loader)


@pytest.fixture
def empty_app(board, empty_seed_loader) -> NoteBoardTUI:
    return NoteBoardTUI(board, seed_loader=empty_seed_loader)


class TestListView:
    """Tests for the initial list panel."""

    @pytest.mark.asyncio
    async def test_mount_seeds_board_and_shows_first_page(self, seeded_app):
        async with seeded_app.run_test() as pilot:
            await pilot.pause()

            cards = seeded_app.query(NoteCard)
            assert [card.note.id for card in cards] == [3]
            assert cards.first().has_class("note-purple")
            assert seeded_app.query_one(ContentSwitcher).current == "list-panel"

    @pytest.mark.asyncio
    async def test_pager_reflects_position(self, seeded_app):
        async with seeded_app.run_test() as pilot:
            await pilot.pause()

            assert seeded_app.query_one("#pager").display is True
            assert seeded_app.query_one("#previous", Button).disabled is True
            assert seeded_app.query_one("#next", Button).disabled is False

    @pytest.mark.asyncio
    async def test_next_moves_to_second_page(self, seeded_app):
        async with seeded_app.run_test() as pilot:
            await pilot.pause()
            seeded_app.query_one("#next", Button).press()
            await pilot.pause()

            assert seeded_app.board.current_page == 2
            assert [card.note.id for card in seeded_app.query(NoteCard)] == [2]
            assert seeded_app.query_one("#previous", Button).disabled is False

    @pytest.mark.asyncio
    async def test_empty_board_shows_message_without_pager(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()

            empty_state = empty_app.query_one("#empty-state", Static)
            assert empty_state.display is True
            assert empty_app.query_one("#pager").display is False
            assert len(empty_app.query(NoteCard)) == 0


class TestComposeFlow:
    """Tests for adding a note from the terminal view."""

    @pytest.mark.asyncio
    async def test_add_note_opens_compose_panel(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()

            assert empty_app.board.mode is BoardMode.COMPOSE
            assert empty_app.query_one(ContentSwitcher).current == "compose-panel"
            assert empty_app.query_one("#submit", Button).disabled is True

    @pytest.mark.asyncio
    async def test_typing_updates_remaining_counter(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()

            empty_app.query_one("#draft-text", Input).value = "Hello"
            await pilot.pause()

            remaining = empty_app.query_one("#remaining", Label)
            assert empty_app.board.remaining_chars == NOTE_MAX_CHARS - 5
            assert remaining.has_class("-low") is False
            assert empty_app.query_one("#submit", Button).disabled is False

    @pytest.mark.asyncio
    async def test_nearly_full_draft_marks_counter_low(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()

            empty_app.query_one("#draft-text", Input).value = "a" * 270
            await pilot.pause()

            assert empty_app.query_one("#remaining", Label).has_class("-low")

    @pytest.mark.asyncio
    async def test_submit_adds_note_and_returns_to_list(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()

            empty_app.query_one("#draft-text", Input).value = "Hello"
            empty_app.query_one("#draft-image", Input).value = "https://example.com/h.png"
            await pilot.pause()
            empty_app.query_one("#submit", Button).press()
            await pilot.pause()

            board = empty_app.board
            assert board.mode is BoardMode.LIST
            assert [note.text for note in board.repo] == ["Hello"]
            assert board.repo.get_all()[0].image_url == "https://example.com/h.png"
            assert [card.note.text for card in empty_app.query(NoteCard)] == ["Hello"]
            assert empty_app.query_one("#draft-text", Input).value == ""

    @pytest.mark.asyncio
    async def test_cancel_keeps_draft_for_next_open(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()

            empty_app.query_one("#draft-text", Input).value = "unfinished"
            await pilot.pause()
            empty_app.query_one("#cancel", Button).press()
            await pilot.pause()

            assert empty_app.board.mode is BoardMode.LIST
            assert empty_app.board.repo.count() == 0

            empty_app.query_one("#add-note", Button).press()
            await pilot.pause()
            assert empty_app.query_one("#draft-text", Input).value == "unfinished"

    @pytest.mark.asyncio
    async def test_escape_cancels_compose(self, empty_app):
        async with empty_app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+n")
            await pilot.pause()
            assert empty_app.board.mode is BoardMode.COMPOSE

            await pilot.press("escape")
            await pilot.pause()
            assert empty_app.board.mode is BoardMode.LIST


class TestEntryPoints:
    """Tests for create_tui and main."""

    def test_create_tui_reads_project_config(self):
        from modules.backend.core.config import get_seed_path
        from tui import create_tui

        app = create_tui()

        assert app.board.is_activated is False
        assert app._seed_loader.path == get_seed_path()

    def test_debug_flag_only_raises_log_level(self, monkeypatch):
        """Should map --debug to DEBUG logging and keep logs off the terminal."""
        import tui

        monkeypatch.setattr(sys, "argv", ["tui.py", "--debug"])
        with patch("tui.setup_logging") as mock_setup, patch("tui.create_tui") as mock_create:
            tui.main()

        mock_setup.assert_called_once_with(level="DEBUG", enable_console=False)
        mock_create.assert_called_once_with()
        mock_create.return_value.run.assert_called_once()

    def test_without_debug_flag_uses_configured_level(self, monkeypatch):
        import tui

        monkeypatch.setattr(sys, "argv", ["tui.py"])
        with patch("tui.setup_logging") as mock_setup, patch("tui.create_tui"):
            tui.main()

        mock_setup.assert_called_once_with(level=None, enable_console=False)

    def test_navigate_takes_page_move(self):
        from collections.abc import Callable
        from typing import get_type_hints

        hints = get_type_hints(NoteBoardTUI._navigate)
        assert hints["move"] == Callable[[], int]
