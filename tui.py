"""
NoteBoard Terminal View.

Interactive terminal front end for the note board. Runs the board
in-process: notes live only as long as the app is open.

Usage:
    python tui.py
    python tui.py --debug
"""

from __future__ import annotations

import sys
from collections.abc import Callable

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import (
    Button,
    ContentSwitcher,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from modules.backend.core.config import get_app_config, get_seed_path
from modules.backend.core.exceptions import ActionUnavailableError
from modules.backend.core.logging import get_logger, log_with_source, setup_logging
from modules.backend.schemas.board import BoardMode, BoardView
from modules.backend.schemas.note import NOTE_MAX_CHARS, Note
from modules.backend.services.board import NoteBoard, build_board
from modules.backend.services.seed import SeedLoader

logger = get_logger(__name__)


class NoteCard(Static):
    """One note: its text and, when present, the image link."""

    def __init__(self, note: Note) -> None:
        body = Text(note.text)
        if note.image_url:
            body.append("\n")
            body.append(f"image: {note.image_url}", style="dim italic")
        super().__init__(body, classes=f"note-card note-{note.color.value}")
        self.note = note


class NoteBoardTUI(App):
    """Terminal front end for a NoteBoard."""

    TITLE = "NoteBoard"

    CSS = """
    Screen {
        layout: vertical;
    }

    #board-title {
        text-style: bold;
        padding: 0 1;
    }

    #board-tagline {
        color: $text-muted;
        padding: 0 1 1 1;
    }

    #content {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #notes {
        height: 1fr;
    }

    .note-card {
        padding: 1 2;
        margin: 0 0 1 0;
        color: $text;
    }

    .note-blue { background: #1e3a8a; }
    .note-green { background: #14532d; }
    .note-purple { background: #581c87; }
    .note-pink { background: #831843; }
    .note-yellow { background: #713f12; }
    .note-orange { background: #7c2d12; }

    #empty-state {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
        padding: 2 0;
    }

    #pager {
        height: auto;
        align: center middle;
    }

    #page-label {
        padding: 1 2;
    }

    #remaining {
        padding: 0 1;
        color: $text-muted;
    }

    #remaining.-low {
        color: $error;
        text-style: bold;
    }

    #compose-actions {
        height: auto;
    }

    #add-note-row {
        height: auto;
        align: center middle;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "add_note", "Add note"),
        Binding("escape", "cancel_compose", "Cancel"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        board: NoteBoard,
        seed_loader: SeedLoader | None = None,
    ) -> None:
        super().__init__()
        self.board = board
        self._seed_loader = seed_loader

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="board-title")
        yield Static(id="board-tagline")
        with ContentSwitcher(initial="list-panel", id="content"):
            with Vertical(id="list-panel"):
                yield Static(id="empty-state")
                yield VerticalScroll(id="notes")
                with Horizontal(id="pager"):
                    yield Button("← Previous", id="previous")
                    yield Label(id="page-label")
                    yield Button("Next →", id="next")
            with Vertical(id="compose-panel"):
                yield Input(
                    placeholder="What's on your mind?",
                    max_length=NOTE_MAX_CHARS,
                    id="draft-text",
                )
                yield Input(placeholder="Image URL (optional)", id="draft-image")
                yield Label(id="remaining")
                with Horizontal(id="compose-actions"):
                    yield Button("Submit", id="submit", variant="primary")
                    yield Button("Cancel", id="cancel")
        with Horizontal(id="add-note-row"):
            yield Button("Add note", id="add-note", variant="success")
        yield Footer()

    async def on_mount(self) -> None:
        if self._seed_loader is not None:
            self.board.activate(self._seed_loader)
        log_with_source(
            logger, "tui", "info", "Board opened", notes=self.board.repo.count(),
        )
        await self.refresh_board()

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    async def refresh_board(self) -> None:
        """Redraw every panel from a fresh board snapshot."""
        view = self.board.snapshot()

        self.title = view.title
        self.query_one("#board-title", Static).update(view.title)
        self.query_one("#board-tagline", Static).update(view.tagline)

        switcher = self.query_one(ContentSwitcher)
        switcher.current = (
            "compose-panel" if view.mode is BoardMode.COMPOSE else "list-panel"
        )

        await self._draw_notes(view)
        self._draw_pager(view)
        self._draw_compose_status(view)

    async def _draw_notes(self, view: BoardView) -> None:
        empty_state = self.query_one("#empty-state", Static)
        empty_state.display = view.empty_message is not None
        empty_state.update(view.empty_message or "")

        notes = self.query_one("#notes", VerticalScroll)
        await notes.remove_children()
        await notes.mount_all(NoteCard(note) for note in view.notes)

    def _draw_pager(self, view: BoardView) -> None:
        pager = self.query_one("#pager", Horizontal)
        pager.display = view.pagination is not None
        if view.pagination is None:
            return

        controls = view.pagination
        self.query_one("#previous", Button).disabled = not controls.previous_enabled
        self.query_one("#next", Button).disabled = not controls.next_enabled
        self.query_one("#page-label", Label).update(
            f"Page {controls.page} of {controls.total_pages}"
        )

    def _draw_compose_status(self, view: BoardView) -> None:
        form = view.compose
        remaining = self.query_one("#remaining", Label)
        remaining.update(f"{form.remaining_chars} characters left")
        remaining.set_class(form.low_remaining, "-low")
        self.query_one("#submit", Button).disabled = not form.can_submit

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def action_add_note(self) -> None:
        self.board.open_compose()
        draft = self.board.draft
        self.query_one("#draft-text", Input).value = draft.text
        self.query_one("#draft-image", Input).value = draft.image_url
        await self.refresh_board()
        self.query_one("#draft-text", Input).focus()

    async def action_cancel_compose(self) -> None:
        if self.board.mode is not BoardMode.COMPOSE:
            return
        self.board.cancel()
        await self.refresh_board()

    @on(Button.Pressed, "#add-note")
    async def on_add_note_pressed(self) -> None:
        await self.action_add_note()

    @on(Button.Pressed, "#cancel")
    async def on_cancel_pressed(self) -> None:
        await self.action_cancel_compose()

    @on(Button.Pressed, "#submit")
    @on(Input.Submitted, "#draft-text")
    async def on_submit_draft(self) -> None:
        if not self.board.can_submit:
            return
        note = self.board.submit()
        log_with_source(logger, "tui", "info", "Note added", note_id=note.id)
        self.query_one("#draft-text", Input).value = ""
        self.query_one("#draft-image", Input).value = ""
        await self.refresh_board()

    @on(Button.Pressed, "#previous")
    async def on_previous_pressed(self) -> None:
        await self._navigate(self.board.previous_page)

    @on(Button.Pressed, "#next")
    async def on_next_pressed(self) -> None:
        await self._navigate(self.board.next_page)

    async def _navigate(self, move: Callable[[], int]) -> None:
        try:
            move()
        except ActionUnavailableError as e:
            # Buttons are disabled at the ends, so this only happens on a stale press
            log_with_source(logger, "tui", "debug", "Navigation ignored", reason=e.reason)
            return
        await self.refresh_board()

    @on(Input.Changed, "#draft-text")
    def on_draft_text_changed(self, event: Input.Changed) -> None:
        self.board.update_draft(text=event.value)
        self._draw_compose_status(self.board.snapshot())

    @on(Input.Changed, "#draft-image")
    def on_draft_image_changed(self, event: Input.Changed) -> None:
        self.board.update_draft(image_url=event.value)


def create_tui() -> NoteBoardTUI:
    """Build the terminal app from the YAML configuration."""
    board = build_board(get_app_config())
    return NoteBoardTUI(board, seed_loader=SeedLoader(get_seed_path()))


def main() -> None:
    debug = "--debug" in sys.argv
    setup_logging(level="DEBUG" if debug else None, enable_console=False)
    create_tui().run()


if __name__ == "__main__":
    main()
