"""
Note Board Service.

The board owns every piece of state behind the note view: the note
collection, the list/compose mode, the draft being written and the
current page. Surfaces call the action methods and draw `snapshot()`.

Usage:
    board = build_board(get_app_config())
    board.activate(SeedLoader(get_seed_path()))

    board.open_compose()
    board.update_draft(text="Hello")
    note = board.submit()
"""

from dataclasses import dataclass

from modules.backend.core.config import AppConfig
from modules.backend.core.config_schema import BoardSchema
from modules.backend.core.exceptions import ActionUnavailableError
from modules.backend.core.pagination import PageWindow
from modules.backend.core.utils import IdFactory, TimestampIdGenerator
from modules.backend.repositories.note import NoteRepository
from modules.backend.schemas.board import (
    BoardMode,
    BoardView,
    ComposeForm,
    PaginationControls,
)
from modules.backend.schemas.note import NOTE_MAX_CHARS, Note, color_for_index
from modules.backend.services.base import BaseService
from modules.backend.services.seed import SeedLoader


@dataclass(frozen=True)
class Draft:
    """Uncommitted compose form fields."""

    text: str = ""
    image_url: str = ""


class NoteBoard(BaseService):
    """
    Controller for a single note board.

    Two modes: LIST (initial) shows the current page of notes and the
    navigation controls, COMPOSE shows the draft form. Actions whose
    control would be disabled raise ActionUnavailableError and change
    nothing.
    """

    def __init__(
        self,
        settings: BoardSchema,
        *,
        reset_draft_on_cancel: bool = False,
        id_factory: IdFactory | None = None,
        repo: NoteRepository | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._reset_draft_on_cancel = reset_draft_on_cancel
        self._next_id = id_factory or TimestampIdGenerator()
        self.repo = repo or NoteRepository()

        self._activated = False
        self._mode = BoardMode.LIST
        self._draft = Draft()
        self._page = 1

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def is_activated(self) -> bool:
        return self._activated

    @property
    def mode(self) -> BoardMode:
        return self._mode

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def current_page(self) -> int:
        return self._page

    @property
    def window(self) -> PageWindow:
        return PageWindow(
            number=self._page,
            size=self._settings.page_size,
            total_items=self.repo.count(),
        )

    @property
    def remaining_chars(self) -> int:
        return NOTE_MAX_CHARS - len(self._draft.text)

    @property
    def is_low_remaining(self) -> bool:
        return self.remaining_chars < self._settings.low_remaining_threshold

    @property
    def can_submit(self) -> bool:
        return self._mode is BoardMode.COMPOSE and bool(self._draft.text.strip())

    def visible_notes(self) -> list[Note]:
        """Notes on the current page."""
        return self.window.slice(self.repo.get_all())

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------

    def activate(self, loader: SeedLoader) -> bool:
        """
        Install seed notes the first time the board is shown.

        Later calls do nothing and do not read the seed file again.

        Returns:
            True if the seed was installed by this call
        """
        if self._activated:
            return False

        notes = loader.load()
        self.repo.replace_all(notes)
        self._activated = True
        self._log_operation("Seed installed", count=len(notes))
        return True

    # -------------------------------------------------------------------------
    # Compose workflow
    # -------------------------------------------------------------------------

    def open_compose(self) -> None:
        """Show the compose form. The existing draft is kept."""
        if self._mode is BoardMode.COMPOSE:
            return
        self._mode = BoardMode.COMPOSE
        self._log_debug("Compose opened", draft_length=len(self._draft.text))

    def cancel(self) -> None:
        """Return to the list without submitting."""
        if self._mode is not BoardMode.COMPOSE:
            raise ActionUnavailableError("cancel", "compose form is not open")

        self._mode = BoardMode.LIST
        if self._reset_draft_on_cancel:
            self._draft = Draft()
        self._log_debug("Compose cancelled", draft_kept=not self._reset_draft_on_cancel)

    def update_draft(self, text: str | None = None, image_url: str | None = None) -> Draft:
        """
        Change draft fields. None leaves a field as it is.

        Text longer than the note limit is cut to the limit, the same way a
        bounded input field refuses extra characters.
        """
        self._draft = Draft(
            text=self._draft.text if text is None else text[:NOTE_MAX_CHARS],
            image_url=self._draft.image_url if image_url is None else image_url,
        )
        return self._draft

    def submit(self) -> Note:
        """
        Turn the draft into a note at the top of the board.

        Clears the draft, goes back to the list and shows the first page.

        Raises:
            ActionUnavailableError: If the form is closed or the text is blank
        """
        if self._mode is not BoardMode.COMPOSE:
            raise ActionUnavailableError("submit", "compose form is not open")
        if not self._draft.text.strip():
            raise ActionUnavailableError("submit", "note text is empty")

        note = Note(
            id=self._fresh_id(),
            text=self._draft.text,
            color=color_for_index(self.repo.count()),
            image_url=self._draft.image_url,
        )
        self.repo.prepend(note)

        self._draft = Draft()
        self._mode = BoardMode.LIST
        self._page = 1

        self._log_operation(
            "Note submitted",
            note_id=note.id,
            color=note.color.value,
            has_image=note.image_url is not None,
        )
        return note

    def _fresh_id(self) -> int:
        note_id = self._next_id()
        while self.repo.contains(note_id):
            note_id = self._next_id()
        return note_id

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def next_page(self) -> int:
        """
        Move one page forward.

        Raises:
            ActionUnavailableError: On the last page or while composing
        """
        self._require_list("next_page")
        if not self.window.has_next:
            raise ActionUnavailableError("next_page", "already on the last page")
        self._page += 1
        self._log_debug("Page changed", page=self._page)
        return self._page

    def previous_page(self) -> int:
        """
        Move one page back.

        Raises:
            ActionUnavailableError: On the first page or while composing
        """
        self._require_list("previous_page")
        if not self.window.has_previous:
            raise ActionUnavailableError("previous_page", "already on the first page")
        self._page -= 1
        self._log_debug("Page changed", page=self._page)
        return self._page

    def _require_list(self, action: str) -> None:
        if self._mode is not BoardMode.LIST:
            raise ActionUnavailableError(action, "note list is not shown")

    # -------------------------------------------------------------------------
    # View
    # -------------------------------------------------------------------------

    def snapshot(self) -> BoardView:
        """Build the render-ready view of the current state."""
        window = self.window
        total = window.total_items

        pagination = None
        if window.show_controls:
            pagination = PaginationControls(
                page=window.number,
                total_pages=window.total_pages,
                previous_enabled=window.has_previous,
                next_enabled=window.has_next,
            )

        return BoardView(
            title=self._settings.title,
            tagline=self._settings.tagline,
            mode=self._mode,
            total_notes=total,
            notes=self.visible_notes(),
            empty_message=self._settings.empty_message if total == 0 else None,
            pagination=pagination,
            compose=ComposeForm(
                text=self._draft.text,
                image_url=self._draft.image_url,
                max_chars=NOTE_MAX_CHARS,
                remaining_chars=self.remaining_chars,
                low_remaining=self.is_low_remaining,
                can_submit=self.can_submit,
            ),
        )


def build_board(app_config: AppConfig, id_factory: IdFactory | None = None) -> NoteBoard:
    """Create a board from board.yaml and features.yaml."""
    return NoteBoard(
        app_config.board,
        reset_draft_on_cancel=app_config.features.board_reset_draft_on_cancel,
        id_factory=id_factory,
    )
