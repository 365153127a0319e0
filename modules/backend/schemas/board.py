"""
Board Schemas.

Render-ready view of the note board. Every surface (JSON API, terminal
view) draws from a BoardView rather than reaching into board internals.
"""

from enum import Enum

from pydantic import BaseModel, Field

from modules.backend.schemas.note import Note


class BoardMode(str, Enum):
    """Which panel the board is showing."""

    LIST = "list"
    COMPOSE = "compose"


class PaginationControls(BaseModel):
    """Previous/next controls shown under the note list."""

    page: int = Field(description="Current 1-based page")
    total_pages: int
    previous_enabled: bool
    next_enabled: bool


class ComposeForm(BaseModel):
    """State of the compose form."""

    text: str
    image_url: str
    max_chars: int
    remaining_chars: int = Field(ge=0)
    low_remaining: bool = Field(description="Fewer characters left than the warning threshold")
    can_submit: bool


class BoardView(BaseModel):
    """Snapshot of everything needed to draw the board."""

    title: str
    tagline: str
    mode: BoardMode
    total_notes: int
    notes: list[Note] = Field(description="Notes on the current page")
    empty_message: str | None = Field(
        default=None,
        description="Set only when the board has no notes",
    )
    pagination: PaginationControls | None = Field(
        default=None,
        description="Absent while the board holds one note or fewer",
    )
    compose: ComposeForm
