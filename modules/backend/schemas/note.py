"""
Note Schemas.

The Note record and the payloads used to edit the compose draft.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

NOTE_MAX_CHARS = 280


class NoteColor(str, Enum):
    """Style token attached to a note card."""

    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    PINK = "pink"
    YELLOW = "yellow"
    ORANGE = "orange"


# Cycled by insertion index: the k-th inserted note gets PALETTE[k % len(PALETTE)]
PALETTE: tuple[NoteColor, ...] = tuple(NoteColor)


def color_for_index(insertion_index: int) -> NoteColor:
    """Palette color for the note inserted at the given position."""
    return PALETTE[insertion_index % len(PALETTE)]


class Note(BaseModel):
    """
    A short, immutable text note with an optional image reference.

    Text is stripped before validation, so whitespace-only text is rejected.
    An empty image URL is stored as None.
    """

    id: int = Field(description="Note unique identifier")
    text: str = Field(
        min_length=1,
        max_length=NOTE_MAX_CHARS,
        description="Note body",
        examples=["Reminder: water the basil."],
    )
    color: NoteColor = Field(description="Card color token")
    image_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image_url", "imageUrl"),
        description="External image URL",
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("text", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("image_url", mode="before")
    @classmethod
    def _blank_image_is_none(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class DraftUpdate(BaseModel):
    """
    Schema for editing the compose draft.

    Omitted fields are left unchanged. Text beyond the character bound is
    truncated by the board, not rejected.
    """

    text: str | None = Field(
        default=None,
        description="Draft note body",
        examples=["Hello"],
    )
    image_url: str | None = Field(
        default=None,
        description="Draft image URL",
        examples=["https://example.com/cat.png"],
    )
