# Pydantic schemas package
from modules.backend.schemas.base import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    PaginatedResponse,
    ResponseMetadata,
)
from modules.backend.schemas.board import BoardMode, BoardView
from modules.backend.schemas.note import DraftUpdate, Note, NoteColor

__all__ = [
    "ApiResponse",
    "BoardMode",
    "BoardView",
    "DraftUpdate",
    "ErrorDetail",
    "ErrorResponse",
    "Note",
    "NoteColor",
    "PaginatedResponse",
    "ResponseMetadata",
]
