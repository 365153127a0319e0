"""
Notes API Endpoints.

Read-only access to the notes on the board. Notes are created through
the board's compose workflow and never edited or deleted.
"""

from typing import Any

from fastapi import APIRouter, Depends

from modules.backend.core.dependencies import Board, RequestId
from modules.backend.core.pagination import (
    PaginationParams,
    create_paginated_response,
    get_pagination_params,
)
from modules.backend.schemas.base import ApiResponse, ResponseMetadata
from modules.backend.schemas.note import Note

router = APIRouter()


@router.get(
    "",
    summary="List notes (paginated)",
    description="All notes newest-first, with limit/offset pagination.",
)
async def list_notes(
    board: Board,
    request_id: RequestId,
    pagination: PaginationParams = Depends(get_pagination_params),
) -> dict[str, Any]:
    """List notes with offset pagination."""
    notes = board.repo.get_all(limit=pagination.limit, offset=pagination.offset)

    return create_paginated_response(
        items=notes,
        item_schema=Note,
        total=board.repo.count(),
        limit=pagination.limit,
        offset=pagination.offset,
        request_id=request_id,
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: int,
    board: Board,
    request_id: RequestId,
) -> ApiResponse[Note]:
    """Get a note by ID."""
    note = board.repo.get_by_id(note_id)
    return ApiResponse(data=note, metadata=ResponseMetadata(request_id=request_id))
