"""
Board API Endpoints.

One endpoint per user action on the note board. Every action answers
with the resulting board view so clients can redraw from a single call.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import Board, RequestId
from modules.backend.schemas import ApiResponse, BoardView, DraftUpdate, ResponseMetadata
from modules.backend.services.board import NoteBoard

router = APIRouter()


def _view(board: NoteBoard, request_id: str) -> ApiResponse[BoardView]:
    return ApiResponse(
        data=board.snapshot(),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    response_model=ApiResponse[BoardView],
    summary="Get the board",
    description="Current page of notes, pagination controls and compose form state.",
)
async def get_board_view(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Get the board view."""
    return _view(board, request_id)


@router.post(
    "/compose",
    response_model=ApiResponse[BoardView],
    summary="Open the compose form",
    description="Switch to the compose form. An existing draft is kept.",
)
async def open_compose(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Open the compose form."""
    board.open_compose()
    return _view(board, request_id)


@router.post(
    "/cancel",
    response_model=ApiResponse[BoardView],
    summary="Cancel composing",
    description="Return to the note list without submitting.",
)
async def cancel_compose(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Cancel composing."""
    board.cancel()
    return _view(board, request_id)


@router.put(
    "/draft",
    response_model=ApiResponse[BoardView],
    summary="Edit the draft",
    description="Set draft text and/or image URL. Text beyond 280 characters is cut off.",
)
async def update_draft(
    data: DraftUpdate,
    board: Board,
    request_id: RequestId,
) -> ApiResponse[BoardView]:
    """Edit the draft."""
    board.update_draft(text=data.text, image_url=data.image_url)
    return _view(board, request_id)


@router.post(
    "/submit",
    response_model=ApiResponse[BoardView],
    status_code=201,
    summary="Submit the draft",
    description="Add the draft as the newest note and return to the first page.",
)
async def submit_draft(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Submit the draft as a new note."""
    board.submit()
    return _view(board, request_id)


@router.post(
    "/pages/next",
    response_model=ApiResponse[BoardView],
    summary="Next page",
)
async def next_page(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Go to the next page."""
    board.next_page()
    return _view(board, request_id)


@router.post(
    "/pages/previous",
    response_model=ApiResponse[BoardView],
    summary="Previous page",
)
async def previous_page(board: Board, request_id: RequestId) -> ApiResponse[BoardView]:
    """Go to the previous page."""
    board.previous_page()
    return _view(board, request_id)
