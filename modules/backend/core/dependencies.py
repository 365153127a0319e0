"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header, Request

from modules.backend.core.logging import get_logger
from modules.backend.services.board import NoteBoard

logger = get_logger(__name__)


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


async def get_board(request: Request) -> NoteBoard:
    """
    Return the application's note board, seeding it on first use.

    Activation is idempotent, so every request may call it.
    """
    board: NoteBoard = request.app.state.board
    board.activate(request.app.state.seed_loader)
    return board


Board = Annotated[NoteBoard, Depends(get_board)]
