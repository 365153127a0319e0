"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from modules.backend.api.v1.endpoints import board, notes

router = APIRouter()

# Board actions (compose, draft, submit, paging)
router.include_router(board.router, prefix="/board", tags=["board"])

# Read-only note listing
router.include_router(notes.router, prefix="/notes", tags=["notes"])
