"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (note board seeded and serving)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from modules.backend.core.logging import get_logger
from modules.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


def check_board(request: Request) -> dict[str, Any]:
    """
    Check that the note board exists and its seed data is installed.

    Returns:
        Dict with status and, when healthy, the number of notes
    """
    board = getattr(request.app.state, "board", None)
    if board is None:
        return {"status": "not_configured"}
    if not board.is_activated:
        return {"status": "unhealthy", "error": "seed data not loaded"}
    return {"status": "healthy", "notes": board.repo.count()}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict[str, Any]:
    """
    Readiness check.

    Returns 503 until the board has been seeded.
    """
    checks = {"board": check_board(request)}

    if checks["board"]["status"] != "healthy":
        logger.warning("Readiness check failed", extra={"checks": checks})
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": checks,
                "timestamp": utc_now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
