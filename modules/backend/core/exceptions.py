"""
Custom Exceptions.

Application-specific exception classes. The HTTP layer turns them into
ErrorResponse bodies; the terminal view catches them directly.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        code: str = "SYS_INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a note cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when loaded data fails validation."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        super().__init__(message, code="VAL_VALIDATION_ERROR", details=details)


class ConflictError(ApplicationError):
    """Raised when a note id is already taken."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class ActionUnavailableError(ApplicationError):
    """
    Raised when a board action is requested while its control is disabled.

    Examples: submitting a blank draft, paging before the first page.
    """

    def __init__(self, action: str, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(
            f"Action '{action}' is unavailable: {reason}",
            code="BOARD_ACTION_UNAVAILABLE",
            details={"action": action, "reason": reason},
        )
