"""
Error Taxonomy for the Theater Statement Engine

Both errors are data-integrity failures: they abort the whole statement
and are never retried.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes surfaced to API callers."""

    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"
    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    INVALID_INPUT = "INVALID_INPUT"


class StatementError(ValueError):
    """Base error with code and user-safe message."""

    code = ErrorCode.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayTypeError(StatementError):
    """Raised when a play's genre is not tragedy or comedy."""

    code = ErrorCode.UNKNOWN_PLAY_TYPE

    def __init__(self, play_type: str) -> None:
        super().__init__(f"Unknown type: {play_type}")
        self.play_type = play_type


class UnknownPlayError(StatementError):
    """Raised when a performance references a play missing from the catalog."""

    code = ErrorCode.UNKNOWN_PLAY

    def __init__(self, play_id: str) -> None:
        super().__init__(f"Unknown play: {play_id}")
        self.play_id = play_id
