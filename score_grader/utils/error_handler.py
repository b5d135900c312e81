"""Custom exception classes for the application."""

class BaseGraderException(Exception):
    """Base exception for all application-specific errors."""
    pass

class InvalidScoreError(BaseGraderException):
    """Error raised when the text read at the prompt is not an integer score."""
    def __init__(self, raw: str, message: str | None = None):
        super().__init__(message or f"Not a valid integer score: {raw!r}")
        self.raw = raw

class UserCancelledError(BaseGraderException):
    """Error raised when the user ends input before entering a score."""
    pass
