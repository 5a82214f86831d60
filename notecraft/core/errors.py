"""Error taxonomy for the generation pipeline."""

from __future__ import annotations

from typing import Optional


class NotecraftError(Exception):
    """Base class for all errors raised by notecraft."""

    pass


class EmptyContentError(NotecraftError, ValueError):
    """Raised when the source text is empty or whitespace-only."""

    def __init__(self, message: str = "Note content is empty") -> None:
        super().__init__(message)


class AIServiceError(NotecraftError):
    """Raised when the external AI completion service fails.

    Covers transport failures, provider errors, timeouts and responses that do
    not validate against the expected structure.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidQuestionIndexError(NotecraftError, IndexError):
    """Raised by a quiz session when there is no current question to answer."""

    def __init__(self, message: str = "Invalid question index") -> None:
        super().__init__(message)
