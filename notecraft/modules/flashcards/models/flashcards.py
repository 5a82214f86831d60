"""Pydantic model for generated flashcards."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """Simple front/back flashcard.

    ``is_revealed`` is presentation state toggled by a study session; it is
    not part of the card's identity.
    """

    id: UUID = Field(default_factory=uuid4)
    front: str
    back: str
    is_revealed: bool = False

    @property
    def content_key(self) -> tuple[str, str]:
        return (self.front, self.back)
