"""Structured outputs requested from the AI provider.

Kept free of length constraints so the provider's structured output schema
stays simple; cleanup happens after generation.
"""

from pydantic import BaseModel, Field


class CardPair(BaseModel):
    """Question on the front, answer on the back."""

    front: str
    back: str


class CardPairSet(BaseModel):
    cards: list[CardPair] = Field(default_factory=list)
