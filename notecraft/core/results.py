"""Generic wrapper for generated artifact lists."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Provenance(str, Enum):
    AI = "ai"
    ALGORITHMIC = "algorithmic"
    BASIC = "basic"


class GenerationResult(BaseModel, Generic[T]):
    """Ordered artifacts plus where they came from (not meant to be persisted)."""

    items: list[T] = Field(default_factory=list)
    provenance: Provenance

    def __len__(self) -> int:
        return len(self.items)
