"""Pydantic models for raw and analyzed note content."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContentSource(str, Enum):
    AUDIO = "audio"
    PDF = "pdf"
    VIDEO = "video"
    TEXT = "text"
    WEB = "web"


class RawContent(BaseModel):
    """Extracted plain text for one note, tagged with where it came from."""

    model_config = ConfigDict(frozen=True)

    text: str
    source: ContentSource = ContentSource.TEXT


class Definition(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    definition: str


class NormalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: list[str] = Field(default_factory=list)


class AnalyzedContent(BaseModel):
    """Signal extracted from a single snapshot of note text.

    Built once per generation call and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    lines: list[str] = Field(default_factory=list)
    definitions: list[Definition] = Field(default_factory=list)
    bullet_points: list[str] = Field(default_factory=list)
    key_phrases: list[str] = Field(default_factory=list)
    key_terms: list[str] = Field(default_factory=list)

    paragraphs: list[str] = Field(default_factory=list)
    sentences: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
