"""Pydantic models for generated quizzes and quiz sessions.

This mirrors the style of the flashcards module: simple Pydantic schemas
handed back to the caller, which owns persistence.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, Field, computed_field, model_validator


def question_key(text: str) -> str:
    """Identity used for duplicate detection: trimmed, lowercased text."""
    return (text or "").strip().lower()


class QuizQuestion(BaseModel):
    """A single multiple-choice (or true/false) question."""

    id: UUID = Field(default_factory=uuid4)
    question: str
    options: list[str] = Field(default_factory=list)
    correct_index: int

    @model_validator(mode="after")
    def _check_options(self) -> "QuizQuestion":
        if len(self.options) < 2:
            raise ValueError("a question needs at least 2 options")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError("correct_index must point into options")
        return self

    @property
    def dedup_key(self) -> str:
        return question_key(self.question)

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


class QuizResult(BaseModel):
    question_id: UUID
    selected_index: int
    correct_index: int

    @computed_field
    def is_correct(self) -> bool:
        return self.selected_index == self.correct_index


class QuizPerformance(BaseModel):
    correct_answers: int = 0
    total_questions: int = 0
    score: float = 0.0
