"""In-memory quiz progress: a forward-only cursor over generated questions.

The session moves Answering(i) -> Answering(i + 1) on each submission and
Answering(last) -> Complete on the final one, at which point the score is
aggregated. There is no way back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from notecraft.core.errors import InvalidQuestionIndexError
from notecraft.core.logging import get_logger
from notecraft.modules.quiz.models import QuizPerformance, QuizQuestion, QuizResult

logger = get_logger(__name__)


@dataclass
class QuizSession:
    questions: list[QuizQuestion]
    current_index: int = 0
    results: dict[UUID, QuizResult] = field(default_factory=dict)
    performance: Optional[QuizPerformance] = None

    @property
    def is_complete(self) -> bool:
        return self.performance is not None

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.is_complete or not 0 <= self.current_index < len(self.questions):
            return None
        return self.questions[self.current_index]

    def submit_answer(self, answer: int) -> QuizResult:
        question = self.current_question
        if question is None:
            raise InvalidQuestionIndexError()

        result = QuizResult(
            question_id=question.id,
            selected_index=answer,
            correct_index=question.correct_index,
        )
        self.results[question.id] = result
        logger.debug(
            "Answer for question %d: selected=%d correct=%s",
            self.current_index,
            answer,
            result.is_correct,
        )

        if self.current_index < len(self.questions) - 1:
            self.current_index += 1
        else:
            self.performance = self._score()
        return result

    def _score(self) -> QuizPerformance:
        correct = sum(1 for r in self.results.values() if r.is_correct)
        total = len(self.questions)
        score = correct / total * 100 if total else 0.0
        logger.info("Quiz complete: %d/%d correct (%.1f%%)", correct, total, score)
        return QuizPerformance(
            correct_answers=correct, total_questions=total, score=score
        )
