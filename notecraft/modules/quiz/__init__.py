"""Quiz module exports."""

from .models import QuizPerformance, QuizQuestion, QuizResult
from .generator import QuizSynthesizer, RandomPlaceholderAnswerPolicy, generate_quiz
from .session import QuizSession

__all__ = [
    "QuizPerformance",
    "QuizQuestion",
    "QuizResult",
    "QuizSynthesizer",
    "RandomPlaceholderAnswerPolicy",
    "generate_quiz",
    "QuizSession",
]
