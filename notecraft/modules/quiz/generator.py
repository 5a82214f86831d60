"""Algorithmic quiz generation from note text.

Provides:
- QuizSynthesizer.generate_quiz(content, minimum_count) -> GenerationResult
- one method per question archetype (factual, conceptual, relationship,
  application, supplementary true/false)

Generation is purely local: the content is analyzed once, each archetype
reads the same immutable ``AnalyzedContent``, and the union is deduplicated,
padded to the minimum count and shuffled.
"""

from __future__ import annotations

import itertools
import random
import re
from typing import Iterable, Iterator, Optional, Protocol, Sequence

from notecraft.core.config import GenerationSettings, settings as app_settings
from notecraft.core.errors import EmptyContentError
from notecraft.core.logging import get_logger
from notecraft.core.results import GenerationResult, Provenance
from notecraft.modules.quiz.models import QuizQuestion, question_key
from notecraft.modules.text.analyzer import ContentAnalyzer
from notecraft.modules.text.models import AnalyzedContent

logger = get_logger(__name__)

BLANK = "______"
NONE_OF_THE_ABOVE = "None of the above"
SUMMARY_LENGTH = 100
OPTION_COUNT = 4

FACTUAL_TERM_LIMIT = 5
CONCEPTUAL_TOPIC_LIMIT = 5
RELATIONSHIP_SENTENCE_LIMIT = 5
APPLICATION_PARAGRAPH_LIMIT = 3

TRUE_FALSE_OPTIONS = ["True", "False"]

RELATIONSHIP_OPTIONS = [
    "Cause and effect",
    "Comparison and contrast",
    "Problem and solution",
    "Sequential relationship",
]

APPLICATION_QUESTION = (
    "Based on the information in the note, which of the following would be "
    "the most appropriate application?"
)
APPLICATION_OPTIONS = [
    "Apply the concepts to solve a related problem",
    "Use the information to make a decision",
    "Explain the concept to someone else",
    "Create a new theory based on this information",
]

GENERIC_CONCEPT_OPTIONS = [
    "It explains the main concept of the note",
    "It introduces a supporting example",
    "It presents a counterargument",
    "It concludes the discussion",
]

TRUE_FALSE_TEMPLATES = (
    'Is the following statement true according to the note: "{}"',
    'True or false, according to the note: "{}"',
)
KEY_TERM_TEMPLATE = 'Is "{}" one of the key terms discussed in the note?'
REVIEW_TEMPLATE = 'Review {}: is the following statement true according to the note: "{}"'


def basic_questions() -> list[QuizQuestion]:
    """Fixed questions used when the content is too short to analyze."""
    return [
        QuizQuestion(
            question="What is the main topic of this note?",
            options=[
                "The content provided",
                "An unrelated topic",
                "Cannot be determined",
                NONE_OF_THE_ABOVE,
            ],
            correct_index=0,
        ),
        QuizQuestion(
            question="Which best describes the content of this note?",
            options=[
                "Brief information",
                "Detailed analysis",
                "Step-by-step instructions",
                "Historical overview",
            ],
            correct_index=0,
        ),
    ]


def summarize_paragraph(paragraph: str) -> str:
    """First sentence when short enough, else a truncated prefix."""
    first = paragraph.split(".", 1)[0]
    if len(first) < SUMMARY_LENGTH:
        return first.strip()
    return paragraph[:SUMMARY_LENGTH] + "..."


def deduplicate(questions: Iterable[QuizQuestion]) -> list[QuizQuestion]:
    """Drop questions whose normalized text was already seen; first wins."""
    seen: set[str] = set()
    out: list[QuizQuestion] = []
    for q in questions:
        key = q.dedup_key
        if key in seen:
            logger.debug("Removed duplicate question: %s", q.question)
            continue
        seen.add(key)
        out.append(q)
    return out


class AnswerPolicy(Protocol):
    def choose(self, options: Sequence[str]) -> int: ...


class RandomPlaceholderAnswerPolicy:
    """Marks a uniformly random option as correct.

    Used by the relationship and application archetypes, which have no way to
    classify the statement. Swap in a real classifier through the
    ``answer_policy`` argument of ``QuizSynthesizer``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose(self, options: Sequence[str]) -> int:
        return self.rng.randrange(len(options))


class QuizSynthesizer:
    def __init__(
        self,
        settings: Optional[GenerationSettings] = None,
        *,
        rng: Optional[random.Random] = None,
        answer_policy: Optional[AnswerPolicy] = None,
    ) -> None:
        self.settings = settings or app_settings.generation
        self.rng = rng or random.Random()
        self.answer_policy = answer_policy or RandomPlaceholderAnswerPolicy(self.rng)
        self.analyzer = ContentAnalyzer(self.settings)

    def _shuffled(self, options: list[str], correct: str) -> tuple[list[str], int]:
        options = list(options)
        self.rng.shuffle(options)
        return options, options.index(correct)

    # Archetypes ---------------------------------------------------------
    def factual_questions(self, analysis: AnalyzedContent) -> list[QuizQuestion]:
        """Cloze questions: blank out a key term in a sentence that uses it."""
        terms = analysis.key_terms
        out: list[QuizQuestion] = []
        for term in terms[:FACTUAL_TERM_LIMIT]:
            sentence = next(
                (s for s in analysis.sentences if term.lower() in s.lower()), None
            )
            if sentence is None:
                continue
            stem = re.sub(re.escape(term), BLANK, sentence, flags=re.IGNORECASE)

            options = [term] + [t for t in terms if t != term][:3]
            while len(options) < OPTION_COUNT:
                options.append(NONE_OF_THE_ABOVE)
            options, correct = self._shuffled(options, term)

            out.append(
                QuizQuestion(
                    question=f'Which term best fits in this context: "{stem}"',
                    options=options,
                    correct_index=correct,
                )
            )
        return out

    def conceptual_questions(self, analysis: AnalyzedContent) -> list[QuizQuestion]:
        """Main-idea questions whose options summarize different paragraphs."""
        paragraphs = analysis.paragraphs
        out: list[QuizQuestion] = []
        for topic in analysis.topics[:CONCEPTUAL_TOPIC_LIMIT]:
            index = next((i for i, p in enumerate(paragraphs) if topic in p), None)
            if index is None:
                options = list(GENERIC_CONCEPT_OPTIONS)
                correct_option = options[0]
            else:
                correct_option = summarize_paragraph(paragraphs[index])
                options = [correct_option]
                for i in range(OPTION_COUNT - 1):
                    other = paragraphs[(index + i + 1) % len(paragraphs)]
                    summary = summarize_paragraph(other)
                    if summary not in options:
                        options.append(summary)

            # Too few distinct paragraphs to build a fair question
            if len(options) != OPTION_COUNT:
                continue

            options, correct = self._shuffled(options, correct_option)
            out.append(
                QuizQuestion(
                    question=f'What is the main idea discussed in this excerpt: "{topic}"',
                    options=options,
                    correct_index=correct,
                )
            )
        return out

    def relationship_questions(self, analysis: AnalyzedContent) -> list[QuizQuestion]:
        terms = [t.lower() for t in analysis.key_terms]
        multi_term = [
            s
            for s in analysis.sentences
            if sum(1 for t in terms if t in s.lower()) >= 2
        ]
        return [
            QuizQuestion(
                question=f'What relationship is described in this statement: "{s}"',
                options=list(RELATIONSHIP_OPTIONS),
                correct_index=self.answer_policy.choose(RELATIONSHIP_OPTIONS),
            )
            for s in multi_term[:RELATIONSHIP_SENTENCE_LIMIT]
        ]

    def application_questions(self, analysis: AnalyzedContent) -> list[QuizQuestion]:
        return [
            QuizQuestion(
                question=APPLICATION_QUESTION,
                options=list(APPLICATION_OPTIONS),
                correct_index=self.answer_policy.choose(APPLICATION_OPTIONS),
            )
            for _ in analysis.paragraphs[:APPLICATION_PARAGRAPH_LIMIT]
        ]

    def _supplementary_prompts(self, analysis: AnalyzedContent) -> Iterator[str]:
        # Every prompt quotes the note verbatim, so "True" is always correct.
        for template in TRUE_FALSE_TEMPLATES:
            for sentence in analysis.sentences:
                yield template.format(sentence)
        for term in analysis.key_terms:
            yield KEY_TERM_TEMPLATE.format(term)
        if not analysis.sentences:
            return
        for n in itertools.count(1):
            sentence = analysis.sentences[(n - 1) % len(analysis.sentences)]
            yield REVIEW_TEMPLATE.format(n, sentence)

    def supplementary_questions(
        self,
        analysis: AnalyzedContent,
        count: int,
        exclude: Iterable[str] = (),
    ) -> list[QuizQuestion]:
        """True/false questions with texts not already in ``exclude``."""
        seen = {question_key(k) for k in exclude}
        out: list[QuizQuestion] = []
        if count <= 0:
            return out
        for text in self._supplementary_prompts(analysis):
            key = question_key(text)
            if key in seen:
                continue
            seen.add(key)
            out.append(
                QuizQuestion(
                    question=text, options=list(TRUE_FALSE_OPTIONS), correct_index=0
                )
            )
            if len(out) >= count:
                break
        return out

    # Entry points -------------------------------------------------------
    def generate_quiz(
        self, content: str, minimum_count: Optional[int] = None
    ) -> GenerationResult[QuizQuestion]:
        if not content or not content.strip():
            raise EmptyContentError()

        minimum = (
            self.settings.minimum_questions if minimum_count is None else minimum_count
        )
        logger.debug("Generating quiz from content with length %d", len(content))

        if self.analyzer.is_short(content):
            return GenerationResult[QuizQuestion](
                items=basic_questions(), provenance=Provenance.BASIC
            )

        analysis = self.analyzer.analyze_text(content)

        generated: list[QuizQuestion] = []
        for name, archetype in (
            ("factual", self.factual_questions),
            ("conceptual", self.conceptual_questions),
            ("relationship", self.relationship_questions),
            ("application", self.application_questions),
        ):
            batch = archetype(analysis)
            logger.debug("Archetype %s produced %d questions", name, len(batch))
            generated.extend(batch)

        questions = deduplicate(generated)
        if len(questions) < minimum:
            questions.extend(
                self.supplementary_questions(
                    analysis,
                    minimum - len(questions),
                    exclude=[q.question for q in questions],
                )
            )

        self.rng.shuffle(questions)
        logger.info("Generated %d unique quiz questions", len(questions))
        return GenerationResult[QuizQuestion](
            items=questions, provenance=Provenance.ALGORITHMIC
        )

    def generate_quiz_questions(
        self, content: str, minimum_count: Optional[int] = None
    ) -> list[QuizQuestion]:
        return self.generate_quiz(content, minimum_count).items


def generate_quiz(content: str, minimum_count: Optional[int] = None) -> list[QuizQuestion]:
    """Module-level shortcut using default settings."""
    return QuizSynthesizer().generate_quiz_questions(content, minimum_count)
