"""Two-tier flashcard generation.

The AI tier asks the artifact client for card pairs built from the note's
title and normalized lines. If that call fails (or yields nothing) the
algorithmic tier composes cards from five local strategies. Either way the
result is sanitized, deduplicated and guaranteed to hold a title card when
fewer than three cards came out.
"""

from __future__ import annotations

from typing import Iterable, Optional

from notecraft.core.config import GenerationSettings, settings as app_settings
from notecraft.core.errors import AIServiceError, EmptyContentError
from notecraft.core.logging import get_logger
from notecraft.core.results import GenerationResult, Provenance
from notecraft.modules.ai.client import ArtifactClient
from notecraft.modules.flashcards.models.flashcards import Flashcard
from notecraft.modules.text import markdown
from notecraft.modules.text.analyzer import ContentAnalyzer
from notecraft.modules.text.models import AnalyzedContent
from notecraft.modules.text.normalizer import normalize, strip_punctuation

logger = get_logger(__name__)

MAIN_TOPIC_FRONT = "What is the main topic?"
UNTITLED = "Untitled note"
MIN_CARDS = 3

CLOZE_BLANK = "_____"
CLOZE_MIN_WORDS = 6
CLOZE_MIN_INDEX = 2
CLOZE_MIN_ANSWER_LENGTH = 4
REVERSE_PREFIX_LENGTH = 50
CONCEPT_LIMIT = 5
APPLICATION_LIMIT = 3
APPLICATION_LONG_WORD = 7
COMPARISON_LIMIT = 2

CardPairs = list[tuple[str, str]]


def definition_cards(analysis: AnalyzedContent) -> CardPairs:
    """Term -> definition, plus the reverse direction."""
    out: CardPairs = []
    for d in analysis.definitions:
        out.append((d.term, d.definition))
        prefix = d.definition[:REVERSE_PREFIX_LENGTH]
        if len(d.definition) > REVERSE_PREFIX_LENGTH:
            prefix += "..."
        out.append((f"What term is defined as: {prefix}", d.term))
    return out


def cloze_cards(analysis: AnalyzedContent) -> CardPairs:
    """Blank out a middle word of longer bullet points."""
    out: CardPairs = []
    for bullet in analysis.bullet_points:
        words = bullet.split()
        if len(words) < CLOZE_MIN_WORDS:
            continue
        index = min(max(CLOZE_MIN_INDEX, len(words) // 2), len(words) - 1)
        word = words[index]
        answer = strip_punctuation(word)
        if len(word) < CLOZE_MIN_ANSWER_LENGTH or not answer:
            continue
        # "cat." -> "_____." keeps the sentence punctuation in place
        blanked = words[:index] + [word.replace(answer, CLOZE_BLANK, 1)] + words[index + 1 :]
        out.append((f"Fill in the blank: {' '.join(blanked)}", answer))
    return out


def concept_cards(analysis: AnalyzedContent) -> CardPairs:
    out: CardPairs = []
    for phrase in analysis.key_phrases[:CONCEPT_LIMIT]:
        concept = " ".join(phrase.split()[:2])
        out.append((f"Explain the concept of {concept}", phrase))
    return out


def application_cards(analysis: AnalyzedContent, title: str) -> CardPairs:
    """Reflection prompts seeded by capitalized or long leading words."""
    words: list[str] = []
    for line in analysis.lines:
        tokens = line.split()
        if not tokens:
            continue
        word = strip_punctuation(tokens[0])
        if not word or word in words:
            continue
        if word[0].isupper() or len(word) >= APPLICATION_LONG_WORD:
            words.append(word)
        if len(words) >= APPLICATION_LIMIT:
            break
    return [
        (
            f"How would you apply {word} in a real-world situation?",
            f"Think of a practical scenario where {word} matters and explain "
            f"how the ideas from {title} would guide your approach.",
        )
        for word in words
    ]


def comparison_cards(analysis: AnalyzedContent) -> CardPairs:
    defs = analysis.definitions
    out: CardPairs = []
    for a, b in list(zip(defs, defs[1:]))[:COMPARISON_LIMIT]:
        out.append(
            (
                f"Compare and contrast {a.term} vs {b.term}",
                f"{a.term}: {a.definition}\n{b.term}: {b.definition}",
            )
        )
    return out


def basic_cards(content: str, title: str) -> CardPairs:
    """Cards for content too short to analyze."""
    return [
        (MAIN_TOPIC_FRONT, title),
        ("What does this note say?", content.strip()),
    ]


def finalize_cards(pairs: Iterable[tuple[str, str]], title: str) -> list[Flashcard]:
    """Sanitize, drop empties and duplicates, then guarantee a title card."""
    seen: set[tuple[str, str]] = set()
    cards: list[Flashcard] = []
    for front, back in pairs:
        card = Flashcard(front=markdown.strip(front), back=markdown.strip(back))
        if not card.front or not card.back or card.content_key in seen:
            continue
        seen.add(card.content_key)
        cards.append(card)

    if len(cards) < MIN_CARDS:
        card = Flashcard(front=MAIN_TOPIC_FRONT, back=markdown.strip(title) or UNTITLED)
        if card.content_key not in seen:
            cards.append(card)
    return cards


class FlashcardSynthesizer:
    def __init__(
        self,
        client: Optional[ArtifactClient] = None,
        settings: Optional[GenerationSettings] = None,
    ) -> None:
        self.client = client
        self.settings = settings or app_settings.generation
        self.analyzer = ContentAnalyzer(self.settings)

    async def _ai_cards(self, lines: list[str], title: str, count: int) -> CardPairs:
        if self.client is None:
            return []
        try:
            pairs = await self.client.generate_card_pairs("\n".join(lines), title, count)
        except AIServiceError as exc:
            logger.warning("AI flashcard generation failed, using fallback: %s", exc)
            return []
        return [(p.front, p.back) for p in pairs]

    def algorithmic_cards(self, analysis: AnalyzedContent, title: str) -> CardPairs:
        pairs: CardPairs = []
        for name, batch in (
            ("definition", definition_cards(analysis)),
            ("cloze", cloze_cards(analysis)),
            ("concept", concept_cards(analysis)),
            ("application", application_cards(analysis, title)),
            ("comparison", comparison_cards(analysis)),
        ):
            logger.debug("Strategy %s produced %d cards", name, len(batch))
            pairs.extend(batch)
        return pairs

    async def generate_flashcards(
        self, content: str, title: str, minimum_count: Optional[int] = None
    ) -> GenerationResult[Flashcard]:
        if not content or not content.strip():
            raise EmptyContentError()

        title = (title or "").strip() or UNTITLED
        minimum = (
            self.settings.minimum_flashcards if minimum_count is None else minimum_count
        )
        lines = normalize(content).lines

        pairs = await self._ai_cards(lines, title, minimum)
        if pairs:
            provenance = Provenance.AI
        elif self.analyzer.is_short(content):
            pairs = basic_cards(content, title)
            provenance = Provenance.BASIC
        else:
            analysis = self.analyzer.analyze(lines)
            pairs = self.algorithmic_cards(analysis, title)
            provenance = Provenance.ALGORITHMIC

        cards = finalize_cards(pairs, title)
        logger.info(
            "Generated %d flashcards for %r (%s)", len(cards), title, provenance.value
        )
        return GenerationResult[Flashcard](items=cards, provenance=provenance)
