"""Heuristic content analysis shared by the quiz and flashcard generators.

Everything here is regex or frequency based: definitions are ``term: text``
lines, bullets are list items, key phrases are the remaining short lines and
key terms are the most frequent longer words.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Optional

from notecraft.core.config import GenerationSettings, settings as app_settings
from notecraft.modules.text.models import AnalyzedContent, Definition
from notecraft.modules.text.normalizer import (
    strip_punctuation,
    split_lines,
    split_paragraphs,
    split_sentences,
)

DEFINITION_SEPARATOR = ":"
MIN_TOPIC_LENGTH = 10

# A single "*" counts as a marker; "**" opens bold text instead.
_BULLET = re.compile(r"^(?:[-•]|\*(?!\*)|\d+\.\s)\s*(.*)$")


def _strip_marker(line: str) -> Optional[str]:
    m = _BULLET.match(line)
    if not m:
        return None
    return m.group(1).strip()


class ContentAnalyzer:
    def __init__(self, settings: Optional[GenerationSettings] = None) -> None:
        self.settings = settings or app_settings.generation

    def is_short(self, content: str) -> bool:
        return len(content or "") < self.settings.short_content_threshold

    # Extraction steps ---------------------------------------------------
    def extract_definitions(self, lines: Iterable[str]) -> list[Definition]:
        cfg = self.settings
        out: list[Definition] = []
        for line in lines:
            if DEFINITION_SEPARATOR not in line:
                continue
            left, right = line.split(DEFINITION_SEPARATOR, 1)
            term = _strip_marker(left.strip())
            term = (term if term is not None else left).strip()
            definition = right.strip()
            if not term or not definition:
                continue
            if len(term) >= cfg.max_term_length:
                continue
            if len(definition) >= cfg.max_definition_length:
                continue
            out.append(Definition(term=term, definition=definition))
        return out

    def extract_bullet_points(self, lines: Iterable[str]) -> list[str]:
        out: list[str] = []
        for line in lines:
            text = _strip_marker(line)
            if not text or len(text) >= self.settings.max_bullet_length:
                continue
            out.append(text)
        return out

    def extract_key_phrases(self, lines: Iterable[str]) -> list[str]:
        """Lines that are neither list items nor accepted definitions."""
        cfg = self.settings
        out: list[str] = []
        for line in lines:
            if _BULLET.match(line):
                continue
            if self.extract_definitions([line]):
                continue
            if cfg.min_phrase_length <= len(line) <= cfg.max_phrase_length:
                out.append(line)
        return out

    def extract_key_terms(self, lines: Iterable[str]) -> list[str]:
        cfg = self.settings
        counts: Counter[str] = Counter()
        for line in lines:
            for token in line.split():
                word = strip_punctuation(token.lower())
                if len(word) >= cfg.key_term_min_length:
                    counts[word] += 1
        # most_common keeps first-seen order among equal counts
        return [
            word
            for word, n in counts.most_common()
            if n >= cfg.key_term_min_frequency
        ][: cfg.key_term_limit]

    def extract_topics(self, paragraphs: Iterable[str]) -> list[str]:
        out: list[str] = []
        for paragraph in paragraphs:
            first = paragraph.split(".", 1)[0].strip()
            if len(first) > MIN_TOPIC_LENGTH:
                out.append(first)
        return out

    # Entry points -------------------------------------------------------
    def analyze(
        self, lines: list[str], paragraphs: Optional[list[str]] = None
    ) -> AnalyzedContent:
        """Analyze already-normalized lines.

        When ``paragraphs`` is omitted each line is treated as its own
        paragraph.
        """
        snapshot = list(lines)
        blocks = list(paragraphs) if paragraphs is not None else snapshot
        return AnalyzedContent(
            lines=snapshot,
            definitions=self.extract_definitions(snapshot),
            bullet_points=self.extract_bullet_points(snapshot),
            key_phrases=self.extract_key_phrases(snapshot),
            key_terms=self.extract_key_terms(snapshot),
            paragraphs=blocks,
            sentences=split_sentences("\n".join(snapshot)),
            topics=self.extract_topics(blocks),
        )

    def analyze_text(self, raw: str) -> AnalyzedContent:
        return self.analyze(split_lines(raw), paragraphs=split_paragraphs(raw))


def analyze(lines: list[str], paragraphs: Optional[list[str]] = None) -> AnalyzedContent:
    return ContentAnalyzer().analyze(lines, paragraphs)


def analyze_text(raw: str) -> AnalyzedContent:
    return ContentAnalyzer().analyze_text(raw)
