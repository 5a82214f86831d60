"""Text module exports."""

from .models import AnalyzedContent, ContentSource, Definition, RawContent
from .normalizer import normalize, split_paragraphs, split_sentences
from .analyzer import ContentAnalyzer, analyze, analyze_text
from . import markdown

__all__ = [
    "AnalyzedContent",
    "ContentSource",
    "Definition",
    "RawContent",
    "normalize",
    "split_paragraphs",
    "split_sentences",
    "ContentAnalyzer",
    "analyze",
    "analyze_text",
    "markdown",
]
