"""Line, paragraph and sentence segmentation."""

from __future__ import annotations

import re
import string
import unicodedata

from notecraft.modules.text.models import NormalizedText

_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")
_WHITESPACE_RUN = re.compile(r"\s+")


def is_punctuation(ch: str) -> bool:
    # ASCII symbols such as "$" or "|" are not in a Unicode P* category
    return ch in string.punctuation or unicodedata.category(ch).startswith("P")


def strip_punctuation(token: str) -> str:
    """Trim punctuation of any script from both ends of ``token``."""
    start, end = 0, len(token)
    while start < end and is_punctuation(token[start]):
        start += 1
    while end > start and is_punctuation(token[end - 1]):
        end -= 1
    return token[start:end]


def split_lines(raw: str) -> list[str]:
    return [line.strip() for line in (raw or "").splitlines() if line.strip()]


def normalize(raw: str) -> NormalizedText:
    return NormalizedText(lines=split_lines(raw))


def split_paragraphs(raw: str) -> list[str]:
    """Blocks of text separated by at least one blank line."""
    return [p.strip() for p in _PARAGRAPH_BREAK.split(raw or "") if p.strip()]


def split_sentences(raw: str) -> list[str]:
    """Period-delimited sentences with inner whitespace collapsed."""
    out: list[str] = []
    for chunk in (raw or "").split("."):
        s = _WHITESPACE_RUN.sub(" ", chunk).strip()
        if s:
            out.append(s)
    return out
