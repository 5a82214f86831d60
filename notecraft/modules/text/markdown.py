"""Reduce generated markdown to plain display text.

Patterns run in a fixed order: headers, then links, then block-level markers
(code fences, rules, list and quote markers), then inline emphasis. Emphasis
runs last so that a leading ``* `` list marker is never read as italics.
"""

from __future__ import annotations

import re

_HEADER = re.compile(r"^[ \t]*#{1,6}[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_LINK = re.compile(r"\[([^\[\]]+)\]\(([^)]+)\)")

# (pattern, keep_group): keep_group=False deletes the whole match
_PATTERNS: list[tuple[re.Pattern[str], bool]] = [
    (re.compile(r"```[\s\S]*?```"), False),
    (re.compile(r"^[ \t]*[*\-_]{3,}[ \t]*$", re.MULTILINE), False),
    # Nested list and quote prefixes ("> > ", "- - ", "> 1. ") go in one pass
    (
        re.compile(
            r"^[ \t]*(?:(?:[*\-+•]|\d+\.)[ \t]+|>[ \t]*)+(.+?)$", re.MULTILINE
        ),
        True,
    ),
    (re.compile(r"\*\*\*(.+?)\*\*\*"), True),
    (re.compile(r"\*\*(.+?)\*\*"), True),
    (re.compile(r"\*(.+?)\*"), True),
    # Underscore emphasis must hug its text, so "_____" blanks survive
    (re.compile(r"__([^_\s](?:.*?[^_\s])?)__"), True),
    (re.compile(r"(?<!\w)_([^_\s](?:.*?[^_\s])?)_(?!\w)"), True),
    (re.compile(r"`(.+?)`"), True),
    (re.compile(r"<((?:https?://|mailto:)[^<>\s]+)>"), True),
]

_SPACE_RUN = re.compile(r"[ \t]{2,}")


def strip(text: str) -> str:
    """Return ``text`` with markdown syntax removed and whitespace tidied."""
    cleaned = _HEADER.sub(r"\1", text or "")
    cleaned = _LINK.sub(r"\1", cleaned)

    for pattern, keep_group in _PATTERNS:
        cleaned = pattern.sub(r"\1" if keep_group else "", cleaned)

    # Stray header tokens the anchored pattern did not catch
    cleaned = cleaned.replace("###", "").replace("##", "")
    cleaned = cleaned.replace("\\", "")
    cleaned = _SPACE_RUN.sub(" ", cleaned)
    return cleaned.strip()
