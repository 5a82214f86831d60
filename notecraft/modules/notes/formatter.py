"""AI-backed note formatting.

The transcript is embedded in a fixed instructional template and the
provider's markdown is returned verbatim. There is no local fallback: AI
failures propagate to the caller as ``AIServiceError``.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel

from notecraft.core.errors import EmptyContentError
from notecraft.core.logging import get_logger
from notecraft.modules.ai.client import ArtifactClient
from notecraft.modules.ai.prompts import build_note_prompt, build_title_prompt

logger = get_logger(__name__)

_TABLE_ROW = re.compile(r"^[ \t]*\|.*\|[ \t]*$", re.MULTILINE)
_TABLE_DIVIDER = re.compile(r"^[ \t]*\|?[ \t]*:?-{3,}:?[ \t]*\|", re.MULTILINE)
_QUOTE = re.compile(r"^[ \t]*>", re.MULTILINE)
_QUOTES_HEADER = re.compile(r"^#{1,6}[ \t]+Notable Quotes", re.MULTILINE | re.IGNORECASE)


class FormattedNote(BaseModel):
    markdown: str
    has_tables: bool = False
    has_quotes: bool = False


def detect_optional_sections(markdown: str) -> FormattedNote:
    """Report which optional sections the AI chose to include."""
    text = markdown or ""
    return FormattedNote(
        markdown=text,
        has_tables=bool(_TABLE_ROW.search(text) and _TABLE_DIVIDER.search(text)),
        has_quotes=bool(_QUOTE.search(text) or _QUOTES_HEADER.search(text)),
    )


class NoteFormatter:
    def __init__(self, client: ArtifactClient) -> None:
        self.client = client

    async def format(self, raw_text: str, language: Optional[str] = None) -> str:
        if not raw_text or not raw_text.strip():
            raise EmptyContentError("Empty transcript provided")
        logger.debug("Formatting note from transcript of length %d", len(raw_text))
        return await self.client.complete(build_note_prompt(raw_text, language))

    async def format_note(
        self, raw_text: str, language: Optional[str] = None
    ) -> FormattedNote:
        return detect_optional_sections(await self.format(raw_text, language))

    async def generate_title(self, raw_text: str, language: Optional[str] = None) -> str:
        if not raw_text or not raw_text.strip():
            raise EmptyContentError("Empty transcript provided")
        response = await self.client.complete(build_title_prompt(raw_text, language))
        return response.strip()
