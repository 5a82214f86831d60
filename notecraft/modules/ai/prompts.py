"""Prompt templates sent to the AI provider."""

from __future__ import annotations

from typing import Optional

MAX_CARD_COUNT = 25
MAX_TITLE_LENGTH = 60

NOTE_SYSTEM_PROMPT = (
    "You are Study-Note-GPT. Your mission: turn any transcript into clear, "
    "well-structured Markdown notes that help the reader master the material "
    "using the Feynman technique (teach it back in simple language)."
)

FLASHCARD_SYSTEM_PROMPT = (
    "You are an expert educator who crafts focused, accurate flashcards. "
    "Return a single JSON object that validates as the provided CardPairSet "
    "model: {cards}. Each card has {front, back} in plain text, no markdown. "
    "No extra keys or commentary; do not include code fences."
)


def language_instruction(language: Optional[str]) -> str:
    if language:
        return f"Write ALL output, including headers, in {language}."
    return (
        "Detect the language of the transcript and write ALL output, "
        "including headers, in that language."
    )


def build_note_prompt(transcript: str, language: Optional[str] = None) -> str:
    return f"""{language_instruction(language)}

Structure the notes with these sections, in this order:

## Summary
One plain-language paragraph that could be read to a novice.

## Key Points
A bullet list of the most important ideas, one idea per bullet.

## Important Details
Supporting facts, definitions, dates and figures from the transcript.

## Notable Quotes
Only if the transcript contains memorable statements worth quoting; use `>` blockquotes. Omit this section otherwise.

## Tables
Only if information (dates, stats, comparisons, steps) is clearer in a table; at most 2 tables. Omit this section otherwise.

## Conclusion
Wrap up in 1 paragraph, linking back to the main takeaways.

### Style Rules
1. Use ## for main headers, ### for sub-headers.
2. Bullet lists with -.
3. Format tables with | and -.
4. Inline code or technical terms with back-ticks.
5. Bold sparingly for emphasis.
6. Never invent facts not present in the transcript.
7. Output only Markdown: no explanations, no apologies.

Transcript:
{transcript}"""


def build_title_prompt(transcript: str, language: Optional[str] = None) -> str:
    if language:
        lang = f"Generate the title in {language}."
    else:
        lang = (
            "Detect the language of the transcript and generate the title in "
            "that same language."
        )
    return (
        "Based on this transcript, generate a concise but descriptive title "
        f"(maximum {MAX_TITLE_LENGTH} characters) that captures the main topic "
        "or theme. The title should be clear and informative, avoiding generic "
        f"phrases.\n{lang}\n\nTranscript:\n{transcript}\n\n"
        "Generate only the title, nothing else."
    )


def build_flashcard_prompt(content: str, title: str, count: int) -> str:
    return f"""Generate between {count} and {max(count, MAX_CARD_COUNT)} educational flashcards from the following note content.
You decide the exact number based on the richness and complexity of the content, but don't generate fewer than {count} cards.

Each flashcard should have a question on the front and an answer on the back.
Create diverse types of cards including:
1. Term-definition pairs
2. Fill-in-the-blank questions
3. Concept explanation questions
4. Application questions
5. Comparison questions

Keep the front side concise (under 100 characters if possible).
Keep the back side clear and informative (under 200 characters if possible).

Note Title: {title}
Note Content: {content}"""
