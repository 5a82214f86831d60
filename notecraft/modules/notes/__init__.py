"""Note formatting exports."""

from .formatter import FormattedNote, NoteFormatter, detect_optional_sections

__all__ = ["FormattedNote", "NoteFormatter", "detect_optional_sections"]
