"""Flashcards module exports."""

from .models.flashcards import Flashcard
from .generator import FlashcardSynthesizer
from .deck import FlashcardDeck

__all__ = [
    "Flashcard",
    "FlashcardSynthesizer",
    "FlashcardDeck",
]
