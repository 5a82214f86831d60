"""Study-session navigation over a generated flashcard list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from notecraft.core.logging import get_logger
from notecraft.modules.flashcards.models.flashcards import Flashcard

logger = get_logger(__name__)


@dataclass
class FlashcardDeck:
    cards: list[Flashcard]
    current_index: int = 0

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def current_card(self) -> Optional[Flashcard]:
        if 0 <= self.current_index < self.total:
            return self.cards[self.current_index]
        return None

    @property
    def progress(self) -> float:
        if not self.cards:
            return 0.0
        return (self.current_index + 1) / self.total

    def next_card(self) -> None:
        if self.current_index >= self.total - 1:
            logger.debug("Cannot move to next card - already at last card")
            return
        self.current_index += 1

    def previous_card(self) -> None:
        if self.current_index <= 0:
            logger.debug("Cannot move to previous card - already at first card")
            return
        self.current_index -= 1

    def toggle_card(self) -> None:
        card = self.current_card
        if card is None:
            logger.debug("Cannot toggle card - invalid index")
            return
        card.is_revealed = not card.is_revealed
