"""
The in-memory card store.

A Deck is an ordered list of flashcards. Insertion order is kept until a
card is removed: removal moves the last card into the freed slot.
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from .models import Flashcard

logger = logging.getLogger(__name__)


class Deck:
    """
    Ordered collection of flashcards with unique terms and definitions.

    Uniqueness is not checked by `add`; callers collecting cards
    interactively use `contains` to reject duplicates first.
    """

    def __init__(self, cards: Iterable[Flashcard] = ()):
        self.cards: List[Flashcard] = list(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Flashcard:
        return self.cards[index]

    def contains(self, text: str, definition: bool = False) -> Tuple[bool, int]:
        """
        Find the first card whose term (or definition) equals `text`.

        Parameters:
            text (str): Value to look for.
            definition (bool): Compare against definitions instead of terms.

        Returns:
            Tuple[bool, int]: (found, index); index is -1 when not found.
        """
        for index, card in enumerate(self.cards):
            value = card.definition if definition else card.term
            if value == text:
                return True, index
        return False, -1

    def add(self, card: Flashcard) -> None:
        self.cards.append(card)
        logger.debug(f"Added card '{card.term}' ({len(self.cards)} in deck)")

    def remove(self, term: str) -> bool:
        """
        Remove the card with the given term.

        The last card takes the removed card's slot, so order is not kept.

        Returns:
            bool: False if no card has that term.
        """
        found, index = self.contains(term)
        if not found:
            logger.debug(f"Cannot remove '{term}': not in deck")
            return False
        self.cards[index] = self.cards[-1]
        self.cards.pop()
        logger.debug(f"Removed card '{term}' ({len(self.cards)} left)")
        return True

    def update(self, cards: Iterable[Flashcard]) -> None:
        """
        Merge cards into the deck.

        New terms are appended. For a known term only the definition and
        the mistake count are overwritten; nothing is ever removed.
        """
        added = updated = 0
        for card in cards:
            found, index = self.contains(card.term)
            if not found:
                self.cards.append(card.model_copy())
                added += 1
            else:
                existing = self.cards[index]
                existing.definition = card.definition
                existing.mistakes = card.mistakes
                updated += 1
        logger.info(f"Merged cards into deck: {added} added, {updated} updated")

    def reset(self) -> None:
        """Zero the mistake count of every card."""
        for card in self.cards:
            card.mistakes = 0
        logger.debug(f"Reset statistics of {len(self.cards)} cards")

    def hardest(self) -> Tuple[int, List[Flashcard]]:
        """
        Return the highest mistake count and the cards that reach it.

        Ties are all returned, in deck order. When no card has a mistake the
        result is (0, []).
        """
        maximum = max((card.mistakes for card in self.cards), default=0)
        if maximum == 0:
            return 0, []
        return maximum, [c for c in self.cards if c.mistakes == maximum]
