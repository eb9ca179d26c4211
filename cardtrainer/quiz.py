"""
Quiz rounds over a deck.

Round `i` asks the card at index `i mod len(deck)`, so asking more
questions than there are cards cycles through the deck again.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .deck import Deck
from .exceptions import EmptyDeckError
from .models import AnswerVerdict, Flashcard

logger = logging.getLogger(__name__)


@dataclass
class AnswerResult:
    """Outcome of one quiz round."""

    verdict: AnswerVerdict
    card: Flashcard
    # Card whose definition matches the wrong answer, for WRONG_CARD.
    matching_card: Optional[Flashcard] = None


class QuizSession:
    """
    Selects cards for quiz rounds and scores answers against a deck.
    """

    def __init__(self, deck: Deck):
        if not len(deck):
            raise EmptyDeckError("There are no cards available in memory")
        self.deck = deck
        self.correct_count = 0
        self.wrong_count = 0

    def index_for_round(self, round_number: int) -> int:
        return round_number % len(self.deck)

    def card_for_round(self, round_number: int) -> Flashcard:
        return self.deck[self.index_for_round(round_number)]

    def check_answer(self, index: int, answer: str) -> AnswerResult:
        """
        Compare `answer` with the definition of the card at `index`.

        A wrong answer adds a mistake to that card, then the whole deck is
        searched for a card the answer would have been right for.

        Returns:
            AnswerResult: The verdict, the asked card and, for WRONG_CARD,
            the card whose definition equals `answer`.
        """
        card = self.deck[index]
        if answer == card.definition:
            self.correct_count += 1
            return AnswerResult(verdict=AnswerVerdict.CORRECT, card=card)

        card.mistakes += 1
        self.wrong_count += 1
        logger.debug(f"Wrong answer for '{card.term}' ({card.mistakes} mistakes)")

        found, other_index = self.deck.contains(answer, definition=True)
        if found:
            return AnswerResult(
                verdict=AnswerVerdict.WRONG_CARD,
                card=card,
                matching_card=self.deck[other_index],
            )
        return AnswerResult(verdict=AnswerVerdict.WRONG, card=card)
