"""Cardtrainer - an interactive command-line flashcard trainer."""

from .models import Flashcard, Command, AnswerVerdict
from .deck import Deck
from .session_log import SessionLog
from .persistence import load_cards, save_cards
from .quiz import QuizSession, AnswerResult

__all__ = [
    "Flashcard",
    "Command",
    "AnswerVerdict",
    "Deck",
    "SessionLog",
    "load_cards",
    "save_cards",
    "QuizSession",
    "AnswerResult",
]
