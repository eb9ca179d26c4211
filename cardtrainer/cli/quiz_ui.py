"""
Interactive quiz over the cards in memory.
"""

import logging

from cardtrainer import messages
from cardtrainer.deck import Deck
from cardtrainer.exceptions import EmptyDeckError
from cardtrainer.models import AnswerVerdict
from cardtrainer.quiz import AnswerResult, QuizSession
from cardtrainer.cli.console_io import TrainerConsole

logger = logging.getLogger(__name__)


def _report_answer(io: TrainerConsole, result: AnswerResult) -> None:
    if result.verdict is AnswerVerdict.CORRECT:
        io.say(messages.CORRECT_ANSWER)
    elif result.verdict is AnswerVerdict.WRONG_CARD:
        io.say(
            messages.WRONG_CARD_TEMPLATE,
            definition=result.card.definition,
            other_term=result.matching_card.term,
        )
    else:
        io.say(messages.WRONG_ANSWER_TEMPLATE, definition=result.card.definition)


def run_quiz(io: TrainerConsole, deck: Deck) -> None:
    """
    Ask for a number of rounds, then quiz the user that many times.

    An empty deck is reported and no count is asked for. A count of zero
    or less asks nothing.

    Raises:
        InvalidNumberError: If the count is not an integer.
    """
    try:
        session = QuizSession(deck)
    except EmptyDeckError:
        io.say(messages.NO_CARDS_AVAILABLE)
        return

    io.say(messages.ASK_COUNT_PROMPT)
    rounds = io.read_number()
    logger.info(f"Starting quiz of {rounds} rounds over {len(deck)} cards")

    for round_number in range(rounds):
        index = session.index_for_round(round_number)
        io.say(messages.ASK_DEFINITION_TEMPLATE, term=deck[index].term)
        answer = io.read_line()
        _report_answer(io, session.check_answer(index, answer))

    logger.info(
        f"Quiz finished: {session.correct_count} correct, "
        f"{session.wrong_count} wrong"
    )
