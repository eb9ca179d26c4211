import pytest

from cardtrainer.deck import Deck
from cardtrainer.exceptions import EmptyDeckError
from cardtrainer.models import AnswerVerdict, Flashcard
from cardtrainer.quiz import QuizSession


def test_empty_deck_refused():
    with pytest.raises(EmptyDeckError):
        QuizSession(Deck())


def test_rounds_cycle_through_deck(deck: Deck):
    session = QuizSession(deck)
    terms = [session.card_for_round(i).term for i in range(5)]
    assert terms == ["cat", "dog", "cat", "dog", "cat"]


def test_correct_answer_changes_nothing(deck: Deck):
    session = QuizSession(deck)

    result = session.check_answer(0, "a feline")

    assert result.verdict is AnswerVerdict.CORRECT
    assert result.card is deck[0]
    assert result.matching_card is None
    assert deck[0].mistakes == 0
    assert session.correct_count == 1


def test_wrong_answer_counts_a_mistake(deck: Deck):
    session = QuizSession(deck)

    result = session.check_answer(1, "wrong")

    assert result.verdict is AnswerVerdict.WRONG
    assert deck[1].mistakes == 1
    assert deck[0].mistakes == 0
    assert session.wrong_count == 1


def test_answer_for_another_card(deck: Deck):
    session = QuizSession(deck)

    result = session.check_answer(1, "a feline")

    assert result.verdict is AnswerVerdict.WRONG_CARD
    assert result.matching_card is deck[0]
    assert deck[1].mistakes == 1
    assert deck[0].mistakes == 0


def test_answers_are_compared_exactly():
    deck = Deck([Flashcard(term="cat", definition="a feline")])
    result = QuizSession(deck).check_answer(0, "A feline")
    assert result.verdict is AnswerVerdict.WRONG
