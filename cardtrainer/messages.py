"""
User-visible text of the trainer.

Every line the trainer prints is built from these templates so the
console transcript (and the session log) stay identical to the
established prompts.
"""

from typing import Sequence

from .models import Flashcard

ACTION_PROMPT = (
    "Input the action (add, remove, import, export, ask, exit, log, "
    "hardest card, reset stats):"
)

# add
TERM_PROMPT = "The card:"
DEFINITION_PROMPT = "The definition of the card:"
DUPLICATE_TEMPLATE = 'The {side} "{text}" already exists. Try again:'
PAIR_ADDED_TEMPLATE = 'The pair ("{term}":"{definition}") has been added.'

# remove
REMOVE_PROMPT = "Which card?"
REMOVE_MISSING_TEMPLATE = 'Can\'t remove "{term}": there is no such card.'
CARD_REMOVED = "The card has been removed."

# import / export / log
FILE_NAME_PROMPT = "File name:"
FILE_NOT_FOUND = "File not found."
CARDS_LOADED_TEMPLATE = "{count} cards have been loaded."
CARDS_SAVED_TEMPLATE = "{count} cards have been saved."
LOG_SAVED = "The log has been saved."

# ask
NO_CARDS_AVAILABLE = "There are no cards available in memory"
ASK_COUNT_PROMPT = "How many times to ask?"
ASK_DEFINITION_TEMPLATE = 'Print the definition of "{term}":'
CORRECT_ANSWER = "Correct!"
WRONG_CARD_TEMPLATE = (
    'Wrong. The right answer is "{definition}", '
    'but your definition is correct for "{other_term}".'
)
WRONG_ANSWER_TEMPLATE = 'Wrong. The right answer is "{definition}".'

# hardest card / reset stats
HARDEST_TEMPLATE = (
    "The hardest card{verb} {terms}. "
    "You have {mistakes} errors answering {pronoun}."
)
NO_CARDS_WITH_ERRORS = "There are no cards with errors."
STATS_RESET = "Card statistics have been reset."

# exit
FAREWELL = "Bye bye!"


def quoted(text: str) -> str:
    """Wrap text in double quotes."""
    return f'"{text}"'


def format_hardest_report(mistakes: int, cards: Sequence[Flashcard]) -> str:
    """
    Render the hardest-card sentence.

    Parameters:
        mistakes (int): The highest mistake count in the deck.
        cards (Sequence[Flashcard]): Every card that reached `mistakes`.

    Returns:
        str: The report line, or the "no errors" line when `mistakes` is 0
        or no card is given. Singular and plural forms differ in the verb,
        the pronoun and the plural "s" on "card".
    """
    if mistakes == 0 or not cards:
        return NO_CARDS_WITH_ERRORS
    plural = len(cards) > 1
    return HARDEST_TEMPLATE.format(
        verb="s are" if plural else " is",
        terms=", ".join(quoted(card.term) for card in cards),
        mistakes=mistakes,
        pronoun="them" if plural else "it",
    )
