"""
The interactive command loop of the trainer.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from cardtrainer import messages
from cardtrainer.deck import Deck
from cardtrainer.models import Command, Flashcard
from cardtrainer.persistence import load_cards, save_cards
from cardtrainer.cli.console_io import TrainerConsole
from cardtrainer.cli.quiz_ui import run_quiz

logger = logging.getLogger(__name__)


@dataclass
class TrainerConfig:
    """Files used when the session starts and ends."""

    import_from: Optional[Path] = None
    export_to: Optional[Path] = None


class Trainer:
    """
    Reads actions from the user and applies them to the deck until `exit`.

    Unknown actions are ignored and the action prompt is shown again.
    Fatal errors (TrainerError) propagate out of `run`.
    """

    def __init__(
        self,
        config: Optional[TrainerConfig] = None,
        io: Optional[TrainerConsole] = None,
        deck: Optional[Deck] = None,
    ):
        self.config = config or TrainerConfig()
        self.io = io or TrainerConsole()
        self.deck = deck if deck is not None else Deck()
        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.ADD: self.add,
            Command.REMOVE: self.remove,
            Command.IMPORT: self.import_cards,
            Command.EXPORT: self.export_cards,
            Command.ASK: self.ask,
            Command.LOG: self.save_log,
            Command.HARDEST_CARD: self.hardest_card,
            Command.RESET_STATS: self.reset_stats,
            Command.EXIT: self.exit,
        }
        self._running = False

    # -- session ------------------------------------------------------------

    def run(self) -> None:
        """
        Load the startup file (if any) and process actions until `exit`.

        End of input stops the loop without the shutdown export.
        """
        if self.config.import_from is not None:
            self.import_file(self.config.import_from)

        self._running = True
        try:
            while self._running:
                self.io.say(messages.ACTION_PROMPT)
                command = Command.parse(self.io.read_line())
                if command is None:
                    continue
                logger.debug(f"Dispatching action '{command.value}'")
                self._handlers[command]()
        except EOFError:
            logger.info("Input closed, ending session")
            self._running = False

    def exit(self) -> None:
        if self.config.export_to is not None:
            self.export_file(self.config.export_to)
        self.io.say(messages.FAREWELL)
        self._running = False

    # -- card editing -------------------------------------------------------

    def _read_side(self, definition: bool) -> str:
        """Prompt until the entered term/definition is not already in use."""
        self.io.say(
            messages.DEFINITION_PROMPT if definition else messages.TERM_PROMPT
        )
        side = "definition" if definition else "card"
        while True:
            text = self.io.read_line()
            found, _ = self.deck.contains(text, definition=definition)
            if not found:
                return text
            self.io.say(messages.DUPLICATE_TEMPLATE, side=side, text=text)

    def add(self) -> None:
        term = self._read_side(definition=False)
        definition = self._read_side(definition=True)
        self.deck.add(Flashcard(term=term, definition=definition))
        self.io.say(
            messages.PAIR_ADDED_TEMPLATE, term=term, definition=definition
        )

    def remove(self) -> None:
        self.io.say(messages.REMOVE_PROMPT)
        term = self.io.read_line()
        if self.deck.remove(term):
            self.io.say(messages.CARD_REMOVED)
        else:
            self.io.say(messages.REMOVE_MISSING_TEMPLATE, term=term)

    # -- files --------------------------------------------------------------

    def _read_file_name(self) -> Path:
        self.io.say(messages.FILE_NAME_PROMPT)
        return Path(self.io.read_line())

    def import_file(self, path: Path) -> None:
        """
        Merge the cards of a card-list file into the deck.

        A missing file is reported and ignored; malformed content raises
        CardListFormatError.
        """
        cards = load_cards(path)
        if cards is None:
            self.io.say(messages.FILE_NOT_FOUND)
            return
        self.io.say(messages.CARDS_LOADED_TEMPLATE, count=len(cards))
        self.deck.update(cards)

    def export_file(self, path: Path) -> None:
        count = save_cards(path, self.deck.cards)
        self.io.say(messages.CARDS_SAVED_TEMPLATE, count=count)

    def import_cards(self) -> None:
        self.import_file(self._read_file_name())

    def export_cards(self) -> None:
        self.export_file(self._read_file_name())

    def save_log(self) -> None:
        self.io.session_log.flush(self._read_file_name())
        self.io.say(messages.LOG_SAVED)

    # -- statistics ---------------------------------------------------------

    def ask(self) -> None:
        run_quiz(self.io, self.deck)

    def hardest_card(self) -> None:
        mistakes, cards = self.deck.hardest()
        self.io.say(messages.format_hardest_report(mistakes, cards))

    def reset_stats(self) -> None:
        self.deck.reset()
        self.io.say(messages.STATS_RESET)
