from io import StringIO

import pytest
from rich.console import Console

from cardtrainer.models import Flashcard
from cardtrainer.deck import Deck
from cardtrainer.cli.console_io import TrainerConsole


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir,
    so relative file names typed at the prompts land there.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    with tmpdir.as_cwd():
        yield


@pytest.fixture
def cat_card() -> Flashcard:
    return Flashcard(term="cat", definition="a feline")


@pytest.fixture
def dog_card() -> Flashcard:
    return Flashcard(term="dog", definition="a canine")


@pytest.fixture
def deck(cat_card: Flashcard, dog_card: Flashcard) -> Deck:
    """A deck holding the cat and dog cards, in that order, no mistakes."""
    return Deck([cat_card, dog_card])


@pytest.fixture
def scripted_console(mocker):
    """
    Build a TrainerConsole that reads the given lines and prints into a
    string buffer.

    Once the scripted lines run out, reading raises EOFError like a closed
    stdin. The buffer is available as `trainer_console.console.file`.
    """

    def _make(*lines: str) -> TrainerConsole:
        feed = iter(lines)

        def _input(*args, **kwargs):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError from None

        console = Console(
            file=StringIO(),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        mocker.patch.object(console, "input", side_effect=_input)
        return TrainerConsole(console=console)

    return _make
