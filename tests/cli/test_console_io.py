"""
Unit tests for the cardtrainer.cli.console_io module.
"""

from unittest.mock import MagicMock

import pytest
from rich.console import Console

from cardtrainer.cli.console_io import TrainerConsole
from cardtrainer.exceptions import InvalidNumberError
from cardtrainer.session_log import SessionLog


def test_say_prints_and_records(scripted_console):
    tc = scripted_console()

    line = tc.say('The pair ("{term}":"{definition}") has been added.',
                  term="cat", definition="a feline")

    assert line == 'The pair ("cat":"a feline") has been added.'
    assert tc.console.file.getvalue() == line + "\n"
    assert tc.session_log.text == line + "\n"


def test_say_without_params_is_not_formatted(scripted_console):
    tc = scripted_console()
    tc.say("braces {stay} as typed")
    assert tc.console.file.getvalue() == "braces {stay} as typed\n"


def test_say_prints_markup_and_long_lines_verbatim(scripted_console):
    tc = scripted_console()
    text = "[bold]not bold[/bold] :smile: " + "x" * 200
    tc.say(text)
    assert tc.console.file.getvalue() == text + "\n"


def test_read_line_strips_whitespace(scripted_console):
    tc = scripted_console("  hello world \t")
    assert tc.read_line() == "hello world"


def test_read_line_end_of_input(scripted_console):
    tc = scripted_console()
    with pytest.raises(EOFError):
        tc.read_line()


def test_read_line_is_not_logged(scripted_console):
    tc = scripted_console("typed")
    tc.read_line()
    assert tc.session_log.text == ""


@pytest.mark.parametrize("text, number", [("3", 3), (" 12 ", 12), ("-1", -1), ("0", 0)])
def test_read_number(scripted_console, text, number):
    assert scripted_console(text).read_number() == number


@pytest.mark.parametrize("text", ["three", "", "1.5"])
def test_read_number_invalid(scripted_console, text):
    with pytest.raises(InvalidNumberError):
        scripted_console(text).read_number()


def test_uses_given_log_and_console():
    log = SessionLog()
    console = MagicMock(spec=Console)
    tc = TrainerConsole(session_log=log, console=console)

    tc.say("hi")

    console.file.write.assert_called_once_with("hi\n")
    assert log.text == "hi\n"


@pytest.mark.parametrize("term", ["a\tb", "a\rb", "bell\x07", "tab\tand\x08backspace"])
def test_console_matches_log_for_special_characters(scripted_console, term):
    tc = scripted_console()

    tc.say('Print the definition of "{term}":', term=term)

    assert tc.console.file.getvalue() == f'Print the definition of "{term}":\n'
    assert tc.console.file.getvalue() == tc.session_log.text
