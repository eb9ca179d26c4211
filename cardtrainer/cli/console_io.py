"""
Console input/output that keeps the session log in step with the screen.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from cardtrainer.exceptions import InvalidNumberError
from cardtrainer.session_log import SessionLog

logger = logging.getLogger(__name__)


def _plain_console() -> Console:
    """A rich Console with markup, emoji and highlighting turned off."""
    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


class TrainerConsole:
    """
    Line-oriented prompt/answer channel used by the trainer.

    Every printed line is recorded in the session log first, so the log is
    a faithful transcript of the console.
    """

    def __init__(
        self,
        session_log: Optional[SessionLog] = None,
        console: Optional[Console] = None,
    ):
        self.session_log = session_log if session_log is not None else SessionLog()
        self.console = console if console is not None else _plain_console()

    def say(self, template: str, **params: Any) -> str:
        """Format, record and print one line. Returns the printed text."""
        line = template.format(**params) if params else template
        self.session_log.record(line)
        self._write(line)
        return line

    def _write(self, line: str) -> None:
        # Console.print expands tabs and drops control codes; the screen must
        # show exactly what the session log records.
        out = self.console.file
        out.write(line + "\n")
        out.flush()

    def read_line(self) -> str:
        """
        Read one line from the user, stripped of surrounding whitespace.

        Raises:
            EOFError: If input is exhausted.
        """
        return self.console.input().strip()

    def read_number(self) -> int:
        """
        Read one line and parse it as an integer.

        Raises:
            InvalidNumberError: If the line is not an integer.
        """
        text = self.read_line()
        try:
            return int(text)
        except ValueError as e:
            logger.error(f"Expected an integer, got {text!r}")
            raise InvalidNumberError(
                f"Invalid number: {text!r}", original_exception=e
            ) from e
