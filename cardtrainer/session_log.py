"""
Transcript of everything the trainer prints during a session.
"""

import logging
from pathlib import Path
from typing import List

from .exceptions import LogWriteError

logger = logging.getLogger(__name__)


class SessionLog:
    """
    Append-only, in-memory transcript of printed lines.

    Each recorded line is stored newline-terminated. Flushing writes the
    whole transcript and keeps it, so later flushes repeat earlier content.
    """

    def __init__(self):
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "".join(self._lines)

    def record(self, line: str) -> None:
        self._lines.append(line + "\n")

    def flush(self, path: Path) -> None:
        """
        Write the transcript to `path`, creating or truncating the file.

        Raises:
            LogWriteError: If the file cannot be created, written or closed.
        """
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.text)
        except OSError as e:
            logger.error(f"Could not write session log to {path}: {e}")
            raise LogWriteError(
                f"Could not write log to {path}: {e}", original_exception=e
            ) from e
        logger.info(f"Session log ({len(self._lines)} lines) written to {path}")
