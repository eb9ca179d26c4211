from typing import Optional


class TrainerError(Exception):
    """Base exception for unrecoverable trainer errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class CardListFormatError(TrainerError):
    """Raised when a card-list file cannot be decoded."""

    pass


class CardListWriteError(TrainerError):
    """Raised when the card list cannot be serialized or written."""

    pass


class LogWriteError(TrainerError):
    """Raised when the session log cannot be written to disk."""

    pass


class InvalidNumberError(TrainerError):
    """Raised when an integer was expected but something else was typed."""

    pass


class EmptyDeckError(TrainerError):
    """Raised when a quiz is requested over a deck with no cards."""

    pass
