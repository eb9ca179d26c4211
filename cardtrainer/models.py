"""
Data models for the card trainer: the flashcard itself, the command
vocabulary of the interactive loop and the outcome of a quiz round.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Flashcard(BaseModel):
    """
    A term/definition pair with its mistake counter.

    Aliases carry the card-list file names (`Term`, `Definition`,
    `Mistakes`); declaration order is the field order on disk. Values are
    validated strictly: `"3"`, `true` or `2.0` are not a mistake count.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra="ignore",
        strict=True,
    )

    term: str = Field(
        default="",
        alias="Term",
        description="Front of the card, unique within a deck.",
    )
    definition: str = Field(
        default="",
        alias="Definition",
        description="Expected answer, unique within a deck.",
    )
    mistakes: int = Field(
        default=0,
        ge=0,
        alias="Mistakes",
        description="Number of wrong answers given for this card.",
    )


CARD_LIST_ADAPTER: TypeAdapter[Optional[List[Flashcard]]] = TypeAdapter(
    Optional[List[Flashcard]]
)


class Command(str, Enum):
    """
    The actions accepted at the main prompt.
    """

    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    LOG = "log"
    HARDEST_CARD = "hardest card"
    RESET_STATS = "reset stats"
    EXIT = "exit"

    @classmethod
    def parse(cls, text: str) -> Optional[Command]:
        """Decode an input line; exact and case-sensitive, None if unknown."""
        try:
            return cls(text)
        except ValueError:
            return None


class AnswerVerdict(Enum):
    """
    Outcome of comparing a typed answer with a card's definition.
    """

    CORRECT = "correct"
    WRONG_CARD = "wrong_card"
    WRONG = "wrong"
