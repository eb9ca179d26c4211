"""
Reading and writing card-list files.

A card-list file is a JSON array of objects with the keys `Term`,
`Definition` and `Mistakes`, in that order, one object per card in deck
order.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .exceptions import CardListFormatError, CardListWriteError
from .models import CARD_LIST_ADAPTER, Flashcard

logger = logging.getLogger(__name__)


def load_cards(path: Path) -> Optional[List[Flashcard]]:
    """
    Read a card-list file.

    Parameters:
        path (Path): File to read.

    Returns:
        Optional[List[Flashcard]]: The cards in file order, or None if the
        file cannot be opened. A JSON `null` document yields an empty list.

    Raises:
        CardListFormatError: If the file was read but its content is not a
            valid card list.
    """
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        logger.info(f"Could not open card list {path}: {e}")
        return None

    try:
        cards = CARD_LIST_ADAPTER.validate_json(content)
    except ValidationError as e:
        logger.error(f"Invalid card list in {path}: {e}")
        raise CardListFormatError(
            f"Invalid card list in {path}: {e}", original_exception=e
        ) from e

    cards = cards or []
    logger.info(f"Loaded {len(cards)} cards from {path}")
    return cards


def save_cards(path: Path, cards: Sequence[Flashcard]) -> int:
    """
    Write the cards to `path` as a card-list file, replacing any existing
    file.

    Returns:
        int: Number of cards written.

    Raises:
        CardListWriteError: If the cards cannot be serialized or the file
            cannot be written.
    """
    try:
        data = CARD_LIST_ADAPTER.dump_json(list(cards), by_alias=True)
    except ValueError as e:
        raise CardListWriteError(
            f"Could not serialize cards: {e}", original_exception=e
        ) from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Could not write card list {path}: {e}")
        raise CardListWriteError(
            f"Could not write to file {path}: {e}", original_exception=e
        ) from e

    logger.info(f"Saved {len(cards)} cards to {path}")
    return len(cards)
