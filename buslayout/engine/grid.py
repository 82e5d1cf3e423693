"""
grid.py - Deck grid reconciliation v1.0

Bus Seating Layout
Rebuilds a deck grid for new dimensions, carrying over every cell that is
still in bounds. Shrinking drops cells for good: growing back afterwards
yields SPACE at the dropped positions.
"""

from typing import Any
import logging
import re

from buslayout.schema.seat import Seat
from buslayout.schema.layout import Deck, DeckType, DEFAULT_DECK_SHAPE

__all__ = [
    'normalize_dimension',
    'create_deck',
    'resize_deck',
]

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_dimension(value: Any) -> int:
    """
    Coerce a row or column count to a positive integer.

    Numbers are truncated; text is read up to its first non-digit, so
    "6.5" and "6 rows" give 6. Empty, non-numeric and non-positive input
    becomes 1.
    """
    if isinstance(value, (int, float)):
        try:
            number = int(value)
        except (OverflowError, ValueError):
            return 1
    else:
        match = _LEADING_INT.match(str(value)) if value is not None else None
        if match is None:
            return 1
        number = int(match.group(1))
    return number if number >= 1 else 1


def create_deck(
    deck_number: int,
    deck_type: DeckType = DeckType.SEMICAMA,
    rows: int = DEFAULT_DECK_SHAPE.rows,
    columns: int = DEFAULT_DECK_SHAPE.columns,
) -> Deck:
    """Create a deck of the given size with every cell SPACE."""
    return Deck.empty(
        deck_number,
        deck_type,
        normalize_dimension(rows),
        normalize_dimension(columns),
    )


def resize_deck(deck: Deck, new_row_count: Any, new_column_count: Any) -> Deck:
    """
    Rebuild a deck grid for new dimensions.

    Every position inside the new bounds keeps the cell that was there
    (same type, same seat number); positions that did not exist become
    SPACE; positions outside the new bounds are dropped.

    Args:
        deck: Deck to resize
        new_row_count: Target rows (normalized to >= 1)
        new_column_count: Target columns (normalized to >= 1)

    Returns:
        New Deck with exactly rows x columns cells in row-major order
    """
    rows = normalize_dimension(new_row_count)
    columns = normalize_dimension(new_column_count)

    seats = []
    for row in range(1, rows + 1):
        for column in range(1, columns + 1):
            existing = deck.get_seat(row, column)
            seats.append(existing if existing is not None else Seat.space(row, column))

    logger.debug(
        f"Deck {deck.deck_number} resized "
        f"{deck.row_count}x{deck.column_count} -> {rows}x{columns}"
    )

    return Deck(
        deck_number=deck.deck_number,
        deck_type=deck.deck_type,
        row_count=rows,
        column_count=columns,
        seats=tuple(seats),
    )
