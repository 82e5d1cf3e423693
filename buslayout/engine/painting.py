"""
painting.py - Cell painting and seat renaming v1.0

Bus Seating Layout
Tool-driven mutation of a single deck cell. The active tool is passed per
call; which tool is selected is the host's concern.

Seat numbers are derived from the live seat count at paint time, not from
a persisted sequence. Removing a seat and painting a new one can therefore
reuse a number that another seat still carries. Renames are not checked
for uniqueness either; see validate_deck() for the advisory report.
"""

from dataclasses import replace
import logging

from buslayout.schema.seat import CellType, Seat
from buslayout.schema.layout import Deck
from buslayout.engine.queries import seat_count

__all__ = [
    'next_seat_number',
    'paint_cell',
    'rename_seat',
]

logger = logging.getLogger(__name__)


def next_seat_number(deck: Deck) -> str:
    """Number a newly painted seat would receive."""
    return str(seat_count(deck) + 1)


def paint_cell(deck: Deck, row: int, column: int, tool: CellType) -> Deck:
    """
    Apply a design tool to one cell.

    Args:
        deck: Deck to edit
        row: 1-based row of the target cell
        column: 1-based column of the target cell
        tool: Cell type to paint

    Returns:
        New Deck, or the same deck when the position does not exist
    """
    current = deck.get_seat(row, column)
    if current is None:
        logger.debug(f"Deck {deck.deck_number}: no cell at ({row}, {column}), paint ignored")
        return deck

    if tool == CellType.SEAT:
        if current.type == CellType.SEAT:
            return deck
        painted = Seat(
            row=row,
            column=column,
            type=CellType.SEAT,
            seat_number=next_seat_number(deck),
        )
    else:
        painted = Seat(row=row, column=column, type=tool)

    logger.debug(
        f"Deck {deck.deck_number}: ({row}, {column}) "
        f"{current.type.value} -> {painted.type.value}"
    )
    return deck.with_seat(painted)


def rename_seat(deck: Deck, row: int, column: int, new_number: str) -> Deck:
    """
    Override the label of an existing seat.

    Non-seat or missing targets are ignored. The label is stored trimmed;
    rejecting blank input is left to the caller.
    """
    current = deck.get_seat(row, column)
    if current is None or current.type != CellType.SEAT:
        return deck

    label = str(new_number).strip()
    logger.debug(
        f"Deck {deck.deck_number}: seat {current.seat_number!r} renamed to {label!r}"
    )
    return deck.with_seat(replace(current, seat_number=label))
