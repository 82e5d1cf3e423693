"""
transitions.py - Deck-count transitions v1.0

Bus Seating Layout
Switches a layout between one and two decks. Decks are independent grids,
so the transition only appends or drops deck 2.
"""

from dataclasses import replace
import logging

from buslayout.schema.layout import BusLayout, DeckShape, DEFAULT_DECK_SHAPE
from buslayout.engine.grid import create_deck

__all__ = [
    'DeckShape',
    'DEFAULT_DECK_SHAPE',
    'set_deck_count',
]

logger = logging.getLogger(__name__)


def set_deck_count(
    layout: BusLayout,
    target_count: int,
    shape: DeckShape = DEFAULT_DECK_SHAPE,
) -> BusLayout:
    """
    Move a layout to one or two decks.

    Going to one deck keeps deck 1 and discards deck 2 with all its cells.
    Going to two decks appends an all-SPACE deck 2 built from shape; deck 1
    is untouched. Only 1 and 2 are meaningful targets.

    Args:
        layout: Layout to change
        target_count: 1 or 2
        shape: Dimensions and class of a newly added deck 2

    Returns:
        New BusLayout, or the same layout when the count already matches
    """
    if target_count == layout.deck_count:
        return layout

    if target_count == 1:
        logger.debug("Deck 2 removed")
        return replace(layout, decks=layout.decks[:1])

    upper = create_deck(2, shape.deck_type, shape.rows, shape.columns)
    logger.debug(f"Deck 2 added ({upper.row_count}x{upper.column_count})")
    return replace(layout, decks=layout.decks[:1] + (upper,))
