"""
buslayout - Bus seating-layout configuration engine.

Schema, pure edit operations, editing sessions and the HTTP API for
designing the deck grids of a bus.
"""

from buslayout.schema import (
    CellType,
    Seat,
    DeckType,
    DeckShape,
    Deck,
    BusLayout,
    DEFAULT_DECK_SHAPE,
    MAX_DECKS,
)
from buslayout.engine import (
    resize_deck,
    paint_cell,
    rename_seat,
    set_deck_count,
    seat_count,
    aisle_count,
    summarize_layout,
)

__version__ = "1.0.0"

__all__ = [
    'CellType',
    'Seat',
    'DeckType',
    'DeckShape',
    'Deck',
    'BusLayout',
    'DEFAULT_DECK_SHAPE',
    'MAX_DECKS',
    'resize_deck',
    'paint_cell',
    'rename_seat',
    'set_deck_count',
    'seat_count',
    'aisle_count',
    'summarize_layout',
]
