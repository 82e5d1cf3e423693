"""
engine - Bus seating-layout edit operations.

Pure functions from (layout value, command) to a new layout value:
- Grid reconciliation on resize
- Cell painting with seat numbering
- Seat renaming
- Deck-count transitions
- Aggregate counts
"""

from buslayout.engine.grid import (
    normalize_dimension,
    create_deck,
    resize_deck,
)
from buslayout.engine.queries import (
    count_cells,
    seat_count,
    aisle_count,
    space_count,
    layout_count,
    layout_seat_count,
    DeckSummary,
    LayoutSummary,
    summarize_deck,
    summarize_layout,
)
from buslayout.engine.painting import (
    next_seat_number,
    paint_cell,
    rename_seat,
)
from buslayout.engine.transitions import (
    DeckShape,
    DEFAULT_DECK_SHAPE,
    set_deck_count,
)

__all__ = [
    # Grid
    'normalize_dimension',
    'create_deck',
    'resize_deck',
    # Queries
    'count_cells',
    'seat_count',
    'aisle_count',
    'space_count',
    'layout_count',
    'layout_seat_count',
    'DeckSummary',
    'LayoutSummary',
    'summarize_deck',
    'summarize_layout',
    # Painting
    'next_seat_number',
    'paint_cell',
    'rename_seat',
    # Transitions
    'DeckShape',
    'DEFAULT_DECK_SHAPE',
    'set_deck_count',
]
