"""
schema - Bus layout schema package.

Provides data models for seats, decks, layouts, and validation.
"""

from buslayout.schema.seat import (
    CellType,
    Seat,
    Position,
)
from buslayout.schema.layout import (
    DeckType,
    DeckShape,
    Deck,
    BusLayout,
    DEFAULT_DECK_SHAPE,
    MAX_DECKS,
)
from buslayout.schema.validation import (
    ValidationSeverity,
    ValidationIssue,
    ValidationResult,
    validate_deck,
    validate_layout,
)

__all__ = [
    # Cells
    'CellType',
    'Seat',
    'Position',
    # Layout
    'DeckType',
    'DeckShape',
    'Deck',
    'BusLayout',
    'DEFAULT_DECK_SHAPE',
    'MAX_DECKS',
    # Validation
    'ValidationSeverity',
    'ValidationIssue',
    'ValidationResult',
    'validate_deck',
    'validate_layout',
]
