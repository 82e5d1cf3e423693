"""
queries.py - Layout aggregate queries v1.0

Bus Seating Layout
Read-only counts over deck cells, used by summary views and when building
submission payloads.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from buslayout.schema.seat import CellType
from buslayout.schema.layout import Deck, BusLayout

__all__ = [
    'count_cells',
    'seat_count',
    'aisle_count',
    'space_count',
    'layout_seat_count',
    'layout_count',
    'DeckSummary',
    'LayoutSummary',
    'summarize_deck',
    'summarize_layout',
]


def count_cells(deck: Deck, cell_type: CellType) -> int:
    """Number of cells of one type on a deck."""
    return sum(1 for s in deck.seats if s.type == cell_type)


def seat_count(deck: Deck) -> int:
    return count_cells(deck, CellType.SEAT)


def aisle_count(deck: Deck) -> int:
    return count_cells(deck, CellType.AISLE)


def space_count(deck: Deck) -> int:
    return count_cells(deck, CellType.SPACE)


def layout_count(layout: BusLayout, cell_type: CellType) -> int:
    """Number of cells of one type across all decks."""
    return sum(count_cells(d, cell_type) for d in layout.decks)


def layout_seat_count(layout: BusLayout) -> int:
    return layout_count(layout, CellType.SEAT)


# =============================================================================
# SUMMARIES
# =============================================================================

@dataclass
class DeckSummary:
    """Counts for a single deck."""

    deck_number: int
    deck_type: str
    rows: int
    columns: int
    seats: int = 0
    aisles: int = 0
    spaces: int = 0

    @property
    def cells(self) -> int:
        return self.seats + self.aisles + self.spaces

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deck_number": self.deck_number,
            "deck_type": self.deck_type,
            "rows": self.rows,
            "columns": self.columns,
            "seats": self.seats,
            "aisles": self.aisles,
            "spaces": self.spaces,
            "cells": self.cells,
        }


@dataclass
class LayoutSummary:
    """Counts for every deck plus layout totals."""

    decks: List[DeckSummary] = field(default_factory=list)

    @property
    def deck_count(self) -> int:
        return len(self.decks)

    @property
    def total_seats(self) -> int:
        return sum(d.seats for d in self.decks)

    @property
    def total_aisles(self) -> int:
        return sum(d.aisles for d in self.decks)

    @property
    def total_spaces(self) -> int:
        return sum(d.spaces for d in self.decks)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deck_count": self.deck_count,
            "total_seats": self.total_seats,
            "total_aisles": self.total_aisles,
            "total_spaces": self.total_spaces,
            "decks": [d.to_dict() for d in self.decks],
        }


def summarize_deck(deck: Deck) -> DeckSummary:
    """Count every cell type on a deck in one pass."""
    summary = DeckSummary(
        deck_number=deck.deck_number,
        deck_type=deck.deck_type.value,
        rows=deck.row_count,
        columns=deck.column_count,
    )
    for seat in deck.seats:
        if seat.type == CellType.SEAT:
            summary.seats += 1
        elif seat.type == CellType.AISLE:
            summary.aisles += 1
        else:
            summary.spaces += 1
    return summary


def summarize_layout(layout: BusLayout) -> LayoutSummary:
    return LayoutSummary(decks=[summarize_deck(d) for d in layout.decks])
