"""
layout.py - Bus layout schema v1.0

Bus Seating Layout
Defines deck grids and the one- or two-deck bus layout built from them.
"""

from dataclasses import dataclass, field, replace
from typing import List, Dict, Optional, Any, Tuple
from enum import Enum
import logging

from buslayout.schema.seat import CellType, Seat, Position

__all__ = [
    'DeckType',
    'DeckShape',
    'Deck',
    'BusLayout',
    'DEFAULT_DECK_SHAPE',
    'MAX_DECKS',
]

logger = logging.getLogger(__name__)

MAX_DECKS = 2


# =============================================================================
# DECK TYPE
# =============================================================================

class DeckType(Enum):
    """Physical seating class of a deck. Descriptive only."""

    LEITO = "LEITO"
    SEMICAMA = "SEMICAMA"
    CAMA = "CAMA"
    MIXTO = "MIXTO"
    SUIT_CAMA = "suit_cama"

    @classmethod
    def selectable(cls) -> List["DeckType"]:
        """Classes offered in the layout editor."""
        return [cls.LEITO, cls.SEMICAMA, cls.CAMA, cls.MIXTO]

    @classmethod
    def parse(cls, value: Any) -> "DeckType":
        """Resolve a wire value or member name, ignoring case."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown deck type: {value!r}")


# =============================================================================
# DECK SHAPE
# =============================================================================

@dataclass(frozen=True)
class DeckShape:
    """
    Dimensions and class used when a deck is synthesized from scratch.

    Attributes:
        rows: Row count of the new grid
        columns: Column count of the new grid
        deck_type: Seating class of the new deck
    """

    rows: int = 10
    columns: int = 4
    deck_type: DeckType = DeckType.SEMICAMA


DEFAULT_DECK_SHAPE = DeckShape()


# =============================================================================
# DECK
# =============================================================================

@dataclass(frozen=True)
class Deck:
    """
    One floor of a bus as a row x column grid of cells.

    A well-formed deck holds exactly one seat per (row, column) within
    its dimensions. Seats are kept in row-major order when produced by
    the engine; loaded decks keep the order they arrived in.

    Attributes:
        deck_number: 1 (lower) or 2 (upper)
        deck_type: Seating class
        row_count: Number of rows
        column_count: Number of columns
        seats: All cells of the grid
    """

    deck_number: int
    deck_type: DeckType = DeckType.SEMICAMA
    row_count: int = 1
    column_count: int = 1
    seats: Tuple[Seat, ...] = ()

    _index: Dict[Position, Seat] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Build the position index."""
        if not isinstance(self.seats, tuple):
            object.__setattr__(self, "seats", tuple(self.seats))
        index: Dict[Position, Seat] = {}
        for seat in self.seats:
            if seat.position in index:
                logger.warning(
                    f"Deck {self.deck_number}: duplicate cell at {seat.position}"
                )
            index[seat.position] = seat
        object.__setattr__(self, "_index", index)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_seat(self, row: int, column: int) -> Optional[Seat]:
        """Get the cell at a position, or None if absent."""
        return self._index.get((row, column))

    def has_position(self, row: int, column: int) -> bool:
        return (row, column) in self._index

    def in_bounds(self, row: int, column: int) -> bool:
        """Whether a coordinate lies inside the deck dimensions."""
        return 1 <= row <= self.row_count and 1 <= column <= self.column_count

    @property
    def cell_count(self) -> int:
        return len(self.seats)

    def with_seat(self, seat: Seat) -> "Deck":
        """Return a copy with the cell at seat.position replaced."""
        seats = tuple(
            seat if s.position == seat.position else s
            for s in self.seats
        )
        return replace(self, seats=seats)

    @classmethod
    def empty(
        cls,
        deck_number: int,
        deck_type: DeckType = DeckType.SEMICAMA,
        rows: int = DEFAULT_DECK_SHAPE.rows,
        columns: int = DEFAULT_DECK_SHAPE.columns,
    ) -> "Deck":
        """Create a deck whose every cell is SPACE."""
        seats = tuple(
            Seat.space(row, column)
            for row in range(1, rows + 1)
            for column in range(1, columns + 1)
        )
        return cls(
            deck_number=deck_number,
            deck_type=deck_type,
            row_count=rows,
            column_count=columns,
            seats=seats,
        )

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the editor shape (includes dimensions)."""
        return {
            "deck": self.deck_number,
            "deckType": self.deck_type.value,
            "rows": self.row_count,
            "columns": self.column_count,
            "seats": [s.to_dict() for s in self.seats],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        """
        Deserialize from the editor or persisted shape.

        Persisted decks carry no dimensions; they are rebuilt from the
        row/column extents of the seat collection.
        """
        seats = [Seat.from_dict(s) for s in data.get("seats", [])]
        rows = data.get("rows", data.get("rowCount"))
        columns = data.get("columns", data.get("columnCount"))
        if rows is None:
            rows = max((s.row for s in seats), default=1)
        if columns is None:
            columns = max((s.column for s in seats), default=1)

        return cls(
            deck_number=int(data.get("deck", data.get("deckNumber", 1))),
            deck_type=DeckType.parse(data.get("deckType", DeckType.SEMICAMA)),
            row_count=max(int(rows), 1),
            column_count=max(int(columns), 1),
            seats=tuple(seats),
        )


# =============================================================================
# BUS LAYOUT
# =============================================================================

@dataclass(frozen=True)
class BusLayout:
    """
    Seating layout of a bus: one or two decks numbered from 1.

    Attributes:
        decks: Decks in deck-number order
        name: Bus type name shown to operators (e.g. "Ejecutivo")
    """

    decks: Tuple[Deck, ...]
    name: str = ""

    def __post_init__(self):
        if not isinstance(self.decks, tuple):
            object.__setattr__(self, "decks", tuple(self.decks))

    @property
    def deck_count(self) -> int:
        return len(self.decks)

    def get_deck(self, deck_number: int) -> Optional[Deck]:
        """Get a deck by its number."""
        for deck in self.decks:
            if deck.deck_number == deck_number:
                return deck
        return None

    def replace_deck(self, deck: Deck) -> "BusLayout":
        """Return a copy with the deck of the same number swapped in."""
        decks = tuple(
            deck if d.deck_number == deck.deck_number else d
            for d in self.decks
        )
        return replace(self, decks=decks)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the editor shape."""
        return {
            "name": self.name,
            "decks": [d.to_dict() for d in self.decks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BusLayout":
        """Deserialize from the editor shape or a persisted bus type."""
        decks = sorted(
            (Deck.from_dict(d) for d in data.get("decks", [])),
            key=lambda d: d.deck_number,
        )
        return cls(decks=tuple(decks), name=data.get("name", "") or "")

    @classmethod
    def create_empty(
        cls,
        name: str = "",
        shape: DeckShape = DEFAULT_DECK_SHAPE,
    ) -> "BusLayout":
        """Create a single-deck layout with every cell SPACE."""
        deck = Deck.empty(1, shape.deck_type, shape.rows, shape.columns)
        return cls(decks=(deck,), name=name)
