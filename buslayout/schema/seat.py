"""
seat.py - Seat cell schema v1.0

Bus Seating Layout
Defines cell types and the positioned grid cell used by deck layouts.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Any, Tuple
from enum import Enum
import logging

__all__ = [
    'CellType',
    'Seat',
    'Position',
]

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# =============================================================================
# ENUMS
# =============================================================================

class CellType(Enum):
    """What occupies a single grid position on a deck."""

    SEAT = "seat"       # Passenger seat, carries a seat number
    AISLE = "aisle"     # Walkway
    SPACE = "space"     # Empty position (default)


# =============================================================================
# SEAT
# =============================================================================

@dataclass(frozen=True)
class Seat:
    """
    A single positioned cell of a deck grid.

    Attributes:
        row: 1-based row index
        column: 1-based column index
        type: Cell type
        seat_number: Human-facing label, only present for SEAT cells
    """

    row: int
    column: int
    type: CellType = CellType.SPACE
    seat_number: Optional[str] = None

    @property
    def position(self) -> Position:
        """Grid coordinate of this cell."""
        return (self.row, self.column)

    @property
    def is_seat(self) -> bool:
        return self.type == CellType.SEAT

    @classmethod
    def space(cls, row: int, column: int) -> "Seat":
        """Create an empty cell."""
        return cls(row=row, column=column, type=CellType.SPACE)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape used by the bus service."""
        data: Dict[str, Any] = {
            "row": self.row,
            "column": self.column,
            "type": self.type.value,
        }
        if self.seat_number is not None:
            data["seatNumber"] = self.seat_number
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Seat":
        """Deserialize from the wire shape."""
        seat_number = data.get("seatNumber", data.get("seat_number"))
        return cls(
            row=int(data["row"]),
            column=int(data["column"]),
            type=CellType(data.get("type", CellType.SPACE.value)),
            seat_number=str(seat_number) if seat_number is not None else None,
        )
