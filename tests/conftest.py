"""
Bus Layout Test Configuration and Fixtures

Provides ready-made decks, layouts, persisted records and session stores.
"""

import pytest
from typing import Any, Dict

from buslayout.schema.seat import CellType, Seat
from buslayout.schema.layout import BusLayout, Deck, DeckShape, DeckType
from buslayout.integration.session_store import LayoutSessionStore


def assert_complete(deck: Deck) -> None:
    """Every in-bounds position holds exactly one cell and nothing else exists."""
    positions = [s.position for s in deck.seats]
    expected = {
        (row, column)
        for row in range(1, deck.row_count + 1)
        for column in range(1, deck.column_count + 1)
    }
    assert len(positions) == len(set(positions))
    assert set(positions) == expected


def assert_numbering_consistent(deck: Deck) -> None:
    """Seat cells carry a number; other cells carry none."""
    for seat in deck.seats:
        if seat.type == CellType.SEAT:
            assert seat.seat_number
        else:
            assert seat.seat_number is None


@pytest.fixture
def empty_deck() -> Deck:
    """3x3 deck with every cell SPACE."""
    return Deck.empty(1, DeckType.SEMICAMA, rows=3, columns=3)


@pytest.fixture
def small_deck() -> Deck:
    """2x2 deck with every cell SPACE."""
    return Deck.empty(1, DeckType.CAMA, rows=2, columns=2)


@pytest.fixture
def single_deck_layout() -> BusLayout:
    """Default one-deck layout."""
    return BusLayout.create_empty(name="Ejecutivo")


@pytest.fixture
def two_deck_layout() -> BusLayout:
    """Two decks, the lower one with a couple of seats."""
    lower = Deck(
        deck_number=1,
        deck_type=DeckType.CAMA,
        row_count=2,
        column_count=2,
        seats=(
            Seat(1, 1, CellType.SEAT, "1"),
            Seat(1, 2, CellType.AISLE),
            Seat(2, 1, CellType.SEAT, "2"),
            Seat(2, 2, CellType.SPACE),
        ),
    )
    upper = Deck(
        deck_number=2,
        deck_type=DeckType.SEMICAMA,
        row_count=1,
        column_count=2,
        seats=(
            Seat(1, 1, CellType.SEAT, "A1"),
            Seat(1, 2, CellType.SEAT, "A2"),
        ),
    )
    return BusLayout(decks=(lower, upper), name="Doble piso")


@pytest.fixture
def bus_record() -> Dict[str, Any]:
    """Persisted bus as returned by the bus service."""
    return {
        "id": "bus-42",
        "name": "Bus 42",
        "plaque": "ABCD12",
        "busType": {
            "name": "Semi cama 40",
            "decks": [
                {
                    "deck": 2,
                    "deckType": "LEITO",
                    "seats": [
                        {"row": 1, "column": 1, "type": "seat", "seatNumber": "21"},
                    ],
                },
                {
                    "deck": 1,
                    "deckType": "SEMICAMA",
                    "seats": [
                        {"row": 1, "column": 1, "type": "seat", "seatNumber": "1"},
                        {"row": 1, "column": 2, "type": "aisle"},
                        {"row": 1, "column": 3, "type": "seat", "seatNumber": "2"},
                        {"row": 2, "column": 1, "type": "space"},
                        {"row": 2, "column": 2, "type": "aisle"},
                        {"row": 2, "column": 3, "type": "seat", "seatNumber": "3"},
                    ],
                },
            ],
        },
    }


@pytest.fixture
def store() -> LayoutSessionStore:
    """Session store creating 3x3 SEMICAMA decks."""
    return LayoutSessionStore(deck_shape=DeckShape(rows=3, columns=3))
