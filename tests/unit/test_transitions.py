"""
Unit tests for deck-count transitions.
"""

from buslayout.schema.seat import CellType
from buslayout.schema.layout import BusLayout, DeckShape, DeckType
from buslayout.engine.painting import paint_cell
from buslayout.engine.transitions import set_deck_count, DEFAULT_DECK_SHAPE


class TestSetDeckCount:
    """Tests for set_deck_count."""

    def test_same_count_returns_layout(self, single_deck_layout):
        assert set_deck_count(single_deck_layout, 1) is single_deck_layout

    def test_add_default_upper_deck(self, single_deck_layout):
        """Test deck 2 is a 10x4 SEMICAMA all-SPACE grid by default."""
        layout = set_deck_count(single_deck_layout, 2)
        upper = layout.get_deck(2)
        assert layout.deck_count == 2
        assert (upper.row_count, upper.column_count) == (10, 4)
        assert upper.deck_type == DeckType.SEMICAMA
        assert all(s.type == CellType.SPACE for s in upper.seats)
        assert layout.get_deck(1) is single_deck_layout.get_deck(1)

    def test_add_custom_shape(self, single_deck_layout):
        shape = DeckShape(rows=2, columns=3, deck_type=DeckType.LEITO)
        upper = set_deck_count(single_deck_layout, 2, shape).get_deck(2)
        assert (upper.row_count, upper.column_count) == (2, 3)
        assert upper.deck_type == DeckType.LEITO

    def test_remove_upper_deck(self, two_deck_layout):
        layout = set_deck_count(two_deck_layout, 1)
        assert layout.deck_count == 1
        assert layout.decks[0] == two_deck_layout.decks[0]
        assert layout.name == two_deck_layout.name

    def test_round_trip_is_lossy(self, two_deck_layout):
        """Test 2 -> 1 -> 2 yields a fresh empty deck 2."""
        layout = set_deck_count(set_deck_count(two_deck_layout, 1), 2)
        upper = layout.get_deck(2)
        assert upper != two_deck_layout.get_deck(2)
        assert all(s.type == CellType.SPACE for s in upper.seats)
        assert upper.cell_count == DEFAULT_DECK_SHAPE.rows * DEFAULT_DECK_SHAPE.columns

    def test_decks_are_independent(self, single_deck_layout):
        """Test edits to deck 2 never reach deck 1."""
        layout = set_deck_count(single_deck_layout, 2)
        upper = paint_cell(layout.get_deck(2), 1, 1, CellType.SEAT)
        layout = layout.replace_deck(upper)
        assert layout.get_deck(1) == single_deck_layout.get_deck(1)
        assert layout.get_deck(2).get_seat(1, 1).seat_number == "1"

    def test_input_untouched(self):
        layout = BusLayout.create_empty()
        set_deck_count(layout, 2)
        assert layout.deck_count == 1
