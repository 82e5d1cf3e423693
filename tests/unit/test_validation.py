"""
Unit tests for layout validation.

Tests the advisory checks over deck grids and layouts.
"""

from buslayout.schema.seat import CellType, Seat
from buslayout.schema.layout import BusLayout, Deck
from buslayout.schema.validation import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_deck,
    validate_layout,
)
from buslayout.engine.painting import paint_cell, rename_seat


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert result.errors_count == 0

    def test_warning_keeps_valid(self):
        result = ValidationResult()
        result.add(ValidationIssue("x", ValidationSeverity.WARNING, "warn"))
        assert result.is_valid
        assert result.warnings_count == 1

    def test_error_invalidates(self):
        result = ValidationResult()
        result.add(ValidationIssue("x", ValidationSeverity.ERROR, "bad"))
        assert not result.is_valid

    def test_merge_and_to_dict(self):
        a = ValidationResult()
        b = ValidationResult()
        b.add(ValidationIssue("y", ValidationSeverity.INFO, "note", deck_number=1))
        a.merge(b)
        data = a.to_dict()
        assert data["issues"][0]["code"] == "y"
        assert data["issues"][0]["severity"] == "info"


class TestValidateDeck:
    """Tests for validate_deck."""

    def test_engine_output_is_valid(self, small_deck):
        deck = paint_cell(small_deck, 1, 1, CellType.SEAT)
        result = validate_deck(deck)
        assert result.is_valid
        assert result.issues == []

    def test_no_seats_is_info(self, small_deck):
        result = validate_deck(small_deck)
        assert result.is_valid
        assert len(result.by_code("no_seats")) == 1

    def test_missing_cell(self):
        deck = Deck(deck_number=1, row_count=1, column_count=2,
                    seats=(Seat(1, 1, CellType.SEAT, "1"),))
        issues = validate_deck(deck).by_code("missing_cell")
        assert [(i.row, i.column) for i in issues] == [(1, 2)]

    def test_out_of_range_cell(self):
        deck = Deck(deck_number=1, row_count=1, column_count=1,
                    seats=(Seat(1, 1, CellType.SEAT, "1"), Seat(2, 1)))
        assert len(validate_deck(deck).by_code("out_of_range_cell")) == 1

    def test_duplicate_cell(self):
        deck = Deck(deck_number=1, row_count=1, column_count=1,
                    seats=(Seat(1, 1), Seat(1, 1, CellType.AISLE)))
        result = validate_deck(deck)
        assert len(result.by_code("duplicate_cell")) == 1
        assert not result.is_valid

    def test_unnumbered_seat(self):
        deck = Deck(deck_number=1, row_count=1, column_count=1,
                    seats=(Seat(1, 1, CellType.SEAT),))
        assert len(validate_deck(deck).by_code("unnumbered_seat")) == 1

    def test_numbered_non_seat(self):
        deck = Deck(deck_number=1, row_count=1, column_count=1,
                    seats=(Seat(1, 1, CellType.AISLE, "3"),))
        assert len(validate_deck(deck).by_code("numbered_non_seat")) == 1

    def test_duplicate_seat_number_is_warning(self, small_deck):
        """Test repeated seat numbers are reported but allowed."""
        deck = paint_cell(small_deck, 1, 1, CellType.SEAT)
        deck = paint_cell(deck, 1, 2, CellType.SEAT)
        deck = rename_seat(deck, 1, 2, "1")
        result = validate_deck(deck)
        assert result.is_valid
        issues = result.by_code("duplicate_seat_number")
        assert len(issues) == 1
        assert issues[0].severity == ValidationSeverity.WARNING


class TestValidateLayout:
    """Tests for validate_layout."""

    def test_valid_two_decks(self, two_deck_layout):
        assert validate_layout(two_deck_layout).is_valid

    def test_too_many_decks(self):
        decks = tuple(Deck.empty(n, rows=1, columns=1) for n in (1, 2, 3))
        result = validate_layout(BusLayout(decks=decks))
        assert len(result.by_code("invalid_deck_count")) == 1

    def test_no_decks(self):
        result = validate_layout(BusLayout(decks=()))
        assert not result.is_valid

    def test_non_contiguous_numbering(self):
        layout = BusLayout(decks=(Deck.empty(2, rows=1, columns=1),))
        assert len(validate_layout(layout).by_code("deck_numbering")) == 1
