"""
validation.py - Bus layout validation v1.0

Bus Seating Layout
Advisory checks over deck grids. Nothing here rejects or repairs a layout;
issues are reported so the host can decide what to surface.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from collections import Counter
from enum import Enum
import logging

from buslayout.schema.seat import CellType
from buslayout.schema.layout import Deck, BusLayout, MAX_DECKS

__all__ = [
    'ValidationSeverity',
    'ValidationIssue',
    'ValidationResult',
    'validate_deck',
    'validate_layout',
]

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================

class ValidationSeverity(Enum):
    """Severity levels for validation issues."""

    ERROR = "error"         # Structural invariant broken
    WARNING = "warning"     # Data-quality concern, layout still usable
    INFO = "info"           # Advisory


# =============================================================================
# VALIDATION ISSUE
# =============================================================================

@dataclass
class ValidationIssue:
    """
    A single finding against a layout.

    Attributes:
        code: Stable machine-readable identifier
        severity: Severity level
        message: Human-readable description
        deck_number: Affected deck (if applicable)
        row: Affected row (if applicable)
        column: Affected column (if applicable)
    """

    code: str
    severity: ValidationSeverity
    message: str
    deck_number: Optional[int] = None
    row: Optional[int] = None
    column: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "code": self.code,
            "severity": self.severity.value,
            "message": self.message,
            "deck_number": self.deck_number,
            "row": self.row,
            "column": self.column,
        }


# =============================================================================
# VALIDATION RESULT
# =============================================================================

@dataclass
class ValidationResult:
    """Collected issues for a deck or layout."""

    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no ERROR issues were found."""
        return self.errors_count == 0

    @property
    def errors_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warnings_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    def add(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def merge(self, other: "ValidationResult") -> None:
        """Append all issues from another result."""
        self.issues.extend(other.issues)

    def by_code(self, code: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.code == code]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "is_valid": self.is_valid,
            "errors_count": self.errors_count,
            "warnings_count": self.warnings_count,
            "issues": [i.to_dict() for i in self.issues],
        }


# =============================================================================
# DECK CHECKS
# =============================================================================

def validate_deck(deck: Deck) -> ValidationResult:
    """
    Check one deck for grid completeness and numbering consistency.

    Duplicate seat numbers are reported as warnings only: the editor
    derives numbers from the live seat count and lets operators rename
    freely, so repeats are possible and currently accepted.

    Args:
        deck: Deck to check

    Returns:
        ValidationResult with every finding
    """
    result = ValidationResult()
    n = deck.deck_number

    if deck.row_count < 1 or deck.column_count < 1:
        result.add(ValidationIssue(
            code="invalid_dimensions",
            severity=ValidationSeverity.ERROR,
            message=f"Deck {n} has dimensions {deck.row_count}x{deck.column_count}",
            deck_number=n,
        ))

    # Completeness
    positions = Counter(s.position for s in deck.seats)
    for (row, column), count in sorted(positions.items()):
        if count > 1:
            result.add(ValidationIssue(
                code="duplicate_cell",
                severity=ValidationSeverity.ERROR,
                message=f"Deck {n} has {count} cells at row {row}, column {column}",
                deck_number=n, row=row, column=column,
            ))
        if not deck.in_bounds(row, column):
            result.add(ValidationIssue(
                code="out_of_range_cell",
                severity=ValidationSeverity.ERROR,
                message=f"Deck {n} has a cell outside its grid at row {row}, column {column}",
                deck_number=n, row=row, column=column,
            ))

    for row in range(1, deck.row_count + 1):
        for column in range(1, deck.column_count + 1):
            if (row, column) not in positions:
                result.add(ValidationIssue(
                    code="missing_cell",
                    severity=ValidationSeverity.ERROR,
                    message=f"Deck {n} is missing the cell at row {row}, column {column}",
                    deck_number=n, row=row, column=column,
                ))

    # Type / number correlation
    for seat in deck.seats:
        if seat.type == CellType.SEAT and not seat.seat_number:
            result.add(ValidationIssue(
                code="unnumbered_seat",
                severity=ValidationSeverity.ERROR,
                message=f"Seat at row {seat.row}, column {seat.column} has no number",
                deck_number=n, row=seat.row, column=seat.column,
            ))
        elif seat.type != CellType.SEAT and seat.seat_number is not None:
            result.add(ValidationIssue(
                code="numbered_non_seat",
                severity=ValidationSeverity.ERROR,
                message=(
                    f"{seat.type.value.capitalize()} at row {seat.row}, "
                    f"column {seat.column} carries number {seat.seat_number!r}"
                ),
                deck_number=n, row=seat.row, column=seat.column,
            ))

    numbers = Counter(
        s.seat_number for s in deck.seats
        if s.type == CellType.SEAT and s.seat_number
    )
    for number, count in sorted(numbers.items()):
        if count > 1:
            result.add(ValidationIssue(
                code="duplicate_seat_number",
                severity=ValidationSeverity.WARNING,
                message=f"Seat number {number!r} is used {count} times on deck {n}",
                deck_number=n,
            ))

    if not any(s.type == CellType.SEAT for s in deck.seats):
        result.add(ValidationIssue(
            code="no_seats",
            severity=ValidationSeverity.INFO,
            message=f"Deck {n} has no seats",
            deck_number=n,
        ))

    return result


# =============================================================================
# LAYOUT CHECKS
# =============================================================================

def validate_layout(layout: BusLayout) -> ValidationResult:
    """Check every deck plus the deck count and numbering."""
    result = ValidationResult()

    if not 1 <= layout.deck_count <= MAX_DECKS:
        result.add(ValidationIssue(
            code="invalid_deck_count",
            severity=ValidationSeverity.ERROR,
            message=f"Layout has {layout.deck_count} decks, expected 1 or {MAX_DECKS}",
        ))

    numbers = [d.deck_number for d in layout.decks]
    if numbers != list(range(1, len(numbers) + 1)):
        result.add(ValidationIssue(
            code="deck_numbering",
            severity=ValidationSeverity.ERROR,
            message=f"Decks must be numbered contiguously from 1, got {numbers}",
        ))

    for deck in layout.decks:
        result.merge(validate_deck(deck))

    if result.issues:
        logger.debug(
            f"Layout validation: {result.errors_count} errors, "
            f"{result.warnings_count} warnings"
        )
    return result
