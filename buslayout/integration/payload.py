"""
payload.py - Bus service payload conversion v1.0

Bus Seating Layout
Converts between persisted bus records and layout values, and builds the
create/update request bodies the bus service accepts. Deck dimensions are
not submitted; the service rebuilds them from the seat extents.
"""

from typing import Dict, Optional, Any
import logging

from buslayout.schema.layout import BusLayout, Deck

__all__ = [
    'load_layout',
    'build_deck_payload',
    'build_bus_type_payload',
    'build_submission_payload',
]

logger = logging.getLogger(__name__)


def load_layout(record: Dict[str, Any]) -> BusLayout:
    """
    Build a layout from a persisted bus or bus type.

    Accepts a full bus record (decks under "busType") or a bus type
    ({"name", "decks"}). The data is trusted and not validated.

    Args:
        record: Bus or bus type as returned by the bus service

    Returns:
        BusLayout with dimensions rebuilt from seat extents
    """
    bus_type = record.get("busType", record) or {}
    layout = BusLayout.from_dict(bus_type)
    logger.debug(f"Loaded layout {layout.name!r} with {layout.deck_count} deck(s)")
    return layout


def build_deck_payload(deck: Deck) -> Dict[str, Any]:
    """Submission shape of one deck."""
    return {
        "deck": deck.deck_number,
        "deckType": deck.deck_type.value,
        "seats": [s.to_dict() for s in deck.seats],
    }


def build_bus_type_payload(layout: BusLayout) -> Dict[str, Any]:
    """Submission shape of the bus type (name plus decks)."""
    return {
        "name": layout.name,
        "decks": [build_deck_payload(d) for d in layout.decks],
    }


def build_submission_payload(
    layout: BusLayout,
    bus_fields: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create or update request body for a bus.

    The descriptive fields (name, plaque, brand, images, owner, ...) are
    passed through untouched; the layout goes under "busType".
    """
    payload = dict(bus_fields or {})
    payload["busType"] = build_bus_type_payload(layout)
    return payload
