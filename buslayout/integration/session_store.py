"""
session_store.py - Layout editing sessions v1.0

Bus Seating Layout
Host-side owner of the layouts being edited. Each session holds the current
layout value, replaces it with the engine's result on every command and
tracks a version chain (update_id / prev_update_id) for the front end.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Any, List
from datetime import datetime, timezone
import hashlib
import json
import logging
import uuid

from buslayout.schema.seat import CellType
from buslayout.schema.layout import (
    BusLayout,
    Deck,
    DeckShape,
    DeckType,
    DEFAULT_DECK_SHAPE,
    MAX_DECKS,
)
from buslayout.schema.validation import ValidationResult, validate_layout
from buslayout.engine.grid import resize_deck
from buslayout.engine.painting import paint_cell, rename_seat
from buslayout.engine.transitions import set_deck_count
from buslayout.engine.queries import LayoutSummary, summarize_layout
from buslayout.integration.payload import build_submission_payload

__all__ = [
    'LayoutSessionError',
    'SessionNotFoundError',
    'SessionVersion',
    'LayoutSession',
    'LayoutSessionStore',
]

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class LayoutSessionError(Exception):
    """Error in layout session operations."""
    pass


class SessionNotFoundError(LayoutSessionError):
    """No session with the requested ID."""
    pass


# =============================================================================
# VERSION TRACKING
# =============================================================================

def _new_update_id() -> str:
    return f"UPD-{uuid.uuid4().hex[:8].upper()}"


@dataclass
class SessionVersion:
    """
    Version tracking for an editing session.

    Attributes:
        version: Version number (monotonically increasing)
        update_id: Unique ID for this update
        prev_update_id: Previous update ID for chain tracking
        timestamp: When this version was created
        description: What changed
    """

    version: int
    update_id: str
    prev_update_id: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "version": self.version,
            "update_id": self.update_id,
            "prev_update_id": self.prev_update_id,
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
        }

    @classmethod
    def create_initial(cls, description: str = "Session started") -> "SessionVersion":
        return cls(version=1, update_id=_new_update_id(), description=description)

    def create_next(self, description: str = "") -> "SessionVersion":
        """Create next version in chain."""
        return SessionVersion(
            version=self.version + 1,
            update_id=_new_update_id(),
            prev_update_id=self.update_id,
            description=description,
        )


# =============================================================================
# SESSION
# =============================================================================

@dataclass
class LayoutSession:
    """A layout being edited plus its version chain."""

    session_id: str
    layout: BusLayout
    version_info: SessionVersion
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def layout_hash(self) -> str:
        """Content hash of the current layout, for staleness checks."""
        content = json.dumps(self.layout.to_dict(), sort_keys=True)
        return hashlib.sha256(content.encode()).hexdigest()

    def get_version_info(self) -> Dict[str, Any]:
        return {
            "update_id": self.version_info.update_id,
            "prev_update_id": self.version_info.prev_update_id,
            "version": self.version_info.version,
            "layout_hash": self.layout_hash,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "version_info": self.version_info.to_dict(),
            "layout_hash": self.layout_hash,
            "layout": self.layout.to_dict(),
        }


# =============================================================================
# STORE
# =============================================================================

class LayoutSessionStore:
    """
    In-memory registry of editing sessions.

    Commands look up the session, run the matching engine operation and
    store the returned layout. A command the engine ignores (for example
    painting a position that does not exist) leaves the version unchanged.
    Unknown sessions and deck numbers raise LayoutSessionError; the engine
    itself never raises.
    """

    def __init__(self, deck_shape: DeckShape = DEFAULT_DECK_SHAPE):
        """
        Initialize the store.

        Args:
            deck_shape: Shape of new layouts and of an added deck 2
        """
        self.deck_shape = deck_shape
        self._sessions: Dict[str, LayoutSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    # -------------------------------------------------------------------------
    # Session Management
    # -------------------------------------------------------------------------

    def create_session(
        self,
        layout: Optional[BusLayout] = None,
        name: str = "",
    ) -> LayoutSession:
        """
        Start editing a layout.

        Args:
            layout: Loaded layout to edit; an empty one is created if None
            name: Bus type name for a new empty layout

        Returns:
            The new session

        Raises:
            LayoutSessionError: If the layout does not have 1 or 2 decks
                numbered from 1
        """
        if layout is None:
            layout = BusLayout.create_empty(name=name, shape=self.deck_shape)

        numbers = [d.deck_number for d in layout.decks]
        if not 1 <= len(numbers) <= MAX_DECKS or numbers != list(range(1, len(numbers) + 1)):
            logger.warning(f"Rejected layout with decks {numbers}")
            raise LayoutSessionError(
                f"Layout must have 1 to {MAX_DECKS} decks numbered from 1, got {numbers}"
            )

        session = LayoutSession(
            session_id=f"SESSION-{uuid.uuid4().hex[:8].upper()}",
            layout=layout,
            version_info=SessionVersion.create_initial(),
        )
        self._sessions[session.session_id] = session
        logger.info(
            f"Session {session.session_id} started "
            f"({layout.deck_count} deck(s), name={layout.name!r})"
        )
        return session

    def get_session(self, session_id: str) -> LayoutSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def get_layout(self, session_id: str) -> BusLayout:
        return self.get_session(session_id).layout

    def list_sessions(self) -> List[str]:
        return list(self._sessions)

    def delete_session(self, session_id: str) -> None:
        """Drop a session and its layout."""
        self.get_session(session_id)
        del self._sessions[session_id]
        logger.info(f"Session {session_id} closed")

    # -------------------------------------------------------------------------
    # Grid Commands
    # -------------------------------------------------------------------------

    def resize(self, session_id: str, deck_number: int, rows: int, columns: int) -> LayoutSession:
        """Resize one deck, keeping in-bounds cells."""
        session = self.get_session(session_id)
        deck = self._get_deck(session, deck_number)
        return self._commit(
            session,
            session.layout.replace_deck(resize_deck(deck, rows, columns)),
            f"Deck {deck_number} resized to {rows}x{columns}",
        )

    def paint(
        self,
        session_id: str,
        deck_number: int,
        row: int,
        column: int,
        tool: CellType,
    ) -> LayoutSession:
        """Paint one cell with the given tool."""
        session = self.get_session(session_id)
        deck = self._get_deck(session, deck_number)
        return self._commit(
            session,
            session.layout.replace_deck(paint_cell(deck, row, column, tool)),
            f"Deck {deck_number} ({row}, {column}) painted {tool.value}",
        )

    def rename(
        self,
        session_id: str,
        deck_number: int,
        row: int,
        column: int,
        new_number: str,
    ) -> LayoutSession:
        """Relabel a seat. Blank labels are rejected here, not by the engine."""
        if not str(new_number).strip():
            raise LayoutSessionError("Seat number cannot be blank")

        session = self.get_session(session_id)
        deck = self._get_deck(session, deck_number)
        return self._commit(
            session,
            session.layout.replace_deck(rename_seat(deck, row, column, new_number)),
            f"Deck {deck_number} ({row}, {column}) renamed",
        )

    def set_deck_count(self, session_id: str, count: int) -> LayoutSession:
        """Switch between one and two decks."""
        if count not in range(1, MAX_DECKS + 1):
            raise LayoutSessionError(f"Deck count must be 1 or {MAX_DECKS}, got {count}")

        session = self.get_session(session_id)
        return self._commit(
            session,
            set_deck_count(session.layout, count, self.deck_shape),
            f"Deck count set to {count}",
        )

    # -------------------------------------------------------------------------
    # Descriptive Fields
    # -------------------------------------------------------------------------

    def set_deck_type(self, session_id: str, deck_number: int, deck_type: DeckType) -> LayoutSession:
        """Change the seating class of a deck. The grid is not touched."""
        session = self.get_session(session_id)
        deck = self._get_deck(session, deck_number)
        return self._commit(
            session,
            session.layout.replace_deck(replace(deck, deck_type=deck_type)),
            f"Deck {deck_number} type set to {deck_type.value}",
        )

    def set_name(self, session_id: str, name: str) -> LayoutSession:
        session = self.get_session(session_id)
        return self._commit(
            session,
            replace(session.layout, name=name.strip()),
            "Bus type renamed",
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def summary(self, session_id: str) -> LayoutSummary:
        return summarize_layout(self.get_layout(session_id))

    def validate(self, session_id: str) -> ValidationResult:
        return validate_layout(self.get_layout(session_id))

    def payload(self, session_id: str, bus_fields: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Create/update request body for the bus service."""
        return build_submission_payload(self.get_layout(session_id), bus_fields)

    def get_version_info(self, session_id: str) -> Dict[str, Any]:
        return self.get_session(session_id).get_version_info()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _get_deck(self, session: LayoutSession, deck_number: int) -> Deck:
        deck = session.layout.get_deck(deck_number)
        if deck is None:
            logger.warning(f"Session {session.session_id}: deck {deck_number} not found")
            raise LayoutSessionError(
                f"Deck {deck_number} not found in session {session.session_id}"
            )
        return deck

    def _commit(self, session: LayoutSession, layout: BusLayout, description: str) -> LayoutSession:
        """Store a new layout value and advance the version if it changed."""
        if layout == session.layout:
            return session

        session.layout = layout
        session.version_info = session.version_info.create_next(description)
        logger.debug(
            f"Session {session.session_id} v{session.version_info.version}: {description}"
        )
        return session
