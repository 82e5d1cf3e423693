"""
api_endpoints.py - Bus layout REST API routes v1.0

Bus Seating Layout
FastAPI endpoints for editing a bus seating layout.

Endpoints:
- POST   /sessions                                   - Start editing a layout
- GET    /sessions/{session_id}                      - Current layout
- DELETE /sessions/{session_id}                      - Close a session
- POST   /sessions/{session_id}/decks/{n}/resize     - Resize a deck
- POST   /sessions/{session_id}/decks/{n}/paint      - Paint a cell
- POST   /sessions/{session_id}/decks/{n}/rename     - Rename a seat
- PUT    /sessions/{session_id}/decks/{n}/type       - Change deck class
- POST   /sessions/{session_id}/deck-count           - Switch 1/2 decks
- PUT    /sessions/{session_id}/name                 - Rename bus type
- GET    /sessions/{session_id}/summary              - Cell counts
- POST   /sessions/{session_id}/validate             - Advisory checks
- GET    /sessions/{session_id}/payload              - Submission body
"""

from typing import List, Dict, Optional, Any
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from buslayout.schema.seat import CellType
from buslayout.schema.layout import DeckType
from buslayout.engine.grid import normalize_dimension
from buslayout.integration.payload import load_layout
from buslayout.integration.session_store import (
    LayoutSession,
    LayoutSessionStore,
    LayoutSessionError,
    SessionNotFoundError,
)
from buslayout.engine.queries import summarize_layout

__all__ = [
    'create_layout_router',
    'CreateSessionRequest',
    'ResizeRequest',
    'PaintRequest',
    'RenameRequest',
    'DeckTypeRequest',
    'DeckCountRequest',
    'NameRequest',
    'SessionResponse',
    'SummaryResponse',
    'ValidationResponse',
]

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start editing a layout."""
    name: str = Field("", description="Bus type name for a new empty layout")
    record: Optional[Dict[str, Any]] = Field(
        None, description="Persisted bus or bus type to edit"
    )


class ResizeRequest(BaseModel):
    """Request to resize a deck. Counts below 1 become 1."""
    rows: int = Field(1, description="Row count")
    columns: int = Field(1, description="Column count")

    @field_validator("rows", "columns", mode="before")
    @classmethod
    def _coerce_dimension(cls, value: Any) -> int:
        return normalize_dimension(value)


class PaintRequest(BaseModel):
    """Request to paint one cell with a tool."""
    row: int
    column: int
    tool: CellType = Field(..., description="seat, aisle or space")


class RenameRequest(BaseModel):
    """Request to relabel a seat."""
    row: int
    column: int
    seat_number: str

    @field_validator("seat_number")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("seat number cannot be blank")
        return value


class DeckTypeRequest(BaseModel):
    """Request to change the seating class of a deck."""
    deck_type: str

    @field_validator("deck_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        return DeckType.parse(value).value


class DeckCountRequest(BaseModel):
    """Request to switch between one and two decks."""
    count: int = Field(..., ge=1, le=2)


class NameRequest(BaseModel):
    """Request to rename the bus type."""
    name: str


class SessionResponse(BaseModel):
    """Current state of an editing session."""
    session_id: str
    version: int
    update_id: str
    prev_update_id: Optional[str] = None
    layout_hash: str
    layout: Dict[str, Any]
    summary: Dict[str, Any]


class SummaryResponse(BaseModel):
    """Cell counts per deck and in total."""
    session_id: str
    deck_count: int
    total_seats: int
    total_aisles: int
    total_spaces: int
    decks: List[Dict[str, Any]]


class ValidationResponse(BaseModel):
    """Result of the advisory layout checks."""
    session_id: str
    is_valid: bool
    errors_count: int
    warnings_count: int
    issues: List[Dict[str, Any]]
    layout_hash: str
    version: int


class DeleteResponse(BaseModel):
    success: bool
    session_id: str


# =============================================================================
# HELPERS
# =============================================================================

def _session_response(session: LayoutSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        version=session.version_info.version,
        update_id=session.version_info.update_id,
        prev_update_id=session.version_info.prev_update_id,
        layout_hash=session.layout_hash,
        layout=session.layout.to_dict(),
        summary=summarize_layout(session.layout).to_dict(),
    )


def _to_http_error(error: LayoutSessionError) -> HTTPException:
    logger.warning(f"Layout request rejected: {error}")
    if isinstance(error, SessionNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))


# =============================================================================
# ROUTER FACTORY
# =============================================================================

def create_layout_router(store: Optional[LayoutSessionStore] = None) -> APIRouter:
    """
    Create FastAPI router for layout editing endpoints.

    Args:
        store: Session store to serve; a fresh one is created if None

    Returns:
        FastAPI APIRouter
    """
    if store is None:
        store = LayoutSessionStore()

    router = APIRouter(
        prefix="/api/v1/bus-layouts",
        tags=["bus-layouts"],
    )

    # =========================================================================
    # SESSION ENDPOINTS
    # =========================================================================

    @router.post("/sessions", response_model=SessionResponse, status_code=201)
    async def create_session(request: CreateSessionRequest) -> SessionResponse:
        """
        Start editing a layout.

        With a record, the persisted bus (or bus type) is loaded as-is;
        otherwise an empty single-deck layout is created. Records that
        cannot be read give 422, records without 1 or 2 decks give 400.
        """
        layout = None
        if request.record is not None:
            try:
                layout = load_layout(request.record)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Malformed layout record: {e!r}")
                raise HTTPException(status_code=422, detail=f"Malformed layout record: {e!r}")

        try:
            session = store.create_session(layout=layout, name=request.name)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.get("/sessions/{session_id}", response_model=SessionResponse)
    async def get_session(session_id: str) -> SessionResponse:
        try:
            return _session_response(store.get_session(session_id))
        except LayoutSessionError as e:
            raise _to_http_error(e)

    @router.delete("/sessions/{session_id}", response_model=DeleteResponse)
    async def delete_session(session_id: str) -> DeleteResponse:
        try:
            store.delete_session(session_id)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return DeleteResponse(success=True, session_id=session_id)

    # =========================================================================
    # GRID ENDPOINTS
    # =========================================================================

    @router.post("/sessions/{session_id}/decks/{deck_number}/resize", response_model=SessionResponse)
    async def resize_deck(session_id: str, deck_number: int, request: ResizeRequest) -> SessionResponse:
        """Resize a deck, keeping every cell still inside the new grid."""
        try:
            session = store.resize(session_id, deck_number, request.rows, request.columns)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.post("/sessions/{session_id}/decks/{deck_number}/paint", response_model=SessionResponse)
    async def paint_cell(session_id: str, deck_number: int, request: PaintRequest) -> SessionResponse:
        """Paint one cell; new seats are numbered from the current seat count."""
        try:
            session = store.paint(session_id, deck_number, request.row, request.column, request.tool)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.post("/sessions/{session_id}/decks/{deck_number}/rename", response_model=SessionResponse)
    async def rename_seat(session_id: str, deck_number: int, request: RenameRequest) -> SessionResponse:
        """Relabel a seat. Ignored when the cell is not a seat."""
        try:
            session = store.rename(
                session_id, deck_number, request.row, request.column, request.seat_number
            )
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.put("/sessions/{session_id}/decks/{deck_number}/type", response_model=SessionResponse)
    async def set_deck_type(session_id: str, deck_number: int, request: DeckTypeRequest) -> SessionResponse:
        try:
            session = store.set_deck_type(session_id, deck_number, DeckType.parse(request.deck_type))
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.post("/sessions/{session_id}/deck-count", response_model=SessionResponse)
    async def set_deck_count(session_id: str, request: DeckCountRequest) -> SessionResponse:
        """Switch between one and two decks. Dropping deck 2 discards it."""
        try:
            session = store.set_deck_count(session_id, request.count)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    @router.put("/sessions/{session_id}/name", response_model=SessionResponse)
    async def set_name(session_id: str, request: NameRequest) -> SessionResponse:
        try:
            session = store.set_name(session_id, request.name)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return _session_response(session)

    # =========================================================================
    # QUERY ENDPOINTS
    # =========================================================================

    @router.get("/sessions/{session_id}/summary", response_model=SummaryResponse)
    async def get_summary(session_id: str) -> SummaryResponse:
        try:
            summary = store.summary(session_id)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return SummaryResponse(session_id=session_id, **summary.to_dict())

    @router.post("/sessions/{session_id}/validate", response_model=ValidationResponse)
    async def validate_layout(session_id: str) -> ValidationResponse:
        """
        Run the advisory layout checks.

        Duplicate seat numbers come back as warnings; the layout is
        never modified.
        """
        try:
            result = store.validate(session_id)
            version_info = store.get_version_info(session_id)
        except LayoutSessionError as e:
            raise _to_http_error(e)

        return ValidationResponse(
            session_id=session_id,
            is_valid=result.is_valid,
            errors_count=result.errors_count,
            warnings_count=result.warnings_count,
            issues=[i.to_dict() for i in result.issues],
            layout_hash=version_info["layout_hash"],
            version=version_info["version"],
        )

    @router.get("/sessions/{session_id}/payload")
    async def get_payload(session_id: str) -> Dict[str, Any]:
        """Bus type body for the bus service create/update request."""
        try:
            payload = store.payload(session_id)
        except LayoutSessionError as e:
            raise _to_http_error(e)
        return payload["busType"]

    return router
