"""
integration - Host-side integration for the layout engine.

Provides editing sessions and bus service payload conversion.
"""

from buslayout.integration.payload import (
    load_layout,
    build_deck_payload,
    build_bus_type_payload,
    build_submission_payload,
)
from buslayout.integration.session_store import (
    LayoutSessionError,
    SessionNotFoundError,
    SessionVersion,
    LayoutSession,
    LayoutSessionStore,
)

__all__ = [
    'load_layout',
    'build_deck_payload',
    'build_bus_type_payload',
    'build_submission_payload',
    'LayoutSessionError',
    'SessionNotFoundError',
    'SessionVersion',
    'LayoutSession',
    'LayoutSessionStore',
]
