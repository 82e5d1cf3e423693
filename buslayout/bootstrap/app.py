"""
bootstrap/app.py - Application factory v1.0

Bootstrap Layer

Builds the FastAPI application serving the layout editing routes and runs
it under uvicorn.
"""

from __future__ import annotations
from typing import Optional
from datetime import datetime, timezone
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buslayout.api_endpoints import create_layout_router
from buslayout.integration.session_store import LayoutSessionStore
from .config import BusLayoutConfig, get_config

logger = logging.getLogger("bootstrap.app")


def create_app(
    config: Optional[BusLayoutConfig] = None,
    store: Optional[LayoutSessionStore] = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Configuration; the global config is used if None
        store: Session store; one is built from the editor defaults if None

    Returns:
        FastAPI application instance
    """
    config = config or get_config()
    if store is None:
        store = LayoutSessionStore(deck_shape=config.editor.deck_shape())

    app = FastAPI(
        title="Bus Layout API",
        description="Bus seating layout editor API",
        version=config.version,
        docs_url=config.api.docs_url if config.api.enable_docs else None,
        redoc_url="/redoc" if config.api.enable_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_layout_router(store))
    app.state.session_store = store

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": config.version,
            "sessions": len(store),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    logger.info(f"API created (environment={config.environment})")
    return app


def run_api(config: Optional[BusLayoutConfig] = None) -> None:
    """
    Run API server.

    Sessions live in process memory, so the server always runs a single
    worker; a configured worker count above 1 is ignored.
    """
    config = config or get_config()
    if config.api.workers != 1:
        logger.warning(
            f"Ignoring workers={config.api.workers}: sessions are in-memory, running 1 worker"
        )
    app = create_app(config)

    uvicorn.run(
        app,
        host=config.api.host,
        port=config.api.port,
        workers=1,
    )
