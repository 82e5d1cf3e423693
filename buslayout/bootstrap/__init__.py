"""
bootstrap/ - Bootstrap Layer

Provides configuration, logging setup and the API application factory.
"""

from .config import (
    BusLayoutConfig,
    EditorConfig,
    APIConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .app import (
    create_app,
    run_api,
)

from .entrypoints import (
    setup_logging,
    api_main,
    main,
)

__all__ = [
    # Config
    "BusLayoutConfig",
    "EditorConfig",
    "APIConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    # App
    "create_app",
    "run_api",
    # Entry points
    "setup_logging",
    "api_main",
    "main",
]
