"""
bootstrap/config.py - Application configuration v1.0

Bootstrap Layer

Provides configuration loading from files, environment variables, and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from pathlib import Path
import os
import json
import logging

from buslayout.schema.layout import DeckShape, DeckType, DEFAULT_DECK_SHAPE

logger = logging.getLogger("bootstrap.config")


@dataclass
class EditorConfig:
    """Defaults for newly created decks."""

    default_rows: int = DEFAULT_DECK_SHAPE.rows
    default_columns: int = DEFAULT_DECK_SHAPE.columns
    default_deck_type: str = DEFAULT_DECK_SHAPE.deck_type.value

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            default_rows=int(os.getenv("BUSLAYOUT_DEFAULT_ROWS", str(DEFAULT_DECK_SHAPE.rows))),
            default_columns=int(os.getenv("BUSLAYOUT_DEFAULT_COLUMNS", str(DEFAULT_DECK_SHAPE.columns))),
            default_deck_type=os.getenv("BUSLAYOUT_DEFAULT_DECK_TYPE", DEFAULT_DECK_SHAPE.deck_type.value),
        )

    def deck_shape(self) -> DeckShape:
        """Shape used for new layouts and an added second deck."""
        return DeckShape(
            rows=max(int(self.default_rows), 1),
            columns=max(int(self.default_columns), 1),
            deck_type=DeckType.parse(self.default_deck_type),
        )


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    enable_docs: bool = True
    docs_url: str = "/docs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "APIConfig":
        cors = os.getenv("BUSLAYOUT_API_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("BUSLAYOUT_API_HOST", "0.0.0.0"),
            port=int(os.getenv("BUSLAYOUT_API_PORT", "8000")),
            workers=int(os.getenv("BUSLAYOUT_API_WORKERS", "1")),
            enable_docs=os.getenv("BUSLAYOUT_API_ENABLE_DOCS", "true").lower() == "true",
            docs_url=os.getenv("BUSLAYOUT_API_DOCS_URL", "/docs"),
            cors_origins=cors.split(",") if cors else ["*"],
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("BUSLAYOUT_LOG_LEVEL", "INFO"),
            format=os.getenv("BUSLAYOUT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("BUSLAYOUT_LOG_FILE"),
            json_logs=os.getenv("BUSLAYOUT_JSON_LOGS", "false").lower() == "true",
        )


@dataclass
class BusLayoutConfig:
    """Root configuration for the layout service."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    editor: EditorConfig = field(default_factory=EditorConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "BusLayoutConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("BUSLAYOUT_ENVIRONMENT", "development"),
            debug=os.getenv("BUSLAYOUT_DEBUG", "false").lower() == "true",
            editor=EditorConfig.from_env(),
            api=APIConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "BusLayoutConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "BusLayoutConfig":
        """Create config from dictionary, file values over environment."""
        config = cls.from_env()

        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        for section in ("editor", "api", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "editor": {
                "default_rows": self.editor.default_rows,
                "default_columns": self.editor.default_columns,
                "default_deck_type": self.editor.default_deck_type,
            },
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "workers": self.api.workers,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
            },
        }


# Global config instance
_config: Optional[BusLayoutConfig] = None


def load_config(filepath: str = None) -> BusLayoutConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        BusLayoutConfig instance
    """
    global _config

    if filepath:
        _config = BusLayoutConfig.from_file(filepath)
    else:
        default_paths = [
            "./buslayout.json",
            "./config/buslayout.json",
            os.path.expanduser("~/.buslayout/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = BusLayoutConfig.from_file(path)
                return _config

        _config = BusLayoutConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> BusLayoutConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
