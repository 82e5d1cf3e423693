"""
Unit tests for configuration loading.
"""

import json

import pytest

from buslayout.schema.layout import DeckType
from buslayout.bootstrap.config import (
    APIConfig,
    BusLayoutConfig,
    EditorConfig,
    LoggingConfig,
    load_config,
)


class TestDefaults:
    """Tests for default configuration values."""

    def test_editor_defaults(self):
        shape = EditorConfig().deck_shape()
        assert (shape.rows, shape.columns) == (10, 4)
        assert shape.deck_type == DeckType.SEMICAMA

    def test_api_defaults(self):
        api = APIConfig()
        assert api.port == 8000
        assert api.cors_origins == ["*"]

    def test_logging_defaults(self):
        assert LoggingConfig().level == "INFO"


class TestFromEnv:
    """Tests for environment variable overrides."""

    def test_editor_env(self, monkeypatch):
        monkeypatch.setenv("BUSLAYOUT_DEFAULT_ROWS", "12")
        monkeypatch.setenv("BUSLAYOUT_DEFAULT_DECK_TYPE", "cama")
        shape = EditorConfig.from_env().deck_shape()
        assert shape.rows == 12
        assert shape.deck_type == DeckType.CAMA

    def test_api_env(self, monkeypatch):
        monkeypatch.setenv("BUSLAYOUT_API_PORT", "9001")
        monkeypatch.setenv("BUSLAYOUT_API_CORS_ORIGINS", "http://a,http://b")
        api = APIConfig.from_env()
        assert api.port == 9001
        assert api.cors_origins == ["http://a", "http://b"]

    def test_debug_env(self, monkeypatch):
        monkeypatch.setenv("BUSLAYOUT_DEBUG", "true")
        assert BusLayoutConfig.from_env().debug is True

    def test_non_positive_rows_become_one(self):
        shape = EditorConfig(default_rows=0, default_columns=-2).deck_shape()
        assert (shape.rows, shape.columns) == (1, 1)


class TestFromFile:
    """Tests for JSON file loading."""

    def test_file_values(self, tmp_path):
        path = tmp_path / "buslayout.json"
        path.write_text(json.dumps({
            "environment": "production",
            "editor": {"default_rows": 8, "default_deck_type": "LEITO"},
            "api": {"port": 8080},
            "unknown": {"x": 1},
        }))
        config = BusLayoutConfig.from_file(str(path))
        assert config.environment == "production"
        assert config.editor.default_rows == 8
        assert config.editor.deck_shape().deck_type == DeckType.LEITO
        assert config.api.port == 8080

    def test_missing_file_uses_defaults(self, tmp_path):
        config = BusLayoutConfig.from_file(str(tmp_path / "nope.json"))
        assert config.environment == "development"

    def test_load_config_explicit_path(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))
        assert load_config(str(path)).logging.level == "DEBUG"

    def test_to_dict(self):
        data = BusLayoutConfig().to_dict()
        assert data["editor"]["default_rows"] == 10
        assert data["api"]["port"] == 8000
