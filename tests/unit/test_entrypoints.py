"""
Unit tests for logging setup and the API entry point.

uvicorn is patched out; no server is started.
"""

import json
import logging

import pytest

from buslayout.bootstrap import app as app_module
from buslayout.bootstrap.config import APIConfig, BusLayoutConfig
from buslayout.bootstrap.entrypoints import JSONFormatter, api_main, setup_logging


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def root_logger():
    """Root logger with its handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def uvicorn_calls(monkeypatch):
    """Record uvicorn.run keyword arguments instead of serving."""
    calls = []
    monkeypatch.setattr(app_module.uvicorn, "run", lambda app, **kw: calls.append(kw))
    return calls


def _added_handlers(root, before):
    return [h for h in root.handlers if h not in before]


# =============================================================================
# LOGGING
# =============================================================================

class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_handler(self, root_logger):
        before = list(root_logger.handlers)
        setup_logging(level="DEBUG")
        added = _added_handlers(root_logger, before)

        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert root_logger.level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, root_logger):
        setup_logging(level="chatty")
        assert root_logger.level == logging.INFO

    def test_file_handler_with_json(self, root_logger, tmp_path):
        """Test a log file gets its own handler sharing the JSON formatter."""
        log_file = tmp_path / "buslayout.log"
        before = list(root_logger.handlers)
        setup_logging(level="INFO", log_file=str(log_file), json_format=True)
        added = _added_handlers(root_logger, before)

        file_handlers = [h for h in added if isinstance(h, logging.FileHandler)]
        assert len(added) == 2
        assert len(file_handlers) == 1
        assert all(isinstance(h.formatter, JSONFormatter) for h in added)

        logging.getLogger("buslayout.test").info("seat painted")
        file_handlers[0].flush()
        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["message"] == "seat painted"
        assert record["level"] == "INFO"
        assert record["logger"] == "buslayout.test"

    def test_quiets_http_clients(self, root_logger):
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING


# =============================================================================
# SERVER
# =============================================================================

class TestRunApi:
    """Tests for run_api."""

    def test_single_worker(self, uvicorn_calls):
        """Test a configured worker count above 1 is not passed to uvicorn."""
        config = BusLayoutConfig(api=APIConfig(host="127.0.0.1", port=9000, workers=4))
        app_module.run_api(config)

        assert uvicorn_calls == [{"host": "127.0.0.1", "port": 9000, "workers": 1}]


class TestApiMain:
    """Tests for the command line entry point."""

    def test_cli_overrides(self, root_logger, uvicorn_calls, tmp_path):
        config_file = tmp_path / "buslayout.json"
        config_file.write_text(json.dumps({"api": {"port": 8100}}))

        api_main(["--config", str(config_file), "--host", "127.0.0.1", "--log-level", "WARNING"])

        assert uvicorn_calls[0]["host"] == "127.0.0.1"
        assert uvicorn_calls[0]["port"] == 8100
        assert root_logger.level == logging.WARNING
