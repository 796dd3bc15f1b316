"""Tests for infrastructure: logging and HTTP retry."""
import asyncio
import logging
import logging.handlers
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


# =============================================================================
# Retry utility tests
# =============================================================================


class TestHTTPRetry:
    """Test retry helpers in collectors/utils.py."""

    @pytest.mark.asyncio
    async def test_http_get_json_success(self):
        """Successful request returns JSON data."""
        from talent_agent.collectors.utils import http_get_json

        mock_resp = AsyncMock()
        mock_resp.status = 200
        mock_resp.json = AsyncMock(return_value={"jobs": []})

        mock_session = AsyncMock()
        mock_session.get = MagicMock(return_value=_async_context(mock_resp))

        result = await http_get_json(mock_session, "https://api.example.com/jobs")
        assert result == {"jobs": []}

    @pytest.mark.asyncio
    async def test_http_get_json_404_returns_none(self):
        """Non-retryable error returns None."""
        from talent_agent.collectors.utils import http_get_json

        mock_resp = AsyncMock()
        mock_resp.status = 404
        mock_resp.json = AsyncMock(return_value={})

        mock_session = AsyncMock()
        mock_session.get = MagicMock(return_value=_async_context(mock_resp))

        result = await http_get_json(mock_session, "https://api.example.com/jobs")
        assert result is None

    @pytest.mark.asyncio
    async def test_http_get_json_retries_on_500(self):
        """Server error triggers retry, then succeeds."""
        from talent_agent.collectors.utils import http_get_json

        error_resp = AsyncMock()
        error_resp.status = 500

        success_resp = AsyncMock()
        success_resp.status = 200
        success_resp.json = AsyncMock(return_value={"ok": True})

        responses = [error_resp, success_resp]

        mock_session = MagicMock()
        mock_session.get = MagicMock(side_effect=lambda *a, **kw: _async_context(responses.pop(0)))

        with patch("talent_agent.collectors.utils.asyncio.sleep", new=AsyncMock()):
            result = await http_get_json(mock_session, "https://api.example.com/jobs", retries=2)

        assert result == {"ok": True}
        assert mock_session.get.call_count == 2

    @pytest.mark.asyncio
    async def test_http_get_json_retries_on_timeout(self):
        """Timeout triggers retry."""
        from talent_agent.collectors.utils import http_get_json

        success_resp = AsyncMock()
        success_resp.status = 200
        success_resp.json = AsyncMock(return_value={"ok": True})

        calls = []

        def side_effect(*args, **kwargs):
            calls.append(args)
            if len(calls) == 1:
                return _async_context(None)  # Will raise timeout
            return _async_context(success_resp)

        mock_session = MagicMock()
        mock_session.get = MagicMock(side_effect=side_effect)

        with patch("talent_agent.collectors.utils.asyncio.sleep", new=AsyncMock()):
            result = await http_get_json(mock_session, "https://api.example.com/jobs", retries=2)

        assert result == {"ok": True}
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_http_get_json_gives_up(self):
        """Exhausted retries return None instead of raising."""
        from talent_agent.collectors.utils import http_get_json

        mock_session = MagicMock()
        mock_session.get = MagicMock(side_effect=lambda *a, **kw: _async_context(None))

        with patch("talent_agent.collectors.utils.asyncio.sleep", new=AsyncMock()):
            result = await http_get_json(mock_session, "https://api.example.com/jobs", retries=2)

        assert result is None

    @pytest.mark.asyncio
    async def test_http_get_json_rate_limited_until_exhausted(self):
        """Persistent 429s sleep between attempts, then give up with None."""
        from talent_agent.collectors.utils import http_get_json

        limited = AsyncMock()
        limited.status = 429

        mock_session = MagicMock()
        mock_session.get = MagicMock(side_effect=lambda *a, **kw: _async_context(limited))

        with patch("talent_agent.collectors.utils.asyncio.sleep", new=AsyncMock()) as mock_sleep:
            result = await http_get_json(mock_session, "https://api.example.com/jobs", retries=3)

        assert result is None
        assert mock_session.get.call_count == 3
        assert mock_sleep.await_count == 2


# =============================================================================
# Logging configuration tests
# =============================================================================


class TestLoggingConfig:
    """Test logging setup."""

    def test_resolve_level(self):
        """Level names are case-insensitive; unknown names fall back to INFO."""
        from talent_agent.logging_config import resolve_level

        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" Warning ") == logging.WARNING
        assert resolve_level(logging.ERROR) == logging.ERROR
        assert resolve_level("verbose") == logging.INFO
        assert resolve_level(None) == logging.INFO

    def test_setup_logging_configures_root_logger(self):
        """setup_logging should add handlers to root logger."""
        from talent_agent.logging_config import setup_logging

        root = logging.getLogger()
        original_handlers = root.handlers.copy()
        original_level = root.level
        root.handlers.clear()

        try:
            setup_logging(level="INFO")
            assert len(root.handlers) > 0
            assert any(
                isinstance(h, logging.StreamHandler) for h in root.handlers
            )
        finally:
            root.handlers = original_handlers
            root.setLevel(original_level)

    def test_setup_logging_idempotent(self):
        """Calling setup_logging twice should not add duplicate handlers."""
        from talent_agent.logging_config import setup_logging

        root = logging.getLogger()
        original_handlers = root.handlers.copy()
        original_level = root.level
        root.handlers.clear()

        try:
            setup_logging(level="INFO")
            count_after_first = len(root.handlers)
            setup_logging(level="INFO")
            count_after_second = len(root.handlers)
            assert count_after_first == count_after_second
        finally:
            root.handlers = original_handlers
            root.setLevel(original_level)

    def test_setup_logging_with_file(self, tmp_path):
        """setup_logging with log_file should add a file handler."""
        from talent_agent.logging_config import setup_logging

        root = logging.getLogger()
        original_handlers = root.handlers.copy()
        original_level = root.level
        root.handlers.clear()

        log_file = str(tmp_path / "logs" / "test.log")
        try:
            setup_logging(level="DEBUG", log_file=log_file)
            file_handlers = [
                h for h in root.handlers
                if isinstance(h, logging.handlers.RotatingFileHandler)
            ]
            assert file_handlers
            assert (tmp_path / "logs").is_dir()
        finally:
            for h in root.handlers:
                if h not in original_handlers:
                    h.close()
            root.handlers = original_handlers
            root.setLevel(original_level)


# =============================================================================
# Helpers
# =============================================================================


class _async_context:
    """Helper to create an async context manager from a mock response.

    A ``None`` response simulates a request timeout.
    """

    def __init__(self, resp):
        self.resp = resp

    async def __aenter__(self):
        if self.resp is None:
            raise asyncio.TimeoutError()
        return self.resp

    async def __aexit__(self, *args):
        pass
