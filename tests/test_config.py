"""
Unit Tests for configuration, decorator and logging setup
=========================================================
"""

import logging
from unittest.mock import patch

import pytest
import structlog


class TestRetryConfig:
    """Tests for RetryConfig defaults and validation."""

    def test_defaults(self, monkeypatch):
        """Should fall back to built-in defaults."""
        from myhelpers.retry import RetryConfig

        monkeypatch.delenv("RETRY_COUNT", raising=False)
        monkeypatch.delenv("RETRY_INTERVAL_MS", raising=False)

        config = RetryConfig()

        assert config.retry_count == 3
        assert config.retry_interval_ms == 1000

    def test_environment_overrides(self, monkeypatch):
        """Should read defaults from the environment."""
        from myhelpers.retry import RetryConfig

        monkeypatch.setenv("RETRY_COUNT", "7")
        monkeypatch.setenv("RETRY_INTERVAL_MS", "25")

        config = RetryConfig()

        assert config.retry_count == 7
        assert config.retry_interval_ms == 25

    def test_explicit_values_win(self, monkeypatch):
        """Should prefer explicit arguments over the environment."""
        from myhelpers.retry import RetryConfig

        monkeypatch.setenv("RETRY_COUNT", "7")

        assert RetryConfig(retry_count=2).retry_count == 2

    @pytest.mark.parametrize("kwargs, argument", [
        ({"retry_count": -1}, "retry_count"),
        ({"retry_interval_ms": -5}, "retry_interval_ms"),
    ])
    def test_negative_values_rejected(self, kwargs, argument):
        """Should reject negative count or interval."""
        from myhelpers.retry import InvalidArgument, RetryConfig

        with pytest.raises(InvalidArgument) as exc_info:
            RetryConfig(**kwargs)

        assert exc_info.value.argument == argument

    @pytest.mark.parametrize("env_name, argument", [
        ("RETRY_COUNT", "retry_count"),
        ("RETRY_INTERVAL_MS", "retry_interval_ms"),
    ])
    def test_non_integer_environment_rejected(self, monkeypatch, env_name, argument):
        """Should report a non-integer environment value as InvalidArgument."""
        from myhelpers.retry import InvalidArgument, RetryConfig

        monkeypatch.setenv(env_name, "three")

        with pytest.raises(InvalidArgument) as exc_info:
            RetryConfig()

        assert exc_info.value.argument == argument
        assert "three" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestWithRetry:
    """Tests for the retry decorator."""

    def test_returns_value_after_failures(self):
        """Should retry the wrapped function and return its value."""
        from myhelpers.retry import with_retry

        calls = []

        @with_retry(retry_count=3, retry_interval_ms=0)
        def fetch_rates(currency):
            """Fetch rates."""
            calls.append(currency)
            if len(calls) < 2:
                raise TimeoutError("slow upstream")
            return {currency: 1.0}

        assert fetch_rates("EUR") == {"EUR": 1.0}
        assert calls == ["EUR", "EUR"]
        assert fetch_rates.__name__ == "fetch_rates"
        assert fetch_rates.__doc__ == "Fetch rates."

    def test_raises_when_exhausted(self):
        """Should raise RetryExhausted after the configured attempts."""
        from myhelpers.retry import RetryExhausted, with_retry

        calls = []

        @with_retry(retry_count=2, retry_interval_ms=0)
        def always_fail():
            calls.append(1)
            raise ValueError("Always fails")

        with pytest.raises(RetryExhausted) as exc_info:
            always_fail()

        assert exc_info.value.retry_count == 2
        assert len(calls) == 2

    def test_defaults_from_config(self, monkeypatch):
        """Should take missing values from RetryConfig."""
        from myhelpers.retry import RetryExhausted, with_retry

        monkeypatch.setenv("RETRY_COUNT", "4")
        monkeypatch.setenv("RETRY_INTERVAL_MS", "0")
        calls = []

        @with_retry()
        def always_fail():
            calls.append(1)
            raise ValueError("Always fails")

        with patch("myhelpers.retry.executor.time.sleep") as sleep:
            with pytest.raises(RetryExhausted):
                always_fail()

        assert len(calls) == 4
        sleep.assert_called_with(0.0)

    @pytest.mark.parametrize("bad_count, bad_interval", [
        ("-1", "-1"),
        ("lots", "soon"),
    ])
    def test_explicit_values_ignore_bad_environment(
        self, monkeypatch, bad_count, bad_interval
    ):
        """Should not read the environment when both values are given."""
        from myhelpers.retry import with_retry

        monkeypatch.setenv("RETRY_COUNT", bad_count)
        monkeypatch.setenv("RETRY_INTERVAL_MS", bad_interval)

        @with_retry(retry_count=2, retry_interval_ms=0)
        def answer():
            return 42

        assert answer() == 42

    def test_partial_values_still_validate_environment(self, monkeypatch):
        """Should reject a bad environment default it actually needs."""
        from myhelpers.retry import InvalidArgument, with_retry

        monkeypatch.delenv("RETRY_COUNT", raising=False)
        monkeypatch.setenv("RETRY_INTERVAL_MS", "-1")

        with pytest.raises(InvalidArgument) as exc_info:
            with_retry(retry_count=2)

        assert exc_info.value.argument == "retry_interval_ms"


class TestSetupLogging:
    """Tests for structlog configuration."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_sets_root_level(self):
        """Should apply the requested level to the root logger."""
        from myhelpers.logging_setup import setup_logging

        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG
        assert structlog.is_configured()

    def test_unknown_level_falls_back_to_info(self):
        """Should use INFO for an unknown level name."""
        from myhelpers.logging_setup import setup_logging

        setup_logging(level="chatty", json_output=True)

        assert logging.getLogger().level == logging.INFO

    def test_json_output(self, capsys):
        """Should render JSON lines when asked to."""
        from myhelpers.logging_setup import setup_logging

        logger = setup_logging(json_output=True)

        logger.info("service started", attempt=1)

        out = capsys.readouterr().out
        assert '"event": "service started"' in out
        assert '"attempt": 1' in out
