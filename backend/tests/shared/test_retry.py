"""Tests for shared/retry.py."""

from unittest.mock import MagicMock

import pytest

from shared.exceptions import SessionExpiredError
from shared.retry import RetryConfig, is_auth_error, with_auth_retry


class FakeError(Exception):
    def __init__(self, message="boom", code=None, status=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status


class TestIsAuthError:
    @pytest.mark.parametrize("error", [
        FakeError("JWT expired"),
        FakeError("invalid_token"),
        FakeError("Session not found"),
        FakeError("nope", code="PGRST301"),
        FakeError("nope", code="PGRST302"),
        FakeError("nope", status=401),
        FakeError("nope", status="403"),
    ])
    def test_auth_errors(self, error):
        assert is_auth_error(error) is True

    @pytest.mark.parametrize("error", [
        FakeError("duplicate key", code="23505"),
        FakeError("server error", status=500),
        ValueError("bad value"),
    ])
    def test_other_errors(self, error):
        assert is_auth_error(error) is False


class TestWithAuthRetry:
    def test_returns_first_success(self):
        operation = MagicMock(return_value="ok")
        assert with_auth_retry(operation) == "ok"
        operation.assert_called_once()

    def test_retries_auth_errors_with_linear_backoff(self):
        sleep = MagicMock()
        operation = MagicMock(side_effect=[FakeError("JWT expired"), FakeError("JWT expired"), "ok"])

        result = with_auth_retry(operation, "load", RetryConfig(max_attempts=3, delay=0.5, sleep=sleep))

        assert result == "ok"
        assert operation.call_count == 3
        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0]

    def test_non_auth_error_raised_immediately(self):
        sleep = MagicMock()
        operation = MagicMock(side_effect=FakeError("duplicate", code="23505"))

        with pytest.raises(FakeError):
            with_auth_retry(operation, config=RetryConfig(sleep=sleep))

        operation.assert_called_once()
        sleep.assert_not_called()

    def test_raises_last_error_when_exhausted(self):
        operation = MagicMock(side_effect=FakeError("JWT expired"))

        with pytest.raises(FakeError, match="JWT expired"):
            with_auth_retry(operation, config=RetryConfig(max_attempts=2, sleep=lambda _: None))

        assert operation.call_count == 2

    def test_failed_session_restore_raises_session_expired(self):
        operation = MagicMock(side_effect=FakeError("JWT expired"))
        config = RetryConfig(before_retry=lambda: False, sleep=lambda _: None)

        with pytest.raises(SessionExpiredError):
            with_auth_retry(operation, config=config)

        operation.assert_called_once()

    def test_before_retry_runs_between_attempts(self):
        before = MagicMock(return_value=True)
        operation = MagicMock(side_effect=[FakeError("JWT expired"), "ok"])

        with_auth_retry(operation, config=RetryConfig(before_retry=before, sleep=lambda _: None))

        before.assert_called_once()

    def test_zero_attempts_still_runs_once(self):
        operation = MagicMock(return_value="ok")
        assert with_auth_retry(operation, config=RetryConfig(max_attempts=0)) == "ok"
