r"""Unit tests for the execute and run entry points.

These tests cover the documented retry scenarios: success on the first
attempt, exhaustion without a callback, reporting to a callback, and an
early stop requested by the callback.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry import RetryConfig, RetryError, RetryState, execute, run
from aretry.callbacks import ErrorCallback, ErrorInfo
from tests.helpers import CountingOperation, RecordingCallback


def test_execute_success_runs_once(mock_sleep: Mock) -> None:
    """Test an operation without errors runs only once."""
    calls: list[bool] = []

    execute(3, 500, lambda: calls.append(True))

    assert len(calls) == 1
    mock_sleep.assert_not_called()


@pytest.mark.parametrize("retry_count", [0, 1, 3, 10])
def test_execute_success_short_circuit(retry_count: int, mock_callback: Mock) -> None:
    """Test success on the first attempt never calls the callback."""
    operation = Mock(return_value=None)

    execute(retry_count, 100, operation, mock_callback)

    operation.assert_called_once_with()
    mock_callback.assert_not_called()


def test_execute_retries_given_count(mock_sleep: Mock) -> None:
    """Test a failing operation is retried the given number of times."""
    operation = CountingOperation()

    with pytest.raises(RetryError) as exc_info:
        execute(3, 100, operation)

    assert len(exc_info.value.errors) == 4
    assert operation.calls == 4


@pytest.mark.parametrize("retry_count", [0, 2, 5])
def test_execute_attempt_bound(retry_count: int, mock_sleep: Mock) -> None:
    """Test the composite error has retry_count + 1 entries in
    invocation order."""
    operation = CountingOperation()

    with pytest.raises(RetryError) as exc_info:
        execute(retry_count, 10, operation)

    assert operation.calls == retry_count + 1
    assert list(exc_info.value.errors) == operation.raised


def test_execute_callback_called_on_error(mock_sleep: Mock) -> None:
    """Test the error callback is called on each failure after the
    first."""
    operation = CountingOperation()
    count = 0

    def on_error(info: ErrorInfo) -> None:
        nonlocal count
        count += 1
        assert info.attempt_number == count
        assert info.cause is not None

    execute(3, 100, operation, on_error)

    assert operation.calls == 4
    assert count == 3


def test_execute_callback_stop(mock_sleep: Mock) -> None:
    """Test requesting a stop in the callback interrupts the retries."""
    operation = CountingOperation()

    class StopOnSecond(ErrorCallback):
        def __init__(self) -> None:
            self.count = 0

        def invoke(self, info: ErrorInfo) -> None:
            self.count += 1
            assert info.attempt_number == self.count
            if self.count == 2:
                info.request_stop()

    execute(3, 100, operation, StopOnSecond())

    assert operation.calls == 3


@pytest.mark.parametrize("retry_count", [1, 3, 6])
def test_execute_callback_attempt_numbering(retry_count: int, mock_sleep: Mock) -> None:
    """Test the callback is invoked retry_count times with increasing
    numbers."""
    callback = RecordingCallback()

    execute(retry_count, 10, CountingOperation(), callback)

    assert callback.attempt_numbers == list(range(1, retry_count + 1))


def test_execute_uses_config(mock_sleep: Mock) -> None:
    """Test None arguments fall back to the config values."""
    callback = RecordingCallback()
    operation = CountingOperation()

    execute(
        None,
        None,
        operation,
        config=RetryConfig(retry_count=2, interval_ms=40, callback=callback),
    )

    assert operation.calls == 3
    assert callback.attempt_numbers == [1, 2]
    mock_sleep.assert_called_once_with(0.04)


def test_execute_arguments_override_config(mock_sleep: Mock) -> None:
    """Test explicit arguments override the config values."""
    operation = CountingOperation()

    with pytest.raises(RetryError):
        execute(1, 0, operation, config=RetryConfig(retry_count=5, interval_ms=40))

    assert operation.calls == 2


def test_execute_rejects_negative_retry_count() -> None:
    with pytest.raises(ValueError, match=r"retry_count must be >= 0, got -1"):
        execute(-1, 100, Mock())


def test_execute_rejects_negative_interval() -> None:
    with pytest.raises(ValueError, match=r"interval_ms must be >= 0, got -1"):
        execute(3, -1, Mock())


def test_execute_rejects_non_callable_operation() -> None:
    with pytest.raises(TypeError, match=r"operation must be callable"):
        execute(3, 100, None)


def test_execute_rejects_invalid_callback() -> None:
    with pytest.raises(TypeError, match=r"callback must be an ErrorCallback or a callable"):
        execute(3, 100, Mock(), "callback")


#########################
#     Tests for run     #
#########################


def test_run_returns_outcome_instead_of_raising(mock_sleep: Mock) -> None:
    """Test run reports the failures without raising."""
    operation = CountingOperation()

    outcome = run(3, 100, operation)

    assert outcome.state is RetryState.EXHAUSTED
    assert outcome.attempts == 4
    assert list(outcome.errors) == operation.raised
    with pytest.raises(RetryError):
        outcome.raise_for_errors()


def test_run_returns_result(mock_sleep: Mock) -> None:
    """Test run returns the value of the successful attempt."""
    outcome = run(3, 100, CountingOperation(failures=1, result={"key": "value"}))

    assert outcome.succeeded
    assert outcome.attempts == 2
    assert outcome.result == {"key": "value"}


def test_run_stopped_by_callback(mock_sleep: Mock) -> None:
    """Test run reports an early stop."""
    outcome = run(3, 100, CountingOperation(), RecordingCallback(stop_at=1))

    assert outcome.state is RetryState.STOPPED_BY_CALLBACK
    assert outcome.attempts == 2
    assert outcome.callback_registered
