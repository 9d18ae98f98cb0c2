"""
Unit tests for the Gemini retry wrapper.
"""

import pytest

from medstudy.core.exceptions import ValidationError
from medstudy.core.retry import with_retry


class FlakyOperation:
    """Fails `failures` times, then returns `value`."""

    def __init__(self, failures, value="ok"):
        self.failures = failures
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f"transient failure {self.calls}")
        return self.value


@pytest.mark.asyncio
@pytest.mark.parametrize("failures,expected_delays", [
    (0, []),
    (1, [1.5]),
    (2, [1.5, 3.0]),
])
async def test_succeeds_after_k_failures(failures, expected_delays, fake_sleep, sleep_calls):
    operation = FlakyOperation(failures)

    result = await with_retry(operation, sleep=fake_sleep)

    assert result == "ok"
    assert operation.calls == failures + 1
    assert sleep_calls == expected_delays


@pytest.mark.asyncio
async def test_always_failing_reraises_original_error(fake_sleep, sleep_calls):
    error = RuntimeError("service unavailable")
    calls = []

    async def operation():
        calls.append(1)
        raise error

    with pytest.raises(RuntimeError) as exc_info:
        await with_retry(operation, sleep=fake_sleep)

    assert exc_info.value is error
    assert len(calls) == 3
    # No wait after the final failed attempt
    assert sleep_calls == [1.5, 3.0]


@pytest.mark.asyncio
async def test_last_failure_is_the_one_propagated(fake_sleep):
    errors = [ValueError("first"), KeyError("second"), TimeoutError("third")]

    async def operation():
        raise errors.pop(0)

    with pytest.raises(TimeoutError, match="third"):
        await with_retry(operation, sleep=fake_sleep)


@pytest.mark.asyncio
async def test_zero_retries_means_single_attempt(fake_sleep, sleep_calls):
    operation = FlakyOperation(failures=1)

    with pytest.raises(ConnectionError):
        await with_retry(operation, retries=0, sleep=fake_sleep)

    assert operation.calls == 1
    assert sleep_calls == []


@pytest.mark.asyncio
async def test_delay_grows_linearly_with_custom_base(fake_sleep, sleep_calls):
    operation = FlakyOperation(failures=4)

    result = await with_retry(operation, retries=4, base_delay=0.5, sleep=fake_sleep)

    assert result == "ok"
    assert sleep_calls == [0.5, 1.0, 1.5, 2.0]


@pytest.mark.asyncio
async def test_negative_retries_rejected(fake_sleep):
    operation = FlakyOperation(failures=0)

    with pytest.raises(ValidationError):
        await with_retry(operation, retries=-1, sleep=fake_sleep)

    assert operation.calls == 0
