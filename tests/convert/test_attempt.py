import threading
from dataclasses import dataclass

import pytest

from tristate import Failed, Retryable, Succeeded
from tristate.convert import AttemptFrom, LockBusy, attempt, attempt_into, try_acquire


@dataclass(frozen=True)
class Port:
    number: int

    @classmethod
    def attempt_from(cls, value):
        if not 0 < value < 65536:
            return Failed(f"{value} is out of range")
        if value == 8080:
            return Retryable("8080 is taken right now")
        return Succeeded(cls(value))


def test_attempt_into_uses_attempt_from() -> None:
    assert isinstance(Port, AttemptFrom)
    assert attempt_into(443, Port) == Succeeded(Port(443))
    assert attempt_into(8080, Port) == Retryable("8080 is taken right now")
    assert attempt_into(70000, Port) == Failed("70000 is out of range")


def test_attempt_into_falls_back_to_the_constructor() -> None:
    assert attempt_into("12", int) == Succeeded(12)


def test_attempt_sorts_exceptions_by_default() -> None:
    timeout = TimeoutError("slow")
    broken = KeyError("missing")

    @attempt
    def run(error=None):
        if error is not None:
            raise error
        return "done"

    assert run() == Succeeded("done")
    assert run(timeout) == Retryable(timeout)
    assert run(broken) == Failed(broken)
    assert run.__name__ == "run"


def test_attempt_with_explicit_exception_types() -> None:
    @attempt(retry_on=(KeyError,), fail_on=(ValueError,))
    def lookup(table, key):
        return int(table[key])

    assert lookup({"a": "1"}, "a") == Succeeded(1)
    assert isinstance(lookup({}, "a").unwrap_retryable(), KeyError)
    assert isinstance(lookup({"a": "x"}, "a").unwrap_failed(), ValueError)

    with pytest.raises(TypeError):
        lookup(None, "a")


def test_try_acquire_reports_a_held_lock_as_retryable() -> None:
    lock = threading.Lock()

    first = try_acquire(lock)
    assert first == Succeeded(lock)

    second = try_acquire(lock)
    assert second == Retryable(LockBusy(lock))
    assert str(second.unwrap_retryable()) == "lock is currently held elsewhere"

    lock.release()
    assert try_acquire(lock, timeout=0.01).is_succeeded()
    lock.release()


def test_try_acquire_with_timeout_on_a_held_lock() -> None:
    lock = threading.Lock()
    lock.acquire()
    try:
        assert try_acquire(lock, timeout=0.01).is_retryable()
    finally:
        lock.release()
