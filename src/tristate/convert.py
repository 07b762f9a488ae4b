"""
Conversions into `Outcome`.

- `AttemptFrom` / `attempt_into`: fallible conversion between types, the
  three-state counterpart of a constructor.
- `attempt`: wraps a function that raises, in the manner of
  `returns.result.safe`, sorting exceptions into Retryable and Failed.
- `try_acquire`: probes a lock without blocking; a held lock is Retryable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, Never, ParamSpec, Protocol, Self, TypeVar, overload, runtime_checkable

from . import config
from .outcome import Failed, Outcome, Retryable, Succeeded

P = ParamSpec("P")
T = TypeVar("T")
L = TypeVar("L", bound="SupportsAcquire")

logger = logging.getLogger(__name__)


@runtime_checkable
class AttemptFrom(Protocol):
    """A type that can try to build itself from another value."""

    @classmethod
    def attempt_from(cls, value: Any) -> Outcome[Self, Any, Any]:
        """Build an instance, or explain as Retryable/Failed why not."""
        ...


def attempt_into(value: Any, target: type[T]) -> Outcome[T, Any, Any]:
    """Convert `value` into `target`.

    Uses `target.attempt_from` when the target implements `AttemptFrom`.
    Otherwise the plain constructor is treated as an infallible conversion.
    """
    if isinstance(target, AttemptFrom):
        return target.attempt_from(value)  # type: ignore[return-value]
    return Succeeded(target(value))  # type: ignore[call-arg]


@overload
def attempt(function: Callable[P, T]) -> Callable[P, Outcome[T, Exception, Exception]]: ...


@overload
def attempt(
    *,
    retry_on: tuple[type[Exception], ...] = ...,
    fail_on: tuple[type[Exception], ...] = ...,
) -> Callable[[Callable[P, T]], Callable[P, Outcome[T, Exception, Exception]]]: ...


def attempt(
    function: Callable[P, T] | None = None,
    *,
    retry_on: tuple[type[Exception], ...] = config.TRANSIENT_ERRORS,
    fail_on: tuple[type[Exception], ...] = (Exception,),
) -> Any:
    """
    Turn a function that raises into one that returns an `Outcome`.

    Usable bare (`@attempt`) or configured (`@attempt(retry_on=(...))`).

    Args:
        function: The function to wrap, when used without arguments.
        retry_on: Exception types that become `Retryable(exc)`. Checked first.
        fail_on: Exception types that become `Failed(exc)`.

    Returns:
        The decorated function, or a decorator when called with keywords only.
        Exceptions matching neither tuple propagate unchanged.
    """

    def decorator(function: Callable[P, T]) -> Callable[P, Outcome[T, Exception, Exception]]:
        @wraps(function)
        def decorated(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception, Exception]:
            try:
                return Succeeded(function(*args, **kwargs))
            except retry_on as exc:
                logger.debug("%s raised a retryable error: %r", function.__qualname__, exc)
                return Retryable(exc)
            except fail_on as exc:
                logger.debug("%s failed: %r", function.__qualname__, exc)
                return Failed(exc)

        return decorated

    if function is None:
        return decorator
    return decorator(function)


@runtime_checkable
class SupportsAcquire(Protocol):
    def acquire(self, blocking: bool = ..., timeout: float = ...) -> bool: ...


@dataclass(frozen=True, slots=True)
class LockBusy:
    """The lock was held by someone else when we asked for it."""

    lock: Any

    def __str__(self) -> str:
        return "lock is currently held elsewhere"


def try_acquire(lock: L, timeout: float | None = None) -> Outcome[L, LockBusy, Never]:
    """
    Acquire `lock` without waiting (or waiting at most `timeout` seconds).

    Returns:
        `Succeeded(lock)` holding the acquired lock, which the caller must
        release, or `Retryable(LockBusy(lock))` if it could not be taken.
    """
    if timeout is None:
        acquired = lock.acquire(blocking=False)
    else:
        acquired = lock.acquire(blocking=True, timeout=timeout)

    if acquired:
        return Succeeded(lock)
    return Retryable(LockBusy(lock))


__all__ = ["AttemptFrom", "LockBusy", "SupportsAcquire", "attempt", "attempt_into", "try_acquire"]
