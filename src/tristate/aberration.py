"""
Reduced state sets produced by escalation.

Escalation only ever moves a value up `Succeeded < Retryable < Failed`, and the
type it returns cannot represent what was left behind:

- `Aberration[M, F]` is `Aberration.Retryable | Aberration.Failed`. It is what
  remains after `Outcome.escalate_to_retryable`, and it has no Succeeded arm,
  constructor or accessor.
- `Fatal[F]` holds a Failed payload and nothing else. It is what remains after
  `escalate_to_failed`.

Neither type offers a way back down. A caller who wants a Succeeded value
again has to build a new Outcome.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Generic, Never, TypeVar

from returns.maybe import Maybe, Nothing, Some

from .errors import UnwrapError
from .outcome import Failed, Outcome, Retryable
from .state import State, ordering_key

M = TypeVar("M", covariant=True)
F = TypeVar("F", covariant=True)

N = TypeVar("N")
G = TypeVar("G")


@total_ordering
class Aberration(Generic[M, F]):
    """Base of the closed `Aberration.Retryable | Aberration.Failed` sum."""

    __slots__ = ()

    state: ClassVar[State]

    Retryable: ClassVar[type[_Retryable[Any]]]
    Failed: ClassVar[type[_Failed[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Aberration is closed; use Aberration.Retryable or Aberration.Failed")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Aberration):
            return NotImplemented
        return ordering_key(self) < ordering_key(other)  # type: ignore[arg-type]

    def is_retryable(self) -> bool:
        return isinstance(self, _Retryable)

    def is_failed(self) -> bool:
        return isinstance(self, _Failed)

    def retryable(self) -> Maybe[M]:
        if isinstance(self, _Retryable):
            return Some(self.value)
        return Nothing

    def failed(self) -> Maybe[F]:
        if isinstance(self, _Failed):
            return Some(self.value)
        return Nothing

    def map_retryable(self, function: Callable[[M], N]) -> Aberration[N, F]:
        if isinstance(self, _Retryable):
            return _Retryable(function(self.value))
        return self  # type: ignore[return-value]

    def map_failed(self, function: Callable[[F], G]) -> Aberration[M, G]:
        if isinstance(self, _Failed):
            return _Failed(function(self.value))
        return self  # type: ignore[return-value]

    def unwrap_retryable(self) -> M:
        if isinstance(self, _Retryable):
            return self.value
        raise UnwrapError("Aberration.unwrap_retryable()", self.state.label, self._payload())

    def unwrap_failed(self) -> F:
        if isinstance(self, _Failed):
            return self.value
        raise UnwrapError("Aberration.unwrap_failed()", self.state.label, self._payload())

    def _payload(self) -> Any:
        return self.value  # type: ignore[attr-defined]

    def escalate_to_failed(self, function: Callable[[M], G]) -> Fatal[F | G]:
        """
        Treat a Retryable value as Failed.

        Args:
            function: Converts the Retryable payload into a Failed payload.

        Returns:
            A `Fatal`, which can only represent Failed.
        """
        if isinstance(self, _Retryable):
            return Fatal(function(self.value))
        return Fatal(self.unwrap_failed())

    def into_outcome(self) -> Outcome[Never, M, F]:
        """Widen to a full Outcome in the same state; nothing is de-escalated."""
        if isinstance(self, _Retryable):
            return Retryable(self.value)
        return Failed(self.unwrap_failed())


@dataclass(frozen=True, slots=True)
class _Retryable(Aberration[M, Never]):
    value: M
    state: ClassVar[State] = State.RETRYABLE


@dataclass(frozen=True, slots=True)
class _Failed(Aberration[Never, F]):
    value: F
    state: ClassVar[State] = State.FAILED


_Retryable.__qualname__ = "Aberration.Retryable"
_Failed.__qualname__ = "Aberration.Failed"

Aberration.Retryable = _Retryable
Aberration.Failed = _Failed


@total_ordering
@dataclass(frozen=True, slots=True)
class Fatal(Generic[F]):
    """A value that has escalated all the way: it can only be Failed."""

    value: F
    state: ClassVar[State] = State.FAILED

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fatal):
            return NotImplemented
        return ordering_key(self) < ordering_key(other)

    def is_failed(self) -> bool:
        return True

    def failed(self) -> Maybe[F]:
        return Some(self.value)

    def unwrap_failed(self) -> F:
        return self.value

    def map_failed(self, function: Callable[[F], G]) -> Fatal[G]:
        return Fatal(function(self.value))

    def into_aberration(self) -> Aberration[Never, F]:
        return _Failed(self.value)

    def into_outcome(self) -> Outcome[Never, Never, F]:
        return Failed(self.value)


__all__ = ["Aberration", "Fatal"]
