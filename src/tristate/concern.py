"""
The two-state `Concern` type: an Outcome with its Failed arm discharged.

`Outcome.acclimate()` separates a Failed payload from the other two arms and
hands back `Success(Concern)` for everything that did not fail. The Concern
keeps Succeeded and Retryable distinct, so a caller that has let the failure
propagate still has to decide what a retryable value means before using it.

A Concern is never equal to an Outcome, and it never turns back into one
implicitly; `into_outcome()` is the explicit way back.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Generic, Never, TypeVar

from returns.maybe import Maybe, Nothing, Some

from .errors import UnwrapError
from .outcome import Outcome, Retryable, Succeeded
from .state import State, ordering_key

S = TypeVar("S", covariant=True)
M = TypeVar("M", covariant=True)

T = TypeVar("T")
N = TypeVar("N")
D = TypeVar("D")


@total_ordering
class Concern(Generic[S, M]):
    """Base of the closed `Concern.Succeeded | Concern.Retryable` sum."""

    __slots__ = ()

    state: ClassVar[State]

    Succeeded: ClassVar[type[_Succeeded[Any]]]
    Retryable: ClassVar[type[_Retryable[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Concern is closed; use Concern.Succeeded or Concern.Retryable")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Concern):
            return NotImplemented
        return ordering_key(self) < ordering_key(other)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[S]:
        if isinstance(self, _Succeeded):
            yield self.value

    def is_succeeded(self) -> bool:
        return isinstance(self, _Succeeded)

    def is_retryable(self) -> bool:
        return isinstance(self, _Retryable)

    def succeeded(self) -> Maybe[S]:
        if isinstance(self, _Succeeded):
            return Some(self.value)
        return Nothing

    def retryable(self) -> Maybe[M]:
        if isinstance(self, _Retryable):
            return Some(self.value)
        return Nothing

    def contains(self, candidate: object) -> bool:
        return isinstance(self, _Succeeded) and self.value == candidate

    def contains_retryable(self, candidate: object) -> bool:
        return isinstance(self, _Retryable) and self.value == candidate

    def map(self, function: Callable[[S], T]) -> Concern[T, M]:
        if isinstance(self, _Succeeded):
            return _Succeeded(function(self.value))
        return self  # type: ignore[return-value]

    def map_retryable(self, function: Callable[[M], N]) -> Concern[S, N]:
        if isinstance(self, _Retryable):
            return _Retryable(function(self.value))
        return self  # type: ignore[return-value]

    def map_all(
        self,
        on_succeeded: Callable[[S], T],
        on_retryable: Callable[[M], N],
    ) -> Concern[T, N]:
        """Transform whichever arm is active; both functions are required."""
        if isinstance(self, _Succeeded):
            return _Succeeded(on_succeeded(self.value))
        return _Retryable(on_retryable(self.unwrap_retryable()))

    def map_or(self, default: D, function: Callable[[S], T]) -> T | D:
        if isinstance(self, _Succeeded):
            return function(self.value)
        return default

    def value_or(self, default: D) -> S | D:
        """The Succeeded payload, otherwise `default` exactly as given."""
        if isinstance(self, _Succeeded):
            return self.value
        return default

    def value_or_else(self, function: Callable[[M], D]) -> S | D:
        """The Succeeded payload, otherwise `function` applied to the Retryable payload."""
        if isinstance(self, _Succeeded):
            return self.value
        return function(self.unwrap_retryable())

    def unwrap(self) -> S:
        """
        Return the Succeeded payload.

        Raises:
            UnwrapError: If this Concern is Retryable.
        """
        if isinstance(self, _Succeeded):
            return self.value
        raise UnwrapError("Concern.unwrap()", self.state.label, self._payload())

    def unwrap_retryable(self) -> M:
        if isinstance(self, _Retryable):
            return self.value
        raise UnwrapError("Concern.unwrap_retryable()", self.state.label, self._payload())

    def _payload(self) -> Any:
        return self.value  # type: ignore[attr-defined]

    def into_outcome(self) -> Outcome[S, M, Never]:
        """
        Re-attach the Failed slot.

        The result holds the same arm and the same payload, so for any
        Outcome `o`, `Outcome.from_acclimated(o.acclimate()) == o`.
        """
        if isinstance(self, _Succeeded):
            return Succeeded(self.value)
        return Retryable(self.unwrap_retryable())


@dataclass(frozen=True, slots=True)
class _Succeeded(Concern[S, Never]):
    value: S
    state: ClassVar[State] = State.SUCCEEDED


@dataclass(frozen=True, slots=True)
class _Retryable(Concern[Never, M]):
    value: M
    state: ClassVar[State] = State.RETRYABLE


_Succeeded.__qualname__ = "Concern.Succeeded"
_Retryable.__qualname__ = "Concern.Retryable"

Concern.Succeeded = _Succeeded
Concern.Retryable = _Retryable

__all__ = ["Concern"]
