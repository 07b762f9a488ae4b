"""
Defines the three-state `Outcome` type and the algebra over it.

An `Outcome` is exactly one of:

- `Succeeded(value)`: the operation produced what was asked of it.
- `Retryable(value)`: a soft failure. Retrying, reconfiguring, or waiting for
  a busy resource to free up may resolve it.
- `Failed(value)`: a hard failure with no recovery path for the caller.

Each arm carries its own independently typed payload. Absent arms are typed
`Never`, so `Succeeded[int]` is an `Outcome[int, Never, Never]` and fits
wherever an `Outcome[int, str, OSError]` is expected.

Every operation here is pure: it returns a new value and never mutates the
receiver. The only exceptions raised on the algebra's own behalf come from
`unwrap*` and `raise_for_status`, whose job is to leave the algebra.

Example:
    >>> busy = {2}
    >>> def reserve(slot: int) -> Outcome[int, str, str]:
    ...     if slot < 0:
    ...         return Failed("no such slot")
    ...     if slot in busy:
    ...         return Retryable("slot busy")
    ...     return Succeeded(slot)
    ...
    >>> reserve(3).map(lambda s: s * 10).value_or(0)
    30
    >>> reserve(2).map(lambda s: s * 10).value_or(0)
    0
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Generic, Never, TypeVar

from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result, Success

from .errors import FailedError, RetryableError, UnwrapError
from .state import State, ordering_key

# S is the Succeeded payload, M the Retryable payload, F the Failed payload.
S = TypeVar("S", covariant=True)
M = TypeVar("M", covariant=True)
F = TypeVar("F", covariant=True)

T = TypeVar("T")
N = TypeVar("N")
G = TypeVar("G")
D = TypeVar("D")


def _not_a_variant(value: object) -> TypeError:
    return TypeError(f"{type(value).__name__} is not an Outcome variant")


@total_ordering
class Outcome(Generic[S, M, F]):
    """Base of the closed `Succeeded | Retryable | Failed` sum."""

    __slots__ = ()

    state: ClassVar[State]

    Succeeded: ClassVar[type[Succeeded[Any]]]
    Retryable: ClassVar[type[Retryable[Any]]]
    Failed: ClassVar[type[Failed[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Outcome is closed; use Succeeded, Retryable or Failed")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return ordering_key(self) < ordering_key(other)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[S]:
        """Yield the Succeeded payload once, or nothing."""
        if isinstance(self, Succeeded):
            yield self.value

    # --- Inspection ---

    def is_succeeded(self) -> bool:
        return isinstance(self, Succeeded)

    def is_retryable(self) -> bool:
        return isinstance(self, Retryable)

    def is_failed(self) -> bool:
        return isinstance(self, Failed)

    def is_error(self) -> bool:
        """True for both Retryable and Failed."""
        return not self.is_succeeded()

    def succeeded(self) -> Maybe[S]:
        """The Succeeded payload as `Some`, otherwise `Nothing`."""
        if isinstance(self, Succeeded):
            return Some(self.value)
        return Nothing

    def retryable(self) -> Maybe[M]:
        if isinstance(self, Retryable):
            return Some(self.value)
        return Nothing

    def failed(self) -> Maybe[F]:
        if isinstance(self, Failed):
            return Some(self.value)
        return Nothing

    def contains(self, candidate: object) -> bool:
        """True when this is Succeeded and its payload equals `candidate`."""
        return isinstance(self, Succeeded) and self.value == candidate

    def contains_retryable(self, candidate: object) -> bool:
        return isinstance(self, Retryable) and self.value == candidate

    def contains_failed(self, candidate: object) -> bool:
        return isinstance(self, Failed) and self.value == candidate

    # --- Mapping ---

    def map(self, function: Callable[[S], T]) -> Outcome[T, M, F]:
        """Transform the Succeeded payload; the other two arms pass through."""
        if isinstance(self, Succeeded):
            return Succeeded(function(self.value))
        return self  # type: ignore[return-value]

    def map_retryable(self, function: Callable[[M], N]) -> Outcome[S, N, F]:
        """Transform the Retryable payload; the other two arms pass through."""
        if isinstance(self, Retryable):
            return Retryable(function(self.value))
        return self  # type: ignore[return-value]

    def map_failed(self, function: Callable[[F], G]) -> Outcome[S, M, G]:
        """Transform the Failed payload; the other two arms pass through."""
        if isinstance(self, Failed):
            return Failed(function(self.value))
        return self  # type: ignore[return-value]

    def map_all(
        self,
        on_succeeded: Callable[[S], T],
        on_retryable: Callable[[M], N],
        on_failed: Callable[[F], G],
    ) -> Outcome[T, N, G]:
        """
        Transform whichever arm is active.

        All three functions are required, so a caller cannot map two arms and
        silently forget the third. Only the function for the active arm runs.
        """
        match self:
            case Succeeded(value):
                return Succeeded(on_succeeded(value))
            case Retryable(value):
                return Retryable(on_retryable(value))
            case Failed(value):
                return Failed(on_failed(value))
        raise _not_a_variant(self)

    def map_or(self, default: D, function: Callable[[S], T]) -> T | D:
        """`function(value)` when Succeeded, otherwise `default`."""
        if isinstance(self, Succeeded):
            return function(self.value)
        return default

    def map_or_else(
        self, default: Callable[[Aberration[M, F]], D], function: Callable[[S], T]
    ) -> T | D:
        """
        Fold the Outcome into a single value.

        Args:
            default: Receives the Retryable or Failed arm as an `Aberration`.
            function: Receives the Succeeded payload.

        Returns:
            Whatever the function for the active arm returned.
        """
        if isinstance(self, Succeeded):
            return function(self.value)
        return default(self.unwrap_error())

    # --- Chaining ---

    def and_then(self, function: Callable[[S], Outcome[T, N, G]]) -> Outcome[T, M | N, F | G]:
        """
        Sequence a fallible step after a Succeeded value.

        `function` runs only when this Outcome is Succeeded; Retryable and
        Failed values pass through untouched. Chaining is associative and
        `Succeeded` is its identity:

            o.and_then(f).and_then(g) == o.and_then(lambda x: f(x).and_then(g))
            o.and_then(Succeeded) == o

        Args:
            function: The next step, given the Succeeded payload.

        Returns:
            The step's Outcome, or this one unchanged.
        """
        if isinstance(self, Succeeded):
            return function(self.value)
        return self  # type: ignore[return-value]

    def recover(self, function: Callable[[M], Outcome[T, N, G]]) -> Outcome[S | T, N, F | G]:
        """
        Attempt a recovery step on a Retryable value.

        The step may resolve to Succeeded, stay Retryable (possibly with a new
        payload), or give up with Failed. Succeeded and Failed pass through.
        """
        if isinstance(self, Retryable):
            return function(self.value)
        return self  # type: ignore[return-value]

    def flatten(self: Outcome[Outcome[T, N, G], M, F]) -> Outcome[T, M | N, F | G]:
        """Remove one level of nesting from a Succeeded Outcome."""
        return self.and_then(lambda inner: inner)

    def transpose(self: Outcome[Maybe[T], M, F]) -> Maybe[Outcome[T, M, F]]:
        """
        Swap an Outcome of a Maybe into a Maybe of an Outcome.

        `Succeeded(Some(x))` becomes `Some(Succeeded(x))` and
        `Succeeded(Nothing)` becomes `Nothing`. Retryable and Failed are
        wrapped in `Some` as they are.
        """
        if isinstance(self, Succeeded):
            return self.value.map(Succeeded)
        return Some(self)

    # --- Extraction ---

    def value_or(self, default: D) -> S | D:
        """The Succeeded payload, otherwise `default` exactly as given."""
        if isinstance(self, Succeeded):
            return self.value
        return default

    def value_or_else(self, function: Callable[[Aberration[M, F]], D]) -> S | D:
        if isinstance(self, Succeeded):
            return self.value
        return function(self.unwrap_error())

    def unwrap(self) -> S:
        """
        Return the Succeeded payload.

        Raises:
            UnwrapError: If this Outcome is Retryable or Failed.
        """
        if isinstance(self, Succeeded):
            return self.value
        raise UnwrapError("Outcome.unwrap()", self.state.label, self._payload())

    def unwrap_retryable(self) -> M:
        if isinstance(self, Retryable):
            return self.value
        raise UnwrapError("Outcome.unwrap_retryable()", self.state.label, self._payload())

    def unwrap_failed(self) -> F:
        if isinstance(self, Failed):
            return self.value
        raise UnwrapError("Outcome.unwrap_failed()", self.state.label, self._payload())

    def unwrap_error(self) -> Aberration[M, F]:
        """Return the Retryable or Failed arm as an `Aberration`."""
        if isinstance(self, Retryable):
            return Aberration.Retryable(self.value)
        if isinstance(self, Failed):
            return Aberration.Failed(self.value)
        raise UnwrapError("Outcome.unwrap_error()", self.state.label, self._payload())

    def raise_for_status(self) -> None:
        """
        Convert a non-success arm into a canonical exception.

        Does nothing for Succeeded.

        Raises:
            RetryableError: If this Outcome is Retryable.
            FailedError: If this Outcome is Failed.
        """
        if isinstance(self, Retryable):
            raise RetryableError(self.value)
        if isinstance(self, Failed):
            raise FailedError(self.value)

    def _payload(self) -> Any:
        return self.value  # type: ignore[attr-defined]

    # --- Escalation ---

    def escalate_to_retryable(self, function: Callable[[S], N]) -> Aberration[M | N, F]:
        """
        Treat a Succeeded value as Retryable.

        The Succeeded payload is converted by `function`; an already Retryable
        or Failed value carries over unchanged. The result is an `Aberration`,
        which has no Succeeded arm at all.
        """
        if isinstance(self, Succeeded):
            return Aberration.Retryable(function(self.value))
        return self.unwrap_error()

    def escalate(
        self, on_succeeded: Callable[[S], N], on_retryable: Callable[[M], G]
    ) -> Aberration[M | N, F | G]:
        """Promote the active arm exactly one level; Failed stays Failed."""
        match self:
            case Succeeded(value):
                return Aberration.Retryable(on_succeeded(value))
            case Retryable(value):
                return Aberration.Failed(on_retryable(value))
            case Failed(value):
                return Aberration.Failed(value)
        raise _not_a_variant(self)

    def escalate_to_failed(
        self, on_succeeded: Callable[[S], G], on_retryable: Callable[[M], G]
    ) -> Fatal[F | G]:
        """
        Collapse every arm into Failed.

        Both conversions are required since a full Outcome can still be in
        either lower state. The result is a `Fatal`, which can only be Failed.
        """
        match self:
            case Succeeded(value):
                return Fatal(on_succeeded(value))
            case Retryable(value):
                return Fatal(on_retryable(value))
            case Failed(value):
                return Fatal(value)
        raise _not_a_variant(self)

    # --- Narrowing ---

    def acclimate(self) -> Result[Concern[S, M], F]:
        """
        Separate the Failed arm from the other two.

        Returns:
            `Success(Concern)` for Succeeded and Retryable, keeping that
            distinction visible, or `Failure(payload)` for Failed. The usual
            `returns` combinators (`bind`, `alt`, ...) then apply.
        """
        match self:
            case Succeeded(value):
                return Success(Concern.Succeeded(value))
            case Retryable(value):
                return Success(Concern.Retryable(value))
            case Failed(value):
                return Failure(value)
        raise _not_a_variant(self)

    @staticmethod
    def from_acclimated(result: Result[Concern[T, N], G]) -> Outcome[T, N, G]:
        """Rebuild the Outcome that `acclimate` split apart."""
        if isinstance(result, Success):
            return result.unwrap().into_outcome()
        return Failed(result.failure())

    # --- Interop with `returns` ---

    def into_result(self) -> Result[S, Aberration[M, F]]:
        if isinstance(self, Succeeded):
            return Success(self.value)
        return Failure(self.unwrap_error())

    @staticmethod
    def from_result(result: Result[T, G]) -> Outcome[T, Never, G]:
        """`Success` becomes Succeeded, `Failure` becomes Failed."""
        if isinstance(result, Success):
            return Succeeded(result.unwrap())
        return Failed(result.failure())

    @staticmethod
    def from_maybe(maybe: Maybe[T], otherwise: Outcome[T, N, G]) -> Outcome[T, N, G]:
        """`Some(x)` becomes `Succeeded(x)`; `Nothing` becomes `otherwise`."""
        if isinstance(maybe, Some):
            return Succeeded(maybe.unwrap())
        return otherwise


@dataclass(frozen=True, slots=True)
class Succeeded(Outcome[S, Never, Never]):
    """The operation produced what was asked of it."""

    value: S
    state: ClassVar[State] = State.SUCCEEDED


@dataclass(frozen=True, slots=True)
class Retryable(Outcome[Never, M, Never]):
    """A soft failure; the caller is expected to have a recovery path."""

    value: M
    state: ClassVar[State] = State.RETRYABLE


@dataclass(frozen=True, slots=True)
class Failed(Outcome[Never, Never, F]):
    """A hard failure that should propagate to a reporting boundary."""

    value: F
    state: ClassVar[State] = State.FAILED


Outcome.Succeeded = Succeeded
Outcome.Retryable = Retryable
Outcome.Failed = Failed

# aberration and concern build on the variants above
from .aberration import Aberration, Fatal  # noqa: E402
from .concern import Concern  # noqa: E402

__all__ = ["Failed", "Outcome", "Retryable", "Succeeded"]
