from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from .concern import Concern
from .outcome import Failed, Outcome, Retryable, Succeeded

S = TypeVar("S")
M = TypeVar("M")
F = TypeVar("F")


def collect(outcomes: Iterable[Outcome[S, M, F]]) -> Outcome[list[S], M, F]:
    """Gather Succeeded payloads into a list, stopping at the first non-success.

    The first Retryable or Failed value is returned as is and the remainder
    of the iterable is left unconsumed.
    """
    collected: list[S] = []
    for outcome in outcomes:
        if not isinstance(outcome, Succeeded):
            return outcome  # type: ignore[return-value]
        collected.append(outcome.value)

    return Succeeded(collected)


def collect_concerns(concerns: Iterable[Concern[S, M]]) -> Concern[list[S], M]:
    """Same as `collect`, for Concerns."""
    collected: list[S] = []
    for concern in concerns:
        if concern.is_retryable():
            return concern  # type: ignore[return-value]
        collected.append(concern.unwrap())

    return Concern.Succeeded(collected)


def partition(outcomes: Iterable[Outcome[S, M, F]]) -> tuple[list[S], list[M], list[F]]:
    """Split payloads by arm.

    Unlike `collect`, this doesn't stop early: every value is consumed and
    sorted into the succeeded, retryable or failed list, preserving order.
    """
    succeeded: list[S] = []
    retryable: list[M] = []
    failed: list[F] = []

    for outcome in outcomes:
        match outcome:
            case Succeeded(value):
                succeeded.append(value)
            case Retryable(value):
                retryable.append(value)
            case Failed(value):
                failed.append(value)

    return succeeded, retryable, failed


def successes(outcomes: Iterable[Outcome[S, Any, Any]]) -> Iterator[S]:
    return (outcome.value for outcome in outcomes if isinstance(outcome, Succeeded))


def retryables(outcomes: Iterable[Outcome[Any, M, Any]]) -> Iterator[M]:
    return (outcome.value for outcome in outcomes if isinstance(outcome, Retryable))


def failures(outcomes: Iterable[Outcome[Any, Any, F]]) -> Iterator[F]:
    return (outcome.value for outcome in outcomes if isinstance(outcome, Failed))


__all__ = ["collect", "collect_concerns", "failures", "partition", "retryables", "successes"]
