import pytest
from returns.maybe import Nothing, Some
from returns.result import Failure, Success

from tristate import (
    Aberration,
    Concern,
    Failed,
    FailedError,
    Outcome,
    Retryable,
    RetryableError,
    Succeeded,
    UnwrapError,
)


def test_acclimate_splits_off_the_failed_arm() -> None:
    assert Failed("disk full").acclimate() == Failure("disk full")
    assert Succeeded(5).acclimate() == Success(Concern.Succeeded(5))
    assert Retryable("busy").acclimate() == Success(Concern.Retryable("busy"))


@pytest.mark.parametrize("outcome", [Succeeded(5), Retryable("busy"), Failed("disk full")])
def test_acclimate_round_trips(outcome) -> None:
    assert Outcome.from_acclimated(outcome.acclimate()) == outcome


def test_acclimated_result_composes_with_returns() -> None:
    def keep_only_succeeded(concern):
        if concern.is_retryable():
            return Failure(f"retry later: {concern.unwrap_retryable()}")
        return Success(concern.unwrap())

    assert Succeeded(5).acclimate().bind(keep_only_succeeded) == Success(5)
    assert Retryable("busy").acclimate().bind(keep_only_succeeded) == Failure("retry later: busy")
    assert Failed("gone").acclimate().bind(keep_only_succeeded) == Failure("gone")


def test_value_or_returns_default_unchanged() -> None:
    default = ["fallback"]

    assert Succeeded(5).value_or(default) == 5
    assert Retryable("busy").value_or(default) is default
    assert Failed("gone").value_or(default) is default


def test_value_or_else_receives_an_aberration() -> None:
    assert Succeeded(5).value_or_else(lambda _: 0) == 5
    assert Retryable("busy").value_or_else(lambda a: a.unwrap_retryable()) == "busy"
    assert Failed("gone").value_or_else(lambda a: a.is_failed()) is True


def test_unwrap_family_raises_on_wrong_variant() -> None:
    assert Succeeded(1).unwrap() == 1
    assert Retryable("busy").unwrap_retryable() == "busy"
    assert Failed("gone").unwrap_failed() == "gone"
    assert Failed("gone").unwrap_error() == Aberration.Failed("gone")

    with pytest.raises(UnwrapError) as excinfo:
        Retryable("disk busy").unwrap()
    assert str(excinfo.value) == "Called `Outcome.unwrap()` on a `Retryable` value: 'disk busy'"
    assert excinfo.value.payload == "disk busy"

    with pytest.raises(UnwrapError, match="unwrap_failed"):
        Succeeded(1).unwrap_failed()
    with pytest.raises(UnwrapError, match="unwrap_error"):
        Succeeded(1).unwrap_error()
    with pytest.raises(ValueError):
        Failed("gone").unwrap_retryable()


def test_raise_for_status_converts_to_canonical_errors() -> None:
    Succeeded(1).raise_for_status()

    with pytest.raises(RetryableError) as retry:
        Retryable("busy").raise_for_status()
    assert retry.value.payload == "busy"

    cause = OSError("disk full")
    with pytest.raises(FailedError) as failure:
        Failed(cause).raise_for_status()
    assert failure.value.__cause__ is cause
    assert "disk full" in str(failure.value)


def test_into_and_from_result() -> None:
    assert Succeeded(1).into_result() == Success(1)
    assert Retryable("busy").into_result() == Failure(Aberration.Retryable("busy"))
    assert Outcome.from_result(Success(1)) == Succeeded(1)
    assert Outcome.from_result(Failure("gone")) == Failed("gone")


def test_from_maybe_uses_the_fallback_when_empty() -> None:
    assert Outcome.from_maybe(Some(1), Retryable("not yet")) == Succeeded(1)
    assert Outcome.from_maybe(Nothing, Retryable("not yet")) == Retryable("not yet")
