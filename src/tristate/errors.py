"""
Exceptions raised by tristate.

The algebra itself never raises. These exist for the operations whose whole
purpose is to leave the algebra: the `unwrap*` family, which asserts a
particular arm, and `raise_for_status`, which turns a non-success arm into a
single canonical exception for top-level reporting.
"""

from __future__ import annotations

from typing import Any


class OutcomeError(Exception):
    """Base class for all tristate exceptions."""


class UnwrapError(OutcomeError, ValueError):
    """An `unwrap*` method was called on the wrong variant."""

    def __init__(self, method: str, variant: str, payload: Any) -> None:
        self.method = method
        self.variant = variant
        self.payload = payload
        super().__init__(f"Called `{method}` on a `{variant}` value: {payload!r}")


class _PayloadError(OutcomeError):
    label = ""

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(f"{self.label}: {payload}")
        if isinstance(payload, BaseException):
            self.__cause__ = payload


class RetryableError(_PayloadError):
    """Raised by `raise_for_status` on a Retryable value."""

    label = "Retryable"


class FailedError(_PayloadError):
    """Raised by `raise_for_status` on a Failed value."""

    label = "Failed"


__all__ = ["FailedError", "OutcomeError", "RetryableError", "UnwrapError"]
