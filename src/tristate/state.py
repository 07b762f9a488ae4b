"""
The escalation order shared by every tri-state container.

`Succeeded < Retryable < Failed`. Escalation only ever moves a value up this
order; nothing in the package moves it back down.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Protocol, runtime_checkable


class State(IntEnum):
    """Which arm of a container is active, ordered by severity."""

    SUCCEEDED = 0
    RETRYABLE = 1
    FAILED = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@runtime_checkable
class Stateful(Protocol):
    """Anything carrying a `State` tag and a single payload."""

    state: State
    value: Any


def state_of(container: Stateful) -> State:
    return container.state


def ordering_key(container: Stateful) -> tuple[State, Any]:
    """Sort key for containers of the same kind: severity first, then payload."""
    return (container.state, container.value)


__all__ = ["State", "Stateful", "ordering_key", "state_of"]
