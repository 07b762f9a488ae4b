"""
Ending a program on a tri-state value.

Maps the terminal Outcome (or Aberration, Fatal, Concern) of a command to a
process exit code. Retryable and Failed values are reported on stderr.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from typing import Annotated, Any, NoReturn, ParamSpec

import typer
from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from . import config
from .report import render
from .state import State, Stateful, state_of

P = ParamSpec("P")

logger = logging.getLogger(__name__)

ExitCode = Annotated[int, Field(ge=0, le=config.MAX_EXIT_CODE)]


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""

    model_config = ConfigDict(frozen=True, validate_default=True)


class TerminationPolicy(ImmutableModel):
    """
    How terminal states become exit codes.
    """

    success_code: ExitCode = config.EXIT_SUCCESS
    retryable_code: ExitCode = config.EXIT_RETRYABLE
    failed_code: ExitCode = config.EXIT_FAILED
    show_diagnostics: bool = True

    def code_for(self, state: State) -> int:
        match state:
            case State.SUCCEEDED:
                return self.success_code
            case State.RETRYABLE:
                return self.retryable_code
            case State.FAILED:
                return self.failed_code


DEFAULT_POLICY = TerminationPolicy()


def exit_code(value: Stateful, policy: TerminationPolicy = DEFAULT_POLICY) -> int:
    return policy.code_for(state_of(value))


def report_outcome(
    value: Stateful,
    console: Console | None = None,
    policy: TerminationPolicy = DEFAULT_POLICY,
) -> int:
    """
    Report a terminal value and work out the exit code for it.

    Args:
        value: The final Outcome, Aberration, Fatal or Concern of a program.
        console: Where diagnostics go; a stderr Console by default.
        policy: Exit codes and whether to print diagnostics at all.

    Returns:
        The exit code for the value's state.
    """
    state = state_of(value)
    code = policy.code_for(state)

    if state is State.SUCCEEDED:
        logger.debug("Terminal value succeeded; exit code %d", code)
        return code

    logger.warning(f"Terminal value is {state.label}; exit code {code}")
    if policy.show_diagnostics:
        console = console or Console(stderr=True)
        style = config.RETRYABLE_STYLE if state is State.RETRYABLE else config.FAILED_STYLE
        console.print(render(value.value, title=f"[bold]{state.label}[/bold]", border_style=style))
    return code


def exit_with(
    value: Stateful,
    console: Console | None = None,
    policy: TerminationPolicy = DEFAULT_POLICY,
) -> NoReturn:
    """Report `value` and end the current typer command with its exit code."""
    raise typer.Exit(code=report_outcome(value, console, policy))


def terminating(
    policy: TerminationPolicy = DEFAULT_POLICY,
) -> Callable[[Callable[P, Stateful]], Callable[P, Any]]:
    """
    Decorate a typer command that returns an Outcome.

    The command's return value decides the process exit code:

        @app.command()
        @terminating()
        def sync(path: Path) -> Outcome[int, str, OSError]: ...
    """

    def decorator(command: Callable[P, Stateful]) -> Callable[P, Any]:
        @wraps(command)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> NoReturn:
            exit_with(command(*args, **kwargs), policy=policy)

        return wrapper

    return decorator


__all__ = [
    "DEFAULT_POLICY",
    "TerminationPolicy",
    "exit_code",
    "exit_with",
    "report_outcome",
    "terminating",
]
