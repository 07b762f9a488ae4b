"""
Diagnostic reports for Retryable and Failed payloads.

Nothing in the core algebra depends on this module. It offers:

- `Report`: an immutable error report with a context chain (outermost message
  first) plus notes, suggestions, warnings and free-form sections.
- `Diagnostic`: the capability a payload implements to supply its own Report.
- `wrap_failure` / `context`: attach a context message to the Failed arm of
  an Outcome, Aberration, Fatal, or `returns` Result.
- `render`: turn any payload into something a `rich` Console can print.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Protocol, TypeVar, runtime_checkable

from returns.result import Result
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.pretty import Pretty
from rich.protocol import is_renderable
from rich.text import Text

from . import config
from .aberration import Aberration, Fatal
from .outcome import Outcome

W = TypeVar("W", Outcome[Any, Any, Any], Aberration[Any, Any], Fatal[Any], Result[Any, Any])


def _describe(error: Any) -> str:
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


@runtime_checkable
class Diagnostic(Protocol):
    """A payload that knows how to describe itself as a `Report`."""

    def to_report(self) -> Report: ...


@dataclass(frozen=True, slots=True)
class Report:
    """
    An error together with the context it was raised in.

    Attributes:
        error: The root cause. Any value, usually an exception or a string.
        context: Messages added by `wrap`, outermost first.
        sections: `(kind, content)` pairs added by the `with_*` builders.
    """

    error: Any
    context: tuple[str, ...] = ()
    sections: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def new(cls, error: Any) -> Report:
        """Build a report for `error`, reusing it if it already is or has one."""
        if isinstance(error, Diagnostic):
            return error.to_report()
        return cls(error)

    def to_report(self) -> Report:
        return self

    def wrap(self, message: object) -> Report:
        """Add an outer context message."""
        return replace(self, context=(str(message), *self.context))

    def _with(self, kind: str, content: Any) -> Report:
        return replace(self, sections=(*self.sections, (kind, content)))

    def with_note(self, note: object) -> Report:
        return self._with("note", str(note))

    def with_suggestion(self, suggestion: object) -> Report:
        return self._with("suggestion", str(suggestion))

    def with_warning(self, warning: object) -> Report:
        return self._with("warning", str(warning))

    def with_section(self, section: object) -> Report:
        return self._with("section", section)

    def with_error(self, error: BaseException) -> Report:
        return self._with("error", error)

    def chain(self) -> tuple[str, ...]:
        """Every message from the outermost context down to the root cause."""
        return (*self.context, _describe(self.error))

    def __str__(self) -> str:
        return ": ".join(self.chain())

    def to_panel(self, title: str | None = None, border_style: str = config.FAILED_STYLE) -> Panel:
        lines: list[RenderableType] = []
        for depth, message in enumerate(self.chain()):
            line = Text(f"{depth:>4}: ", style="dim")
            line.append(message, style=config.CONTEXT_STYLE if depth == 0 else None)
            lines.append(line)

        for kind, content in self.sections:
            style = config.SECTION_STYLES.get(kind, "")
            heading = Text(f"\n{kind.capitalize()}: ", style=f"bold {style}".strip())
            if isinstance(content, str | BaseException):
                heading.append(_describe(content))
                lines.append(heading)
            else:
                lines.extend([heading, content if is_renderable(content) else Pretty(content)])

        return Panel(Group(*lines), title=title, border_style=border_style)

    def __rich__(self) -> Panel:
        return self.to_panel()


def wrap_failure_with(value: W, message: Callable[[], object]) -> W:
    """
    Wrap the Failed payload of `value` in a `Report` with an outer message.

    `message` is only called when there is a failure to wrap. Succeeded and
    Retryable arms pass through unchanged.
    """

    def wrap(error: Any) -> Report:
        return Report.new(error).wrap(message())

    if isinstance(value, Outcome | Aberration | Fatal):
        return value.map_failed(wrap)  # type: ignore[return-value]
    if isinstance(value, Result):
        return value.alt(wrap)  # type: ignore[return-value]
    raise TypeError(f"cannot wrap the failure of a {type(value).__name__}")


def wrap_failure(value: W, message: object) -> W:
    """Like `wrap_failure_with`, with the message given up front."""
    return wrap_failure_with(value, lambda: message)


context = wrap_failure
with_context = wrap_failure_with


def render(
    payload: Any, title: str | None = None, border_style: str = config.FAILED_STYLE
) -> RenderableType:
    """
    Render a Retryable or Failed payload for a `rich` Console.

    Diagnostics render their own report, exceptions get a fresh one, rich
    renderables are framed as they are, and anything else is pretty-printed.
    """
    if isinstance(payload, Diagnostic):
        return payload.to_report().to_panel(title, border_style)
    if isinstance(payload, BaseException):
        return Report.new(payload).to_panel(title, border_style)
    if isinstance(payload, str):
        return Panel(Text(payload), title=title, border_style=border_style)
    if is_renderable(payload):
        return Panel(payload, title=title, border_style=border_style)
    return Panel(Pretty(payload), title=title, border_style=border_style)


__all__ = [
    "Diagnostic",
    "Report",
    "context",
    "render",
    "with_context",
    "wrap_failure",
    "wrap_failure_with",
]
