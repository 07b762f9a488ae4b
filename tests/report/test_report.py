import io
import os

import pytest
from returns.result import Failure, Success
from rich.console import Console

from tristate import Aberration, Failed, Fatal, Retryable, Succeeded
from tristate.config import BEARTYPE_THIS_PACKAGE_ENV
from tristate.report import Diagnostic, Report, context, render, wrap_failure, wrap_failure_with


def render_text(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_wrap_builds_an_outermost_first_chain() -> None:
    report = Report.new(OSError("disk full")).wrap("writing cache").wrap("syncing project")

    assert report.chain() == ("syncing project", "writing cache", "disk full")
    assert str(report) == "syncing project: writing cache: disk full"


def test_exception_without_message_uses_its_type_name() -> None:
    assert str(Report.new(KeyError())) == "KeyError"


def test_sections_are_kept_in_order() -> None:
    report = (
        Report("boom")
        .with_note("first run")
        .with_suggestion("try --force")
        .with_warning("slow")
    )

    assert report.sections == (
        ("note", "first run"),
        ("suggestion", "try --force"),
        ("warning", "slow"),
    )


def test_report_is_its_own_diagnostic() -> None:
    report = Report("boom").wrap("outer")

    assert isinstance(report, Diagnostic)
    assert Report.new(report) is report


def test_wrap_failure_only_touches_failed() -> None:
    assert wrap_failure(Succeeded(1), "loading") == Succeeded(1)
    assert wrap_failure(Retryable("busy"), "loading") == Retryable("busy")

    wrapped = wrap_failure(Failed("missing key"), "loading config")
    assert str(wrapped.unwrap_failed()) == "loading config: missing key"


def test_wrap_failure_on_reduced_types_and_results() -> None:
    assert str(context(Aberration.Failed("gone"), "outer").unwrap_failed()) == "outer: gone"
    assert str(context(Fatal("gone"), "outer").unwrap_failed()) == "outer: gone"
    assert context(Aberration.Retryable("busy"), "outer") == Aberration.Retryable("busy")
    assert context(Success(1), "outer") == Success(1)
    assert str(context(Failure("gone"), "outer").failure()) == "outer: gone"


def test_wrap_failure_with_is_lazy() -> None:
    calls = []

    def message():
        calls.append(1)
        return "outer"

    wrap_failure_with(Succeeded(1), message)
    assert calls == []

    wrap_failure_with(Failed("gone"), message)
    assert calls == [1]


@pytest.mark.skipif(
    os.environ.get(BEARTYPE_THIS_PACKAGE_ENV) == "1",
    reason="beartype rejects the argument before wrap_failure runs",
)
def test_wrap_failure_rejects_other_values() -> None:
    with pytest.raises(TypeError, match="int"):
        wrap_failure(3, "outer")


def test_render_report_panel() -> None:
    report = Report(OSError("disk full")).wrap("syncing").with_note("check free space")
    output = render_text(render(report, title="Failed"))

    assert "Failed" in output
    assert "syncing" in output
    assert "disk full" in output
    assert "Note: check free space" in output


def test_render_uses_a_custom_diagnostic() -> None:
    class QuotaExceeded:
        def to_report(self):
            return Report("quota exceeded").with_suggestion("raise the quota")

    output = render_text(render(QuotaExceeded()))

    assert "quota exceeded" in output
    assert "Suggestion: raise the quota" in output


def test_render_plain_payloads() -> None:
    assert "busy" in render_text(render("busy", title="Retryable"))
    assert "'retry_after': 30" in render_text(render({"retry_after": 30}))
