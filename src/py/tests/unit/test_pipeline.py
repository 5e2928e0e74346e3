"""Tests for react_scaffold.pipeline module."""

import pytest

from react_scaffold.exceptions import BootstrapError, ExecutableNotFoundError, ExecutionError
from react_scaffold.pipeline import FailurePolicy, PipelineResult, Step, StepOutcome, StepRunner


def _fail_with(exc: Exception):
    def action() -> None:
        raise exc

    return action


def test_runs_steps_in_order() -> None:
    calls: list[str] = []
    steps = [Step(name=name, action=lambda name=name: calls.append(name)) for name in ("a", "b", "c")]

    result = StepRunner().run(steps)

    assert calls == ["a", "b", "c"]
    assert result.completed == ["a", "b", "c"]
    assert result.warnings == []


def test_fatal_failure_stops_the_pipeline() -> None:
    calls: list[str] = []
    error = ExecutionError(["npm", "install"], 1)
    steps = [
        Step(name="first", action=lambda: calls.append("first")),
        Step(name="install", action=_fail_with(error)),
        Step(name="last", action=lambda: calls.append("last")),
    ]
    result = PipelineResult()

    with pytest.raises(BootstrapError) as exc_info:
        StepRunner().run(steps, result)

    assert calls == ["first"]
    assert exc_info.value.step == "install"
    assert exc_info.value.cause is error
    assert exc_info.value.__cause__ is error
    assert result.outcomes == {"first": StepOutcome.OK}


def test_warn_failure_records_and_continues(capsys: pytest.CaptureFixture[str]) -> None:
    calls: list[str] = []
    steps = [
        Step(
            name="git",
            action=_fail_with(ExecutableNotFoundError("git")),
            policy=FailurePolicy.WARN,
            warning="Git was not initialized.",
        ),
        Step(name="after", action=lambda: calls.append("after")),
    ]

    result = StepRunner().run(steps)

    assert calls == ["after"]
    assert result.outcomes == {"git": StepOutcome.WARNED, "after": StepOutcome.OK}
    assert result.warnings == ["Git was not initialized."]
    assert "Git was not initialized." in capsys.readouterr().out


def test_warn_failure_default_message() -> None:
    steps = [Step(name="extra", action=_fail_with(ExecutionError(["npm"], 1)), policy=FailurePolicy.WARN)]
    result = StepRunner().run(steps)
    assert result.warnings == ["Step 'extra' failed, continuing..."]


def test_skipped_steps_do_not_run() -> None:
    calls: list[str] = []
    steps = [Step(name="editor", action=lambda: calls.append("editor"), when=lambda: False)]

    result = StepRunner().run(steps)

    assert calls == []
    assert result.outcomes == {"editor": StepOutcome.SKIPPED}
    assert result.completed == []


def test_filesystem_errors_propagate() -> None:
    steps = [Step(name="write", action=_fail_with(PermissionError("read-only")), policy=FailurePolicy.WARN)]
    with pytest.raises(PermissionError):
        StepRunner().run(steps)


def test_custom_failures_are_handled() -> None:
    steps = [Step(name="cleanup", action=_fail_with(OSError("busy")), policy=FailurePolicy.WARN)]
    result = StepRunner(failures=(OSError,)).run(steps)
    assert result.outcomes == {"cleanup": StepOutcome.WARNED}


def test_titles_and_success_messages_are_printed(capsys: pytest.CaptureFixture[str]) -> None:
    steps = [Step(name="folders", action=lambda: None, title="Creating folders", success="Folders created")]
    StepRunner().run(steps)
    out = capsys.readouterr().out
    assert "Creating folders" in out
    assert "Folders created" in out
