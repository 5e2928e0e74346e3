"""Sequential step runner for project bootstrapping.

A bootstrap is a list of :class:`Step` objects, each with a failure policy.
The runner executes them in order and applies the policy when an external
tool fails:

- ``FATAL``: stop and raise :class:`~react_scaffold.exceptions.BootstrapError`.
- ``WARN``: print a warning, record it, and continue with the next step.

Filesystem errors are never caught here; they propagate to the caller.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from react_scaffold.exceptions import BootstrapError, ExecutableNotFoundError, ExecutionError
from react_scaffold.utils import console

__all__ = ("FailurePolicy", "PipelineResult", "Step", "StepOutcome", "StepRunner")

logger = logging.getLogger("react_scaffold")

EXTERNAL_FAILURES: tuple[type[Exception], ...] = (ExecutionError, ExecutableNotFoundError)


class FailurePolicy(str, Enum):
    """What happens when a step fails."""

    FATAL = "fatal"
    WARN = "warn"


class StepOutcome(str, Enum):
    """How a step ended."""

    OK = "ok"
    WARNED = "warned"
    SKIPPED = "skipped"


def _always() -> bool:
    return True


@dataclass
class Step:
    """One named action of a pipeline.

    Attributes:
        name: Short identifier, used in logs and errors.
        action: Callable doing the work. Its return value is ignored.
        policy: Failure policy applied to external-tool errors.
        title: Line printed before the step runs.
        success: Line printed after the step succeeds.
        warning: Line printed when a ``WARN`` step fails.
        when: Predicate evaluated right before the step; ``False`` skips it.
    """

    name: str
    action: Callable[[], object]
    policy: FailurePolicy = FailurePolicy.FATAL
    title: "str | None" = None
    success: "str | None" = None
    warning: "str | None" = None
    when: Callable[[], bool] = _always


@dataclass
class PipelineResult:
    """Outcome of a pipeline run."""

    outcomes: dict[str, StepOutcome] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def completed(self) -> list[str]:
        return [name for name, outcome in self.outcomes.items() if outcome is StepOutcome.OK]


class StepRunner:
    """Runs steps strictly in order, enforcing each step's failure policy."""

    def __init__(self, *, failures: tuple[type[Exception], ...] = EXTERNAL_FAILURES) -> None:
        self.failures = failures

    def run(self, steps: Iterable[Step], result: "PipelineResult | None" = None) -> PipelineResult:
        """Run every step.

        Args:
            steps: Steps to run.
            result: Collects outcomes as steps finish, so a caller keeps them when a fatal step raises.

        Raises:
            BootstrapError: When a ``FATAL`` step fails.

        Returns:
            The per-step outcomes and collected warnings.
        """
        result = result if result is not None else PipelineResult()
        for step in steps:
            if not step.when():
                logger.debug("Skipping step %s", step.name)
                result.outcomes[step.name] = StepOutcome.SKIPPED
                continue
            if step.title:
                console.print(step.title)
            logger.debug("Starting step %s (%s)", step.name, step.policy.value)
            try:
                step.action()
            except self.failures as e:
                if step.policy is FailurePolicy.FATAL:
                    logger.error("Step %s failed: %s", step.name, e)
                    raise BootstrapError(step.name, e) from e
                message = step.warning or f"Step {step.name!r} failed, continuing..."
                logger.warning("Step %s failed: %s", step.name, e)
                console.print(f"[yellow]⚠️  {message}[/]")
                result.outcomes[step.name] = StepOutcome.WARNED
                result.warnings.append(message)
                continue
            result.outcomes[step.name] = StepOutcome.OK
            if step.success:
                console.print(step.success)
        return result
