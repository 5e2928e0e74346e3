"""Next.js starter cloned from the boilerplate repository."""

import logging
import shutil
from pathlib import Path
from typing import Any

import msgspec
from rich.markup import escape
from rich.panel import Panel

from react_scaffold.bootstrap.project import BootstrapResult
from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import BootstrapError, TargetExistsError
from react_scaffold.executor import JSExecutor, format_command, run_command
from react_scaffold.models import BoilerplateRequest, validate_project_name
from react_scaffold.pipeline import EXTERNAL_FAILURES, FailurePolicy, PipelineResult, Step, StepRunner
from react_scaffold.utils import console

__all__ = ("BOILERPLATE_FAILURES", "clone_boilerplate", "rewrite_package_json")

logger = logging.getLogger("react_scaffold")

# Cleaning up the clone touches files the boilerplate owns, so filesystem and
# decode errors are step failures here rather than fatal crashes.
BOILERPLATE_FAILURES: tuple[type[Exception], ...] = (*EXTERNAL_FAILURES, OSError, msgspec.DecodeError)

_DROPPED_PACKAGE_FIELDS: tuple[str, ...] = ("repository", "bugs", "homepage")


def rewrite_package_json(path: Path, project_name: str) -> None:
    """Rename the cloned package and drop the boilerplate's repository metadata.

    Args:
        path: The ``package.json`` file.
        project_name: New package name.

    Raises:
        msgspec.ValidationError: If the file does not hold a JSON object.
    """
    package = msgspec.json.decode(path.read_bytes(), type=dict[str, Any])
    package["name"] = project_name
    package["version"] = "1.0.0"
    for key in _DROPPED_PACKAGE_FIELDS:
        package.pop(key, None)
    path.write_bytes(msgspec.json.format(msgspec.json.encode(package), indent=2) + b"\n")
    logger.debug("Renamed package in %s to %s", path, project_name)


def _print_summary(request: BoilerplateRequest, executor: JSExecutor, config: ScaffoldConfig) -> None:
    console.print(
        Panel.fit(f"[bold white]✅ Next.js boilerplate created: {request.project_name}[/]", border_style="green")
    )
    console.print("\n[bold white]⚡ Included in the boilerplate:[/]")
    for feature in (
        "Next.js with the App Router",
        "TypeScript",
        "Tailwind CSS",
        "shadcn/ui components",
        "ESLint + Prettier",
    ):
        console.print(f"[dim]   • {feature}[/]")

    console.print("\n[bold white]🚀 Next steps:[/]")
    console.print(f"[dim]   cd {request.project_name}[/]")
    if not request.install_dependencies:
        console.print(f"[dim]   {format_command(executor.install_command)}[/]")
    console.print(f"[dim]   {format_command(executor.dev_command)}[/]")
    if not request.open_editor:
        console.print(f"[dim]   {config.editor} {request.project_name}[/]")

    console.print("\n[bold yellow]🔗 Links:[/]")
    console.print(f"[dim]   📖 Boilerplate: {escape(request.repository or config.boilerplate_repository)}[/]")
    console.print("[dim]   📘 Next.js: https://nextjs.org/docs[/]")
    console.print("[dim]   🎨 shadcn/ui: https://ui.shadcn.com[/]")
    console.print()


def clone_boilerplate(
    request: BoilerplateRequest,
    *,
    config: "ScaffoldConfig | None" = None,
    executor: "JSExecutor | None" = None,
    runner: "StepRunner | None" = None,
    cwd: "Path | None" = None,
) -> BootstrapResult:
    """Create a project from the Next.js boilerplate repository.

    Only cloning is fatal. Every later step warns and continues.

    Raises:
        ValidationError: If the project name is not valid.
        TargetExistsError: If the project directory already exists.

    Returns:
        The bootstrap outcome.
    """
    config = config or ScaffoldConfig()
    name = validate_project_name(request.project_name)
    root = Path(cwd) if cwd is not None else Path.cwd()
    project_dir = root / name
    if project_dir.exists():
        raise TargetExistsError(name)

    executor = executor or config.get_executor()
    runner = runner or StepRunner(failures=BOILERPLATE_FAILURES)
    repository = request.repository or config.boilerplate_repository
    package_json = project_dir / "package.json"

    def init_git() -> None:
        run_command(["git", "init"], project_dir)
        run_command(["git", "add", "."], project_dir)
        run_command(["git", "commit", "-m", "Initial commit from Next.js boilerplate"], project_dir)

    steps = [
        Step(
            name="clone",
            action=lambda: run_command(["git", "clone", repository, name], root),
            title="[blue]📥[/] [bold]Cloning repository...[/]",
            success="[green]✅[/] [bold]Repository cloned![/]\n",
        ),
        Step(
            name="remove-git-history",
            action=lambda: shutil.rmtree(project_dir / ".git"),
            policy=FailurePolicy.WARN,
            title="[blue]🗑️ [/] [bold]Removing git history...[/]",
            success="[green]✅[/] [bold]Git history removed![/]\n",
            warning="Could not remove the git history.",
            when=lambda: request.remove_git_history and (project_dir / ".git").exists(),
        ),
        Step(
            name="package-json",
            action=lambda: rewrite_package_json(package_json, name),
            policy=FailurePolicy.WARN,
            title="[blue]📝[/] [bold]Updating package.json...[/]",
            success="[green]✅[/] [bold]package.json updated![/]\n",
            warning="Could not update package.json.",
            when=package_json.exists,
        ),
        Step(
            name="install",
            action=lambda: executor.install(project_dir),
            policy=FailurePolicy.WARN,
            title="[blue]📦[/] [bold]Installing dependencies...[/]\n[dim]  This may take a few minutes...[/]",
            success="[green]✅[/] [bold]Dependencies installed![/]\n",
            warning=f"Could not install dependencies; run {format_command(executor.install_command)!r} manually.",
            when=lambda: request.install_dependencies,
        ),
        Step(
            name="git",
            action=init_git,
            policy=FailurePolicy.WARN,
            title="[blue]📚[/] [bold]Initializing a new git repository...[/]",
            success="[green]✅[/] [bold]New git repository initialized![/]\n",
            warning="Git was not initialized.",
            when=lambda: request.remove_git_history,
        ),
        Step(
            name="editor",
            action=lambda: run_command([config.editor, str(project_dir)]),
            policy=FailurePolicy.WARN,
            title=f"[blue]🆚[/] [bold]Opening in {config.editor}...[/]",
            success="[green]✅[/] [bold]Project opened![/]\n",
            warning=f"Could not open the project with {config.editor!r}; is it on your PATH?",
            when=lambda: request.open_editor,
        ),
    ]

    console.print(Panel.fit(f"[bold white]⚡ Cloning Next.js boilerplate: {name}[/]", border_style="cyan"))
    console.print()
    outcome = PipelineResult()
    try:
        runner.run(steps, outcome)
    except BootstrapError as e:
        console.print(f"\n[bold red]❌ Error cloning boilerplate:[/] [red]{escape(str(e))}[/]")
        console.print("[dim]\n💡 Check your internet connection and that git is installed, then try again.[/]")
        return BootstrapResult(ok=False, project_dir=project_dir, warnings=outcome.warnings, failed_step=e.step)

    _print_summary(request, executor, config)
    return BootstrapResult(ok=True, project_dir=project_dir, warnings=outcome.warnings)
