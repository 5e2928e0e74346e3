"""Vite + React project bootstrapper.

A project is created by a fixed sequence of steps run by
:class:`~react_scaffold.pipeline.StepRunner`. Steps that the project cannot
work without (creating the Vite skeleton, installing dependencies, writing
configuration) are fatal; optional ones (extra packages, shadcn/ui
components, git, editor) only produce warnings.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import msgspec
from rich.markup import escape
from rich.panel import Panel

from react_scaffold.bootstrap.examples import EXAMPLE_PACKAGES, plan_package_examples
from react_scaffold.bootstrap.ui_kit import ui_kit_steps
from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import BootstrapError, TargetExistsError
from react_scaffold.executor import JSExecutor, create_executor, format_command, run_command
from react_scaffold.models import ProjectRequest, validate_project_name
from react_scaffold.pipeline import FailurePolicy, PipelineResult, Step, StepRunner
from react_scaffold.scaffolding.templates import render_template
from react_scaffold.utils import console, write_text_file

__all__ = (
    "PROJECT_FOLDERS",
    "BootstrapResult",
    "create_project",
    "patch_tsconfig",
    "render_app",
)

logger = logging.getLogger("react_scaffold")

PROJECT_FOLDERS: tuple[str, ...] = (
    "src/components/ui",
    "src/pages",
    "src/hooks",
    "src/lib",
    "src/services",
    "src/stores",
    "src/contexts",
    "src/types",
    "src/utils",
    "src/assets",
)

TSCONFIG_FILES: tuple[str, ...] = ("tsconfig.json", "tsconfig.app.json")
PATH_ALIASES: dict[str, list[str]] = {"@/*": ["./src/*"]}

_APP_COMMANDS: tuple[dict[str, str], ...] = (
    {"cmd": "crc --interactive", "desc": "Interactive mode", "icon": "🎯"},
    {"cmd": "crc Button --ts --styled", "desc": "TypeScript component with Styled Components", "icon": "🎨"},
    {"cmd": "crc Card --emotion --test", "desc": "Emotion component with a test", "icon": "😊"},
    {"cmd": "crc Cart --zustand", "desc": "Component with a Zustand store", "icon": "🏪"},
    {"cmd": "crc Theme --context", "desc": "Component with a Context API module", "icon": "🎯"},
    {"cmd": "crc --project", "desc": "Create a full project", "icon": "🚀"},
)


@dataclass
class BootstrapResult:
    """Outcome of a project bootstrap.

    Attributes:
        ok: Whether every fatal step succeeded.
        project_dir: Directory of the project.
        warnings: Warnings of non-fatal steps, in order.
        generated_examples: Example files written for the extra packages, relative to the project.
        failed_step: Name of the fatal step that aborted the run.
    """

    ok: bool
    project_dir: Path
    warnings: list[str] = field(default_factory=list)
    generated_examples: list[str] = field(default_factory=list)
    failed_step: "str | None" = None


def render_app(request: ProjectRequest) -> str:
    """Render ``src/App`` for a project, with or without the UI kit."""
    return render_template(
        "project/App.jsx.j2",
        ui_kit=request.install_ui_kit,
        commands=list(_APP_COMMANDS),
        project_name=request.project_name,
        language="TypeScript" if request.typescript else "JavaScript",
        ext=request.jsx_extension,
    )


def patch_tsconfig(path: Path) -> bool:
    """Add the ``@/`` path alias to a tsconfig file.

    Files that are not plain JSON (tsconfig allows comments) are left alone.

    Args:
        path: The tsconfig file.

    Returns:
        ``True`` if the file was updated.
    """
    try:
        data = msgspec.json.decode(path.read_bytes())
    except msgspec.DecodeError as e:
        logger.debug("Could not decode %s: %s", path, e)
        return False
    if not isinstance(data, dict):
        return False
    compiler_options = data.setdefault("compilerOptions", {})
    compiler_options["baseUrl"] = "."
    compiler_options["paths"] = PATH_ALIASES
    path.write_bytes(msgspec.json.format(msgspec.json.encode(data), indent=2) + b"\n")
    return True


def _print_header(project_name: str) -> None:
    console.print(Panel.fit(f"[bold white]🚀 Creating project: {project_name}[/]", border_style="cyan"))
    console.print()


def _print_summary(
    request: ProjectRequest,
    project_dir: Path,
    executor: JSExecutor,
    generated_examples: list[str],
    warnings: list[str],
) -> None:
    console.print(
        Panel.fit(f"[bold white]✅ Project {request.project_name} created successfully![/]", border_style="green")
    )
    console.print("\n[bold white]📦 Installed:[/]")
    console.print("[dim]   • React + Vite[/]")
    if request.install_ui_kit:
        console.print("[dim]   • shadcn/ui + Tailwind CSS[/]")
    for package in request.extra_packages:
        console.print(f"[dim]   • {package}[/]")

    if generated_examples:
        console.print("\n[bold yellow]✨ Examples created:[/]")
        for path in generated_examples:
            console.print(f"[dim]   • {path}[/]")

    if warnings:
        console.print("\n[bold yellow]⚠️  Finished with warnings:[/]")
        for warning in warnings:
            console.print(f"[dim]   • {warning}[/]")

    console.print("\n[bold white]🚀 Next steps:[/]")
    console.print(f"[dim]   cd {project_dir.name}[/]")
    console.print(f"[dim]   {format_command(executor.dev_command)}[/]")
    if generated_examples:
        console.print("\n[bold white]📚 Examples:[/]")
        console.print("[dim]   Read EXAMPLES.md for the full guide[/]")
        console.print(f"[dim]   Import ExampleUsage in App.{request.jsx_extension} to see them running[/]")

    console.print("\n[bold white]📚 Available commands:[/]")
    console.print(f"[dim]   {format_command(executor.dev_command):<20} Start the development server[/]")
    console.print(f"[dim]   {format_command(executor.build_command):<20} Build for production[/]")
    console.print(f"[dim]   {format_command(executor.preview_command):<20} Preview the production build[/]")
    console.print()


def _build_steps(
    request: ProjectRequest,
    project_dir: Path,
    *,
    config: ScaffoldConfig,
    executor: JSExecutor,
    warnings: list[str],
    generated_examples: list[str],
) -> list[Step]:
    template = "react-ts" if request.typescript else "react"

    def create_folders() -> None:
        for folder in PROJECT_FOLDERS:
            (project_dir / folder).mkdir(parents=True, exist_ok=True)

    def write_example_files() -> None:
        write_text_file(project_dir / "src" / f"App.{request.jsx_extension}", render_app(request))
        write_text_file(
            project_dir / f"vite.config.{request.code_extension}",
            render_template("project/vite.config.js.j2", alias="@", source_dir="src"),
        )
        if not request.typescript:
            return
        for name in TSCONFIG_FILES:
            path = project_dir / name
            if not path.exists():
                continue
            if patch_tsconfig(path):
                logger.debug("Added path aliases to %s", path)
                continue
            message = f"{name} is not plain JSON; add the '@/*' path alias manually."
            console.print(f"[yellow]⚠️  {message}[/]")
            warnings.append(message)

    def write_package_examples() -> None:
        console.print("[blue]✨[/] [bold]Creating examples for the selected packages...[/]")
        for planned in plan_package_examples(request.typescript, request.extra_packages, config.api_url):
            path = write_text_file(project_dir / planned.filename, planned.content)
            logger.debug("Wrote %s", path)
            console.print(f"[dim]  {planned.icon} {planned.label}: {planned.filename}[/]")
            generated_examples.append(planned.filename)

    def init_git() -> None:
        run_command(["git", "init"], project_dir)
        run_command(["git", "add", "."], project_dir)
        run_command(["git", "commit", "-m", "Initial commit"], project_dir)

    steps = [
        Step(
            name="create-vite",
            action=lambda: executor.create_vite(
                request.project_name, template, project_dir.parent, package=config.vite_package
            ),
            title="[blue]📦[/] [bold]Creating Vite project...[/]",
            success="[green]✅[/] [bold]Vite project created![/]\n",
        ),
        Step(
            name="install",
            action=lambda: executor.install(project_dir),
            title="[blue]📦[/] [bold]Installing base dependencies...[/]",
            success="[green]✅[/] [bold]Base dependencies installed![/]\n",
        ),
    ]
    if request.install_ui_kit:
        steps.extend(
            ui_kit_steps(
                project_dir,
                typescript=request.typescript,
                components=request.ui_kit_components,
                executor=executor,
                config=config,
            )
        )
    steps.extend(
        [
            Step(
                name="extra-packages",
                action=lambda: executor.add(request.extra_packages, project_dir),
                policy=FailurePolicy.WARN,
                title=f"[blue]📦[/] [bold]Installing extra packages:[/] [dim]{', '.join(request.extra_packages)}[/]",
                success="[green]✅[/] [bold]Extra packages installed![/]\n",
                warning="Some extra packages may not have been installed.",
                when=lambda: bool(request.extra_packages),
            ),
            Step(
                name="folders",
                action=create_folders,
                title="[blue]📁[/] [bold]Creating folder structure...[/]",
                success="[green]✅[/] [bold]Folder structure created![/]\n",
            ),
            Step(
                name="example-files",
                action=write_example_files,
                title="[blue]📝[/] [bold]Creating example files...[/]",
                success="[green]✅[/] [bold]Example files created![/]\n",
            ),
            Step(
                name="package-examples",
                action=write_package_examples,
                success="[green]✅[/] [bold]Package examples created![/]\n",
                when=lambda: any(package in EXAMPLE_PACKAGES for package in request.extra_packages),
            ),
            Step(
                name="git",
                action=init_git,
                policy=FailurePolicy.WARN,
                title="[blue]📚[/] [bold]Initializing git...[/]",
                success="[green]✅[/] [bold]Git repository initialized![/]\n",
                warning="Git was not initialized.",
                when=lambda: request.init_git,
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
    )
    return steps


def create_project(
    request: ProjectRequest,
    *,
    config: "ScaffoldConfig | None" = None,
    executor: "JSExecutor | None" = None,
    runner: "StepRunner | None" = None,
    cwd: "Path | None" = None,
) -> BootstrapResult:
    """Bootstrap a Vite + React project.

    Args:
        request: What to create.
        config: Shared settings (default: read from the environment).
        executor: Package manager executor (default: built from the request or the config).
        runner: Step runner.
        cwd: Directory the project is created in (default: working directory).

    Raises:
        ValidationError: If the project name is not valid.
        TargetExistsError: If the project directory already exists. Nothing is written and no process is started.

    Returns:
        The bootstrap outcome. ``ok`` is ``False`` when a fatal step failed.
    """
    config = config or ScaffoldConfig()
    name = validate_project_name(request.project_name)
    root = Path(cwd) if cwd is not None else Path.cwd()
    project_dir = root / name
    if project_dir.exists():
        raise TargetExistsError(name)

    executor = executor or create_executor(request.package_manager or config.package_manager)
    runner = runner or StepRunner()
    warnings: list[str] = []
    generated_examples: list[str] = []

    _print_header(name)
    steps = _build_steps(
        request,
        project_dir,
        config=config,
        executor=executor,
        warnings=warnings,
        generated_examples=generated_examples,
    )
    outcome = PipelineResult()
    try:
        runner.run(steps, outcome)
    except BootstrapError as e:
        console.print(f"\n[bold red]❌ Error creating project:[/] [red]{escape(str(e))}[/]")
        console.print("[dim]\n💡 Try running the failed command manually.[/]")
        return BootstrapResult(
            ok=False,
            project_dir=project_dir,
            warnings=[*outcome.warnings, *warnings],
            generated_examples=generated_examples,
            failed_step=e.step,
        )

    all_warnings = [*outcome.warnings, *warnings]
    _print_summary(request, project_dir, executor, generated_examples, all_warnings)
    return BootstrapResult(
        ok=True,
        project_dir=project_dir,
        warnings=all_warnings,
        generated_examples=generated_examples,
    )
