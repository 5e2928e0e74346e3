"""Command line entry point (``crc`` / ``create-react-component``)."""

import sys
from typing import Optional

from click import Choice, argument, command, option, version_option
from rich.markup import escape

from react_scaffold.__metadata__ import __version__
from react_scaffold.bootstrap import clone_boilerplate, create_project
from react_scaffold.config import PACKAGE_MANAGERS, ScaffoldConfig
from react_scaffold.exceptions import TargetExistsError, ValidationError
from react_scaffold.models import (
    DEFAULT_EXTRA_PACKAGES,
    DEFAULT_UI_KIT_COMPONENTS,
    BoilerplateRequest,
    ComponentRequest,
    GenerationRequest,
    ProjectRequest,
    Starter,
    StyleMode,
    resolve_style_mode,
    validate_entity_name,
    validate_project_name,
    validate_target_path,
)
from react_scaffold.prompts import ask_generation_request, ask_project_request
from react_scaffold.scaffolding import generate_entity
from react_scaffold.utils import configure_logging, console

__all__ = ("EXIT_ABORTED", "EXIT_EXTERNAL", "EXIT_FILESYSTEM", "EXIT_OK", "EXIT_VALIDATION", "main")

EXIT_OK = 0
EXIT_VALIDATION = 1
EXIT_EXTERNAL = 2
EXIT_FILESYSTEM = 3
EXIT_ABORTED = 130

EPILOG = """\b
Examples:
  crc --interactive                    Interactive mode
  crc Button                           Basic component in the current directory
  crc Modal --ts                       TypeScript component
  crc Header --styled                  Component with Styled Components
  crc Sidebar --emotion                Component with Emotion
  crc Card --path ./src                Component inside ./src
  crc Form --ts --test -p ./src/forms  TypeScript component with a test
  crc Cart --zustand --ts              Component with a Zustand store
  crc Auth --context --ts              Component with a Context API module
  crc Dashboard -z -c --ts             Component with a store and a context
  crc --project                        Create a project interactively
  crc my-app --project --ts            Vite + React + shadcn/ui project
  crc my-app --project --starter nextjs
                                       Project from the Next.js boilerplate

\b
Generated layout:
  default    Name/ Name.jsx + Name.css + index.js
  --styled   Name/ Name.jsx + styled.js + index.js
  --emotion  Name/ Name.jsx + styles.js + index.js
  --test     adds Name.test.jsx
  --zustand  adds store.js
  --context  adds context.js
  --ts       uses .tsx/.ts instead of .jsx/.js
"""


def _split_list(value: "Optional[str]", default: "tuple[str, ...]") -> "tuple[str, ...]":
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _request_from_flags(
    name: str,
    *,
    project: bool,
    starter: str,
    typescript: bool,
    style_mode: StyleMode,
    path: str,
    test: bool,
    zustand: bool,
    context: bool,
    ui_kit: bool,
    ui_components: "Optional[str]",
    packages: "Optional[str]",
    git: bool,
    open_editor: bool,
    package_manager: "Optional[str]",
) -> GenerationRequest:
    if project:
        project_name = validate_project_name(name)
        if Starter(starter) is Starter.NEXTJS:
            return BoilerplateRequest(project_name=project_name, open_editor=open_editor)
        return ProjectRequest(
            project_name=project_name,
            typescript=typescript,
            install_ui_kit=ui_kit,
            ui_kit_components=_split_list(ui_components, DEFAULT_UI_KIT_COMPONENTS) if ui_kit else (),
            extra_packages=_split_list(packages, DEFAULT_EXTRA_PACKAGES),
            init_git=git,
            open_editor=open_editor,
            package_manager=package_manager,  # type: ignore[arg-type]
        )
    return ComponentRequest(
        name=validate_entity_name(name),
        path=validate_target_path(path),
        typescript=typescript,
        style_mode=style_mode,
        include_test=test,
        include_store=zustand,
        include_context=context,
    )


def _run(request: GenerationRequest, config: ScaffoldConfig) -> bool:
    match request:
        case ProjectRequest():
            return create_project(request, config=config).ok
        case BoilerplateRequest():
            return clone_boilerplate(request, config=config).ok
        case _:
            generate_entity(request)
            return True


@command(
    name="crc",
    help="Generate React components, Zustand stores, Context API modules and whole projects.",
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@argument("name", required=False)
@option("-t", "--ts", "typescript", is_flag=True, default=False, help="Generate TypeScript files.")
@option("-s", "--styled", is_flag=True, default=False, help="Style the component with Styled Components.")
@option("-e", "--emotion", is_flag=True, default=False, help="Style the component with Emotion.")
@option("-p", "--path", default=".", show_default=True, help="Directory to create the component in.")
@option("-i", "--interactive", is_flag=True, default=False, help="Ask questions instead of reading flags.")
@option("--test", is_flag=True, default=False, help="Generate a test file.")
@option("-z", "--zustand", is_flag=True, default=False, help="Generate a Zustand store.")
@option("-c", "--context", is_flag=True, default=False, help="Generate a Context API module.")
@option("--project", is_flag=True, default=False, help="Create a whole project instead of a component.")
@option(
    "--starter",
    type=Choice([starter.value for starter in Starter]),
    default=Starter.VITE.value,
    show_default=True,
    help="Project starter.",
)
@option("--ui-kit/--no-ui-kit", default=True, show_default=True, help="Install shadcn/ui with Tailwind CSS.")
@option("--ui-components", default=None, help="Comma-separated shadcn/ui components to add.")
@option("--packages", default=None, help="Comma-separated extra packages to install.")
@option("--git/--no-git", default=True, show_default=True, help="Initialize a git repository.")
@option("--open", "open_editor", is_flag=True, default=False, help="Open the project in the editor when done.")
@option("--package-manager", type=Choice(list(PACKAGE_MANAGERS)), default=None, help="Package manager to use.")
@option("-v", "--verbose", is_flag=True, default=False, help="Enable verbose output.")
@option("-q", "--quiet", is_flag=True, default=False, help="Only print errors from the logger.")
@version_option(__version__, "--version", prog_name="crc")
def main(
    name: "Optional[str]",
    typescript: bool,
    styled: bool,
    emotion: bool,
    path: str,
    interactive: bool,
    test: bool,
    zustand: bool,
    context: bool,
    project: bool,
    starter: str,
    ui_kit: bool,
    ui_components: "Optional[str]",
    packages: "Optional[str]",
    git: bool,
    open_editor: bool,
    package_manager: "Optional[str]",
    verbose: bool,
    quiet: bool,
) -> None:
    """Generate React components, stores, contexts and projects."""
    log_level = "verbose" if verbose else "quiet" if quiet else None
    try:
        config = ScaffoldConfig(package_manager=package_manager, log_level=log_level)  # type: ignore[arg-type]
    except ValueError as e:
        console.print(f"[bold red]❌ ERROR:[/] [red]{escape(str(e))}[/]")
        sys.exit(EXIT_VALIDATION)
    configure_logging(config.log_level)

    try:
        style_mode = resolve_style_mode(styled, emotion)
        if name and not interactive:
            request = _request_from_flags(
                name,
                project=project,
                starter=starter,
                typescript=typescript,
                style_mode=style_mode,
                path=path,
                test=test,
                zustand=zustand,
                context=context,
                ui_kit=ui_kit,
                ui_components=ui_components,
                packages=packages,
                git=git,
                open_editor=open_editor,
                package_manager=package_manager,
            )
        elif project:
            request = ask_project_request(config)
        else:
            request = ask_generation_request(config)
        ok = _run(request, config)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]👋 Cancelled.[/]")
        sys.exit(EXIT_ABORTED)
    except ValidationError as e:
        console.print(f"[bold red]❌ ERROR:[/] [red]{escape(e.message)}[/]")
        sys.exit(EXIT_VALIDATION)
    except TargetExistsError as e:
        console.print(f"[bold red]❌ ERROR:[/] [red]{escape(str(e))}[/]")
        sys.exit(EXIT_VALIDATION)
    except OSError as e:
        console.print(f"[bold red]❌ Could not write files:[/] [red]{escape(str(e))}[/]")
        sys.exit(EXIT_FILESYSTEM)
    if not ok:
        sys.exit(EXIT_EXTERNAL)
