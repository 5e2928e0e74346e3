"""Scaffolding engine for components, stores and contexts.

This module turns an entity request into a directory of files and prints a
report of what was created.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from react_scaffold.models import EntityKind, EntityRequest, validate_entity_name, validate_target_path
from react_scaffold.scaffolding.templates import PlannedFile, entity_files
from react_scaffold.utils import console, display_path, write_text_file

__all__ = ("GenerationResult", "generate_entity", "usage_lines")

logger = logging.getLogger("react_scaffold")

_KIND_ICONS: dict[EntityKind, str] = {
    EntityKind.COMPONENT: "🎨",
    EntityKind.STORE: "🏪",
    EntityKind.CONTEXT: "🎯",
}


@dataclass
class GenerationResult:
    """Files written for one request.

    Attributes:
        target_dir: Directory holding the generated unit.
        files: Paths written, in order.
        created_dirs: Directories that did not exist before.
    """

    target_dir: Path
    files: list[Path] = field(default_factory=list)
    created_dirs: list[Path] = field(default_factory=list)


def _import_path(relative_target: str) -> str:
    return relative_target if relative_target.startswith(("./", "../")) else f"./{relative_target}"


def usage_lines(request: EntityRequest, import_path: str) -> list[str]:
    """Build the usage example shown after generation.

    Args:
        request: The generation request.
        import_path: Path to import the unit from.

    Returns:
        Lines of Rich markup.
    """
    name = request.name
    source = escape(import_path)
    match request.kind:
        case EntityKind.STORE:
            return [
                f'[dim]import[/] {{ [yellow]use{name}Store[/] }} [dim]from[/] [green]"{source}"[/];',
                "[dim]// In a component:[/]",
                f"[dim]const[/] {{ [yellow]count, increment[/] }} = [yellow]use{name}Store[/]();",
            ]
        case EntityKind.CONTEXT:
            return [
                f"[dim]import[/] {{ [yellow]{name}Provider, use{name}Context[/] }} "
                f'[dim]from[/] [green]"{source}"[/];',
                "[dim]// In App.jsx:[/]",
                f"<[yellow]{name}Provider[/]> ... </[yellow]{name}Provider[/]>",
                "[dim]// In a component:[/]",
                f"[dim]const[/] {{ [yellow]state, dispatch[/] }} = [yellow]use{name}Context[/]();",
            ]
        case _:
            return [f'[dim]import[/] {{ [yellow]{name}[/] }} [dim]from[/] [green]"{source}"[/];']


def _print_header(request: EntityRequest, relative_target: str) -> None:
    icon = _KIND_ICONS[request.kind]
    console.print(
        Panel.fit(
            f"[bold white]{icon} Creating {request.kind.value}: {request.name}[/]\n"
            f"[dim]📁 Path: {escape(relative_target)}[/]",
            border_style="cyan",
        )
    )


def _print_summary(request: EntityRequest, planned: list[PlannedFile], relative_target: str) -> None:
    console.print()
    console.print(
        Panel.fit(f"[bold white]✅ {request.kind.label} {request.name} created successfully![/]", border_style="green")
    )
    console.print("\n[bold white]📁 Files created:[/]")
    for planned_file in planned:
        console.print(f"   {planned_file.icon}  {planned_file.filename}")
    console.print("\n[bold white]🚀 How to use:[/]")
    for line in usage_lines(request, _import_path(relative_target)):
        console.print(f"   {line}")
    console.print()
    console.print(f"[dim]💡 Tip: {request.kind.label} created in [white]{escape(relative_target)}[/][/]")
    console.print("[dim]💡 The index file lets you import straight from the folder![/]")
    console.print()


def generate_entity(request: EntityRequest, *, cwd: "Path | None" = None) -> GenerationResult:
    """Write the files of a component, store or context request.

    Missing directories are created. Existing files at the computed paths are
    overwritten. Filesystem errors propagate to the caller.

    Args:
        request: The generation request.
        cwd: Directory the request path is relative to (default: working directory).

    Returns:
        The written files.
    """
    name = validate_entity_name(request.name)
    root = (Path(cwd) if cwd is not None else Path.cwd()).resolve()
    base_dir = (root / validate_target_path(request.path)).resolve()
    target_dir = base_dir / name
    relative_target = display_path(target_dir, root)

    planned = entity_files(request)
    result = GenerationResult(target_dir=target_dir)

    if not base_dir.exists():
        base_dir.mkdir(parents=True, exist_ok=True)
        result.created_dirs.append(base_dir)
        console.print(f"[blue]📁[/] [bold]Directory created:[/] [dim]{escape(display_path(base_dir, root))}[/]")
    if not target_dir.exists():
        target_dir.mkdir(parents=True, exist_ok=True)
        result.created_dirs.append(target_dir)

    _print_header(request, relative_target)

    for planned_file in planned:
        path = write_text_file(target_dir / planned_file.filename, planned_file.content)
        logger.debug("Wrote %s (%d bytes)", path, len(planned_file.content))
        result.files.append(path)
        console.print(f"{planned_file.icon} [bold]{planned_file.label}:[/] [dim]{escape(display_path(path, root))}[/]")

    _print_summary(request, planned, relative_target)
    return result
