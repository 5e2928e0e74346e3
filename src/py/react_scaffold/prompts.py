"""Interactive question flow.

Questions are asked one at a time with :mod:`rich.prompt`. Invalid names and
paths are reported and asked again, so the flow only returns valid requests.
A ``KeyboardInterrupt`` raised while waiting for an answer propagates to the
caller.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from rich.prompt import Confirm, Prompt

from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import ValidationError
from react_scaffold.models import (
    DEFAULT_EXTRA_PACKAGES,
    DEFAULT_UI_KIT_COMPONENTS,
    EXTRA_PACKAGE_CHOICES,
    UI_KIT_COMPONENT_CHOICES,
    BoilerplateRequest,
    ComponentRequest,
    ContextRequest,
    EntityKind,
    GenerationRequest,
    ProjectRequest,
    Starter,
    StoreRequest,
    StyleMode,
    validate_entity_name,
    validate_project_name,
    validate_target_path,
)
from react_scaffold.utils import console

__all__ = (
    "ask_generation_request",
    "ask_multi_select",
    "ask_project_request",
    "parse_selection",
)

T = TypeVar("T")

PROJECT_CHOICE = "project"


def _ask_validated(question: str, validator: Callable[[str], T], default: "str | None" = None) -> T:
    while True:
        answer = Prompt.ask(question) if default is None else Prompt.ask(question, default=default)
        try:
            return validator(answer or "")
        except ValidationError as e:
            console.print(f"[red]❌ {e.message}[/]")


def parse_selection(answer: str, choices: Sequence[str], defaults: Sequence[str]) -> tuple[str, ...]:
    """Parse the answer to a multi-select question.

    Entries are separated by commas and may be choice names or 1-based
    numbers. An empty answer keeps ``defaults``; ``none`` selects nothing.

    Raises:
        ValidationError: If an entry matches no choice.

    Returns:
        The selected choices, in the order they are listed.
    """
    raw = answer.strip()
    if not raw:
        return tuple(defaults)
    if raw.lower() == "none":
        return ()
    selected: set[str] = set()
    for entry in raw.split(","):
        token = entry.strip()
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(choices):
            selected.add(choices[int(token) - 1])
        elif token in choices:
            selected.add(token)
        else:
            msg = f"Unknown choice: {token!r}."
            raise ValidationError(msg, "selection")
    return tuple(choice for choice in choices if choice in selected)


def ask_multi_select(question: str, choices: Sequence[str], defaults: Sequence[str]) -> tuple[str, ...]:
    """Ask the user to pick any number of ``choices``.

    Returns:
        The selected choices.
    """
    console.print(f"[bold]{question}[/]")
    for number, choice in enumerate(choices, start=1):
        marker = "[green]◉[/]" if choice in defaults else "[dim]○[/]"
        console.print(f"  {marker} {number:>2}. {choice}")
    while True:
        answer = Prompt.ask(
            "Comma-separated names or numbers (empty keeps the marked ones, 'none' selects nothing)",
            default="",
            show_default=False,
        )
        try:
            return parse_selection(answer, choices, defaults)
        except ValidationError as e:
            console.print(f"[red]❌ {e.message}[/]")


def ask_project_request(config: ScaffoldConfig) -> "ProjectRequest | BoilerplateRequest":
    """Ask the questions of a new project.

    Args:
        config: Shared settings, used for the editor name shown in questions.

    Returns:
        A Vite project request, or a boilerplate request for the Next.js starter.
    """
    starter = Starter(
        Prompt.ask("Which starter?", choices=[starter.value for starter in Starter], default=Starter.VITE.value)
    )
    project_name = _ask_validated("Project name", validate_project_name)

    if starter is Starter.NEXTJS:
        return BoilerplateRequest(
            project_name=project_name,
            install_dependencies=Confirm.ask("Install dependencies now?", default=True),
            remove_git_history=Confirm.ask("Remove the boilerplate git history?", default=True),
            open_editor=Confirm.ask(f"Open the project in {config.editor}?", default=False),
        )

    typescript = Confirm.ask("Use TypeScript?", default=True)
    install_ui_kit = Confirm.ask("Install shadcn/ui with Tailwind CSS?", default=True)
    ui_kit_components = (
        ask_multi_select("Which shadcn/ui components?", UI_KIT_COMPONENT_CHOICES, DEFAULT_UI_KIT_COMPONENTS)
        if install_ui_kit
        else ()
    )
    extra_packages = ask_multi_select("Which extra packages?", EXTRA_PACKAGE_CHOICES, DEFAULT_EXTRA_PACKAGES)
    init_git = Confirm.ask("Initialize a git repository?", default=True)
    open_editor = Confirm.ask(f"Open the project in {config.editor}?", default=False)
    return ProjectRequest(
        project_name=project_name,
        typescript=typescript,
        install_ui_kit=install_ui_kit,
        ui_kit_components=ui_kit_components,
        extra_packages=extra_packages,
        init_git=init_git,
        open_editor=open_editor,
    )


def ask_generation_request(config: ScaffoldConfig) -> GenerationRequest:
    """Ask what to create and return the matching request.

    Args:
        config: Shared settings.

    Returns:
        The request built from the answers.
    """
    kind = Prompt.ask(
        "What do you want to create?",
        choices=[*(kind.value for kind in EntityKind), PROJECT_CHOICE],
        default=EntityKind.COMPONENT.value,
    )
    if kind == PROJECT_CHOICE:
        return ask_project_request(config)

    name = _ask_validated(f"{EntityKind(kind).label} name (e.g. Button)", validate_entity_name)
    path = _ask_validated("Where should it be created?", validate_target_path, default=".")
    typescript = Confirm.ask("Use TypeScript?", default=False)

    if kind == EntityKind.STORE.value:
        return StoreRequest(name=name, path=path, typescript=typescript)
    if kind == EntityKind.CONTEXT.value:
        return ContextRequest(name=name, path=path, typescript=typescript)

    style_mode = StyleMode(
        Prompt.ask("How should it be styled?", choices=[mode.value for mode in StyleMode], default=StyleMode.CSS.value)
    )
    return ComponentRequest(
        name=name,
        path=path,
        typescript=typescript,
        style_mode=style_mode,
        include_test=Confirm.ask("Include a test file?", default=False),
        include_store=Confirm.ask("Also create a Zustand store?", default=False),
        include_context=Confirm.ask("Also create a Context API module?", default=False),
    )
