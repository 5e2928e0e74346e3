"""Generation requests.

A request is built once per invocation, from command-line flags or from the
interactive prompts, and handed to the scaffolding engine or the project
bootstrapper. Each kind of request carries only the fields that apply to it.
"""

import re
from dataclasses import dataclass
from enum import Enum

from react_scaffold.config import PackageManager
from react_scaffold.exceptions import StyleConflictError, ValidationError

__all__ = (
    "DEFAULT_EXTRA_PACKAGES",
    "DEFAULT_UI_KIT_COMPONENTS",
    "EXTRA_PACKAGE_CHOICES",
    "UI_KIT_COMPONENT_CHOICES",
    "BoilerplateRequest",
    "ComponentRequest",
    "ContextRequest",
    "EntityKind",
    "EntityRequest",
    "GenerationRequest",
    "ProjectRequest",
    "Starter",
    "StoreRequest",
    "StyleMode",
    "resolve_style_mode",
    "validate_entity_name",
    "validate_project_name",
    "validate_target_path",
)

ENTITY_NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

UI_KIT_COMPONENT_CHOICES: tuple[str, ...] = (
    "button",
    "card",
    "input",
    "label",
    "dialog",
    "dropdown-menu",
    "form",
    "select",
    "sheet",
    "table",
    "tabs",
    "toast",
)
DEFAULT_UI_KIT_COMPONENTS: tuple[str, ...] = ("button", "card", "input", "label")

EXTRA_PACKAGE_CHOICES: tuple[str, ...] = (
    "zustand",
    "@tanstack/react-query",
    "axios",
    "zod",
    "react-router-dom",
    "react-hook-form",
    "date-fns",
    "framer-motion",
)
DEFAULT_EXTRA_PACKAGES: tuple[str, ...] = ("zustand", "@tanstack/react-query", "axios")


class StyleMode(str, Enum):
    """How a component is styled."""

    CSS = "css"
    STYLED = "styled"
    EMOTION = "emotion"

    @property
    def uses_container(self) -> bool:
        """Whether the component renders a ``Container`` styled element."""
        return self is not StyleMode.CSS


class EntityKind(str, Enum):
    """What a non-project request creates."""

    COMPONENT = "component"
    STORE = "store"
    CONTEXT = "context"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Starter(str, Enum):
    """Project starters."""

    VITE = "vite"
    NEXTJS = "nextjs"


def validate_entity_name(value: str) -> str:
    """Validate a component, store or context name.

    Args:
        value: The raw name.

    Raises:
        ValidationError: If the name is empty or not a capitalized alphanumeric identifier.

    Returns:
        The trimmed name.
    """
    name = (value or "").strip()
    if not name:
        msg = "The name is required."
        raise ValidationError(msg, "name")
    if not ENTITY_NAME_PATTERN.match(name):
        msg = "The name must start with an uppercase letter and contain only letters and numbers."
        raise ValidationError(msg, "name")
    return name


def validate_target_path(value: str) -> str:
    """Validate the directory a generated unit is placed in.

    Only paths relative to the working directory are accepted; a value that
    climbs with ``..`` must be written explicitly as ``./...``.

    Raises:
        ValidationError: If the path is not acceptable.

    Returns:
        The path, ``.`` when empty.
    """
    path = (value or "").strip() or "."
    if ".." in path and not path.startswith("./"):
        msg = 'Use relative paths that start with "./".'
        raise ValidationError(msg, "path")
    return path


def validate_project_name(value: str) -> str:
    """Validate a project directory name.

    Raises:
        ValidationError: If the name is not lowercase letters, digits and dashes.

    Returns:
        The trimmed project name.
    """
    name = (value or "").strip()
    if not PROJECT_NAME_PATTERN.match(name):
        msg = "The project name may only contain lowercase letters, numbers and dashes."
        raise ValidationError(msg, "project_name")
    return name


def resolve_style_mode(styled: bool = False, emotion: bool = False) -> StyleMode:
    """Turn the styled/emotion flags into a single style mode.

    Raises:
        StyleConflictError: If both flags are set.

    Returns:
        The selected style mode.
    """
    if styled and emotion:
        raise StyleConflictError
    if styled:
        return StyleMode.STYLED
    if emotion:
        return StyleMode.EMOTION
    return StyleMode.CSS


@dataclass(frozen=True)
class ComponentRequest:
    """A React component, optionally with a test, a store and a context."""

    name: str
    path: str = "."
    typescript: bool = False
    style_mode: StyleMode = StyleMode.CSS
    include_test: bool = False
    include_store: bool = False
    include_context: bool = False

    kind = EntityKind.COMPONENT

    @property
    def includes_store(self) -> bool:
        return self.include_store

    @property
    def includes_context(self) -> bool:
        return self.include_context


@dataclass(frozen=True)
class StoreRequest:
    """A standalone zustand store."""

    name: str
    path: str = "."
    typescript: bool = False

    kind = EntityKind.STORE
    style_mode = StyleMode.CSS
    include_test = False
    includes_store = True
    includes_context = False


@dataclass(frozen=True)
class ContextRequest:
    """A standalone React context with reducer, provider and hook."""

    name: str
    path: str = "."
    typescript: bool = False

    kind = EntityKind.CONTEXT
    style_mode = StyleMode.CSS
    include_test = False
    includes_store = False
    includes_context = True


@dataclass(frozen=True)
class ProjectRequest:
    """A Vite + React project bootstrapped through external tools.

    Attributes:
        project_name: Name of the directory to create.
        typescript: Use the ``react-ts`` Vite template.
        install_ui_kit: Install and configure shadcn/ui with Tailwind CSS.
        ui_kit_components: shadcn/ui components to add (ignored without the UI kit).
        extra_packages: Additional npm packages installed in one batch.
        init_git: Create a git repository with an initial commit.
        open_editor: Open the project in the configured editor when done.
        package_manager: Overrides the configured package manager.
    """

    project_name: str
    typescript: bool = True
    install_ui_kit: bool = True
    ui_kit_components: tuple[str, ...] = DEFAULT_UI_KIT_COMPONENTS
    extra_packages: tuple[str, ...] = DEFAULT_EXTRA_PACKAGES
    init_git: bool = True
    open_editor: bool = False
    package_manager: "PackageManager | None" = None

    starter = Starter.VITE

    @property
    def code_extension(self) -> str:
        return "ts" if self.typescript else "js"

    @property
    def jsx_extension(self) -> str:
        return "tsx" if self.typescript else "jsx"


@dataclass(frozen=True)
class BoilerplateRequest:
    """A project cloned from the Next.js boilerplate repository."""

    project_name: str
    install_dependencies: bool = True
    remove_git_history: bool = True
    open_editor: bool = False
    repository: "str | None" = None

    starter = Starter.NEXTJS


EntityRequest = ComponentRequest | StoreRequest | ContextRequest
GenerationRequest = ComponentRequest | StoreRequest | ContextRequest | ProjectRequest | BoilerplateRequest
