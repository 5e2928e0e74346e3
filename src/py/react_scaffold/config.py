"""React-Scaffold configuration.

Every setting can be given explicitly or taken from the environment::

    # Defaults (npm, normal logging, https://api.example.com)
    ScaffoldConfig()

    # pnpm, with the generated HTTP client pointed at a local API
    ScaffoldConfig(package_manager="pnpm", api_url="http://localhost:8000")

    # Environment variables
    export REACT_SCAFFOLD_PACKAGE_MANAGER=bun
    export VITE_API_URL=https://api.internal
"""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, cast

if TYPE_CHECKING:
    from react_scaffold.executor import JSExecutor

__all__ = (
    "DEFAULT_API_URL",
    "DEFAULT_BOILERPLATE_REPOSITORY",
    "LOG_LEVELS",
    "PACKAGE_MANAGERS",
    "LogLevel",
    "PackageManager",
    "ScaffoldConfig",
    "resolve_log_level",
    "resolve_package_manager",
)

PackageManager = Literal["npm", "pnpm", "yarn", "bun"]
LogLevel = Literal["quiet", "normal", "verbose"]

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "pnpm", "yarn", "bun")
LOG_LEVELS: tuple[str, ...] = ("quiet", "normal", "verbose")

DEFAULT_API_URL = "https://api.example.com"
DEFAULT_BOILERPLATE_REPOSITORY = "https://github.com/thiagonmiziara/boileerplate-next.git"


def resolve_package_manager(value: "str | None" = None) -> PackageManager:
    """Resolve the package manager from an explicit value or the environment.

    Reads REACT_SCAFFOLD_PACKAGE_MANAGER when ``value`` is None. ``node`` is
    accepted as an alias of ``npm``.

    Raises:
        ValueError: If an unsupported package manager is given.

    Returns:
        The package manager name.
    """
    raw = value if value is not None else os.getenv("REACT_SCAFFOLD_PACKAGE_MANAGER", "npm")
    match raw.strip().lower():
        case "" | "npm" | "node":
            return "npm"
        case "pnpm":
            return "pnpm"
        case "yarn":
            return "yarn"
        case "bun":
            return "bun"
        case _:
            msg = f"Invalid package manager: {raw!r}. Expected one of: {', '.join(PACKAGE_MANAGERS)}"
            raise ValueError(msg)


def resolve_log_level(value: "str | None" = None) -> LogLevel:
    """Resolve the console verbosity.

    Precedence: explicit value > REACT_SCAFFOLD_LOG_LEVEL > ``normal``.

    Raises:
        ValueError: If an unknown level is given.

    Returns:
        The log level name.
    """
    raw = value if value is not None else os.getenv("REACT_SCAFFOLD_LOG_LEVEL", "normal")
    level = raw.strip().lower() or "normal"
    if level not in LOG_LEVELS:
        msg = f"Invalid log level: {raw!r}. Expected one of: {', '.join(LOG_LEVELS)}"
        raise ValueError(msg)
    return cast("LogLevel", level)


@dataclass
class ScaffoldConfig:
    """Settings shared by the scaffolding engine and the project bootstrapper.

    Attributes:
        package_manager: JavaScript package manager used for installs.
        api_url: Default base URL baked into the generated HTTP client examples.
            The generated code still prefers ``import.meta.env.VITE_API_URL`` at runtime.
        editor: Editor binary used to open a created project.
        boilerplate_repository: Git URL of the Next.js boilerplate starter.
        vite_package: Package spec passed to ``<pm> create``.
        ui_kit_cli: Package spec of the shadcn/ui CLI.
        log_level: Console verbosity (quiet, normal, verbose).
    """

    package_manager: PackageManager = field(default_factory=resolve_package_manager)
    api_url: str = field(default_factory=lambda: os.getenv("VITE_API_URL") or DEFAULT_API_URL)
    editor: str = field(default_factory=lambda: os.getenv("REACT_SCAFFOLD_EDITOR") or "code")
    boilerplate_repository: str = field(
        default_factory=lambda: os.getenv("REACT_SCAFFOLD_BOILERPLATE_REPO") or DEFAULT_BOILERPLATE_REPOSITORY
    )
    vite_package: str = "vite@latest"
    ui_kit_cli: str = "shadcn@latest"
    log_level: LogLevel = field(default_factory=resolve_log_level)

    def __post_init__(self) -> None:
        self.package_manager = resolve_package_manager(self.package_manager)
        self.log_level = resolve_log_level(self.log_level)
        self.api_url = self.api_url.rstrip("/") or DEFAULT_API_URL

    def get_executor(self) -> "JSExecutor":
        """Build the executor for the configured package manager.

        Returns:
            A JSExecutor instance.
        """
        from react_scaffold.executor import create_executor

        return create_executor(self.package_manager)
