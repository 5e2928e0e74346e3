"""JavaScript package manager executors.

This module provides executor classes for the package managers a project can
be bootstrapped with (npm, pnpm, Yarn, Bun), plus a helper to run other
binaries such as git or an editor. Every call blocks until the process exits.
"""

import logging
import platform
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from react_scaffold.exceptions import ExecutableNotFoundError, ExecutionError

__all__ = (
    "BunExecutor",
    "CommandExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "create_executor",
    "format_command",
    "run_command",
)

logger = logging.getLogger("react_scaffold")


def format_command(command: "Sequence[str] | None") -> str:
    """Render a command for display."""
    if not command:
        return ""
    return " ".join(command)


def _resolve(executable: str) -> str:
    path = shutil.which(executable)
    if path is None:
        raise ExecutableNotFoundError(executable)
    return path


def run_command(command: Sequence[str], cwd: "Path | None" = None, *, input_text: "str | None" = None) -> None:
    """Run an external binary and wait for it to finish.

    Output is inherited so the user sees it live.

    Args:
        command: Program and arguments. The program is looked up on ``PATH``.
        cwd: Working directory.
        input_text: Text written to the process's standard input.

    Raises:
        ExecutionError: If the process exits with a non-zero status.
    """
    executable = _resolve(command[0])
    resolved = [executable, *command[1:]]
    logger.debug("Running %s (cwd=%s)", format_command(command), cwd or Path.cwd())
    process = subprocess.run(
        resolved,
        cwd=cwd,
        input=input_text,
        text=True,
        shell=platform.system() == "Windows",
        check=False,
    )
    if process.returncode != 0:
        raise ExecutionError(list(command), process.returncode)


class JSExecutor(ABC):
    """Abstract base class for Javascript package manager executors."""

    bin_name: ClassVar[str]
    dlx_bin: ClassVar["tuple[str, ...]"]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def create_vite(self, project_name: str, template: str, cwd: Path, *, package: str = "vite@latest") -> None:
        """Create a Vite project skeleton without interactive questions."""

    @abstractmethod
    def install(self, cwd: Path) -> None:
        """Install the dependencies declared in package.json."""

    @abstractmethod
    def add(self, packages: Sequence[str], cwd: Path, *, dev: bool = False) -> None:
        """Install named packages."""

    @abstractmethod
    def dlx(self, args: Sequence[str], cwd: Path) -> None:
        """Download and run a package binary (npx and friends)."""

    @abstractmethod
    def execute(self, args: Sequence[str], cwd: Path, *, input_text: "str | None" = None) -> None:
        """Execute a package manager command and wait for it to finish."""

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        return _resolve(self.bin_name)

    @property
    def install_command(self) -> list[str]:
        """The command used to install declared dependencies (e.g., npm install)."""
        return [self.bin_name, "install"]

    @property
    def dev_command(self) -> list[str]:
        """The command used to start the Vite dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]

    @property
    def build_command(self) -> list[str]:
        """The command used to build for production (e.g., npm run build)."""
        return [self.bin_name, "run", "build"]

    @property
    def preview_command(self) -> list[str]:
        """The command used to preview a production build (e.g., npm run preview)."""
        return [self.bin_name, "run", "preview"]

    def create_args(self, project_name: str, template: str, package: str) -> list[str]:
        return ["create", package.replace("@latest", ""), project_name, "--template", template]

    def add_args(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return ["add", *(["-D"] if dev else []), *packages]


class CommandExecutor(JSExecutor):
    """Generic command executor."""

    def create_vite(self, project_name: str, template: str, cwd: Path, *, package: str = "vite@latest") -> None:
        # The Vite wizard still asks a couple of yes/no questions; answer "no" to all of them.
        self.execute(self.create_args(project_name, template, package), cwd, input_text="n\nn\n")

    def install(self, cwd: Path) -> None:
        self.execute(["install"], cwd)

    def add(self, packages: Sequence[str], cwd: Path, *, dev: bool = False) -> None:
        if not packages:
            return
        self.execute(self.add_args(packages, dev=dev), cwd)

    def dlx(self, args: Sequence[str], cwd: Path) -> None:
        command = list(self.dlx_bin)
        run_command([*command, *args], cwd)

    def execute(self, args: Sequence[str], cwd: Path, *, input_text: "str | None" = None) -> None:
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        command = list(args) if args and Path(args[0]).name == Path(executable).name else [executable, *args]
        logger.debug("Running %s (cwd=%s)", format_command([self.bin_name, *args]), cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            input=input_text,
            text=True,
            shell=platform.system() == "Windows",
            check=False,
            stdout=None,  # inherit for live output
            stderr=subprocess.PIPE,
        )
        if process.returncode != 0:
            raise ExecutionError(command, process.returncode, process.stderr or "")


class NodeExecutor(CommandExecutor):
    """npm executor."""

    bin_name = "npm"
    dlx_bin = ("npx",)

    def create_args(self, project_name: str, template: str, package: str) -> list[str]:
        return ["create", package, project_name, "--", "--template", template]

    def add_args(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return ["install", *(["-D"] if dev else []), *packages]


class PnpmExecutor(CommandExecutor):
    """pnpm executor."""

    bin_name = "pnpm"
    dlx_bin = ("pnpm", "dlx")


class YarnExecutor(CommandExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    dlx_bin = ("yarn", "dlx")


class BunExecutor(CommandExecutor):
    """Bun executor."""

    bin_name = "bun"
    dlx_bin = ("bunx",)

    def add_args(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        return ["add", *(["-d"] if dev else []), *packages]


_EXECUTORS: dict[str, type[JSExecutor]] = {
    "npm": NodeExecutor,
    "pnpm": PnpmExecutor,
    "yarn": YarnExecutor,
    "bun": BunExecutor,
}


def create_executor(package_manager: str, executable_path: "Path | str | None" = None) -> JSExecutor:
    """Build the executor for a package manager name.

    Raises:
        ValueError: If the package manager is unknown.

    Returns:
        The executor.
    """
    try:
        executor_class = _EXECUTORS[package_manager]
    except KeyError:
        msg = f"Unsupported package manager: {package_manager!r}"
        raise ValueError(msg) from None
    return executor_class(executable_path)
