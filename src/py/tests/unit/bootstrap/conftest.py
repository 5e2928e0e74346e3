from collections.abc import Sequence
from pathlib import Path

import pytest

from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import ExecutionError
from react_scaffold.executor import JSExecutor


class FakeExecutor(JSExecutor):
    """Records package manager calls instead of starting processes.

    ``create_vite`` lays down a minimal skeleton so later steps have a
    project directory to write into.
    """

    bin_name = "npm"
    dlx_bin = ("npx",)

    def __init__(self, fail_on: "Sequence[str]" = (), tsconfig: "dict[str, str] | None" = None) -> None:
        super().__init__()
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.fail_on = set(fail_on)
        self.tsconfig = tsconfig or {}

    def _record(self, kind: str, *args: str) -> None:
        self.calls.append((kind, args))
        if kind in self.fail_on or any(f"{kind}:{arg}" in self.fail_on for arg in args):
            raise ExecutionError([self.bin_name, kind, *args], 1)

    def create_vite(self, project_name: str, template: str, cwd: Path, *, package: str = "vite@latest") -> None:
        self._record("create", project_name, template)
        project_dir = cwd / project_name
        (project_dir / "src").mkdir(parents=True)
        (project_dir / "package.json").write_text('{"name": "%s"}\n' % project_name)
        for name, content in self.tsconfig.items():
            (project_dir / name).write_text(content)

    def install(self, cwd: Path) -> None:
        self._record("install")

    def add(self, packages: Sequence[str], cwd: Path, *, dev: bool = False) -> None:
        self._record("add-dev" if dev else "add", *packages)

    def dlx(self, args: Sequence[str], cwd: Path) -> None:
        self._record("dlx", *args)

    def execute(self, args: Sequence[str], cwd: Path, *, input_text: "str | None" = None) -> None:
        self._record("execute", *args)

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.calls]


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def scaffold_config() -> ScaffoldConfig:
    return ScaffoldConfig(package_manager="npm", api_url="http://localhost:8000", editor="code", log_level="normal")


@pytest.fixture
def executor_factory() -> "type[FakeExecutor]":
    return FakeExecutor
