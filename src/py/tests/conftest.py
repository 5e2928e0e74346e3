from collections.abc import Generator

import pytest
from click.testing import CliRunner

# Environment variables that may affect test behavior - clear before each test
_SCAFFOLD_ENV_VARS = [
    "REACT_SCAFFOLD_PACKAGE_MANAGER",
    "REACT_SCAFFOLD_LOG_LEVEL",
    "REACT_SCAFFOLD_EDITOR",
    "REACT_SCAFFOLD_BOILERPLATE_REPO",
    "VITE_API_URL",
]


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear react-scaffold environment variables before each test for isolation."""
    for var in _SCAFFOLD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
