"""Tests for react_scaffold.scaffolding.generator module."""

from pathlib import Path

import pytest

from react_scaffold.exceptions import ValidationError
from react_scaffold.models import ComponentRequest, ContextRequest, StoreRequest, StyleMode
from react_scaffold.scaffolding.generator import generate_entity, usage_lines


def _names(paths: list[Path]) -> list[str]:
    return [path.name for path in paths]


def test_generate_basic_component(tmp_path: Path) -> None:
    result = generate_entity(ComponentRequest(name="Button"), cwd=tmp_path)

    target = tmp_path / "Button"
    assert result.target_dir == target
    assert sorted(path.name for path in target.iterdir()) == ["Button.css", "Button.jsx", "index.js"]
    assert _names(result.files) == ["Button.css", "Button.jsx", "index.js"]
    assert (target / "index.js").read_text() == 'export { Button } from "./Button";\n'


def test_generate_typescript_styled_component_with_test(tmp_path: Path) -> None:
    request = ComponentRequest(
        name="Header", path="./src/components", typescript=True, style_mode=StyleMode.STYLED, include_test=True
    )

    result = generate_entity(request, cwd=tmp_path)

    target = tmp_path / "src" / "components" / "Header"
    assert sorted(path.name for path in target.iterdir()) == ["Header.test.tsx", "Header.tsx", "index.ts", "styled.ts"]
    assert "styled-components" in (target / "styled.ts").read_text()
    assert result.created_dirs == [tmp_path / "src" / "components", target]


def test_generate_component_with_store_and_context(tmp_path: Path) -> None:
    request = ComponentRequest(name="Dashboard", include_store=True, include_context=True)

    generate_entity(request, cwd=tmp_path)

    index = (tmp_path / "Dashboard" / "index.js").read_text()
    assert index.splitlines() == [
        'export { Dashboard } from "./Dashboard";',
        'export { useDashboardStore } from "./store";',
        'export { DashboardProvider, useDashboardContext, dashboardActions } from "./context";',
    ]


def test_generate_store(tmp_path: Path) -> None:
    generate_entity(StoreRequest(name="Cart", typescript=True), cwd=tmp_path)
    assert sorted(path.name for path in (tmp_path / "Cart").iterdir()) == ["index.ts", "store.ts"]


def test_generate_context(tmp_path: Path) -> None:
    generate_entity(ContextRequest(name="Auth"), cwd=tmp_path)
    assert sorted(path.name for path in (tmp_path / "Auth").iterdir()) == ["context.js", "index.js"]


def test_generate_overwrites_existing_files(tmp_path: Path) -> None:
    target = tmp_path / "Button"
    target.mkdir()
    (target / "Button.jsx").write_text("old")

    result = generate_entity(ComponentRequest(name="Button"), cwd=tmp_path)

    assert "Button component" in (target / "Button.jsx").read_text()
    assert result.created_dirs == []


def test_invalid_name_writes_nothing(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        generate_entity(ComponentRequest(name="button", path="./src"), cwd=tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_reports_progress_and_usage(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    generate_entity(ComponentRequest(name="Card", path="src"), cwd=tmp_path)

    out = capsys.readouterr().out
    assert "Directory created" in out
    assert "Card created successfully" in out
    assert 'from "./src/Card"' in out


def test_filesystem_errors_propagate(tmp_path: Path) -> None:
    (tmp_path / "blocked").write_text("not a directory")
    with pytest.raises(OSError):
        generate_entity(ComponentRequest(name="Card", path="blocked"), cwd=tmp_path)


def test_usage_lines_per_kind() -> None:
    assert any("useCartStore" in line for line in usage_lines(StoreRequest(name="Cart"), "./Cart"))
    context_lines = usage_lines(ContextRequest(name="Auth"), "./Auth")
    assert any("AuthProvider" in line for line in context_lines)
    assert any("useAuthContext" in line for line in context_lines)
    assert len(usage_lines(ComponentRequest(name="Card"), "./Card")) == 1


def test_bracketed_path_is_reported_verbatim(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = generate_entity(ComponentRequest(name="Card", path="./app/[slug]"), cwd=tmp_path)

    assert result.target_dir == tmp_path.resolve() / "app" / "[slug]" / "Card"
    out = capsys.readouterr().out
    assert "app/[slug]/Card" in out
    assert 'from "./app/[slug]/Card"' in out


def test_closing_tag_like_path_does_not_break_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    generate_entity(ComponentRequest(name="Card", path="./x[/y]"), cwd=tmp_path)

    assert (tmp_path / "x[" / "y]" / "Card" / "Card.jsx").is_file()
    assert 'from "./x[/y]/Card"' in capsys.readouterr().out


def test_usage_lines_escape_import_path() -> None:
    (line,) = usage_lines(ComponentRequest(name="Card"), "./app/[slug]/Card")
    assert "\\[slug]" in line


def test_symlinked_cwd_reports_relative_paths(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    result = generate_entity(ComponentRequest(name="Card", path="src"), cwd=link)

    assert result.target_dir == real.resolve() / "src" / "Card"
    out = capsys.readouterr().out
    assert 'from "./src/Card"' in out
    assert "../" not in out
