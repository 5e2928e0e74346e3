"""Tests for react_scaffold.bootstrap.ui_kit module."""

from pathlib import Path
from typing import Any

import msgspec
import pytest

from react_scaffold.bootstrap.ui_kit import (
    CONTENT_GLOBS,
    UI_KIT_DEPENDENCIES,
    UI_KIT_DEV_DEPENDENCIES,
    components_manifest,
    render_index_css,
    render_tailwind_config,
    ui_kit_steps,
    update_tailwind_content,
    write_ui_kit_files,
)
from react_scaffold.config import ScaffoldConfig
from react_scaffold.pipeline import FailurePolicy, StepOutcome, StepRunner



@pytest.mark.parametrize("typescript", [True, False])
def test_components_manifest(typescript: bool) -> None:
    manifest = components_manifest(typescript)

    assert manifest["tsx"] is typescript
    assert manifest["rsc"] is False
    assert manifest["tailwind"]["css"] == "src/index.css"
    assert manifest["tailwind"]["cssVariables"] is True
    assert manifest["aliases"] == {"components": "@/components", "utils": "@/lib/utils"}


def test_tailwind_config_lists_palette_colors() -> None:
    config = render_tailwind_config()

    assert 'darkMode: ["class"]' in config
    assert 'DEFAULT: "hsl(var(--primary))"' in config
    assert 'foreground: "hsl(var(--destructive-foreground))"' in config
    assert '"./components/**/*.{ts,tsx}",' in config
    assert 'require("tailwindcss-animate")' in config


def test_index_css_declares_light_and_dark_tokens() -> None:
    css = render_index_css()

    assert css.startswith("@tailwind base;")
    assert "--background: 0 0% 100%;" in css
    assert ".dark {" in css
    assert "--radius: 0.5rem;" in css


def test_update_tailwind_content(tmp_path: Path) -> None:
    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text(render_tailwind_config())

    assert update_tailwind_content(config_path) is True

    updated = config_path.read_text()
    assert "./pages/**" not in updated
    for glob in CONTENT_GLOBS:
        assert f'"{glob}",' in updated
    assert "prefix:" in updated


def test_update_tailwind_content_without_array(tmp_path: Path) -> None:
    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text("export default {}\n")

    assert update_tailwind_content(config_path) is False
    assert config_path.read_text() == "export default {}\n"


@pytest.mark.parametrize(("typescript", "utils_name"), [(True, "utils.ts"), (False, "utils.js")])
def test_write_ui_kit_files(tmp_path: Path, typescript: bool, utils_name: str) -> None:
    written = write_ui_kit_files(tmp_path, typescript)

    assert [path.relative_to(tmp_path).as_posix() for path in written] == [
        "tailwind.config.js",
        "postcss.config.js",
        "components.json",
        "src/index.css",
        f"src/lib/{utils_name}",
    ]
    manifest = msgspec.json.decode((tmp_path / "components.json").read_bytes())
    assert manifest["tsx"] is typescript
    assert '"./src/**/*.{js,ts,jsx,tsx}",' in (tmp_path / "tailwind.config.js").read_text()
    utils = (tmp_path / "src" / "lib" / utils_name).read_text()
    assert "twMerge(clsx(inputs))" in utils
    assert ("ClassValue[]" in utils) is typescript


def test_ui_kit_steps_order_and_policies(
    tmp_path: Path, scaffold_config: ScaffoldConfig, fake_executor: Any
) -> None:
    steps = ui_kit_steps(
        tmp_path, typescript=True, components=("button", "card"), executor=fake_executor, config=scaffold_config
    )

    assert [step.name for step in steps] == [
        "ui-kit-dependencies",
        "ui-kit-config",
        "ui-kit-component:button",
        "ui-kit-component:card",
    ]
    assert [step.policy for step in steps] == [
        FailurePolicy.FATAL,
        FailurePolicy.FATAL,
        FailurePolicy.WARN,
        FailurePolicy.WARN,
    ]


def test_ui_kit_steps_component_failure_warns(
    tmp_path: Path, scaffold_config: ScaffoldConfig, executor_factory: Any
) -> None:
    executor = executor_factory(fail_on=["dlx:button"])
    steps = ui_kit_steps(
        tmp_path, typescript=False, components=("button", "card"), executor=executor, config=scaffold_config
    )

    result = StepRunner().run(steps)

    assert result.outcomes["ui-kit-component:button"] is StepOutcome.WARNED
    assert result.outcomes["ui-kit-component:card"] is StepOutcome.OK
    assert result.warnings == ["Could not add button, continuing..."]
    assert executor.calls == [
        ("add-dev", UI_KIT_DEV_DEPENDENCIES),
        ("add", UI_KIT_DEPENDENCIES),
        ("dlx", ("shadcn@latest", "add", "button", "--yes")),
        ("dlx", ("shadcn@latest", "add", "card", "--yes")),
    ]
