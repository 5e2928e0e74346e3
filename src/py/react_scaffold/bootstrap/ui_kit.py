"""shadcn/ui and Tailwind CSS setup for bootstrapped projects."""

import logging
import re
from collections.abc import Sequence
from functools import partial
from pathlib import Path
from typing import Any

import msgspec

from react_scaffold.config import ScaffoldConfig
from react_scaffold.executor import JSExecutor
from react_scaffold.pipeline import FailurePolicy, Step
from react_scaffold.scaffolding.templates import render_template
from react_scaffold.utils import console, write_text_file

__all__ = (
    "CONTENT_GLOBS",
    "UI_KIT_DEPENDENCIES",
    "UI_KIT_DEV_DEPENDENCIES",
    "components_manifest",
    "render_index_css",
    "render_tailwind_config",
    "ui_kit_steps",
    "update_tailwind_content",
    "write_ui_kit_files",
)

logger = logging.getLogger("react_scaffold")

UI_KIT_DEV_DEPENDENCIES: tuple[str, ...] = ("tailwindcss@^3", "postcss", "autoprefixer", "tailwindcss-animate")
UI_KIT_DEPENDENCIES: tuple[str, ...] = ("class-variance-authority", "clsx", "tailwind-merge", "lucide-react")

# Globs shadcn/ui ships with, replaced by CONTENT_GLOBS once the config is written.
INITIAL_CONTENT_GLOBS: tuple[str, ...] = (
    "./pages/**/*.{ts,tsx}",
    "./components/**/*.{ts,tsx}",
    "./app/**/*.{ts,tsx}",
    "./src/**/*.{ts,tsx}",
)
CONTENT_GLOBS: tuple[str, ...] = ("./index.html", "./src/**/*.{js,ts,jsx,tsx}")

PALETTE: tuple[str, ...] = ("primary", "secondary", "destructive", "muted", "accent", "popover", "card")

LIGHT_TOKENS: dict[str, str] = {
    "background": "0 0% 100%",
    "foreground": "222.2 84% 4.9%",
    "card": "0 0% 100%",
    "card-foreground": "222.2 84% 4.9%",
    "popover": "0 0% 100%",
    "popover-foreground": "222.2 84% 4.9%",
    "primary": "222.2 47.4% 11.2%",
    "primary-foreground": "210 40% 98%",
    "secondary": "210 40% 96.1%",
    "secondary-foreground": "222.2 47.4% 11.2%",
    "muted": "210 40% 96.1%",
    "muted-foreground": "215.4 16.3% 46.9%",
    "accent": "210 40% 96.1%",
    "accent-foreground": "222.2 47.4% 11.2%",
    "destructive": "0 84.2% 60.2%",
    "destructive-foreground": "210 40% 98%",
    "border": "214.3 31.8% 91.4%",
    "input": "214.3 31.8% 91.4%",
    "ring": "222.2 84% 4.9%",
    "radius": "0.5rem",
}

DARK_TOKENS: dict[str, str] = {
    "background": "222.2 84% 4.9%",
    "foreground": "210 40% 98%",
    "card": "222.2 84% 4.9%",
    "card-foreground": "210 40% 98%",
    "popover": "222.2 84% 4.9%",
    "popover-foreground": "210 40% 98%",
    "primary": "210 40% 98%",
    "primary-foreground": "222.2 47.4% 11.2%",
    "secondary": "217.2 32.6% 17.5%",
    "secondary-foreground": "210 40% 98%",
    "muted": "217.2 32.6% 17.5%",
    "muted-foreground": "215 20.2% 65.1%",
    "accent": "217.2 32.6% 17.5%",
    "accent-foreground": "210 40% 98%",
    "destructive": "0 62.8% 30.6%",
    "destructive-foreground": "210 40% 98%",
    "border": "217.2 32.6% 17.5%",
    "input": "217.2 32.6% 17.5%",
    "ring": "212.7 26.8% 83.9%",
}

_CONTENT_PATTERN = re.compile(r"content:\s*\[[^\]]*\]", re.DOTALL)


def components_manifest(typescript: bool) -> dict[str, Any]:
    """Build the ``components.json`` manifest read by the shadcn/ui CLI."""
    return {
        "$schema": "https://ui.shadcn.com/schema.json",
        "style": "default",
        "rsc": False,
        "tsx": typescript,
        "tailwind": {
            "config": "tailwind.config.js",
            "css": "src/index.css",
            "baseColor": "slate",
            "cssVariables": True,
        },
        "aliases": {
            "components": "@/components",
            "utils": "@/lib/utils",
        },
    }


def render_tailwind_config(content: Sequence[str] = INITIAL_CONTENT_GLOBS) -> str:
    return render_template("project/ui_kit/tailwind.config.js.j2", content=list(content), palette=list(PALETTE))


def render_index_css() -> str:
    return render_template("project/ui_kit/index.css.j2", light=LIGHT_TOKENS, dark=DARK_TOKENS)


def update_tailwind_content(config_path: Path, globs: Sequence[str] = CONTENT_GLOBS) -> bool:
    """Point the ``content`` array of a Tailwind config at the project sources.

    Args:
        config_path: Path to ``tailwind.config.js``.
        globs: Globs that replace the current ones.

    Returns:
        ``True`` if the config had a ``content`` array to rewrite.
    """
    source = config_path.read_text(encoding="utf-8")
    lines = "".join(f'    "{glob}",\n' for glob in globs)
    replacement = f"content: [\n{lines}  ]"
    updated, count = _CONTENT_PATTERN.subn(lambda _: replacement, source, count=1)
    if count == 0:
        logger.warning("No content array found in %s", config_path)
        return False
    config_path.write_text(updated, encoding="utf-8")
    return True


def write_ui_kit_files(project_dir: Path, typescript: bool) -> list[Path]:
    """Write the Tailwind, PostCSS and shadcn/ui configuration of a project.

    Args:
        project_dir: Root of the project.
        typescript: Whether the project uses TypeScript.

    Returns:
        The written paths.
    """
    manifest = msgspec.json.format(msgspec.json.encode(components_manifest(typescript)), indent=2)
    extension = "ts" if typescript else "js"
    written = [
        write_text_file(project_dir / "tailwind.config.js", render_tailwind_config()),
        write_text_file(project_dir / "postcss.config.js", render_template("project/ui_kit/postcss.config.js.j2")),
        write_text_file(project_dir / "components.json", manifest.decode("utf-8") + "\n"),
        write_text_file(project_dir / "src" / "index.css", render_index_css()),
        write_text_file(
            project_dir / "src" / "lib" / f"utils.{extension}",
            render_template("project/ui_kit/utils.js.j2", typescript=typescript),
        ),
    ]
    update_tailwind_content(project_dir / "tailwind.config.js")
    for path in written:
        logger.debug("Wrote %s", path)
    return written


def ui_kit_steps(
    project_dir: Path,
    *,
    typescript: bool,
    components: Sequence[str],
    executor: JSExecutor,
    config: ScaffoldConfig,
) -> list[Step]:
    """Build the steps installing and configuring shadcn/ui.

    Dependencies and configuration files are fatal; each component is added
    by its own step so a single failure only produces a warning.
    """

    def install_dependencies() -> None:
        console.print("[dim]  📦 Installing shadcn/ui dependencies...[/]")
        executor.add(UI_KIT_DEV_DEPENDENCIES, project_dir, dev=True)
        executor.add(UI_KIT_DEPENDENCIES, project_dir)

    steps = [
        Step(
            name="ui-kit-dependencies",
            action=install_dependencies,
            title="[blue]🎨[/] [bold]Setting up shadcn/ui...[/]",
            success="[green]  ✅ Dependencies installed![/]",
        ),
        Step(
            name="ui-kit-config",
            action=lambda: write_ui_kit_files(project_dir, typescript),
            title="[dim]  ⚙️  Writing Tailwind and shadcn/ui configuration...[/]",
            success="[green]  ✅ Configuration files created![/]",
        ),
    ]
    steps.extend(
        Step(
            name=f"ui-kit-component:{component}",
            action=partial(executor.dlx, [config.ui_kit_cli, "add", component, "--yes"], project_dir),
            policy=FailurePolicy.WARN,
            title=f"[dim]  📦 Adding shadcn/ui component {component}...[/]",
            warning=f"Could not add {component}, continuing...",
        )
        for component in components
    )
    return steps
