"""Template library for generated React units.

Every function here is pure: it renders a Jinja2 template shipped inside the
package and returns the resulting text. Nothing is written to disk.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from react_scaffold.models import EntityKind, EntityRequest, StyleMode
from react_scaffold.utils import get_template_dir

__all__ = (
    "STYLE_LIBRARIES",
    "PlannedFile",
    "entity_files",
    "get_environment",
    "render_component",
    "render_context",
    "render_index",
    "render_store",
    "render_stylesheet",
    "render_template",
    "render_test",
    "stylesheet_filename",
)

STYLE_LIBRARIES: dict[StyleMode, str] = {
    StyleMode.STYLED: "styled-components",
    StyleMode.EMOTION: "@emotion/styled",
}

_STYLE_MODULES: dict[StyleMode, str] = {
    StyleMode.STYLED: "styled",
    StyleMode.EMOTION: "styles",
}


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Build the Jinja2 environment used for every template.

    Templates are rendered with autoescaping disabled because the output is
    source code, not HTML.

    Returns:
        The shared environment.
    """
    return Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        autoescape=False,  # noqa: S701
    )


def render_template(template_name: str, **context: Any) -> str:
    """Render a packaged template.

    Args:
        template_name: Path of the template relative to the templates directory.
        **context: Template variables.

    Returns:
        Rendered template content.
    """
    return get_environment().get_template(template_name).render(**context)


def _names(name: str) -> dict[str, str]:
    return {"name": name, "lower_name": name.lower()}


def render_component(name: str, style_mode: StyleMode = StyleMode.CSS) -> str:
    """Render a functional component showing ``<name> component``.

    CSS components wrap their heading in a ``div`` whose class is the
    lower-cased name; styled and emotion components use ``Container``.
    """
    return render_template(
        "entity/component.jsx.j2",
        style_mode=style_mode.value,
        uses_container=style_mode.uses_container,
        **_names(name),
    )


def render_stylesheet(name: str, style_mode: StyleMode = StyleMode.CSS) -> str:
    """Render the stylesheet, or the ``Container`` definition for CSS-in-JS."""
    if style_mode.uses_container:
        return render_template("entity/container.js.j2", library=STYLE_LIBRARIES[style_mode])
    return render_template("entity/stylesheet.css.j2", **_names(name))


def render_store(name: str, typescript: bool = False) -> str:
    """Render a zustand store exposing ``use<Name>Store``."""
    return render_template("entity/store.js.j2", typescript=typescript, **_names(name))


def render_context(name: str, typescript: bool = False) -> str:
    """Render a reducer-backed context with provider, hook and action creators."""
    return render_template("entity/context.js.j2", typescript=typescript, **_names(name))


def render_test(name: str, style_mode: StyleMode = StyleMode.CSS) -> str:
    """Render a Testing Library test for a component."""
    return render_template(
        "entity/component.test.jsx.j2",
        uses_container=style_mode.uses_container,
        library=STYLE_LIBRARIES.get(style_mode, "css"),
        **_names(name),
    )


def render_index(
    name: str,
    kind: EntityKind = EntityKind.COMPONENT,
    include_store: bool = False,
    include_context: bool = False,
) -> str:
    """Render the barrel file re-exporting the public symbols of a unit."""
    return render_template(
        "entity/index.js.j2",
        include_component=kind is EntityKind.COMPONENT,
        include_store=include_store,
        include_context=include_context,
        **_names(name),
    )


def stylesheet_filename(name: str, style_mode: StyleMode, typescript: bool = False) -> str:
    if style_mode.uses_container:
        return f"{_STYLE_MODULES[style_mode]}.{'ts' if typescript else 'js'}"
    return f"{name}.css"


@dataclass(frozen=True)
class PlannedFile:
    """A file the scaffolding engine is about to write.

    Attributes:
        label: Human readable description used in progress output.
        filename: File name inside the unit directory.
        content: Rendered content.
        icon: Emoji shown next to the label.
    """

    label: str
    filename: str
    content: str
    icon: str = "📄"


def entity_files(request: EntityRequest) -> list[PlannedFile]:
    """Plan every file for a component, store or context request.

    The order is the order files are written and reported in.

    Args:
        request: The generation request.

    Returns:
        The planned files.
    """
    name = request.name
    jsx_ext = "tsx" if request.typescript else "jsx"
    js_ext = "ts" if request.typescript else "js"
    files: list[PlannedFile] = []

    if request.kind is EntityKind.COMPONENT:
        style_mode = request.style_mode
        style_label = {
            StyleMode.CSS: ("CSS Stylesheet", "🎨"),
            StyleMode.STYLED: ("Styled Components", "📦"),
            StyleMode.EMOTION: ("Emotion Styles", "😊"),
        }[style_mode]
        files.append(
            PlannedFile(
                style_label[0],
                stylesheet_filename(name, style_mode, request.typescript),
                render_stylesheet(name, style_mode),
                style_label[1],
            )
        )
        files.append(PlannedFile("React Component", f"{name}.{jsx_ext}", render_component(name, style_mode), "⚛️ "))
        if request.include_test:
            files.append(PlannedFile("Test File", f"{name}.test.{jsx_ext}", render_test(name, style_mode), "🧪"))

    if request.includes_store:
        files.append(PlannedFile("Zustand Store", f"store.{js_ext}", render_store(name, request.typescript), "🏪"))

    if request.includes_context:
        files.append(PlannedFile("Context API", f"context.{js_ext}", render_context(name, request.typescript), "🎯"))

    files.append(
        PlannedFile(
            "Index File",
            f"index.{js_ext}",
            render_index(name, request.kind, request.includes_store, request.includes_context),
            "📋",
        )
    )
    return files
