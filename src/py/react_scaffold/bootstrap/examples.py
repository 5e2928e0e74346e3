"""Example files for the extra packages of a bootstrapped project.

The plan depends only on the selected packages, the language and the API
URL, so it can be computed and inspected without touching the disk.
"""

from collections.abc import Collection

from react_scaffold.config import DEFAULT_API_URL
from react_scaffold.scaffolding.templates import PlannedFile, render_template

__all__ = ("EXAMPLE_PACKAGES", "plan_package_examples")

EXAMPLE_PACKAGES: tuple[str, ...] = ("zustand", "@tanstack/react-query", "axios", "zod")


def plan_package_examples(
    typescript: bool,
    packages: Collection[str],
    api_url: str = DEFAULT_API_URL,
) -> list[PlannedFile]:
    """Plan the example files for the selected packages.

    - zustand: ``src/stores/userStore`` and ``src/stores/todoStore``
    - axios: ``src/services/api`` and ``src/services/userService`` (validated with zod when selected)
    - @tanstack/react-query with axios: ``src/hooks/useUsers``
    - @tanstack/react-query: ``src/lib/queryClient``
    - zustand or @tanstack/react-query: ``src/pages/ExampleUsage``
    - any of the above or zod: ``EXAMPLES.md``

    Args:
        typescript: Emit ``.ts``/``.tsx`` files with type annotations.
        packages: The extra packages of the project.
        api_url: Fallback base URL of the generated HTTP client.

    Returns:
        Files to write, with ``filename`` relative to the project root.
    """
    zustand = "zustand" in packages
    react_query = "@tanstack/react-query" in packages
    axios = "axios" in packages
    zod = "zod" in packages
    if not any((zustand, react_query, axios, zod)):
        return []

    ext = "ts" if typescript else "js"
    jsx_ext = "tsx" if typescript else "jsx"
    context = {
        "typescript": typescript,
        "zustand": zustand,
        "react_query": react_query,
        "axios": axios,
        "zod": zod,
        "api_url": api_url,
        "ext": ext,
        "jsx_ext": jsx_ext,
    }
    described: list[tuple[PlannedFile, str]] = []

    def plan(label: str, path: str, template: str, icon: str, description: str) -> None:
        content = render_template(f"project/examples/{template}", **context)
        described.append((PlannedFile(label, path, content, icon), description))

    if zustand:
        plan("User store", f"src/stores/userStore.{ext}", "userStore.js.j2", "🏪", "user store with persistence")
        plan("Todo store", f"src/stores/todoStore.{ext}", "todoStore.js.j2", "🏪", "todo store with DevTools")
    if axios:
        plan("API client", f"src/services/api.{ext}", "api.js.j2", "🌐", "Axios instance with interceptors")
        plan("User service", f"src/services/userService.{ext}", "userService.js.j2", "🌐", "user CRUD service")
    if react_query and axios:
        plan("Query hooks", f"src/hooks/useUsers.{ext}", "useUsers.js.j2", "🔄", "React Query hooks")
    if react_query:
        plan("Query client", f"src/lib/queryClient.{ext}", "queryClient.js.j2", "⚙️ ", "QueryClient defaults")

    files = [planned for planned, _ in described]
    if zustand or react_query:
        listing = [(planned.filename, description) for planned, description in described]
        files.append(
            PlannedFile(
                "Example page",
                f"src/pages/ExampleUsage.{jsx_ext}",
                render_template("project/examples/ExampleUsage.jsx.j2", files=listing, **context),
                "📄",
            )
        )
    guide = render_template("project/examples/EXAMPLES.md.j2", **context)
    files.append(PlannedFile("Examples guide", "EXAMPLES.md", guide, "📋"))
    return files
