"""Tests for react_scaffold.bootstrap.examples module."""

import pytest

from react_scaffold.bootstrap.examples import plan_package_examples


def _paths(typescript: bool, packages: tuple[str, ...]) -> list[str]:
    return [planned.filename for planned in plan_package_examples(typescript, packages)]


def test_no_example_packages_plans_nothing() -> None:
    assert plan_package_examples(True, ("react-router-dom", "date-fns")) == []
    assert plan_package_examples(True, ()) == []


def test_full_stack_typescript() -> None:
    assert _paths(True, ("zustand", "@tanstack/react-query", "axios", "zod")) == [
        "src/stores/userStore.ts",
        "src/stores/todoStore.ts",
        "src/services/api.ts",
        "src/services/userService.ts",
        "src/hooks/useUsers.ts",
        "src/lib/queryClient.ts",
        "src/pages/ExampleUsage.tsx",
        "EXAMPLES.md",
    ]


@pytest.mark.parametrize(
    ("packages", "expected"),
    [
        (("zustand",), ["src/stores/userStore.js", "src/stores/todoStore.js", "src/pages/ExampleUsage.jsx"]),
        (("axios",), ["src/services/api.js", "src/services/userService.js"]),
        (("@tanstack/react-query",), ["src/lib/queryClient.js", "src/pages/ExampleUsage.jsx"]),
        (("zod",), []),
    ],
)
def test_files_per_package(packages: tuple[str, ...], expected: list[str]) -> None:
    assert _paths(False, packages) == [*expected, "EXAMPLES.md"]


def test_query_hooks_need_axios() -> None:
    assert "src/hooks/useUsers.js" not in _paths(False, ("@tanstack/react-query",))
    assert "src/hooks/useUsers.js" in _paths(False, ("@tanstack/react-query", "axios"))


def test_api_url_is_the_client_fallback() -> None:
    planned = {file.filename: file for file in plan_package_examples(False, ("axios",), "http://localhost:8000")}

    api = planned["src/services/api.js"].content
    assert "baseURL: import.meta.env.VITE_API_URL || 'http://localhost:8000'," in api
    assert "timeout: 10000," in api
    assert "config.headers.Authorization = `Bearer ${token}`;" in api


def test_user_service_validates_with_zod_when_selected() -> None:
    with_zod = {file.filename: file.content for file in plan_package_examples(True, ("axios", "zod"))}
    without_zod = {file.filename: file.content for file in plan_package_examples(True, ("axios",))}

    service = with_zod["src/services/userService.ts"]
    assert "import { z } from 'zod';" in service
    assert "export type User = z.infer<typeof userSchema>;" in service
    assert "createUserSchema.parse(data)" in service
    assert "apiRequest" in with_zod["src/services/api.ts"]

    plain = without_zod["src/services/userService.ts"]
    assert "zod" not in plain
    assert "export interface User {" in plain
    assert "apiRequest" not in without_zod["src/services/api.ts"]


def test_javascript_examples_have_no_type_annotations() -> None:
    planned = {file.filename: file.content for file in plan_package_examples(False, ("zustand", "axios"))}

    assert "interface" not in planned["src/stores/userStore.js"]
    assert "AxiosError" not in planned["src/services/api.js"]
    assert "getAll: async () => {" in planned["src/services/userService.js"]


def test_examples_guide_only_documents_selected_packages() -> None:
    guide = plan_package_examples(False, ("zustand",))[-1]

    assert guide.label == "Examples guide"
    assert "## Zustand" in guide.content
    assert "## Axios" not in guide.content
    assert "`src/stores/userStore.js`" in guide.content


def test_example_page_imports_selected_hooks() -> None:
    packages = ("zustand", "@tanstack/react-query")
    planned = {file.filename: file.content for file in plan_package_examples(True, packages)}

    page = planned["src/pages/ExampleUsage.tsx"]
    assert "import { useUserStore } from '@/stores/userStore';" in page
    assert "@/hooks/useUsers" not in page
