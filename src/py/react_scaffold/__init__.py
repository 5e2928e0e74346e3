"""React-Scaffold: generate React components, stores, contexts and projects.

Components, stores and contexts are rendered from packaged templates and
written straight to disk. Projects are bootstrapped with Vite and the
selected package manager.

Basic usage:
    from react_scaffold import ComponentRequest, generate_entity

    generate_entity(ComponentRequest(name="Button", path="./src/components", typescript=True))

Creating a project:
    from react_scaffold import ProjectRequest, ScaffoldConfig, create_project

    create_project(ProjectRequest(project_name="my-app"), config=ScaffoldConfig(package_manager="pnpm"))
"""

from react_scaffold.__metadata__ import __version__
from react_scaffold.bootstrap import BootstrapResult, clone_boilerplate, create_project
from react_scaffold.config import ScaffoldConfig
from react_scaffold.exceptions import ReactScaffoldError
from react_scaffold.models import (
    BoilerplateRequest,
    ComponentRequest,
    ContextRequest,
    ProjectRequest,
    StoreRequest,
    StyleMode,
)
from react_scaffold.scaffolding import GenerationResult, generate_entity

__all__ = (
    "BoilerplateRequest",
    "BootstrapResult",
    "ComponentRequest",
    "ContextRequest",
    "GenerationResult",
    "ProjectRequest",
    "ReactScaffoldError",
    "ScaffoldConfig",
    "StoreRequest",
    "StyleMode",
    "__version__",
    "clone_boilerplate",
    "create_project",
    "generate_entity",
)
