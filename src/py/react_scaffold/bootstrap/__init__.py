"""Project bootstrapping for react-scaffold.

- Vite + React projects, optionally with shadcn/ui, extra packages and examples
- Next.js projects cloned from the boilerplate repository
"""

from react_scaffold.bootstrap.boilerplate import clone_boilerplate
from react_scaffold.bootstrap.examples import plan_package_examples
from react_scaffold.bootstrap.project import BootstrapResult, create_project

__all__ = ["BootstrapResult", "clone_boilerplate", "create_project", "plan_package_examples"]
