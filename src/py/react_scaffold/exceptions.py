"""React-Scaffold exception classes."""

__all__ = [
    "BootstrapError",
    "ExecutableNotFoundError",
    "ExecutionError",
    "ReactScaffoldError",
    "StyleConflictError",
    "TargetExistsError",
    "ValidationError",
]


class ReactScaffoldError(Exception):
    """Base exception for React-Scaffold related errors."""


class ValidationError(ReactScaffoldError, ValueError):
    """Raised when a name, path or option combination is not acceptable."""

    def __init__(self, message: str, field: "str | None" = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class StyleConflictError(ValidationError):
    """Raised when more than one CSS-in-JS library is requested for a component."""

    def __init__(self) -> None:
        super().__init__("Cannot use 'styled' and 'emotion' together. Choose only one styling option.", "style")


class TargetExistsError(ReactScaffoldError):
    """Raised when the directory of a new project already exists."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The directory {path!r} already exists.")
        self.path = path


class ExecutableNotFoundError(ReactScaffoldError):
    """Raised when an external executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class ExecutionError(ReactScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str = "") -> None:
        message = f"Command {command!r} failed with return code {return_code}."
        if stderr:
            message = f"{message}\nStderr: {stderr}"
        super().__init__(message)
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class BootstrapError(ReactScaffoldError):
    """Raised when a fatal step of a project bootstrap fails."""

    def __init__(self, step: str, cause: "Exception | None" = None) -> None:
        message = f"Step {step!r} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.step = step
        self.cause = cause
