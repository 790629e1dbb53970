"""Custom exception hierarchy for git-open-link."""


class OpenLinkError(Exception):
    """Base error for all custom exceptions."""


class NoActiveEditorError(OpenLinkError):
    """Raised when there is no active file to link to."""

    def __init__(self, message: str = "No active text editor.") -> None:
        super().__init__(message)


class WorkspaceNotFoundError(OpenLinkError):
    """Raised when no repository root can be resolved."""

    def __init__(self, message: str = "No workspace folder found.") -> None:
        super().__init__(message)


class RemoteNotFoundError(OpenLinkError):
    """Raised when the git config has no remote url."""

    def __init__(self, message: str = "Git origin not found.") -> None:
        super().__init__(message)


class GitCommandError(OpenLinkError):
    """Raised when a git invocation fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        message = "Git command failed"
        if command:
            message = f"Git command failed: {' '.join(command)}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""


class ValidationError(OpenLinkError):
    """Raised when user input is invalid."""
