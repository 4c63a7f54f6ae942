# ABOUTME: Error taxonomy for mcp-conf
# ABOUTME: Every failure raised by the core derives from McpConfError
from pathlib import PurePath


class McpConfError(Exception):
    """Base error for a single target (one client config file).

    ABOUTME: Carries optional file path and server name for context
    ABOUTME: Path is usually attached by the runner via with_path()
    """

    def __init__(
        self,
        message: str,
        *,
        path: PurePath | str | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.name = name

    def with_path(self, path: PurePath | str) -> "McpConfError":
        """Attach the target file path if none was recorded yet."""
        if self.path is None:
            self.path = path
        return self

    def __str__(self) -> str:
        if self.path is not None and str(self.path) not in self.message:
            return f"{self.message} ({self.path})"
        return self.message


class ValidationError(McpConfError):
    """Operation fields are inconsistent or unsupported by the client."""


class NotFoundError(McpConfError):
    """Target server entry (or project) is absent."""


class AlreadyExistsError(McpConfError):
    """Add without force onto an existing server name."""


class UnsupportedOperationError(McpConfError):
    """Client schema has no way to express the requested action."""


class DependencyUnavailableError(McpConfError):
    """YAML/TOML library needed for the client's format is not installed."""


class MalformedDocumentError(McpConfError):
    """Existing config file can't be parsed in its declared format."""


class DocumentAccessError(McpConfError):
    """Config file can't be read or written (permissions, a directory in the way)."""
