# mcp-conf - MCP server entries for AI client configs
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models and errors
from mcpconf.config import Environment
from mcpconf.errors import (
    AlreadyExistsError,
    DependencyUnavailableError,
    DocumentAccessError,
    MalformedDocumentError,
    McpConfError,
    NotFoundError,
    UnsupportedOperationError,
    ValidationError,
)
from mcpconf.models import (
    Auth,
    ClientAdapter,
    ClientCapabilities,
    NormalizedEntry,
    Operation,
)

# ABOUTME: Export adapter lookup and the runner
from mcpconf.platforms import get_adapter, get_capabilities
from mcpconf.runner import RunReport, TargetResult, prepare_operation, run_all, run_operation

__all__ = [
    "__version__",
    "Auth",
    "ClientAdapter",
    "ClientCapabilities",
    "Environment",
    "NormalizedEntry",
    "Operation",
    "McpConfError",
    "ValidationError",
    "NotFoundError",
    "AlreadyExistsError",
    "UnsupportedOperationError",
    "DependencyUnavailableError",
    "MalformedDocumentError",
    "DocumentAccessError",
    "get_adapter",
    "get_capabilities",
    "RunReport",
    "TargetResult",
    "prepare_operation",
    "run_all",
    "run_operation",
]
