# Platform adapter registry
from mcpconf.errors import ValidationError
from mcpconf.models import ClientCapabilities
from mcpconf.platforms.antigravity import AntigravityAdapter
from mcpconf.platforms.base import BaseAdapter
from mcpconf.platforms.claude import ClaudeAdapter
from mcpconf.platforms.cline import ClineAdapter
from mcpconf.platforms.codex import CodexAdapter
from mcpconf.platforms.copilot import CopilotAdapter
from mcpconf.platforms.crush import CrushAdapter
from mcpconf.platforms.cursor import CursorAdapter
from mcpconf.platforms.goose import GooseAdapter
from mcpconf.platforms.opencode import OpenCodeAdapter
from mcpconf.platforms.windsurf import WindsurfAdapter

# Registry of all client adapters, keyed by client name
CLIENTS: dict[str, type[BaseAdapter]] = {
    "cline": ClineAdapter,
    "codex": CodexAdapter,
    "claude": ClaudeAdapter,
    "goose": GooseAdapter,
    "cursor": CursorAdapter,
    "windsurf": WindsurfAdapter,
    "opencode": OpenCodeAdapter,
    "copilot": CopilotAdapter,
    "antigravity": AntigravityAdapter,
    "crush": CrushAdapter,
}

# ABOUTME: Alternative client names accepted on input
CLIENT_ALIASES = {"kilo": "opencode"}

__all__ = [
    "BaseAdapter",
    "AntigravityAdapter",
    "ClaudeAdapter",
    "ClineAdapter",
    "CodexAdapter",
    "CopilotAdapter",
    "CrushAdapter",
    "CursorAdapter",
    "GooseAdapter",
    "OpenCodeAdapter",
    "WindsurfAdapter",
    "CLIENTS",
    "CLIENT_ALIASES",
    "get_adapter",
    "get_capabilities",
    "normalize_client_name",
]


def normalize_client_name(client: str) -> str:
    """Lowercase a client name and resolve aliases (kilo -> opencode)."""
    normalized = client.strip().lower()
    return CLIENT_ALIASES.get(normalized, normalized)


def get_adapter(client: str) -> BaseAdapter:
    """Instantiate the adapter registered for a client.

    ABOUTME: Accepts aliases and any letter case

    Raises:
        ValidationError: If the client is unknown
    """
    name = normalize_client_name(client)
    try:
        adapter_cls = CLIENTS[name]
    except KeyError:
        raise ValidationError(f"Unknown client: {client}") from None
    return adapter_cls()


def get_capabilities(client: str) -> ClientCapabilities:
    return get_adapter(client).capabilities
