# Codex CLI platform adapter
from mcpconf.models import ClientCapabilities, Operation, RawEntry
from mcpconf.platforms.base import BaseAdapter


class CodexAdapter(BaseAdapter):
    """Adapter for Codex CLI (~/.codex/config.toml or ./.codex/config.toml).

    ABOUTME: Uses snake_case mcp_servers key (not mcpServers)
    ABOUTME: Timeout lives in startup_timeout_sec, headers in http_headers
    ABOUTME: 'enabled' flag (inverted polarity); new servers start disabled
    ABOUTME: No type tag and no SSE support - a url means streamable HTTP
    """

    capabilities = ClientCapabilities(
        client="codex",
        display_name="Codex",
        supported_scopes=("global", "local"),
        supported_transports=("stdio", "http"),
        store_field="mcp_servers",
        format_kind="toml",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
    toggle_field = "enabled"

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {
            "command": op.command,
            "args": self.encode_auth(op),
            "startup_timeout_sec": op.timeout,
        }

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "url": op.url,
            "startup_timeout_sec": op.timeout,
        }
        if op.headers:
            entry["http_headers"] = dict(op.headers)
        return entry
