# Goose platform adapter
from mcpconf.models import ClientCapabilities, Operation, RawEntry
from mcpconf.platforms.base import BaseAdapter


class GooseAdapter(BaseAdapter):
    """Adapter for Goose (~/.config/goose/config.yaml).

    ABOUTME: YAML document, servers are 'extensions'
    ABOUTME: Stdio entries use 'cmd', remote entries use 'uri'
    ABOUTME: Remote types are 'sse' or 'streamable_http'
    ABOUTME: New extensions are always created disabled
    """

    capabilities = ClientCapabilities(
        client="goose",
        display_name="Goose",
        supported_scopes=("global",),
        supported_transports=("stdio", "sse", "http"),
        store_field="extensions",
        format_kind="yaml",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
    toggle_field = "enabled"
    remote_type_tags = {"sse": "sse", "http": "streamable_http"}

    def create_disabled(self, op: Operation) -> bool:
        # Goose only picks up extensions the user enables explicitly
        return True

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {
            "name": op.name,
            "cmd": op.command,
            "args": self.encode_auth(op),
            "type": "stdio",
            "timeout": op.timeout,
        }

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "name": op.name,
            "description": f"{op.name} MCP server",
            "type": self.remote_type_tags[op.transport],
            "uri": op.url,
            "timeout": op.timeout,
            "envs": {},
            "env_keys": [],
            "available_tools": [],
            "bundled": None,
        }
        if op.headers:
            entry["headers"] = dict(op.headers)
        return entry
