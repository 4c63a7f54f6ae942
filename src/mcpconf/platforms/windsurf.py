# Windsurf platform adapter
from mcpconf.models import ClientCapabilities
from mcpconf.platforms.base import BaseAdapter


class WindsurfAdapter(BaseAdapter):
    """Adapter for Windsurf (~/.codeium/windsurf/mcp_config.json).

    ABOUTME: Same entry shape as Cline; new entries persist disabled: true by default
    """

    capabilities = ClientCapabilities(
        client="windsurf",
        display_name="Windsurf",
        supported_scopes=("global",),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcpServers",
        format_kind="json",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
