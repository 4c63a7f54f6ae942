# Cline platform adapter
from mcpconf.models import ClientCapabilities
from mcpconf.platforms.base import BaseAdapter


class ClineAdapter(BaseAdapter):
    """Adapter for Cline (VS Code globalStorage cline_mcp_settings.json).

    ABOUTME: mcpServers store, boolean 'disabled' flag
    ABOUTME: New entries start disabled unless --enable is given
    ABOUTME: Remote entries are tagged sse or streamableHttp
    """

    capabilities = ClientCapabilities(
        client="cline",
        display_name="Cline",
        supported_scopes=("global",),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcpServers",
        format_kind="json",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
