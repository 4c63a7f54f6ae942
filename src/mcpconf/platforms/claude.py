# Claude platform adapter
from typing import Any

from mcpconf.errors import (
    MalformedDocumentError,
    NotFoundError,
    UnsupportedOperationError,
    ValidationError,
)
from mcpconf.models import ClientCapabilities, Operation, RawDocument, RawEntry
from mcpconf.platforms.base import BaseAdapter, Groups, require_mapping
from mcpconf.projects import (
    current_membership,
    drop_membership,
    new_project_node,
    resolve_project_key,
    set_membership,
)


class ClaudeAdapter(BaseAdapter):
    """Adapter for Claude (~/.claude.json / claude_desktop_config.json and ./.mcp.json).

    ABOUTME: Global scope: servers live per project under projects.<key>.mcpServers
    ABOUTME: Enabled state is membership in enabledMcpServers/disabledMcpServers
    ABOUTME: Local scope: plain mcpServers in .mcp.json, no enabled state there
    ABOUTME: all_projects operations act on every project holding the server
    """

    capabilities = ClientCapabilities(
        client="claude",
        display_name="Claude",
        supported_scopes=("global", "local"),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcpServers",
        format_kind="json",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
    # Enabled state is list membership, never a field on the entry
    toggle_field = None
    remote_type_tags = {"sse": "sse", "http": "http"}

    @staticmethod
    def is_project_file(op: Operation) -> bool:
        """True when the operation targets ./.mcp.json rather than the global file."""
        return op.scope == "local"

    # -- project plumbing -----------------------------------------------

    @staticmethod
    def _projects(doc: RawDocument) -> dict[str, Any]:
        projects = doc.get("projects")
        return projects if isinstance(projects, dict) else {}

    def project_key(self, doc: RawDocument, op: Operation) -> str:
        """Existing key for op.project_path (symlink aliases resolved)."""
        if not op.project_path:
            raise ValidationError("Claude global config requires a project path.", name=op.name)
        projects = doc.get("projects")
        return resolve_project_key(projects if isinstance(projects, dict) else None, op.project_path)

    def _ensure_project_node(self, doc: RawDocument, key: str) -> dict[str, Any]:
        """Project node for key, created when absent or null.

        Raises:
            MalformedDocumentError: If projects, the node or its mcpServers isn't a mapping
        """
        projects = require_mapping(doc, "projects")
        node = projects.get(key)
        if node is None:
            node = projects[key] = new_project_node()
        elif not isinstance(node, dict):
            raise MalformedDocumentError(
                f'Project "{key}" must be a mapping, found {type(node).__name__}.'
            )
        require_mapping(node, "mcpServers")
        return node

    @staticmethod
    def _node_servers(node: Any) -> dict[str, Any]:
        if not isinstance(node, dict):
            return {}
        servers = node.get("mcpServers")
        return servers if isinstance(servers, dict) else {}

    def _projects_with(self, doc: RawDocument, server_name: str | None) -> list[str]:
        """Sorted keys of projects whose mcpServers contain server_name."""
        return sorted(
            key for key, node in self._projects(doc).items()
            if server_name in self._node_servers(node)
        )

    # -- store access -------------------------------------------------

    def get_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        if self.is_project_file(op):
            return super().get_store(doc, op)
        return self._node_servers(self._projects(doc).get(self.project_key(doc, op)))

    def ensure_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        if self.is_project_file(op):
            return super().ensure_store(doc, op)
        node = self._ensure_project_node(doc, self.project_key(doc, op))
        return node["mcpServers"]

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        entry = super().build_stdio_entry(op)
        if self.is_project_file(op):
            return entry
        return {"type": "stdio", **entry, "env": {}}

    # -- contract -----------------------------------------------------

    def add(self, doc: RawDocument, op: Operation) -> RawDocument:
        super().add(doc, op)
        if not self.is_project_file(op):
            node = self._ensure_project_node(doc, self.project_key(doc, op))
            set_membership(node, op.name, self.create_disabled(op))
        return doc

    def update(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Replace an entry in the current project.

        ABOUTME: List membership is kept unless --enable/--disable is given
        ABOUTME: A server in neither list gets the create-time default
        """
        super().update(doc, op)
        if not self.is_project_file(op):
            node = self._ensure_project_node(doc, self.project_key(doc, op))
            disabled = op.disabled
            if disabled is None:
                disabled = current_membership(node, op.name)
            if disabled is None:
                disabled = self.create_disabled(op)
            set_membership(node, op.name, disabled)
        return doc

    def remove(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Delete an entry and its enabled/disabled list membership.

        ABOUTME: With all_projects, removes from every project that has it
        """
        if self.is_project_file(op):
            return super().remove(doc, op)

        if op.all_projects:
            keys = self._projects_with(doc, op.name)
            if not keys:
                raise NotFoundError(
                    f'Server "{op.name}" not found in any Claude projects.', name=op.name
                )
        else:
            key = self.project_key(doc, op)
            if op.name not in self._node_servers(self._projects(doc).get(key)):
                raise NotFoundError(f'Server "{op.name}" not found for {key}.', name=op.name)
            keys = [key]

        for key in keys:
            node = doc["projects"][key]
            del node["mcpServers"][op.name]
            drop_membership(node, op.name)
        return doc

    def toggle(self, doc: RawDocument, op: Operation, require_entry: bool = True) -> RawDocument:
        """Move the server between the enabled and disabled name lists.

        ABOUTME: require_entry=False is used when the server is defined in ./.mcp.json
        ABOUTME: (its lists still live in the global file under the project key)
        """
        if self.is_project_file(op):
            raise UnsupportedOperationError(
                "Claude enable/disable requires the main Claude config file.", name=op.name
            )

        if op.all_projects:
            keys = self._projects_with(doc, op.name)
            if not keys:
                raise NotFoundError(
                    f'Server "{op.name}" not found in any Claude projects.', name=op.name
                )
        else:
            key = self.project_key(doc, op)
            if require_entry and op.name not in self._node_servers(self._projects(doc).get(key)):
                raise NotFoundError(f'Server "{op.name}" not found for {key}.', name=op.name)
            keys = [key]

        for key in keys:
            node = self._ensure_project_node(doc, key)
            set_membership(node, op.name, op.wants_disabled)
        return doc

    def show(self, doc: RawDocument, op: Operation) -> RawEntry:
        if self.is_project_file(op):
            return super().show(doc, op)
        key = self.project_key(doc, op)
        store = self._node_servers(self._projects(doc).get(key))
        if op.name not in store:
            raise NotFoundError(f'Server "{op.name}" not found for {key}.', name=op.name)
        return store[op.name]

    # -- grouped reads --------------------------------------------------

    def list_grouped(self, doc: RawDocument, op: Operation) -> Groups:
        if self.is_project_file(op):
            return super().list_grouped(doc, op)
        if op.all_projects:
            return {
                key: sorted(self._node_servers(node))
                for key, node in sorted(self._projects(doc).items())
            }
        return {self.project_key(doc, op): self.list_names(doc, op)}

    def locate(self, doc: RawDocument, op: Operation) -> Groups:
        """Where the server is defined.

        ABOUTME: all_projects returns only the projects containing it (may be empty)
        """
        if self.is_project_file(op):
            return super().locate(doc, op)
        if op.all_projects:
            return {key: True for key in self._projects_with(doc, op.name)}
        return {self.project_key(doc, op): self.contains(doc, op)}

    def show_grouped(self, doc: RawDocument, op: Operation) -> Groups:
        if self.is_project_file(op) or not op.all_projects:
            key = None if self.is_project_file(op) else self.project_key(doc, op)
            return {key: self.show(doc, op)}
        keys = self._projects_with(doc, op.name)
        if not keys:
            raise NotFoundError(
                f'Server "{op.name}" not found in any Claude projects.', name=op.name
            )
        return {key: self._node_servers(self._projects(doc)[key])[op.name] for key in keys}
