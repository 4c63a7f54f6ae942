# Platform adapter base class and shared entry builders
from typing import Any

from mcpconf.arguments import encode_args
from mcpconf.errors import (
    AlreadyExistsError,
    MalformedDocumentError,
    NotFoundError,
    UnsupportedOperationError,
)
from mcpconf.models import (
    Auth,
    ClientCapabilities,
    NormalizedEntry,
    Operation,
    RawDocument,
    RawEntry,
)
from mcpconf.normalize import normalize_entry

# ABOUTME: Grouped read results are keyed by project label; None for single-store clients
Groups = dict[str | None, Any]


def require_mapping(container: dict[str, Any], field: str) -> dict[str, Any]:
    """Return container[field], creating an empty mapping when absent or null."""
    value = container.get(field)
    if value is None:
        value = container[field] = {}
    elif not isinstance(value, dict):
        raise MalformedDocumentError(
            f'"{field}" must be a mapping, found {type(value).__name__}.'
        )
    return value


class BaseAdapter:
    """Shared implementation of the ClientAdapter contract.

    ABOUTME: Subclasses declare capabilities and override the entry builders
    ABOUTME: Only the store container and the addressed entry are touched
    ABOUTME: toggle_field names the disabled signal and its polarity
    """

    capabilities: ClientCapabilities
    # "disabled" (True = off) or "enabled" (True = on); None when unsupported
    toggle_field: str | None = "disabled"
    # Type tag written for remote transports
    remote_type_tags: dict[str, str] = {"sse": "sse", "http": "streamableHttp"}

    @property
    def name(self) -> str:
        """Human-readable client name."""
        return self.capabilities.display_name

    # -- store access -------------------------------------------------

    def get_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        """Read-only view of the store; empty dict if absent."""
        store = doc.get(self.capabilities.store_field)
        return store if isinstance(store, dict) else {}

    def ensure_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        """Create the store container in doc if absent.

        ABOUTME: Mutates doc in place and returns the store mapping, not the document
        ABOUTME: A null store is replaced; any other non-mapping value is left alone

        Raises:
            MalformedDocumentError: If the store field holds a non-mapping value
        """
        return require_mapping(doc, self.capabilities.store_field)

    # -- entry construction -------------------------------------------

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {
            "command": op.command,
            "args": self.encode_auth(op),
            "timeout": op.timeout,
        }

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "type": self.remote_type_tags[op.transport],
            "url": op.url,
            "timeout": op.timeout,
        }
        if op.headers:
            entry["headers"] = dict(op.headers)
        return entry

    def build_entry(self, op: Operation, disabled: bool | None = None) -> RawEntry:
        """Fresh entry for add/update.

        ABOUTME: disabled=None applies the create-time enabled state
        """
        if op.transport == "stdio":
            entry = self.build_stdio_entry(op)
        else:
            entry = self.build_remote_entry(op)
        if self.toggle_field is not None:
            self.set_disabled(entry, self.create_disabled(op) if disabled is None else disabled)
        return entry

    def encode_auth(self, op: Operation) -> list[str]:
        return encode_args(op.auth or Auth("unknown"))

    def create_disabled(self, op: Operation) -> bool:
        """Disabled state of a newly created entry.

        ABOUTME: Explicit --enable/--disable wins over the client default
        """
        if op.disabled is not None:
            return op.disabled
        return self.capabilities.default_disabled_on_create

    def set_disabled(self, entry: RawEntry, disabled: bool) -> None:
        if self.toggle_field == "enabled":
            entry["enabled"] = not disabled
        elif self.toggle_field == "disabled":
            entry["disabled"] = disabled

    def is_disabled(self, entry: Any) -> bool | None:
        """Disabled state stored on an entry; None when the entry has no flag."""
        if not isinstance(entry, dict) or self.toggle_field is None:
            return None
        value = entry.get(self.toggle_field)
        if not isinstance(value, bool):
            return None
        return not value if self.toggle_field == "enabled" else value

    # -- contract -----------------------------------------------------

    def _not_found(self, op: Operation) -> NotFoundError:
        return NotFoundError(f'Server "{op.name}" not found.', name=op.name)

    def add(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Insert a new entry.

        ABOUTME: Fails with AlreadyExistsError unless op.force is set
        ABOUTME: A forced add replaces the old entry completely
        """
        store = self.ensure_store(doc, op)
        if op.name in store and not op.force:
            raise AlreadyExistsError(
                f'Server "{op.name}" already exists. Use --force to overwrite.', name=op.name
            )
        store[op.name] = self.build_entry(op)
        return doc

    def update(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Replace an existing entry; NotFoundError if absent.

        ABOUTME: Keeps the entry's enabled state unless --enable/--disable is given
        """
        if op.name not in self.get_store(doc, op):
            raise self._not_found(op)
        store = self.ensure_store(doc, op)
        disabled = op.disabled
        if disabled is None:
            disabled = self.is_disabled(store[op.name])
        store[op.name] = self.build_entry(op, disabled)
        return doc

    def remove(self, doc: RawDocument, op: Operation) -> RawDocument:
        if op.name not in self.get_store(doc, op):
            raise self._not_found(op)
        store = self.ensure_store(doc, op)
        del store[op.name]
        return doc

    def toggle(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Flip the entry's enabled state according to op.action.

        ABOUTME: Support is checked before the document is touched
        ABOUTME: The entry is copied; every other field is preserved
        """
        if not self.capabilities.supports_toggle or self.toggle_field is None:
            raise UnsupportedOperationError(
                f"{self.name} enable/disable is not supported.", name=op.name
            )
        if op.name not in self.get_store(doc, op):
            raise self._not_found(op)
        store = self.ensure_store(doc, op)
        entry = dict(store[op.name])
        self.set_disabled(entry, op.wants_disabled)
        store[op.name] = entry
        return doc

    def list_names(self, doc: RawDocument, op: Operation) -> list[str]:
        return sorted(self.get_store(doc, op))

    def show(self, doc: RawDocument, op: Operation) -> RawEntry:
        store = self.get_store(doc, op)
        if op.name not in store:
            raise self._not_found(op)
        return store[op.name]

    def contains(self, doc: RawDocument, op: Operation) -> bool:
        return op.name in self.get_store(doc, op)

    # -- grouped reads (Claude overrides these for per-project output) --

    def list_grouped(self, doc: RawDocument, op: Operation) -> Groups:
        return {None: self.list_names(doc, op)}

    def locate(self, doc: RawDocument, op: Operation) -> Groups:
        return {None: self.contains(doc, op)}

    def show_grouped(self, doc: RawDocument, op: Operation) -> Groups:
        return {None: self.show(doc, op)}

    def normalize(self, server_name: str, raw: RawEntry) -> NormalizedEntry:
        """Canonical view of one of this client's stored entries."""
        return normalize_entry(self.capabilities.client, server_name, raw)
