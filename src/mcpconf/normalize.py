# ABOUTME: Canonical view of stored server entries (show --normalized)
# ABOUTME: Inverse of the per-client entry builders and the argument codec
from dataclasses import dataclass
from typing import Any

from mcpconf.arguments import canonical_transport, decode_args
from mcpconf.config import DEFAULT_TIMEOUT
from mcpconf.models import ClientName, NormalizedEntry, RawEntry, Transport


@dataclass(frozen=True)
class EntrySchema:
    """Field names one client uses inside a stored entry."""
    command_field: str = "command"
    url_fields: tuple[str, ...] = ("url",)
    timeout_field: str = "timeout"
    headers_field: str = "headers"


DEFAULT_SCHEMA = EntrySchema()

# ABOUTME: Clients whose entries deviate from command/url/timeout/headers
ENTRY_SCHEMAS: dict[str, EntrySchema] = {
    "codex": EntrySchema(timeout_field="startup_timeout_sec", headers_field="http_headers"),
    "goose": EntrySchema(command_field="cmd", url_fields=("uri",)),
    "antigravity": EntrySchema(url_fields=("serverUrl", "url")),
}


def _first_url(raw: RawEntry, schema: EntrySchema) -> str | None:
    for field_name in schema.url_fields:
        value = raw.get(field_name)
        if isinstance(value, str) and value:
            return value
    return None


def _timeout(raw: RawEntry, schema: EntrySchema) -> float:
    value = raw.get(schema.timeout_field)
    # bool is an int subclass; a stray true/false is not a timeout
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return value
    return DEFAULT_TIMEOUT


def _headers(raw: RawEntry, schema: EntrySchema) -> dict[str, str]:
    value = raw.get(schema.headers_field)
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}


def infer_transport(raw: RawEntry, schema: EntrySchema = DEFAULT_SCHEMA) -> Transport:
    """Work out the transport of a stored entry.

    ABOUTME: Schema type tag first (streamable_http, remote, local, ...)
    ABOUTME: Untagged entries with a URL are http
    ABOUTME: Otherwise the --transport flag in args decides, default stdio
    """
    tagged = canonical_transport(raw.get("type"))
    if tagged is not None:
        return tagged
    if _first_url(raw, schema) is not None:
        return "http"
    return decode_args(raw.get("args")).transport or "stdio"


def normalize_entry(client: ClientName, name: str, raw: RawEntry) -> NormalizedEntry:
    """Reconstruct the canonical view of one stored entry.

    ABOUTME: Timeout defaults to 60 when the schema field is absent
    ABOUTME: Stdio entries: command + auth decoded from args (url/headers dropped)
    ABOUTME: Remote entries: url + headers (auth dropped)

    Args:
        client: Client the entry was read from
        name: Server name (store key)
        raw: Entry exactly as stored

    Returns:
        NormalizedEntry

    Examples:
        >>> normalize_entry("goose", "abap", {"type": "streamable_http", "uri": "https://x"}).transport
        'http'
    """
    schema = ENTRY_SCHEMAS.get(client, DEFAULT_SCHEMA)
    if not isinstance(raw, dict):
        raw = {}
    transport = infer_transport(raw, schema)
    timeout = _timeout(raw, schema)

    if transport == "stdio":
        command: Any = raw.get(schema.command_field)
        return NormalizedEntry(
            client=client,
            name=name,
            transport="stdio",
            timeout=timeout,
            command=command if isinstance(command, str) else None,
            auth=decode_args(raw.get("args")).auth,
        )

    return NormalizedEntry(
        client=client,
        name=name,
        transport=transport,
        timeout=timeout,
        url=_first_url(raw, schema),
        headers=_headers(raw, schema),
    )
