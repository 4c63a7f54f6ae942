# Document read/write for JSON, YAML and TOML client configs
import json
import logging
from pathlib import Path, PurePath
from types import ModuleType
from typing import Any

from mcpconf.errors import (
    DependencyUnavailableError,
    DocumentAccessError,
    MalformedDocumentError,
)
from mcpconf.models import FormatKind, RawDocument

logger = logging.getLogger(__name__)


def _require_yaml() -> ModuleType:
    """Import PyYAML or fail with a DependencyUnavailableError."""
    try:
        import yaml
    except ImportError as e:
        raise DependencyUnavailableError(
            "YAML dependency not available. Install PyYAML and retry."
        ) from e
    return yaml


def _require_toml_reader() -> ModuleType:
    try:
        import tomli
    except ImportError as e:
        raise DependencyUnavailableError(
            "TOML dependency not available. Install tomli and retry."
        ) from e
    return tomli


def _require_toml_writer() -> ModuleType:
    try:
        import tomli_w
    except ImportError as e:
        raise DependencyUnavailableError(
            "TOML dependency not available. Install tomli-w and retry."
        ) from e
    return tomli_w


def parse_document(text: str, format_kind: FormatKind, path: PurePath | str = "<string>") -> RawDocument:
    """Parse config text into a raw document tree.

    ABOUTME: Blank text is an empty document
    ABOUTME: A root that isn't a mapping is treated as malformed

    Raises:
        MalformedDocumentError: If text isn't valid in the declared format
        DependencyUnavailableError: If the YAML/TOML library is missing
    """
    if not text.strip():
        return {}

    data: Any
    if format_kind == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError(f"Invalid JSON in {path}: {e}", path=path) from e
    elif format_kind == "yaml":
        yaml = _require_yaml()
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedDocumentError(f"Invalid YAML in {path}: {e}", path=path) from e
    elif format_kind == "toml":
        tomli = _require_toml_reader()
        try:
            data = tomli.loads(text)
        except tomli.TOMLDecodeError as e:
            raise MalformedDocumentError(f"Invalid TOML in {path}: {e}", path=path) from e
    else:
        raise ValueError(f"Unknown format '{format_kind}'")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"Invalid {format_kind.upper()} in {path}: top level must be a mapping", path=path
        )
    return data


def read_document(path: Path, format_kind: FormatKind) -> RawDocument:
    """Read a client config file fresh from disk.

    ABOUTME: Returns empty dict if the file doesn't exist or is blank
    ABOUTME: Raises MalformedDocumentError for unparseable content or bad encoding
    ABOUTME: Raises DocumentAccessError when the file exists but can't be read

    Args:
        path: Config file path
        format_kind: Declared format of the file

    Returns:
        Parsed document tree
    """
    if format_kind == "yaml":
        _require_yaml()
    elif format_kind == "toml":
        _require_toml_reader()

    if not path.exists():
        logger.debug("Config %s not found, starting from an empty document", path)
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"Invalid UTF-8 in {path}: {e}", path=path) from e
    except OSError as e:
        raise DocumentAccessError(f"Cannot read {path}: {e.strerror or e}", path=path) from e
    return parse_document(text, format_kind, path)


def render_document(data: RawDocument, format_kind: FormatKind) -> str:
    """Serialize a document tree to text.

    ABOUTME: JSON keeps key order with 2-space indentation and a trailing newline
    ABOUTME: YAML keeps key order (sort_keys=False)
    """
    if format_kind == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if format_kind == "yaml":
        yaml = _require_yaml()
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
    if format_kind == "toml":
        tomli_w = _require_toml_writer()
        return tomli_w.dumps(data)
    raise ValueError(f"Unknown format '{format_kind}'")


def write_document(
    path: Path,
    data: RawDocument,
    format_kind: FormatKind,
    dry_run: bool = False,
) -> str:
    """Overwrite a client config file with the whole document.

    ABOUTME: Creates parent directories if needed
    ABOUTME: In dry-run mode nothing touches the disk; the text is returned for display

    Args:
        path: Config file path
        data: Full document tree
        format_kind: Format to serialize as
        dry_run: Render only

    Returns:
        The rendered file content
    """
    content = render_document(data, format_kind)
    if dry_run:
        logger.info("Dry run: not writing %s", path)
        return content

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise DocumentAccessError(f"Cannot write {path}: {e.strerror or e}", path=path) from e
    logger.info("Saved configuration to %s", path)
    return content
