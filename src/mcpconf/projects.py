# ABOUTME: Claude multi-project store helpers
# ABOUTME: Project key resolution (symlink aliasing) and enabled/disabled list upkeep
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ENABLED_LIST = "enabledMcpServers"
DISABLED_LIST = "disabledMcpServers"

# ABOUTME: Older Claude releases kept the lists under these names
LEGACY_LISTS = {
    ENABLED_LIST: "enabledMcpjsonServers",
    DISABLED_LIST: "disabledMcpjsonServers",
}


def _real_path(path: str) -> str:
    """Resolve symlinks; raises OSError/RuntimeError if the path doesn't exist."""
    return str(Path(path).resolve(strict=True))


def resolve_project_key(projects: dict[str, Any] | None, desired: str) -> str:
    """Find the key a project path is recorded under.

    ABOUTME: Exact key match first, then real-path (symlink-resolved) comparison
    ABOUTME: Keys that no longer resolve on disk are skipped, never fatal
    ABOUTME: Falls back to the desired path so a new project node can be created

    Args:
        projects: The document's "projects" mapping (None if absent)
        desired: Project path requested by the caller

    Returns:
        Existing matching key, or desired unchanged

    Examples:
        >>> resolve_project_key({"/home/u/proj": {}}, "/home/u/proj")
        '/home/u/proj'
        >>> resolve_project_key(None, "/tmp/new")
        '/tmp/new'
    """
    if not projects or desired in projects:
        return desired

    try:
        desired_real = _real_path(desired)
    except (OSError, RuntimeError):
        logger.debug("Project path %s does not resolve, using it verbatim", desired)
        return desired

    for key in projects:
        try:
            if _real_path(key) == desired_real:
                logger.debug("Project path %s matches existing key %s", desired, key)
                return key
        except (OSError, RuntimeError):
            logger.debug("Skipping unresolvable project key %s", key)
            continue

    return desired


def new_project_node() -> dict[str, Any]:
    """Empty project node in the shape Claude writes itself."""
    return {
        "allowedTools": [],
        "mcpContextUris": [],
        "mcpServers": {},
        ENABLED_LIST: [],
        DISABLED_LIST: [],
    }


def merge_legacy_lists(node: dict[str, Any]) -> None:
    """Fold legacy list fields into the canonical enabled/disabled lists.

    ABOUTME: One-way: legacy fields are read but left untouched
    ABOUTME: Creates the canonical lists when missing; never duplicates names
    ABOUTME: A name already in either canonical list keeps its canonical state
    """
    for canonical in LEGACY_LISTS:
        if not isinstance(node.get(canonical), list):
            node[canonical] = []
    for canonical, legacy in LEGACY_LISTS.items():
        current = node[canonical]
        opposite = node[DISABLED_LIST if canonical == ENABLED_LIST else ENABLED_LIST]
        old = node.get(legacy)
        if isinstance(old, list):
            for server_name in old:
                if server_name not in current and server_name not in opposite:
                    current.append(server_name)


def set_membership(node: dict[str, Any], server_name: str, disabled: bool) -> None:
    """Put a server name in exactly one of the enabled/disabled lists.

    ABOUTME: Legacy lists are folded in first
    ABOUTME: All occurrences are dropped from the opposite list
    """
    merge_legacy_lists(node)
    target = node[DISABLED_LIST] if disabled else node[ENABLED_LIST]
    opposite = DISABLED_LIST if not disabled else ENABLED_LIST
    node[opposite] = [item for item in node[opposite] if item != server_name]
    if server_name not in target:
        target.append(server_name)


def drop_membership(node: dict[str, Any], server_name: str) -> None:
    """Remove a server name from both canonical lists."""
    merge_legacy_lists(node)
    for canonical in (ENABLED_LIST, DISABLED_LIST):
        node[canonical] = [item for item in node[canonical] if item != server_name]


def current_membership(node: dict[str, Any], server_name: str) -> bool | None:
    """Disabled state recorded in the lists; None when the name is in neither."""
    merge_legacy_lists(node)
    if server_name in node[DISABLED_LIST]:
        return True
    if server_name in node[ENABLED_LIST]:
        return False
    return None
