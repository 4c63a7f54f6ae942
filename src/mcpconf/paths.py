# Config file locations per client, scope and OS
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from mcpconf.config import Environment
from mcpconf.errors import ValidationError
from mcpconf.models import Scope

# ABOUTME: VS Code extension id Cline stores its settings under
CLINE_EXTENSION_ID = "saoudrizwan.claude-dev"

# ABOUTME: Relative paths of project-scoped (local) stores
LOCAL_PATHS: dict[str, tuple[str, ...]] = {
    "codex": (".codex", "config.toml"),
    "claude": (".mcp.json",),
    "cursor": (".cursor", "mcp.json"),
    "opencode": ("opencode.json",),
    "copilot": (".vscode", "mcp.json"),
    "crush": ("crush.json",),
}


def _pure(platform: str, base: object) -> PurePath:
    """Build a PurePath in the flavour of the target platform, not the host."""
    if platform == "win32":
        return PureWindowsPath(str(base))
    return PurePosixPath(str(base))


def _vscode_user_dir(env: Environment) -> PurePath:
    """VS Code user data directory.

    ABOUTME: Mirrors the globalStorage lookup VS Code extensions use per OS
    """
    if env.platform == "darwin":
        # VS Code keeps user data here on macOS, not ~/.config; Cline settings live under it
        return _pure(env.platform, env.home) / "Library" / "Application Support" / "Code" / "User"
    if env.platform == "win32":
        return _pure(env.platform, env.appdata) / "Code" / "User"
    return _pure(env.platform, env.home) / ".config" / "Code" / "User"


def _global_path(client: str, env: Environment) -> PurePath | None:
    platform = env.platform
    home = _pure(platform, env.home)

    if client == "cline":
        return (
            _vscode_user_dir(env) / "globalStorage" / CLINE_EXTENSION_ID
            / "settings" / "cline_mcp_settings.json"
        )
    if client == "codex":
        base = _pure(platform, env.userprofile) if platform == "win32" else home
        return base / ".codex" / "config.toml"
    if client == "claude":
        if platform == "darwin":
            return home / "Library" / "Application Support" / "Claude" / "claude_desktop_config.json"
        if platform == "win32":
            return _pure(platform, env.appdata) / "Claude" / "claude_desktop_config.json"
        return home / ".claude.json"
    if client == "goose":
        if platform == "win32":
            return _pure(platform, env.appdata) / "Block" / "goose" / "config" / "config.yaml"
        return home / ".config" / "goose" / "config.yaml"
    if client == "cursor":
        base = _pure(platform, env.userprofile) if platform == "win32" else home
        return base / ".cursor" / "mcp.json"
    if client == "windsurf":
        base = _pure(platform, env.userprofile) if platform == "win32" else home
        return base / ".codeium" / "windsurf" / "mcp_config.json"
    if client == "opencode":
        if platform == "win32":
            return _pure(platform, env.appdata) / "opencode" / "opencode.json"
        return home / ".config" / "opencode" / "opencode.json"
    if client == "antigravity":
        return home / ".gemini" / "antigravity" / "mcp_config.json"
    if client == "crush":
        if platform == "win32":
            return _pure(platform, env.localappdata) / "crush" / "crush.json"
        return home / ".config" / "crush" / "crush.json"
    return None


def resolve_config_path(
    client: str,
    scope: Scope,
    env: Environment,
    project_dir: PurePath | str | None = None,
) -> PurePath:
    """Compute the absolute path of a client's config store.

    ABOUTME: Pure function - no filesystem access, no directory creation
    ABOUTME: Windows targets produce PureWindowsPath regardless of host OS
    ABOUTME: Local scope is relative to project_dir (default: env.cwd)

    Args:
        client: Client name (e.g. "cline", "codex")
        scope: "global" or "local"
        env: Host environment (platform, home, Windows profile dirs)
        project_dir: Directory for local-scope stores

    Returns:
        Path to the client's config file

    Raises:
        ValidationError: If the client has no store for the scope
    """
    if scope == "local":
        parts = LOCAL_PATHS.get(client)
        if parts is None:
            raise ValidationError(f"{client} has no local (project) configuration file.")
        base = project_dir if project_dir is not None else env.cwd
        return _pure(env.platform, base).joinpath(*parts)

    path = _global_path(client, env)
    if path is None:
        raise ValidationError(f"{client} has no global configuration file.")
    return path
