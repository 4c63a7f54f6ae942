# Runtime configuration for mcp-conf
import os
import sys
from dataclasses import dataclass
from pathlib import Path

# ABOUTME: Launch command written into stdio entries when --command is not given
DEFAULT_COMMAND = "mcp-abap-adt"

# ABOUTME: Entry timeout in seconds when --timeout is not given or not stored
DEFAULT_TIMEOUT = 60

# ABOUTME: Name suggested by interactive callers; the CLI itself requires --name
DEFAULT_SERVER_NAME = "abap"


@dataclass(frozen=True)
class Environment:
    """Host facts the path resolver and runner depend on.

    ABOUTME: Captured once per invocation and passed explicitly
    ABOUTME: Tests build it directly to stay independent of the real host
    """
    platform: str
    home: Path
    cwd: Path
    appdata: Path
    userprofile: Path
    localappdata: Path

    @classmethod
    def from_os(cls) -> "Environment":
        """Build the environment from the running process.

        ABOUTME: Windows directories fall back to home-derived defaults
        """
        home = Path.home()
        return cls(
            platform=sys.platform,
            home=home,
            cwd=Path.cwd(),
            appdata=Path(os.environ.get("APPDATA") or home),
            userprofile=Path(os.environ.get("USERPROFILE") or home),
            localappdata=Path(os.environ.get("LOCALAPPDATA") or home / "AppData" / "Local"),
        )

    @classmethod
    def for_home(cls, home: Path, cwd: Path | None = None, platform: str = "linux") -> "Environment":
        """Environment rooted at one directory (all Windows dirs under it)."""
        return cls(
            platform=platform,
            home=home,
            cwd=cwd if cwd is not None else home,
            appdata=home / "AppData" / "Roaming",
            userprofile=home,
            localappdata=home / "AppData" / "Local",
        )
