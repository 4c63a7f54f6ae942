# CLI interface for mcp-conf
import argparse
import json
import logging
import sys
from typing import Any

from mcpconf import __version__
from mcpconf.arguments import looks_like_env_path
from mcpconf.config import DEFAULT_COMMAND, DEFAULT_TIMEOUT, Environment
from mcpconf.errors import McpConfError
from mcpconf.models import Auth, Operation
from mcpconf.platforms import CLIENTS, CLIENT_ALIASES, get_adapter, normalize_client_name
from mcpconf.runner import RunReport, TargetResult, run_all

logger = logging.getLogger(__name__)

# ABOUTME: Exit codes
# 0 = success, 1 = partial success, 2 = config error, 3 = fatal
EXIT_SUCCESS = 0
EXIT_PARTIAL = 1
EXIT_CONFIG_ERROR = 2
EXIT_FATAL = 3

# ABOUTME: Subcommand name -> canonical action
COMMANDS = {
    "add": "add",
    "update": "update",
    "rm": "remove",
    "ls": "list",
    "enable": "enable",
    "disable": "disable",
    "where": "where",
    "show": "show",
}

_SESSION_ENV = object()


class UsageError(Exception):
    """Command-line value that argparse accepts but can't be turned into an operation."""


def _number(value: str) -> int | float:
    """argparse type for --timeout; keeps whole numbers as int."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    return int(number) if number.is_integer() else number


def parse_headers(values: list[str] | None) -> dict[str, str]:
    """Turn repeated key=value strings into a dict.

    ABOUTME: Splits on the first '='; later values for a key win

    Raises:
        UsageError: If a value has no key or no '='
    """
    headers: dict[str, str] = {}
    for raw in values or []:
        key, sep, value = raw.partition("=")
        if not key or not sep:
            raise UsageError("Header must be in key=value format.")
        headers[key] = value
    return headers


def auth_from_args(args: argparse.Namespace) -> Auth | None:
    """Auth source selected on the command line.

    ABOUTME: Bare --env means the session environment
    ABOUTME: --env <value> is a file path if it looks like one, else an env name
    """
    env = getattr(args, "env", None)
    if env is _SESSION_ENV or getattr(args, "session_env", False):
        return Auth.session_env()
    if env is not None:
        return Auth.env_path(env) if looks_like_env_path(env) else Auth.env_name(env)
    if getattr(args, "env_path", None):
        return Auth.env_path(args.env_path)
    if getattr(args, "mcp", None):
        return Auth.destination(args.mcp)
    return None


def build_operations(args: argparse.Namespace) -> list[Operation]:
    """One Operation per --client, in command-line order."""
    action = COMMANDS[args.command]
    common: dict[str, Any] = {
        "name": args.name,
        "scope": args.scope,
        "all_projects": args.all_projects,
        "project_path": args.project,
    }
    if action in ("add", "update"):
        common.update(
            transport=args.transport,
            command=args.server_command,
            timeout=args.timeout,
            url=args.url,
            headers=parse_headers(args.header),
            auth=auth_from_args(args),
            force=args.force,
            disabled=args.disabled,
        )
    return [
        Operation(action=action, client=normalize_client_name(client), **common)
        for client in args.client
    ]


def _header(result: TargetResult, label: str | None) -> str:
    return f"# {result.path} ({label})" if label else f"# {result.path}"


def print_result(result: TargetResult, name: str | None, normalized: bool = False) -> None:
    """Print one target's outcome the way each command reports it."""
    if result.action == "list":
        groups = result.groups or {"no-projects": []}
        for label, names in groups.items():
            print(_header(result, label))
            if not names:
                print("- (none)")
            for server_name in names:
                print(f"- {server_name}")
    elif result.action == "where":
        groups = result.groups or {"all-projects": False}
        for label, found in groups.items():
            print(_header(result, label))
            print(f"- {name}: {'found' if found else 'not found'}")
    elif result.action == "show":
        adapter = get_adapter(result.client)
        for label, entry in result.groups.items():
            print(_header(result, label))
            data = adapter.normalize(name, entry).to_dict() if normalized else entry
            print(json.dumps(data, indent=2, ensure_ascii=False))
    elif result.written:
        print(f"Updated {result.path}")
    else:
        print(f"\n# {result.path}\n{result.rendered}")


def exit_code_for(report: RunReport) -> int:
    """Success only if every target succeeded; partial if at least one did."""
    if report.ok:
        return EXIT_SUCCESS
    if report.results:
        return EXIT_PARTIAL
    return EXIT_CONFIG_ERROR


def cmd_run(args: argparse.Namespace) -> int:
    """Execute a subcommand against every requested client.

    ABOUTME: Each client file is handled independently
    ABOUTME: Errors are printed to stderr and the remaining clients still run
    """
    try:
        operations = build_operations(args)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    environment = Environment.from_os()
    report = run_all(operations, environment, dry_run=getattr(args, "dry_run", False))

    for result in report.results:
        print_result(result, args.name, normalized=getattr(args, "normalized", False))
    for error in report.errors:
        print(f"Error: {error}", file=sys.stderr)

    return exit_code_for(report)


def _add_common_options(parser: argparse.ArgumentParser, needs_name: bool = True) -> None:
    client_names = ", ".join(sorted([*CLIENTS, *CLIENT_ALIASES]))
    parser.add_argument(
        "--client",
        action="append",
        required=True,
        help=f"Target client (repeatable): {client_names}"
    )
    parser.add_argument(
        "--name",
        required=needs_name,
        help="MCP server name key"
    )
    scope = parser.add_mutually_exclusive_group()
    scope.add_argument(
        "--global",
        dest="scope",
        action="store_const",
        const="global",
        help="Use the global user config (default)"
    )
    scope.add_argument(
        "--local",
        dest="scope",
        action="store_const",
        const="local",
        help="Use the project config (where supported)"
    )
    parser.add_argument(
        "--all-projects",
        action="store_true",
        help="Claude global: act on every project"
    )
    parser.add_argument(
        "--project",
        help="Claude global: target a specific project path"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )


def _add_write_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print changes without writing files"
    )


def _add_entry_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default="stdio",
        help="Server transport (default: stdio)"
    )
    parser.add_argument(
        "--command",
        dest="server_command",
        default=DEFAULT_COMMAND,
        help="Command to run for stdio servers (default: mcp-abap-adt)"
    )
    parser.add_argument(
        "--url",
        help="Endpoint URL, required for sse/http"
    )
    parser.add_argument(
        "--header",
        action="append",
        metavar="KEY=VALUE",
        help="Request header (repeatable)"
    )
    parser.add_argument(
        "--timeout",
        type=_number,
        default=DEFAULT_TIMEOUT,
        help="Entry timeout in seconds (default: 60)"
    )

    auth = parser.add_mutually_exclusive_group()
    auth.add_argument(
        "--env",
        nargs="?",
        const=_SESSION_ENV,
        metavar="NAME_OR_PATH",
        help="Session env vars (no value), an env name, or a .env path (stdio only)"
    )
    auth.add_argument(
        "--env-path",
        help="Path to a .env file (stdio only)"
    )
    auth.add_argument(
        "--session-env",
        action="store_true",
        help="Use the current shell environment (stdio only)"
    )
    auth.add_argument(
        "--mcp",
        metavar="DEST",
        help="Destination name (stdio only)"
    )

    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing entry (add)"
    )
    state = parser.add_mutually_exclusive_group()
    state.add_argument(
        "--enable",
        dest="disabled",
        action="store_const",
        const=False,
        help="Create the entry enabled (update: switch it on)"
    )
    state.add_argument(
        "--disable",
        dest="disabled",
        action="store_const",
        const=True,
        help="Create the entry disabled (update: switch it off)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-conf",
        description="Add, update, remove, toggle and inspect MCP server entries in AI client configs",
        epilog=(
            "Scope defaults to --global (Copilot uses --local only). "
            "For Claude, --local maps to the project file ./.mcp.json."
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"mcp-conf v{__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command, help_text in (
        ("add", "Add an MCP server entry"),
        ("update", "Replace an existing MCP server entry"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        _add_common_options(sub)
        _add_entry_options(sub)
        _add_write_options(sub)

    for command, help_text in (
        ("rm", "Remove an MCP server entry"),
        ("enable", "Enable an existing entry"),
        ("disable", "Disable an existing entry"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        _add_common_options(sub)
        _add_write_options(sub)

    ls_parser = subparsers.add_parser("ls", help="List MCP server entries")
    _add_common_options(ls_parser, needs_name=False)

    where_parser = subparsers.add_parser("where", help="Show where a server name is defined")
    _add_common_options(where_parser)

    show_parser = subparsers.add_parser("show", help="Print a stored entry")
    _add_common_options(show_parser)
    show_parser.add_argument(
        "--normalized",
        action="store_true",
        help="Print the client-independent view of the entry"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to the runner
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_SUCCESS

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        return cmd_run(args)
    except McpConfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
