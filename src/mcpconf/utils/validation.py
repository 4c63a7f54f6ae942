# ABOUTME: Validation of canonical operations against a client's capabilities
# ABOUTME: Checks routing concerns only; values such as URLs are not inspected
from mcpconf.errors import ValidationError
from mcpconf.models import ACTIONS, ClientCapabilities, Operation


def _scope_problem(op: Operation, capabilities: ClientCapabilities) -> str | None:
    allowed = capabilities.supported_scopes
    if op.scope is not None and op.scope not in allowed:
        return (
            f"{capabilities.display_name} supports {'/'.join(allowed)} configuration only. "
            f"Use --{allowed[0]}."
        )
    return None


def _connection_problems(op: Operation, capabilities: ClientCapabilities) -> list[str]:
    """Transport/auth consistency for add and update."""
    problems: list[str] = []

    if op.transport not in capabilities.supported_transports:
        problems.append(
            f"{capabilities.display_name} does not support {op.transport.upper()} transport."
        )

    if op.transport == "stdio":
        if op.auth is None or op.auth.type == "unknown":
            problems.append("Provide --env, --env-path <path>, or --mcp <destination>.")
        elif op.auth.type != "session-env" and not op.auth.value:
            problems.append(f"Auth source '{op.auth.type}' requires a value.")
        if op.url or op.headers:
            problems.append("--url/--header are only valid for sse/http transports.")
    else:
        if not op.url:
            problems.append("Provide --url <http(s)://...> for sse/http transports.")
        if op.auth is not None:
            problems.append("--env/--env-path/--mcp are only valid for stdio transport.")

    if isinstance(op.timeout, bool) or not isinstance(op.timeout, (int, float)) or op.timeout <= 0:
        problems.append("Timeout must be a positive number of seconds.")

    return problems


def _project_problems(op: Operation, capabilities: ClientCapabilities) -> list[str]:
    """Claude-only project selectors."""
    problems: list[str] = []
    if not (op.all_projects or op.project_path):
        return problems

    if capabilities.client != "claude":
        problems.append("--project/--all-projects are only supported for Claude.")
        return problems
    if op.all_projects and op.project_path:
        problems.append("Use either --project or --all-projects (not both).")
    if op.all_projects and op.creates_entry:
        problems.append("--all-projects is only supported for rm/enable/disable/ls/where/show.")
    # Claude toggles always edit the global file, so only non-toggles care about scope
    if not op.is_toggle and op.scope == "local":
        problems.append("--project/--all-projects are only supported for Claude global config.")
    return problems


def find_operation_problems(op: Operation, capabilities: ClientCapabilities) -> list[str]:
    """Collect every inconsistency between an operation and its client.

    ABOUTME: Returns an empty list when the operation can be routed
    ABOUTME: Messages match the wording of the CLI flags

    Args:
        op: Operation to check (scope may still be unresolved)
        capabilities: Capabilities of op.client

    Returns:
        List of human-readable problems
    """
    problems: list[str] = []

    if op.action not in ACTIONS:
        problems.append(f"Unknown action '{op.action}'.")
    if op.action != "list" and not op.name:
        problems.append("Provide --name <serverName> (required).")

    scope_problem = _scope_problem(op, capabilities)
    if scope_problem:
        problems.append(scope_problem)

    if op.creates_entry:
        problems.extend(_connection_problems(op, capabilities))

    problems.extend(_project_problems(op, capabilities))
    return problems


def validate_operation(op: Operation, capabilities: ClientCapabilities) -> None:
    """Raise ValidationError if the operation can't be applied to the client.

    Raises:
        ValidationError: With all problems joined, one per line
    """
    problems = find_operation_problems(op, capabilities)
    if problems:
        raise ValidationError("\n".join(problems), name=op.name)
