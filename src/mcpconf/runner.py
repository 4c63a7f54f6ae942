# Operation runner for mcp-conf
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path, PurePath
from typing import Any, Iterable

from mcpconf.config import Environment
from mcpconf.documents import read_document, write_document
from mcpconf.errors import McpConfError, NotFoundError
from mcpconf.models import Operation
from mcpconf.paths import resolve_config_path
from mcpconf.platforms import get_adapter
from mcpconf.platforms.base import BaseAdapter
from mcpconf.platforms.claude import ClaudeAdapter
from mcpconf.utils import validate_operation

logger = logging.getLogger(__name__)


@dataclass
class TargetResult:
    """Outcome of one operation on one client config file.

    ABOUTME: groups maps a project label (None outside Claude global) to
    ABOUTME: server names (ls), a found flag (where) or a raw entry (show)
    """
    client: str
    path: PurePath
    action: str
    groups: dict[str | None, Any] = field(default_factory=dict)
    written: bool = False
    rendered: str | None = None


@dataclass
class RunReport:
    """Report from a multi-client run.

    ABOUTME: Tracks success/failure across targets
    ABOUTME: A failed target never rolls back the ones before it
    """
    results: list[TargetResult] = field(default_factory=list)
    errors: list[McpConfError] = field(default_factory=list)

    def add_result(self, result: TargetResult) -> None:
        self.results.append(result)

    def add_error(self, error: McpConfError) -> None:
        """Record an error for one target; the run continues."""
        self.errors.append(error)

    @property
    def ok(self) -> bool:
        return not self.errors


def prepare_operation(op: Operation, environment: Environment) -> Operation:
    """Fill in derived fields and validate.

    ABOUTME: Scope defaults to the client's default scope (global where supported)
    ABOUTME: Claude global operations default their project path to the cwd

    Args:
        op: Operation as requested
        environment: Host environment

    Returns:
        New Operation ready for run_operation

    Raises:
        ValidationError: If the operation doesn't fit the client
    """
    adapter = get_adapter(op.client)
    capabilities = adapter.capabilities
    if op.client != capabilities.client:
        op = replace(op, client=capabilities.client)

    validate_operation(op, capabilities)

    if op.scope is None:
        op = replace(op, scope=capabilities.default_scope)

    needs_project = op.scope == "global" or op.is_toggle
    if (
        capabilities.client == "claude"
        and needs_project
        and not op.all_projects
        and not op.project_path
    ):
        op = replace(op, project_path=str(environment.cwd))
    return op


def _target_path(op: Operation, environment: Environment) -> PurePath:
    return resolve_config_path(op.client, op.scope, environment)


def _apply(adapter: BaseAdapter, doc: dict[str, Any], op: Operation) -> dict[str | None, Any]:
    """Dispatch an operation to the adapter; returns grouped read results."""
    if op.action == "add":
        adapter.add(doc, op)
    elif op.action == "update":
        adapter.update(doc, op)
    elif op.action == "remove":
        adapter.remove(doc, op)
    elif op.is_toggle:
        adapter.toggle(doc, op)
    elif op.action == "list":
        return adapter.list_grouped(doc, op)
    elif op.action == "where":
        return adapter.locate(doc, op)
    elif op.action == "show":
        return adapter.show_grouped(doc, op)
    else:
        raise ValueError(f"Unknown action '{op.action}'")
    return {}


def _run_claude_project_toggle(
    adapter: ClaudeAdapter,
    op: Operation,
    environment: Environment,
    dry_run: bool,
) -> TargetResult:
    """Enable/disable a server defined in ./.mcp.json.

    ABOUTME: The entry must exist in the project file
    ABOUTME: Its enabled/disabled lists live in the global file under the project key
    """
    project_path = Path(str(_target_path(op, environment)))
    project_doc = read_document(project_path, adapter.capabilities.format_kind)
    if not adapter.contains(project_doc, op):
        raise NotFoundError(f'Server "{op.name}" not found.', name=op.name, path=project_path)

    global_op = replace(op, scope="global")
    path = _target_path(global_op, environment)
    doc = read_document(Path(str(path)), adapter.capabilities.format_kind)
    adapter.toggle(doc, global_op, require_entry=False)
    rendered = write_document(Path(str(path)), doc, adapter.capabilities.format_kind, dry_run)
    return TargetResult(op.client, path, op.action, written=not dry_run, rendered=rendered)


def run_operation(op: Operation, environment: Environment, dry_run: bool = False) -> TargetResult:
    """Apply one operation to one client config file.

    ABOUTME: Reads the file fresh, mutates in memory, writes the whole file back
    ABOUTME: Read-only actions never write; dry_run renders without writing
    ABOUTME: Any McpConfError leaves with the target path attached

    Args:
        op: Operation (prepared or not)
        environment: Host environment
        dry_run: Render mutations instead of writing them

    Returns:
        TargetResult for the file
    """
    op = prepare_operation(op, environment)
    adapter = get_adapter(op.client)
    path = _target_path(op, environment)
    format_kind = adapter.capabilities.format_kind

    try:
        if isinstance(adapter, ClaudeAdapter) and op.is_toggle and adapter.is_project_file(op):
            return _run_claude_project_toggle(adapter, op, environment, dry_run)

        logger.debug("Reading %s config from %s", adapter.name, path)
        doc = read_document(Path(str(path)), format_kind)
        groups = _apply(adapter, doc, op)

        if not op.is_mutation:
            return TargetResult(op.client, path, op.action, groups=groups)

        rendered = write_document(Path(str(path)), doc, format_kind, dry_run)
        return TargetResult(op.client, path, op.action, written=not dry_run, rendered=rendered)
    except McpConfError as e:
        raise e.with_path(path)


def run_all(
    ops: Iterable[Operation],
    environment: Environment,
    dry_run: bool = False,
) -> RunReport:
    """Run operations one after another.

    ABOUTME: Continues on per-target errors, records them in the report
    ABOUTME: Unexpected exceptions propagate
    """
    report = RunReport()
    for op in ops:
        try:
            report.add_result(run_operation(op, environment, dry_run))
        except McpConfError as e:
            logger.warning("%s: %s", op.client, e)
            report.add_error(e)
    return report
