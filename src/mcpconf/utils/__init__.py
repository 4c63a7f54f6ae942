# ABOUTME: Utility modules for mcp-conf
# ABOUTME: Exports operation validation functions

from mcpconf.utils.validation import find_operation_problems, validate_operation

__all__ = [
    "find_operation_problems",
    "validate_operation",
]
