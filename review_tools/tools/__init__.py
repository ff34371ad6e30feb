"""Agent-facing tools."""

from .handlers import (
    generate_commit_message,
    get_file_changes_in_directory,
    write_review_to_markdown,
)
from .registry import TOOLS, Tool, execute_tool, get_tool, handle_tool_call, openai_tool_definitions

__all__ = [
    "TOOLS",
    "Tool",
    "execute_tool",
    "generate_commit_message",
    "get_file_changes_in_directory",
    "get_tool",
    "handle_tool_call",
    "openai_tool_definitions",
    "write_review_to_markdown",
]
