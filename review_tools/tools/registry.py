"""Tool declarations exposed to an OpenAI function-calling agent."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from openai.types.chat import ChatCompletionToolMessageParam
from pydantic import BaseModel

from ..exceptions import UnknownToolError
from . import handlers
from .schemas import CommitMessageInput, FileChangesInput, WriteReviewInput

if TYPE_CHECKING:
    from openai.types.chat import ChatCompletionMessageToolCall, ChatCompletionToolParam

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tool:
    """A named, schema-validated tool."""

    name: str
    description: str
    input_model: type[BaseModel]
    run: Callable[[Any], Any]

    def definition(self) -> ChatCompletionToolParam:
        """OpenAI function tool definition for this tool."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_model.model_json_schema(),
            },
        }

    def invoke(self, arguments: dict[str, Any] | str | None) -> Any:
        """Validate the arguments and run the tool."""
        if isinstance(arguments, str):
            params = self.input_model.model_validate_json(arguments or "{}")
        else:
            params = self.input_model.model_validate(arguments or {})
        logger.debug("Running tool %s", self.name)
        return self.run(params)


TOOLS: tuple[Tool, ...] = (
    Tool(
        name="get_file_changes_in_directory",
        description="Gets the code changes made in given directory",
        input_model=FileChangesInput,
        run=lambda p: handlers.get_file_changes_in_directory(p.root_dir),
    ),
    Tool(
        name="generate_commit_message",
        description="Generates a conventional commit message based on git changes in the directory",
        input_model=CommitMessageInput,
        run=lambda p: handlers.generate_commit_message(p.root_dir, p.type),
    ),
    Tool(
        name="write_review_to_markdown",
        description="Writes a code review to a markdown file with proper formatting",
        input_model=WriteReviewInput,
        run=lambda p: handlers.write_review_to_markdown(
            p.file_path,
            p.review_content,
            title=p.title,
            include_timestamp=p.include_timestamp,
        ),
    ),
)


def get_tool(name: str) -> Tool:
    """Look up a registered tool by name."""
    for tool in TOOLS:
        if tool.name == name:
            return tool
    raise UnknownToolError(name)


def openai_tool_definitions() -> list[ChatCompletionToolParam]:
    """Definitions to pass as ``tools=`` to ``chat.completions.create``."""
    return [tool.definition() for tool in TOOLS]


def execute_tool(name: str, arguments: dict[str, Any] | str | None = None) -> Any:
    """
    Run a tool by name.

    Raises:
        UnknownToolError: If no tool has that name.
        pydantic.ValidationError: If the arguments do not match the schema.
    """
    return get_tool(name).invoke(arguments)


def handle_tool_call(tool_call: ChatCompletionMessageToolCall) -> ChatCompletionToolMessageParam:
    """Execute a model-issued tool call and wrap the result as a tool message."""
    result = execute_tool(tool_call.function.name, tool_call.function.arguments)
    content = result if isinstance(result, str) else json.dumps(result)
    return {
        "role": "tool",
        "tool_call_id": tool_call.id,
        "content": content,
    }
