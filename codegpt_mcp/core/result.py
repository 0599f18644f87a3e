"""Uniform text envelope returned by every tool."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from mcp.types import TextContent


NO_TEXT_PLACEHOLDER = "No response text available"
NO_DATA_PLACEHOLDER = "No response data available"


@dataclass(frozen=True)
class TextBlock:
    """A single ``{"type": "text", "text": ...}`` content block."""

    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool invocation.

    A result holds either a success block or an error block, never both.
    ``is_error`` is informational; the envelope sent to the client is the
    same shape in both cases.
    """

    content: Tuple[TextBlock, ...]
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=(TextBlock(text=text),))

    @classmethod
    def from_error(cls, error: BaseException) -> "ToolResult":
        return cls(content=(TextBlock(text=render_error(error)),), is_error=True)

    @property
    def text(self) -> str:
        """Text of the first block."""
        return self.content[0].text

    def to_content(self) -> List[TextContent]:
        """Convert to MCP content blocks."""
        return [TextContent(type="text", text=block.text) for block in self.content]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [{"type": block.type, "text": block.text} for block in self.content]
        }


def render_error(error: BaseException) -> str:
    """Render any error as ``"<ErrorClass>: <message>"``."""
    message = str(error)
    name = error.__class__.__name__
    return f"{name}: {message}" if message else name
