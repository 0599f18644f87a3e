"""
CodeGPT MCP Server

Exposes the CodeGPT code-graph and agent APIs as Model Context Protocol
tools over stdio. Every tool forwards one request to the backend and
returns the response as a single text block.
"""

__version__ = "0.1.0"

# Public API
from .config import Config, BackendConfig, ToolSet
from .core import ToolResult
from .tools import ToolGateway
from .server import CodeGPTMCP

__all__ = [
    "Config",
    "BackendConfig",
    "ToolSet",
    "ToolResult",
    "ToolGateway",
    "CodeGPTMCP",
    "__version__"
]
