"""MCP tools for the CodeGPT backend."""

from typing import Tuple

from ..config import ToolSet
from .definitions import HttpTool, ToolParameter
from .graphs import (
    GRAPH_TOOLS,
    GET_CODE,
    FIND_DIRECT_CONNECTIONS,
    NODES_SEMANTIC_SEARCH,
    DOCS_SEMANTIC_SEARCH,
    GET_USAGE_DEPENDENCY_LINKS,
)
from .agents import AGENT_TOOLS, LIST_AGENTS, ASK_TO_AN_AGENT, MAX_MESSAGE_LENGTH
from .gateway import ToolGateway


def tools_for(toolset: ToolSet) -> Tuple[HttpTool, ...]:
    """Tools registered for a tool set."""
    tools: Tuple[HttpTool, ...] = ()
    if toolset.includes_graphs:
        tools += GRAPH_TOOLS
    if toolset.includes_agents:
        tools += AGENT_TOOLS
    return tools


__all__ = [
    "HttpTool",
    "ToolParameter",
    "ToolGateway",
    "tools_for",
    "GRAPH_TOOLS",
    "AGENT_TOOLS",
    "GET_CODE",
    "FIND_DIRECT_CONNECTIONS",
    "NODES_SEMANTIC_SEARCH",
    "DOCS_SEMANTIC_SEARCH",
    "GET_USAGE_DEPENDENCY_LINKS",
    "LIST_AGENTS",
    "ASK_TO_AN_AGENT",
    "MAX_MESSAGE_LENGTH",
]
