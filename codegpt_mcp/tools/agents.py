"""Agent tools: list agents and chat with one."""

from typing import Any, Dict

import httpx

from .definitions import HttpTool, ToolParameter, Arguments, parse_json, extract_text
from ..config import BackendConfig
from ..core import BackendError, NO_TEXT_PLACEHOLDER


MAX_MESSAGE_LENGTH = 4000


def format_agent(agent: Dict[str, Any]) -> str:
    """Format one agent entry of the listing."""
    return "\n".join([
        f"id: {agent.get('id', '')}",
        f"Name: {agent.get('name', '')}",
        f"Welcome Message: {agent.get('welcome', '')}",
        f"Created At: {agent.get('created_at', '')}",
        "---",
    ])


def extract_agent_listing(response: httpx.Response) -> str:
    agents = parse_json(response)
    if not isinstance(agents, list):
        raise BackendError(
            f"Expected a list of agents, got {type(agents).__name__}",
            status_code=response.status_code
        )
    formatted = "\n".join(format_agent(agent) for agent in agents)
    return f"Available CodeGPT Agents:\n\n{formatted}"


def chat_body(arguments: Arguments, config: BackendConfig) -> Dict[str, Any]:
    """Single-turn, non-streaming chat completion request."""
    return {
        "agentId": arguments["agentId"],
        "messages": [
            {"role": "user", "content": arguments["message"]},
        ],
        "format": "text",
        "stream": False,
    }


LIST_AGENTS = HttpTool(
    name="list-agents",
    description="List all available CodeGPT agents",
    method="GET",
    path="/agent",
    extract=extract_agent_listing,
    check_status=True,
)

ASK_TO_AN_AGENT = HttpTool(
    name="ask-to-an-agent",
    description=(
        "Chat with a CodeGPT agent, an agent is like a database specialized in a specific"
        " codebase or knowledge"
    ),
    method="POST",
    path="/chat/completions",
    parameters=(
        ToolParameter(name="agentId", description="The ID of the agent to chat with"),
        ToolParameter(
            name="message",
            description="The message to send to the agent",
            max_length=MAX_MESSAGE_LENGTH,
        ),
    ),
    build_body=chat_body,
    extract=extract_text,
    placeholder=NO_TEXT_PLACEHOLDER,
)

AGENT_TOOLS = (LIST_AGENTS, ASK_TO_AN_AGENT)
