"""MCP server exposing the CodeGPT backend as tools."""

import argparse
import asyncio
import logging
from typing import Annotated, List, Optional
import sys

import httpx
from dotenv import find_dotenv, load_dotenv
from mcp.server import FastMCP
from mcp.types import TextContent

from .config import Config, ToolSet
from .core import ConfigurationError
from .di import create_container, DIContainer
from .tools import (
    ToolGateway,
    GET_CODE,
    FIND_DIRECT_CONNECTIONS,
    NODES_SEMANTIC_SEARCH,
    DOCS_SEMANTIC_SEARCH,
    GET_USAGE_DEPENDENCY_LINKS,
    LIST_AGENTS,
    ASK_TO_AN_AGENT,
)

logger = logging.getLogger(__name__)


class CodeGPTMCP:
    """MCP server whose tools forward to the CodeGPT backend."""

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self.server = FastMCP(config.mcp_server_name)
        self.container: Optional[DIContainer] = None
        self.gateway: Optional[ToolGateway] = None
        self._transport = transport

    async def initialize(self):
        """Wire services and register tools."""
        logger.info(f"Initializing {self.config.mcp_server_name} MCP server ({self.config.toolset.value} tools)...")

        self.container = await create_container(self.config, transport=self._transport)
        self.gateway = await self.container.get(ToolGateway)

        if self.config.toolset.includes_graphs:
            self._register_graph_tools()
        if self.config.toolset.includes_agents:
            self._register_agent_tools()

        logger.info(f"Registered {len(self.gateway.tools)} tools: {[t.name for t in self.gateway.tools]}")

    def _register_graph_tools(self):
        gateway = self.gateway

        @self.server.tool(name=GET_CODE.name, description=GET_CODE.description, structured_output=False)
        async def get_code(
            name: Annotated[str, GET_CODE.field("name")],
            path: Annotated[Optional[str], GET_CODE.field("path")] = None,
        ) -> List[TextContent]:
            result = await gateway.invoke(GET_CODE.name, {"name": name, "path": path})
            return result.to_content()

        @self.server.tool(
            name=FIND_DIRECT_CONNECTIONS.name,
            description=FIND_DIRECT_CONNECTIONS.description,
            structured_output=False,
        )
        async def find_direct_connections(
            name: Annotated[str, FIND_DIRECT_CONNECTIONS.field("name")],
            path: Annotated[Optional[str], FIND_DIRECT_CONNECTIONS.field("path")] = None,
        ) -> List[TextContent]:
            result = await gateway.invoke(FIND_DIRECT_CONNECTIONS.name, {"name": name, "path": path})
            return result.to_content()

        @self.server.tool(
            name=NODES_SEMANTIC_SEARCH.name,
            description=NODES_SEMANTIC_SEARCH.description,
            structured_output=False,
        )
        async def nodes_semantic_search(
            query: Annotated[str, NODES_SEMANTIC_SEARCH.field("query")],
        ) -> List[TextContent]:
            result = await gateway.invoke(NODES_SEMANTIC_SEARCH.name, {"query": query})
            return result.to_content()

        @self.server.tool(
            name=DOCS_SEMANTIC_SEARCH.name,
            description=DOCS_SEMANTIC_SEARCH.description,
            structured_output=False,
        )
        async def docs_semantic_search(
            query: Annotated[str, DOCS_SEMANTIC_SEARCH.field("query")],
        ) -> List[TextContent]:
            result = await gateway.invoke(DOCS_SEMANTIC_SEARCH.name, {"query": query})
            return result.to_content()

        @self.server.tool(
            name=GET_USAGE_DEPENDENCY_LINKS.name,
            description=GET_USAGE_DEPENDENCY_LINKS.description,
            structured_output=False,
        )
        async def get_usage_dependency_links(
            name: Annotated[str, GET_USAGE_DEPENDENCY_LINKS.field("name")],
            path: Annotated[Optional[str], GET_USAGE_DEPENDENCY_LINKS.field("path")] = None,
        ) -> List[TextContent]:
            result = await gateway.invoke(GET_USAGE_DEPENDENCY_LINKS.name, {"name": name, "path": path})
            return result.to_content()

    def _register_agent_tools(self):
        gateway = self.gateway

        @self.server.tool(name=LIST_AGENTS.name, description=LIST_AGENTS.description, structured_output=False)
        async def list_agents() -> List[TextContent]:
            result = await gateway.invoke(LIST_AGENTS.name, {})
            return result.to_content()

        @self.server.tool(
            name=ASK_TO_AN_AGENT.name,
            description=ASK_TO_AN_AGENT.description,
            structured_output=False,
        )
        async def ask_to_an_agent(
            agentId: Annotated[str, ASK_TO_AN_AGENT.field("agentId")],
            message: Annotated[str, ASK_TO_AN_AGENT.field("message")],
        ) -> List[TextContent]:
            result = await gateway.invoke(ASK_TO_AN_AGENT.name, {"agentId": agentId, "message": message})
            return result.to_content()

    async def run(self):
        """Run the MCP server on stdio."""
        await self.initialize()
        logger.info(f"{self.config.mcp_server_name} MCP server running on stdio")
        await self.server.run_stdio_async()

    async def shutdown(self):
        """Shutdown the server."""
        logger.info("Shutting down server...")
        if self.container:
            await self.container.shutdown()
        logger.info("Server shut down complete")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="codegpt-mcp",
        description="Serve CodeGPT graph and agent tools over MCP (stdio)."
    )
    parser.add_argument(
        "--toolset",
        choices=[t.value for t in ToolSet],
        default=ToolSet.ALL.value,
        help="Tools to register (graphs requires GRAPH_ID)"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Read environment variables from this file instead of ./.env"
    )
    return parser.parse_args(argv)


async def serve(config: Config) -> None:
    server = CodeGPTMCP(config)
    try:
        await server.run()
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
    finally:
        await server.shutdown()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    load_dotenv(args.env_file or find_dotenv(usecwd=True))

    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        config = Config.from_env(toolset=ToolSet(args.toolset))
    except ConfigurationError as e:
        logger.error(f"Fatal configuration error: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)

    try:
        asyncio.run(serve(config))
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
