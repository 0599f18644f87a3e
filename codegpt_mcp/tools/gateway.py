"""Tool gateway: dispatches tool invocations to the backend."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..backend import BackendService
from ..config import BackendConfig
from ..core import BackendError, ServiceError, ToolResult, ValidationError
from .definitions import HttpTool

logger = logging.getLogger(__name__)


class ToolGateway:
    """Registry of HTTP-backed tools with a single ``invoke`` entry point.

    ``invoke`` never raises: validation failures, network failures and bad
    backend responses all come back as a :class:`ToolResult` whose text is
    the rendered error.
    """

    def __init__(
        self,
        config: BackendConfig,
        backend: BackendService,
        tools: Iterable[HttpTool]
    ):
        self.config = config
        self.backend = backend
        self._tools: Dict[str, HttpTool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Tool '{tool.name}' registered twice")
            self._tools[tool.name] = tool

    @property
    def tools(self) -> List[HttpTool]:
        return list(self._tools.values())

    async def invoke(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run one tool and wrap its outcome in a ToolResult."""
        try:
            tool = self._tools.get(tool_name)
            if tool is None:
                raise ValidationError(f"Unknown tool: {tool_name}", field="name", value=tool_name)

            cleaned = tool.validate(arguments or {})
            text = await self._call(tool, cleaned)
            return ToolResult.from_text(text or tool.placeholder)

        except ValidationError as e:
            logger.warning(f"Rejected {tool_name} call: {e}")
            return ToolResult.from_error(e)
        except ServiceError as e:
            logger.error(f"Error making CodeGPT request for {tool_name}: {e}")
            return ToolResult.from_error(e)
        except Exception as e:
            logger.error(f"Unexpected error in {tool_name}: {e}", exc_info=True)
            return ToolResult.from_error(e)

    async def _call(self, tool: HttpTool, arguments: Dict[str, Any]) -> str:
        response = await self.backend.request(
            tool.method,
            tool.path,
            body=tool.body(arguments, self.config),
        )

        if tool.check_status and not response.is_success:
            raise BackendError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code
            )

        return tool.extract(response)
