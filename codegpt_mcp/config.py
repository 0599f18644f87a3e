"""Configuration management for the CodeGPT MCP gateway."""

from enum import Enum
from typing import Literal, Optional, Mapping
import os

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError

from .core.errors import ConfigurationError


DEFAULT_API_BASE = "http://localhost:8000/api/v1"
DEFAULT_TIMEOUT_SECONDS = 120.0

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ToolSet(str, Enum):
    """Which group of tools the server registers."""

    GRAPHS = "graphs"
    AGENTS = "agents"
    ALL = "all"

    @property
    def includes_graphs(self) -> bool:
        return self in (ToolSet.GRAPHS, ToolSet.ALL)

    @property
    def includes_agents(self) -> bool:
        return self in (ToolSet.AGENTS, ToolSet.ALL)


class BackendConfig(BaseModel):
    """Credentials and location of the CodeGPT backend."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(description="Bearer token sent with every request")
    org_id: str = Field(
        default="",
        description="Organization id sent in the CodeGPT-Org-Id header"
    )
    graph_id: str = Field(
        default="",
        description="Graph queried by the graph tools"
    )
    api_base: str = Field(
        default=DEFAULT_API_BASE,
        description="Root URL of the backend API"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP timeout in seconds"
    )


class Config(BaseModel):
    """Main configuration object."""

    model_config = ConfigDict(frozen=True)

    backend: BackendConfig
    toolset: ToolSet = Field(
        default=ToolSet.ALL,
        description="Tool group registered on the MCP server"
    )
    log_level: LogLevel = Field(default="INFO", description="Root logging level")

    # MCP specific
    mcp_server_name: str = Field(
        default="CodeGPT",
        description="Name of the MCP server"
    )

    def check_required(self) -> None:
        """Raise ConfigurationError when a value needed at startup is missing."""
        if not self.backend.api_key.get_secret_value():
            raise ConfigurationError("CODEGPT_API_KEY is not set", config_key="CODEGPT_API_KEY")
        if self.toolset.includes_graphs and not self.backend.graph_id:
            raise ConfigurationError("GRAPH_ID is not set", config_key="GRAPH_ID")

    @classmethod
    def from_env(
        cls,
        toolset: Optional[ToolSet] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """Create config from environment variables."""
        env = os.environ if environ is None else environ

        backend: dict = {
            "api_key": env.get("CODEGPT_API_KEY", ""),
            "org_id": env.get("CODEGPT_ORG_ID", ""),
            "graph_id": env.get("GRAPH_ID", ""),
        }
        if api_base := env.get("CODEGPT_API_BASE"):
            backend["api_base"] = api_base.rstrip("/")
        if timeout := env.get("CODEGPT_TIMEOUT"):
            try:
                backend["timeout"] = float(timeout)
            except ValueError:
                raise ConfigurationError(
                    f"CODEGPT_TIMEOUT must be a number, got {timeout!r}",
                    config_key="CODEGPT_TIMEOUT"
                )

        try:
            config_dict: dict = {"backend": BackendConfig(**backend)}
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid backend configuration: {e}")
        if toolset is not None:
            config_dict["toolset"] = toolset
        if log_level := env.get("CODEGPT_LOG_LEVEL"):
            config_dict["log_level"] = log_level.upper()

        try:
            config = cls(**config_dict)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"CODEGPT_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG: {e}",
                config_key="CODEGPT_LOG_LEVEL"
            )
        config.check_required()
        return config
